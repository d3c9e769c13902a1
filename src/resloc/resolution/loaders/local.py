"""Local filesystem loader."""

from __future__ import annotations

from typing import ClassVar

from resloc.core.paths import FileSystem, PathFlavor
from resloc.core.types import Scheme
from resloc.resolution.base import SchemeLoader


class LocalLoader(SchemeLoader):
    """
    Loader for files on a filesystem.

    Claims the "file" scheme. Relative paths are resolved against the
    filesystem's working directory. Handles are file URLs (or the
    protocol URL of a non-local fsspec filesystem).
    """

    URL_SCHEME: ClassVar[str] = Scheme.FILE

    def __init__(self, filesystem: FileSystem | None = None) -> None:
        self._filesystem = filesystem or FileSystem()

    @property
    def filesystem(self) -> FileSystem:
        return self._filesystem

    @filesystem.setter
    def filesystem(self, value: FileSystem) -> None:
        # Decorators capture the path flavor when they wrap this loader
        self._filesystem = value

    @property
    def path_flavor(self) -> PathFlavor:
        return self._filesystem.flavor

    def lookup(self, path: str) -> str | None:
        absolute = self._filesystem.absolute(path)
        if not self._filesystem.exists(absolute):
            return None
        return self._filesystem.to_url(absolute)

    def __repr__(self) -> str:
        return f"LocalLoader({self._filesystem!r})"
