"""Path rules and the filesystem collaborator used by filesystem-aware loaders."""

from __future__ import annotations

import ntpath
import os
import posixpath
import re
from pathlib import Path
from types import ModuleType
from typing import ClassVar
from urllib.parse import unquote, urlsplit

import fsspec

_DRIVE_IN_URL_PATH = re.compile(r"^/[A-Za-z]:")


class PathFlavor:
    """Path syntax of a family of filesystems (posix or windows)."""

    def __init__(self, module: ModuleType = posixpath) -> None:
        self._module = module

    @classmethod
    def posix(cls) -> PathFlavor:
        return cls(posixpath)

    @classmethod
    def windows(cls) -> PathFlavor:
        return cls(ntpath)

    @classmethod
    def native(cls) -> PathFlavor:
        return cls(os.path)

    @property
    def sep(self) -> str:
        return self._module.sep

    @property
    def is_windows(self) -> bool:
        return self._module is ntpath

    def normalize(self, path: str) -> str:
        """
        Resolve dot segments and collapse redundant separators.

        "/tmp/inner/../inner/x.nfo" -> "/tmp/inner/x.nfo"
        "/tmp/inner/"               -> "/tmp/inner"
        """
        normalized = self._module.normpath(path)
        # posix keeps a leading "//" as implementation defined; treat it as "/"
        if not self.is_windows and normalized.startswith("//"):
            normalized = "/" + normalized.lstrip("/")
        return normalized

    def is_absolute(self, path: str) -> bool:
        return self._module.isabs(path)

    def parent(self, path: str) -> str | None:
        """Parent of the normalized path, or None for a bare name."""
        parent = self._module.dirname(self.normalize(path))
        return parent or None

    def join(self, *parts: str) -> str:
        return self._module.join(*parts)

    def path_from_url(self, url: str) -> str:
        """
        Extract the filesystem path from a URL-like handle.

        Strings without a scheme (or with a single-letter drive) are
        returned unchanged.
        """
        parts = urlsplit(url)
        if len(parts.scheme) <= 1:
            return url

        path = unquote(parts.path)
        if self.is_windows and _DRIVE_IN_URL_PATH.match(path):
            path = path[1:]
        return path

    def __repr__(self) -> str:
        return f"PathFlavor({self._module.__name__})"


class FileSystem:
    """
    Filesystem collaborator for filesystem-aware loaders.

    Wraps an fsspec filesystem so that tests can swap the local disk for
    an in-memory one. Relative paths are resolved against ``cwd`` (the
    process working directory for the local disk, the root otherwise).
    """

    LOCAL_PROTOCOLS: ClassVar[frozenset[str]] = frozenset({"file", "local"})

    def __init__(
        self,
        fs: fsspec.AbstractFileSystem | None = None,
        *,
        flavor: PathFlavor | None = None,
        cwd: str | None = None,
    ) -> None:
        self._fs = fs if fs is not None else fsspec.filesystem("file")
        protocols = (self._fs.protocol,) if isinstance(self._fs.protocol, str) else self._fs.protocol
        self._protocol = protocols[0]
        self._is_local = bool(self.LOCAL_PROTOCOLS.intersection(protocols))
        self.flavor = flavor or (PathFlavor.native() if self._is_local else PathFlavor.posix())
        self._cwd = cwd

    @property
    def sep(self) -> str:
        return self.flavor.sep

    @property
    def protocol(self) -> str:
        return self._protocol

    @property
    def cwd(self) -> str:
        if self._cwd is not None:
            return self._cwd
        if self._is_local:
            return os.getcwd()
        return self._fs.root_marker or self.flavor.sep

    def absolute(self, path: str) -> str:
        """Normalized absolute form of ``path``."""
        if not self.flavor.is_absolute(path):
            path = self.flavor.join(self.cwd, path)
        return self.flavor.normalize(path)

    def exists(self, path: str) -> bool:
        return self._fs.exists(self.absolute(path))

    def to_url(self, path: str) -> str:
        """URL handle for ``path`` (``file:///...`` on the local disk)."""
        absolute = self.absolute(path)
        if self._is_local:
            return Path(absolute).as_uri()
        return self._fs.unstrip_protocol(absolute)

    def path_from_url(self, url: str) -> str:
        return self.flavor.path_from_url(url)

    def __repr__(self) -> str:
        return f"FileSystem(protocol={self._protocol!r}, flavor={self.flavor!r})"
