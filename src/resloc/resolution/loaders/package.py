"""Loader for resources bundled with Python packages."""

from __future__ import annotations

import logging
import posixpath
import sys
from collections.abc import Sequence
from importlib.resources import files
from pathlib import Path
from typing import ClassVar

from resloc.core.types import Scheme
from resloc.resolution.base import SchemeLoader

logger = logging.getLogger(__name__)


class PackageResourceLoader(SchemeLoader):
    """
    Loader for bundled resources, claiming the "classpath" scheme.

    Looks a resource name up in two tiers:
    - The anchor package's resources (``importlib.resources``)
    - Every directory on the search path (``sys.path`` by default)

    File-backed resources resolve to file URLs. Resources inside an
    archive resolve to a "classpath:<name>" handle.
    """

    URL_SCHEME: ClassVar[str] = Scheme.CLASSPATH

    def __init__(
        self,
        package: str | None = None,
        search_path: Sequence[str] | None = None,
    ) -> None:
        self.package = package
        self._search_path = tuple(search_path) if search_path is not None else None

    @property
    def search_path(self) -> tuple[str, ...]:
        """Directories searched in the global tier (the live ``sys.path`` if unset)."""
        if self._search_path is not None:
            return self._search_path
        return tuple(sys.path)

    @staticmethod
    def normalize_name(path: str) -> str | None:
        """
        Normalize a resource name.

        "/META-INF/./x.nfo" -> "META-INF/x.nfo"
        "../x.nfo"          -> None

        Returns:
            The name relative to a resource root, or None if it escapes it
        """
        name = posixpath.normpath(path.replace("\\", "/").lstrip("/"))
        if name in (".", "..") or name.startswith("../"):
            return None
        return name

    def lookup(self, path: str) -> str | None:
        name = self.normalize_name(path)
        if name is None:
            return None

        if self.package:
            handle = self._lookup_package(name)
            if handle:
                return handle

        return self._lookup_search_path(name)

    def _lookup_package(self, name: str) -> str | None:
        """Look a name up among the anchor package's resources."""
        try:
            resource = files(self.package)
        except (ImportError, TypeError) as e:
            logger.warning(f"Cannot read resources of package {self.package!r}: {e}")
            return None

        for part in name.split("/"):
            resource = resource.joinpath(part)

        if not resource.is_file():
            return None
        if isinstance(resource, Path):
            return resource.resolve().as_uri()
        return f"{Scheme.CLASSPATH}:{name}"

    def _lookup_search_path(self, name: str) -> str | None:
        """Look a name up in every directory of the search path."""
        parts = name.split("/")
        for entry in self.search_path:
            base = Path(entry or ".")
            if not base.is_dir():
                continue

            candidate = base.joinpath(*parts)
            if candidate.is_file():
                return candidate.resolve().as_uri()

        return None

    def __repr__(self) -> str:
        return f"PackageResourceLoader(package={self.package!r})"
