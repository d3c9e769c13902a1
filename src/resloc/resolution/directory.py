"""Directory jail decorator."""

from __future__ import annotations

import logging

from resloc.core.exceptions import LoaderConfigurationError
from resloc.core.models import ResolutionContext, ResolutionResult
from resloc.core.paths import PathFlavor
from resloc.resolution.base import AbstractLoader, LoaderDecorator

logger = logging.getLogger(__name__)


class DirectoryLoader(LoaderDecorator):
    """
    Restricts resolution to files directly inside a root directory.

    A relative root is made absolute against the inner loader's
    filesystem; loaders without one need an absolute root.

    Relative locations are rewritten under the root. Absolute locations
    and resolved handles whose parent is not exactly the root are
    discarded as unresolved, so "../" escapes never leak out.
    """

    def __init__(self, loader: AbstractLoader, root_path: str) -> None:
        super().__init__(loader)
        self._flavor = self.path_flavor or PathFlavor.posix()
        self.root_path = root_path

    @property
    def root_path(self) -> str:
        return self._root_path

    @root_path.setter
    def root_path(self, value: str) -> None:
        if not value:
            raise LoaderConfigurationError("Root path must not be empty")
        if not self._flavor.is_absolute(value):
            if self.filesystem is None:
                raise LoaderConfigurationError(
                    f"Root path {value!r} must be absolute for {self.loader.source_entity}"
                )
            value = self.filesystem.absolute(value)
        self._root_path = self._flavor.normalize(value)

    def resolve(
        self,
        location: str,
        context: ResolutionContext | None = None,
    ) -> ResolutionResult:
        stripped = self._flavor.normalize(self.strip_own_scheme(location))

        if self._flavor.is_absolute(stripped):
            if self._flavor.parent(stripped) != self._root_path:
                logger.debug(f"Discarding {location!r}: outside {self._root_path!r}")
                return ResolutionResult.unresolved(location)
            return self.loader.resolve(location, context)

        candidate = self.prefix_location(self._root_path, location, keep_scheme=True)
        result = self.loader.resolve(candidate, context)
        if not result.resolved:
            return result

        resolved_path = self._flavor.path_from_url(result.handle)
        if self._flavor.parent(resolved_path) != self._root_path:
            logger.debug(f"Discarding {result.handle!r}: escapes {self._root_path!r}")
            return ResolutionResult.unresolved(location)
        return result

    def __repr__(self) -> str:
        return f"DirectoryLoader({self.loader!r}, {self._root_path!r})"
