"""Abstract base loaders and the decorator base class."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from resloc.core.exceptions import LoaderConfigurationError, ResolocError
from resloc.core.models import ResolutionContext, ResolutionResult
from resloc.core.paths import FileSystem, PathFlavor
from resloc.core.schemes import has_scheme, strip_scheme
from resloc.core.types import Scheme

logger = logging.getLogger(__name__)

# Separator used when the wrapped loader has no path flavor of its own
DEFAULT_PATH_SEPARATOR = "/"


class AbstractLoader(ABC):
    """
    Abstract base class for all loaders.

    Provides:
    - Capability queries used by decorators (claimed scheme, path flavor)
    - Source entity naming for resolution results
    - Resource cleanup
    """

    # Class-level configuration (to be overridden by subclasses)
    URL_SCHEME: ClassVar[str | None] = None

    @property
    def url_scheme(self) -> str | None:
        """Scheme claimed by this loader ("*" for any, None for none)."""
        return self.URL_SCHEME

    @property
    def path_flavor(self) -> PathFlavor | None:
        """Path rules when this loader is filesystem-aware."""
        return None

    @property
    def filesystem(self) -> FileSystem | None:
        """Filesystem backing this loader, when it has one."""
        return None

    @property
    def source_entity(self) -> str:
        """Identity recorded on the results this loader resolves."""
        return type(self).__name__

    @property
    def has_concrete_scheme(self) -> bool:
        return self.url_scheme is not None and self.url_scheme != Scheme.ANY

    def claims(self, location: str) -> bool:
        """Check if ``location`` carries this loader's own scheme."""
        return self.has_concrete_scheme and has_scheme(location, self.url_scheme)

    @abstractmethod
    def resolve(
        self,
        location: str,
        context: ResolutionContext | None = None,
    ) -> ResolutionResult:
        """
        Resolve a location to a resource handle.

        Args:
            location: Path, scheme-prefixed URI or bare name
            context: Per-call state shared across a chain, if any

        Returns:
            ResolutionResult, unresolved when this loader cannot find the
            resource. Never raises for missing resources or backend failures.
        """
        ...

    def close(self) -> None:
        """Release resources held by the loader."""

    def __enter__(self) -> AbstractLoader:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scheme={self.url_scheme!r})"


class SchemeLoader(AbstractLoader):
    """
    Loader bound to a single URL scheme.

    A location carrying the loader's scheme is looked up without it;
    any other location is looked up as-is.
    """

    def resolve(
        self,
        location: str,
        context: ResolutionContext | None = None,
    ) -> ResolutionResult:
        path = strip_scheme(location, self.url_scheme) if self.claims(location) else location

        try:
            handle = self.lookup(path)
        except (ResolocError, OSError, ValueError) as e:
            logger.warning(f"{self.source_entity} lookup failed for {location!r}: {e}")
            handle = None

        return ResolutionResult.from_handle(location, handle, self.source_entity)

    @abstractmethod
    def lookup(self, path: str) -> str | None:
        """
        Look up a scheme-less path in the backing store.

        Returns:
            The handle if found, None otherwise
        """
        ...


class LoaderDecorator(AbstractLoader):
    """
    Base class for loaders wrapping another loader.

    The wrapped loader's scheme, path flavor and filesystem are captured at
    construction and exposed unchanged, so decorators compose.
    """

    def __init__(self, loader: AbstractLoader) -> None:
        if loader is None:
            raise LoaderConfigurationError("Wrapped loader must not be None")
        self.loader = loader
        self._url_scheme = loader.url_scheme
        self._path_flavor = loader.path_flavor
        self._filesystem = loader.filesystem

    @property
    def url_scheme(self) -> str | None:
        return self._url_scheme

    @property
    def path_flavor(self) -> PathFlavor | None:
        return self._path_flavor

    @property
    def filesystem(self) -> FileSystem | None:
        return self._filesystem

    @property
    def separator(self) -> str:
        """Separator placed between a prefix and a location."""
        return self._path_flavor.sep if self._path_flavor else DEFAULT_PATH_SEPARATOR

    def strip_own_scheme(self, location: str) -> str:
        """Remove the wrapped loader's scheme from ``location``, if present."""
        return strip_scheme(location, self.url_scheme) if self.claims(location) else location

    def prefix_location(self, prefix: str, location: str, *, keep_scheme: bool) -> str:
        """
        Rewrite ``location`` under ``prefix``.

        "x.nfo" under "/tmp" -> "/tmp/x.nfo"; with ``keep_scheme`` a loader
        claiming "file" gets "file:/tmp/x.nfo".
        """
        rewritten = f"{prefix}{self.separator}{self.strip_own_scheme(location)}"
        if keep_scheme and self.has_concrete_scheme:
            rewritten = f"{self.url_scheme}:{rewritten}"
        return rewritten

    def close(self) -> None:
        self.loader.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.loader!r})"
