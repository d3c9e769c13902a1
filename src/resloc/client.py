"""Main library facade for standalone usage."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from resloc.config import ResolocSettings, get_settings
from resloc.core.exceptions import LoaderConfigurationError
from resloc.core.models import ResolutionContext, ResolutionResult
from resloc.resolution.base import AbstractLoader
from resloc.resolution.chain import LoaderChain
from resloc.resolution.defaults import default_chain, default_loaders
from resloc.resolution.fallback import FallbackLoader

logger = logging.getLogger(__name__)


class Resolver:
    """
    Main entry point for resolving resource locations.

    Resolves a path, a scheme-prefixed URI or a bare name to a resource
    handle using an ordered chain of loaders.

    Usage:
        with Resolver.default() as resolver:
            # Local file
            handle = resolver.lookup("/etc/hosts")

            # Bundled resource, retried under META-INF/
            result = resolver.resolve("classpath:app.properties")

            # Custom chain
            resolver = (
                Resolver.builder()
                .add(LocalLoader(), "/opt/app/conf")
                .add(RemoteLoader())
                .build()
            )

    Without an explicit chain the default chain is built from settings.
    """

    def __init__(
        self,
        chain: LoaderChain | None = None,
        *,
        settings: ResolocSettings | None = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            chain: Loaders to resolve with. Defaults to the default chain.
            settings: Settings for the default chain. If not provided, loaded from environment.
        """
        self._settings = settings or get_settings()
        self._chain = chain if chain is not None else default_chain(self._settings)

    @classmethod
    def default(cls, settings: ResolocSettings | None = None) -> Resolver:
        """Create a resolver with the default chain."""
        return cls(settings=settings)

    @classmethod
    def builder(cls, settings: ResolocSettings | None = None) -> ResolverBuilder:
        return ResolverBuilder(settings)

    @property
    def chain(self) -> LoaderChain:
        return self._chain

    @property
    def settings(self) -> ResolocSettings:
        return self._settings

    def resolve(self, location: str) -> ResolutionResult:
        """
        Resolve a location.

        Args:
            location: Path, scheme-prefixed URI or bare name

        Returns:
            The first resolved result, or an unresolved result whose
            search path is ``location`` and source is "Unknown"

        Raises:
            InvalidLocationError: If the location is None, not a string or empty
        """
        return self._chain.resolve(location, ResolutionContext())

    # Alias
    fetch = resolve

    def lookup(self, location: str) -> str | None:
        """Resolve a location to its handle, or None if nothing resolves it."""
        return self.resolve(location).handle

    def resolve_context(
        self,
        location: str,
        context: ResolutionContext | None = None,
    ) -> ResolutionContext:
        """
        Resolve a location and return the resolution context.

        The context holds the outcome plus any properties loaders recorded.
        A supplied context is cleared first.
        """
        if context is None:
            context = ResolutionContext()
        else:
            context.clear()

        self._chain.resolve(location, context)
        return context

    def close(self) -> None:
        """Close all loaders."""
        self._chain.close()

    def __enter__(self) -> Resolver:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Resolver({self._chain!r})"


class ResolverBuilder:
    """Assembles a resolver from loaders in resolution order."""

    def __init__(self, settings: ResolocSettings | None = None) -> None:
        self._settings = settings
        self._loaders: list[AbstractLoader] = []

    def add(self, loader: AbstractLoader, *fallback_paths: str) -> ResolverBuilder:
        """
        Append a loader.

        Args:
            loader: Loader to append
            fallback_paths: Prefixes retried when the loader fails, in order
        """
        if loader is None:
            raise LoaderConfigurationError("Cannot add a None loader")
        if fallback_paths:
            loader = FallbackLoader(loader, fallback_paths)
        self._loaders.append(loader)
        return self

    def add_all(self, loaders: Iterable[AbstractLoader]) -> ResolverBuilder:
        for loader in loaders:
            self.add(loader)
        return self

    def with_defaults(self) -> ResolverBuilder:
        """Append the default loaders."""
        return self.add_all(default_loaders(self._settings or get_settings()))

    def build(self) -> Resolver:
        if not self._loaders:
            logger.warning("Building a resolver without loaders; nothing will resolve")
        return Resolver(LoaderChain(self._loaders), settings=self._settings)


# Convenience functions for one-off resolutions
def resolve(
    location: str,
    *,
    settings: ResolocSettings | None = None,
) -> ResolutionResult:
    """
    Resolve a location with the default chain (convenience function).

    For multiple resolutions, use Resolver for better performance.
    """
    with Resolver.default(settings) as resolver:
        return resolver.resolve(location)


def fetch(
    location: str,
    *,
    settings: ResolocSettings | None = None,
) -> ResolutionResult:
    """Alias of :func:`resolve`."""
    return resolve(location, settings=settings)


def lookup(
    location: str,
    *,
    settings: ResolocSettings | None = None,
) -> str | None:
    """
    Resolve a location to its handle with the default chain (convenience function).

    For multiple resolutions, use Resolver for better performance.
    """
    with Resolver.default(settings) as resolver:
        return resolver.lookup(location)
