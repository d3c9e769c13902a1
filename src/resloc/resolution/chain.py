"""Chain loader for ordered resolution."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from resloc.core.exceptions import LoaderConfigurationError
from resloc.core.models import ResolutionContext, ResolutionResult
from resloc.core.schemes import validate_location
from resloc.resolution.base import AbstractLoader

logger = logging.getLogger(__name__)


class LoaderChain(AbstractLoader):
    """
    Tries loaders in insertion order and stops at the first success.

    Features:
    - Short-circuit on the first resolved result
    - Failing members logged and treated as unresolved
    - Nests, since the chain is itself a loader
    """

    def __init__(self, loaders: Iterable[AbstractLoader] | None = None) -> None:
        self._loaders: list[AbstractLoader] = []
        for loader in loaders or ():
            self.add(loader)

    @classmethod
    def from_loaders(cls, *loaders: AbstractLoader) -> LoaderChain:
        return cls(loaders)

    @property
    def loaders(self) -> tuple[AbstractLoader, ...]:
        return tuple(self._loaders)

    def add(self, loader: AbstractLoader) -> LoaderChain:
        """Append a loader. Not safe once the chain is shared across threads."""
        if loader is None:
            raise LoaderConfigurationError("Cannot add a None loader to the chain")
        self._loaders.append(loader)
        return self

    def resolve(
        self,
        location: str,
        context: ResolutionContext | None = None,
    ) -> ResolutionResult:
        """
        Resolve a location with the first loader that succeeds.

        Raises:
            InvalidLocationError: If the location is malformed
        """
        validate_location(location)

        result = self._run_sequential(location, context)
        if context is not None:
            context.update(result)
        return result

    # Alias
    process = resolve

    def _try_loader(
        self,
        loader: AbstractLoader,
        location: str,
        context: ResolutionContext | None,
    ) -> ResolutionResult:
        """Try a single loader with error handling."""
        try:
            return loader.resolve(location, context)
        except Exception as e:
            logger.exception(f"Loader {loader.source_entity} failed for {location!r}: {e}")
            return ResolutionResult.unresolved(location)

    def _run_sequential(
        self,
        location: str,
        context: ResolutionContext | None,
    ) -> ResolutionResult:
        for loader in self._loaders:
            result = self._try_loader(loader, location, context)
            if result.resolved:
                logger.debug(f"{location!r} resolved by {result.source_entity}: {result.handle}")
                return result

        logger.debug(f"{location!r} not resolved by any of {len(self._loaders)} loaders")
        return ResolutionResult.unresolved(location)

    def close(self) -> None:
        """Close all loaders."""
        for loader in self._loaders:
            loader.close()

    def __len__(self) -> int:
        return len(self._loaders)

    def __iter__(self) -> Iterator[AbstractLoader]:
        return iter(tuple(self._loaders))

    def __repr__(self) -> str:
        return f"LoaderChain({self._loaders!r})"
