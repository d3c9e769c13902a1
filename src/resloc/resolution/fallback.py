"""Fallback decorator retrying a lookup under alternate prefixes."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from resloc.core.exceptions import LoaderConfigurationError
from resloc.core.models import ResolutionContext, ResolutionResult
from resloc.resolution.base import AbstractLoader, LoaderDecorator

logger = logging.getLogger(__name__)


class FallbackLoader(LoaderDecorator):
    """
    Retries a failed lookup with each fallback prefix in order.

    With prefix "META-INF", "x.nfo" is retried as "META-INF/x.nfo".
    A prefix the location already starts with is skipped.
    """

    def __init__(
        self,
        loader: AbstractLoader,
        fallback_paths: Iterable[str] | None = None,
    ) -> None:
        super().__init__(loader)
        self._fallback_paths: list[str] = []
        for path in fallback_paths or ():
            self.add_fallback(path)

    @property
    def fallback_paths(self) -> tuple[str, ...]:
        return tuple(self._fallback_paths)

    def add_fallback(self, path: str) -> FallbackLoader:
        if not path:
            raise LoaderConfigurationError("Fallback path must not be empty")
        self._fallback_paths.append(path)
        return self

    def resolve(
        self,
        location: str,
        context: ResolutionContext | None = None,
    ) -> ResolutionResult:
        result = self.loader.resolve(location, context)
        if result.resolved:
            return result

        stripped = self.strip_own_scheme(location)
        for prefix in self._fallback_paths:
            if stripped.startswith(prefix):
                continue

            candidate = self.prefix_location(prefix, location, keep_scheme=False)
            logger.debug(f"Retrying {location!r} as {candidate!r}")
            result = self.loader.resolve(candidate, context)
            if result.resolved:
                return result

        return result

    def __repr__(self) -> str:
        return f"FallbackLoader({self.loader!r}, {self._fallback_paths!r})"
