"""Loader built from a plain callable."""

from __future__ import annotations

import logging
from collections.abc import Callable

from resloc.core.exceptions import LoaderConfigurationError, ResolocError
from resloc.core.models import ResolutionContext, ResolutionResult
from resloc.core.schemes import strip_scheme
from resloc.resolution.base import AbstractLoader

logger = logging.getLogger(__name__)

LookupFunction = Callable[[str, ResolutionContext], "str | None"]


class FunctionLoader(AbstractLoader):
    """
    Adapts a ``(location, context) -> handle | None`` callable to a loader.

    With a ``scheme`` the callable receives locations without the
    ``scheme:`` prefix. Backend failures raised by the callable
    (``ResolocError``, ``OSError``, ``ValueError``) leave the location
    unresolved.

    Usage:
        def from_registry(location, context):
            context.set_property("registry_checked", True)
            return REGISTRY.get(location)

        loader = FunctionLoader(from_registry, name="Registry")
    """

    def __init__(
        self,
        func: LookupFunction,
        *,
        name: str | None = None,
        scheme: str | None = None,
    ) -> None:
        if func is None:
            raise LoaderConfigurationError("Lookup function must not be None")
        self.func = func
        self._name = name
        self._scheme = scheme

    @property
    def url_scheme(self) -> str | None:
        return self._scheme

    @property
    def source_entity(self) -> str:
        return self._name or super().source_entity

    def resolve(
        self,
        location: str,
        context: ResolutionContext | None = None,
    ) -> ResolutionResult:
        if context is None:
            context = ResolutionContext()
        path = strip_scheme(location, self.url_scheme) if self.claims(location) else location

        try:
            handle = self.func(path, context)
        except (ResolocError, OSError, ValueError) as e:
            logger.warning(f"{self.source_entity} lookup failed for {location!r}: {e}")
            handle = None

        if handle is not None:
            handle = str(handle)
        return ResolutionResult.from_handle(location, handle, self.source_entity)

    def __repr__(self) -> str:
        return f"FunctionLoader({self.source_entity!r}, scheme={self._scheme!r})"
