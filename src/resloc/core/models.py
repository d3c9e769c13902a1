"""Resolution outcome models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .types import UNKNOWN_SOURCE


class ResolutionResult(BaseModel):
    """Outcome of a single resolution attempt."""

    model_config = ConfigDict(frozen=True)

    search_path: str = Field(..., description="Location string that was looked up")
    resolved: bool = Field(default=False, description="Whether a handle was found")
    handle: str | None = Field(default=None, description="Resolved URL-like handle")
    source_entity: str = Field(
        default=UNKNOWN_SOURCE,
        description="Loader that resolved the location",
    )

    @model_validator(mode="after")
    def _check_consistency(self) -> ResolutionResult:
        if self.resolved != (self.handle is not None):
            raise ValueError("resolved must be True exactly when a handle is set")
        if not self.resolved and self.source_entity != UNKNOWN_SOURCE:
            raise ValueError(f"unresolved results must use source {UNKNOWN_SOURCE!r}")
        return self

    @classmethod
    def solved(cls, search_path: str, handle: str, source_entity: str) -> ResolutionResult:
        """Result for a location resolved to ``handle`` by ``source_entity``."""
        return cls(
            search_path=search_path,
            resolved=True,
            handle=handle,
            source_entity=source_entity,
        )

    @classmethod
    def unresolved(cls, search_path: str) -> ResolutionResult:
        """Result for a location nothing could resolve."""
        return cls(search_path=search_path)

    @classmethod
    def from_handle(
        cls,
        search_path: str,
        handle: str | None,
        source_entity: str,
    ) -> ResolutionResult:
        """Solved result when ``handle`` is set, unresolved otherwise."""
        if handle is None:
            return cls.unresolved(search_path)
        return cls.solved(search_path, handle, source_entity)


@dataclass
class ResolutionContext:
    """
    Per-call scratch space shared by the loaders of a chain.

    Created fresh for each top-level resolution. Loaders may read and
    write properties but must not keep a reference after the call.
    """

    resolved: bool = False
    handle: str | None = None
    source_entity: str = UNKNOWN_SOURCE
    properties: dict[str, Any] = field(default_factory=dict)

    def set_property(self, key: str, value: Any) -> None:
        self.properties[key] = value

    def get_property(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)

    def update(self, result: ResolutionResult) -> None:
        """Record the outcome of ``result``."""
        self.resolved = result.resolved
        self.handle = result.handle
        self.source_entity = result.source_entity

    def clear(self) -> None:
        """Reset properties and outcome."""
        self.properties.clear()
        self.resolved = False
        self.handle = None
        self.source_entity = UNKNOWN_SOURCE

    def to_result(self, search_path: str) -> ResolutionResult:
        """Build an immutable result from the recorded outcome."""
        return ResolutionResult.from_handle(search_path, self.handle, self.source_entity)
