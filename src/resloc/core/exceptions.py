"""Custom exception hierarchy for resloc."""

from typing import Any


class ResolocError(Exception):
    """Base exception for all resloc errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidLocationError(ResolocError):
    """Location is missing, not a string or empty."""

    def __init__(
        self,
        message: str,
        location: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.location = location


class LoaderConfigurationError(ResolocError):
    """A loader, chain or decorator was configured with invalid arguments."""

    pass


class ResourceUnavailableError(ResolocError):
    """A backing store (filesystem, package namespace, network) failed.

    Raised inside loaders only; loaders downgrade it to an unresolved result.
    """

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code
