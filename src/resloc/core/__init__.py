"""Core types, models, and utilities."""

from .exceptions import (
    InvalidLocationError,
    LoaderConfigurationError,
    ResolocError,
    ResourceUnavailableError,
)
from .models import ResolutionContext, ResolutionResult
from .paths import FileSystem, PathFlavor
from .schemes import extract_scheme, has_scheme, strip_scheme, validate_location
from .types import UNKNOWN_SOURCE, Scheme

__all__ = [
    # Types
    "Scheme",
    "UNKNOWN_SOURCE",
    # Models
    "ResolutionContext",
    "ResolutionResult",
    # Paths
    "FileSystem",
    "PathFlavor",
    # Schemes
    "extract_scheme",
    "has_scheme",
    "strip_scheme",
    "validate_location",
    # Exceptions
    "InvalidLocationError",
    "LoaderConfigurationError",
    "ResolocError",
    "ResourceUnavailableError",
]
