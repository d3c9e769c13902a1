"""Resloc - Resolve resource locations through a chain of pluggable loaders."""

from resloc._version import __version__
from resloc.client import Resolver, ResolverBuilder, fetch, lookup, resolve
from resloc.config import ResolocSettings, get_settings
from resloc.core.exceptions import (
    InvalidLocationError,
    LoaderConfigurationError,
    ResolocError,
    ResourceUnavailableError,
)
from resloc.core.models import ResolutionContext, ResolutionResult
from resloc.core.paths import FileSystem, PathFlavor
from resloc.core.types import UNKNOWN_SOURCE, Scheme
from resloc.resolution import (
    AbstractLoader,
    DirectoryLoader,
    FallbackLoader,
    FunctionLoader,
    LoaderChain,
    LocalLoader,
    PackageResourceLoader,
    RemoteLoader,
    RemoteLoaderConfig,
)

__all__ = [
    # Client
    "Resolver",
    "ResolverBuilder",
    "fetch",
    "lookup",
    "resolve",
    # Config
    "ResolocSettings",
    "get_settings",
    # Models
    "ResolutionContext",
    "ResolutionResult",
    "Scheme",
    "UNKNOWN_SOURCE",
    # Paths
    "FileSystem",
    "PathFlavor",
    # Loaders
    "AbstractLoader",
    "DirectoryLoader",
    "FallbackLoader",
    "FunctionLoader",
    "LoaderChain",
    "LocalLoader",
    "PackageResourceLoader",
    "RemoteLoader",
    "RemoteLoaderConfig",
    # Exceptions
    "InvalidLocationError",
    "LoaderConfigurationError",
    "ResolocError",
    "ResourceUnavailableError",
    # Version
    "__version__",
]
