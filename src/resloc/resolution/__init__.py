"""Resolution layer: loaders, decorators and the loader chain."""

from resloc.resolution.base import AbstractLoader, LoaderDecorator, SchemeLoader
from resloc.resolution.chain import LoaderChain
from resloc.resolution.defaults import default_chain, default_loaders
from resloc.resolution.directory import DirectoryLoader
from resloc.resolution.fallback import FallbackLoader
from resloc.resolution.loaders import (
    FunctionLoader,
    LocalLoader,
    PackageResourceLoader,
    RemoteLoader,
    RemoteLoaderConfig,
)

__all__ = [
    # Base
    "AbstractLoader",
    "LoaderDecorator",
    "SchemeLoader",
    # Chain
    "LoaderChain",
    "default_chain",
    "default_loaders",
    # Decorators
    "DirectoryLoader",
    "FallbackLoader",
    # Loaders
    "FunctionLoader",
    "LocalLoader",
    "PackageResourceLoader",
    "RemoteLoader",
    "RemoteLoaderConfig",
]
