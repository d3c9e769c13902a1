"""Built-in loaders."""

from resloc.resolution.loaders.function import FunctionLoader
from resloc.resolution.loaders.local import LocalLoader
from resloc.resolution.loaders.package import PackageResourceLoader
from resloc.resolution.loaders.remote import RemoteLoader, RemoteLoaderConfig

__all__ = [
    "FunctionLoader",
    "LocalLoader",
    "PackageResourceLoader",
    "RemoteLoader",
    "RemoteLoaderConfig",
]
