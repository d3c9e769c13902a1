"""Default loader chain built from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resloc.resolution.base import AbstractLoader
from resloc.resolution.chain import LoaderChain
from resloc.resolution.fallback import FallbackLoader
from resloc.resolution.loaders.local import LocalLoader
from resloc.resolution.loaders.package import PackageResourceLoader
from resloc.resolution.loaders.remote import RemoteLoader, RemoteLoaderConfig

if TYPE_CHECKING:
    from resloc.config import ResolocSettings


def default_loaders(settings: "ResolocSettings") -> list[AbstractLoader]:
    """
    Create the default loaders in resolution order.

    - Local files, retried under ``local_fallback_paths`` when set
    - Bundled resources, retried under ``fallback_namespace``
    - Remote URLs, when ``remote_enabled``
    """
    loaders: list[AbstractLoader] = []

    local: AbstractLoader = LocalLoader()
    if settings.local_fallback_paths:
        local = FallbackLoader(local, settings.local_fallback_paths)
    loaders.append(local)

    loaders.append(
        FallbackLoader(
            PackageResourceLoader(settings.package_anchor),
            [settings.fallback_namespace],
        )
    )

    if settings.remote_enabled:
        loaders.append(
            RemoteLoader(
                RemoteLoaderConfig(
                    timeout=settings.remote_timeout,
                    proxy=settings.remote_proxy,
                    follow_redirects=settings.remote_follow_redirects,
                    user_agent=settings.user_agent,
                )
            )
        )

    return loaders


def default_chain(settings: "ResolocSettings") -> LoaderChain:
    """Create a chain of the default loaders."""
    return LoaderChain(default_loaders(settings))
