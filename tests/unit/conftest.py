"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import respx

from resloc.config import ResolocSettings, get_settings
from resloc.resolution.loaders.remote import RemoteLoader, RemoteLoaderConfig

# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Loader Configuration Fixtures
# ============================================================================


@pytest.fixture
def remote_config() -> RemoteLoaderConfig:
    """Create a remote loader config for testing."""
    return RemoteLoaderConfig(timeout=5.0, user_agent="resloc-tests/1.0")


@pytest.fixture
def remote_loader(remote_config: RemoteLoaderConfig) -> Iterator[RemoteLoader]:
    """Create a remote loader, closed after the test."""
    loader = RemoteLoader(remote_config)
    yield loader
    loader.close()


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def offline_settings() -> ResolocSettings:
    """Settings for a default chain without the remote loader."""
    return ResolocSettings(remote_enabled=False)


@pytest.fixture
def clean_settings_cache() -> Iterator[None]:
    """Clear the cached settings before and after a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
