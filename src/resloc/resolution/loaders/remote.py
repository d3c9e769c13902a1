"""Remote URL loader over HTTP."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import ClassVar

import httpx
from pydantic import BaseModel, ConfigDict, Field

from resloc.core.exceptions import ResourceUnavailableError
from resloc.core.types import DEFAULT_USER_AGENT, Scheme
from resloc.resolution.base import SchemeLoader

logger = logging.getLogger(__name__)


class RemoteLoaderConfig(BaseModel):
    """Configuration for the remote loader's HTTP client."""

    model_config = ConfigDict(frozen=True)

    timeout: float = Field(default=10.0, gt=0, description="Connect/read timeout in seconds")
    proxy: str | None = Field(default=None, description="Proxy URL for all requests")
    follow_redirects: bool = True
    user_agent: str = DEFAULT_USER_AGENT


class RemoteLoader(SchemeLoader):
    """
    Loader for absolute http(s) URLs.

    Claims any scheme. A location resolves when a streaming GET succeeds
    and the body can be opened; only the first chunk is read. The handle
    is the final URL after redirects.
    """

    URL_SCHEME: ClassVar[str] = Scheme.ANY
    SUPPORTED_SCHEMES: ClassVar[frozenset[str]] = frozenset({"http", "https"})

    def __init__(
        self,
        config: RemoteLoaderConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.config = config or RemoteLoaderConfig()
        self._client = client
        self._lock = threading.Lock()

    @contextmanager
    def _get_client(self) -> Iterator[httpx.Client]:
        """Get or create HTTP client with proper lifecycle."""
        with self._lock:
            if self._client is None or self._client.is_closed:
                self._client = httpx.Client(
                    timeout=httpx.Timeout(self.config.timeout),
                    proxy=self.config.proxy,
                    headers=self._get_default_headers(),
                    follow_redirects=self.config.follow_redirects,
                )
            client = self._client

        try:
            yield client
        except httpx.HTTPError as e:
            raise ResourceUnavailableError(
                message=f"HTTP error: {e}",
                source=self.source_entity,
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        return {"User-Agent": self.config.user_agent}

    def parse_url(self, location: str) -> httpx.URL | None:
        """Parse an absolute http(s) URL, or None for anything else."""
        try:
            url = httpx.URL(location)
        except httpx.InvalidURL:
            return None

        if url.scheme not in self.SUPPORTED_SCHEMES or not url.host:
            return None
        return url

    def lookup(self, path: str) -> str | None:
        url = self.parse_url(path)
        if url is None:
            return None

        with self._get_client() as client:
            with client.stream("GET", url) as response:
                if response.is_error:
                    logger.debug(f"{url} answered {response.status_code}")
                    return None
                # Opening the body is enough; do not download it
                next(response.iter_bytes(), None)
                return str(response.url)

    def close(self) -> None:
        """Close the HTTP client."""
        with self._lock:
            if self._client and not self._client.is_closed:
                self._client.close()
            self._client = None

    def __repr__(self) -> str:
        return f"RemoteLoader(timeout={self.config.timeout}, proxy={self.config.proxy!r})"
