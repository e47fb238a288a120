"""Configuration fetchers.

A fetcher reads configuration bytes from somewhere durable and decodes
them into a ``RawConfig``. Every I/O or decode failure is reported as a
``FetchError`` naming the source, so the lifecycle manager can log it
and keep serving the previous snapshot.

``URLFetcher`` requires ``httpx``::

    pip install vanityurls[http]
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from vanityurls.errors import ConfigurationError, FetchError
from vanityurls.model import RawConfig

logger = logging.getLogger("vanityurls.fetchers")

DEFAULT_CONFIG_PATH = "vanity.yaml"


def parse_document(text: str | bytes, *, source: str) -> RawConfig:
    """Decode a YAML (or JSON) configuration document."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise FetchError(source, f"invalid YAML: {exc}") from exc
    return RawConfig.from_mapping(data, source=source)


class FileFetcher:
    """Reads a YAML configuration file on every fetch."""

    __slots__ = ("path",)

    def __init__(self, path: str | Path = DEFAULT_CONFIG_PATH) -> None:
        self.path = Path(path)

    def fetch(self) -> RawConfig:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise FetchError(str(self.path), exc.strerror or str(exc)) from exc
        logger.debug("read %d bytes from %s", len(text), self.path)
        return parse_document(text, source=str(self.path))

    def __repr__(self) -> str:
        return f"FileFetcher({str(self.path)!r})"


def _get_httpx() -> Any:
    """Import httpx or raise a clear error."""
    try:
        import httpx

        return httpx
    except ImportError:
        msg = (
            "URLFetcher requires 'httpx' to download configuration. "
            "Install it with: pip install vanityurls[http]"
        )
        raise ConfigurationError(msg) from None


class URLFetcher:
    """Downloads a YAML configuration document over HTTP(S).

    Suits configurations kept in an object store or served by another
    service. Pass ``client`` to reuse (or mock) an ``httpx.Client``.
    """

    __slots__ = ("_client", "timeout", "url")

    def __init__(self, url: str, *, timeout: float = 10.0, client: Any = None) -> None:
        self.url = url
        self.timeout = timeout
        self._client = client

    def fetch(self) -> RawConfig:
        httpx = _get_httpx()
        try:
            if self._client is not None:
                response = self._client.get(self.url, timeout=self.timeout)
            else:
                with httpx.Client(follow_redirects=True) as client:
                    response = client.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(self.url, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise FetchError(self.url, str(exc) or type(exc).__name__) from exc
        logger.debug("downloaded %d bytes from %s", len(response.content), self.url)
        return parse_document(response.content, source=self.url)

    def __repr__(self) -> str:
        return f"URLFetcher({self.url!r})"


class StaticFetcher:
    """Serves a fixed in-memory configuration.

    Useful for embedding and tests. ``update()`` replaces what the next
    fetch returns.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | RawConfig | None = None) -> None:
        self._data: Mapping[str, Any] | RawConfig = data if data is not None else {}

    def update(self, data: Mapping[str, Any] | RawConfig) -> None:
        self._data = data

    def fetch(self) -> RawConfig:
        if isinstance(self._data, RawConfig):
            return self._data
        return RawConfig.from_mapping(self._data, source="<static>")
