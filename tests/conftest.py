"""Shared fixtures for vanityurls tests."""

from typing import Any

import pytest

from vanityurls.app import App
from vanityurls.config import AppConfig
from vanityurls.fetchers import StaticFetcher
from vanityurls.lifecycle import ConfigManager


@pytest.fixture
def document() -> dict[str, Any]:
    """A small configuration document with nested paths."""
    return {
        "host": "example.org",
        "cache_max_age": 3600,
        "paths": {
            "/a": {"repo": "https://github.com/acme/a"},
            "/a/b": {"repo": "https://github.com/acme/b"},
            "/hg/": {"repo": "https://hg.example.com/tools", "vcs": "hg"},
        },
    }


@pytest.fixture
def fetcher(document: dict[str, Any]) -> StaticFetcher:
    return StaticFetcher(document)


@pytest.fixture
def manager(fetcher: StaticFetcher) -> ConfigManager:
    manager = ConfigManager(fetcher)
    manager.load()
    return manager


@pytest.fixture
def app(manager: ConfigManager) -> App:
    return App(manager, AppConfig(refresh=False))
