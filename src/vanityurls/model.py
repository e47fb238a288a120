"""Configuration model: raw input records and compiled snapshots.

``RawConfig`` is what a fetcher hands over: loosely validated, straight
from the decoded document. ``ConfigModel`` is what the compiler produces:
a frozen snapshot with normalized, sorted, duplicate-free entries that
request handlers read without locking.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from vanityurls.errors import FetchError

DEFAULT_FETCH_INTERVAL = 86400
DEFAULT_CACHE_MAX_AGE = 86400


class VCS(StrEnum):
    """Version control systems understood by the ``go`` tool."""

    BZR = "bzr"
    GIT = "git"
    HG = "hg"
    SVN = "svn"


@dataclass(frozen=True, slots=True)
class RawPathConfig:
    """One ``paths`` entry as written by the operator."""

    repo: str
    display: str = ""
    vcs: str = ""


@dataclass(frozen=True, slots=True)
class RawConfig:
    """An un-compiled configuration document.

    Build one from a decoded YAML/JSON document with ``from_mapping``::

        raw = RawConfig.from_mapping(yaml.safe_load(text))
    """

    host: str = ""
    fetch_interval: int | None = None
    cache_max_age: int | None = None
    paths: Mapping[str, RawPathConfig] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Any, *, source: str = "<memory>") -> "RawConfig":
        """Validate the document's shape and build a ``RawConfig``.

        Raises ``FetchError`` when the document is structurally malformed.
        Semantic checks (VCS names, cache age sign) belong to the compiler.
        """
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise FetchError(source, "configuration root must be a mapping")

        host = data.get("host")
        if host is None:
            host = ""
        elif not isinstance(host, str):
            raise FetchError(source, "'host' must be a string")

        raw_paths = data.get("paths")
        if raw_paths is None:
            raw_paths = {}
        elif not isinstance(raw_paths, Mapping):
            raise FetchError(source, "'paths' must be a mapping")

        paths: dict[str, RawPathConfig] = {}
        for key, value in raw_paths.items():
            if not isinstance(value, Mapping):
                raise FetchError(source, f"path {key!r} must be a mapping")
            repo = value.get("repo") or ""
            if not isinstance(repo, str) or not repo:
                raise FetchError(source, f"path {key!r} needs a 'repo' string")
            paths[str(key)] = RawPathConfig(
                repo=repo,
                display=_optional_str(value, "display", key, source),
                vcs=_optional_str(value, "vcs", key, source),
            )

        return cls(
            host=host,
            fetch_interval=_optional_int(data, "fetch_interval", source),
            cache_max_age=_optional_int(data, "cache_max_age", source),
            paths=paths,
        )


def _optional_str(value: Mapping[str, Any], name: str, key: str, source: str) -> str:
    result = value.get(name)
    if result is None:
        return ""
    if not isinstance(result, str):
        raise FetchError(source, f"path {key!r}: '{name}' must be a string")
    return result


def _optional_int(data: Mapping[str, Any], name: str, source: str) -> int | None:
    value = data.get(name)
    if value is None:
        return None
    # bool is an int subclass; "yes" is not a duration
    if isinstance(value, bool) or not isinstance(value, int):
        raise FetchError(source, f"'{name}' must be an integer number of seconds")
    return value


@dataclass(frozen=True, slots=True)
class PathEntry:
    """One resolvable vanity path."""

    path: str
    repo: str
    display: str
    vcs: VCS


@dataclass(frozen=True, slots=True)
class ConfigModel:
    """One immutable, validated configuration snapshot.

    ``entries`` is sorted ascending by ``path`` and duplicate-free for as
    long as the snapshot is visible to readers. Superseded snapshots are
    replaced whole, never mutated.
    """

    entries: tuple[PathEntry, ...] = ()
    host: str = ""
    cache_max_age: int = DEFAULT_CACHE_MAX_AGE
    cache_control: str = f"public, max-age={DEFAULT_CACHE_MAX_AGE}"
    fetch_interval: int = DEFAULT_FETCH_INTERVAL

    @property
    def paths(self) -> tuple[str, ...]:
        """Configured paths, in resolution order."""
        return tuple(entry.path for entry in self.entries)

    def effective_host(self, request_host: str) -> str:
        """The import host: the configured override, else the request's host."""
        return self.host or request_host
