"""Configuration compiler.

Turns a ``RawConfig`` into a ``ConfigModel``: normalizes paths, fills in
display templates and VCS kinds that can be inferred from the repository
URL, validates, and sorts the entries for the resolver.

Compilation is all-or-nothing. The first validation failure raises a
``CompileError`` subclass and no partial snapshot escapes.
"""

from vanityurls.errors import (
    CannotInferVCS,
    DuplicatePath,
    EmptyPath,
    NegativeCacheAge,
    UnknownVCS,
)
from vanityurls.model import (
    DEFAULT_CACHE_MAX_AGE,
    DEFAULT_FETCH_INTERVAL,
    VCS,
    ConfigModel,
    PathEntry,
    RawConfig,
    RawPathConfig,
)

GITHUB_PREFIX = "https://github.com/"
BITBUCKET_PREFIX = "https://bitbucket.org"


def normalize_path(path: str) -> str:
    """Strip a single trailing ``/`` from a configured path."""
    return path.removesuffix("/")


def infer_display(repo: str) -> str:
    """Documentation-browsing template for well-known hosts, else ``""``."""
    if repo.startswith(GITHUB_PREFIX):
        return f"{repo} {repo}/tree/master{{/dir}} {repo}/blob/master{{/dir}}/{{file}}#L{{line}}"
    if repo.startswith(BITBUCKET_PREFIX):
        return (
            f"{repo} {repo}/src/default{{/dir}} "
            f"{repo}/src/default{{/dir}}/{{file}}#{{file}}-{{line}}"
        )
    return ""


def infer_vcs(path: str, repo: str, vcs: str = "") -> VCS:
    """Resolve the VCS for an entry.

    An explicit value must name a known VCS. Without one, only GitHub
    repositories can be inferred (as git).
    """
    if vcs:
        try:
            return VCS(vcs)
        except ValueError:
            raise UnknownVCS(path, vcs) from None
    if repo.startswith(GITHUB_PREFIX):
        return VCS.GIT
    raise CannotInferVCS(path, repo)


def cache_control_value(max_age: int) -> str:
    """The ``Cache-Control`` directive served with vanity documents."""
    return f"public, max-age={max_age}"


def compile_entry(key: str, raw: RawPathConfig) -> PathEntry:
    """Compile one ``paths`` entry."""
    path = normalize_path(key)
    if not path:
        raise EmptyPath(key)
    return PathEntry(
        path=path,
        repo=raw.repo,
        display=raw.display or infer_display(raw.repo),
        vcs=infer_vcs(key, raw.repo, raw.vcs),
    )


def compile_config(raw: RawConfig) -> ConfigModel:
    """Compile a raw configuration into an immutable snapshot.

    Raises:
        NegativeCacheAge: ``cache_max_age`` is below zero.
        EmptyPath: a key is empty after normalization.
        UnknownVCS: an explicit ``vcs`` is not bzr, git, hg or svn.
        CannotInferVCS: no ``vcs`` given and none can be inferred.
        DuplicatePath: two keys normalize to the same path.
    """
    cache_max_age = DEFAULT_CACHE_MAX_AGE
    if raw.cache_max_age is not None:
        if raw.cache_max_age < 0:
            raise NegativeCacheAge(raw.cache_max_age)
        cache_max_age = raw.cache_max_age

    fetch_interval = DEFAULT_FETCH_INTERVAL
    if raw.fetch_interval is not None and raw.fetch_interval > 0:
        fetch_interval = raw.fetch_interval

    entries: dict[str, PathEntry] = {}
    for key, path_config in raw.paths.items():
        entry = compile_entry(key, path_config)
        if entry.path in entries:
            raise DuplicatePath(entry.path)
        entries[entry.path] = entry

    return ConfigModel(
        entries=tuple(sorted(entries.values(), key=lambda e: e.path)),
        host=raw.host,
        cache_max_age=cache_max_age,
        cache_control=cache_control_value(cache_max_age),
        fetch_interval=fetch_interval,
    )
