"""Longest-prefix path resolution over a sorted entry set.

Request paths routinely outnumber configured entries, so the exact and
direct-parent cases are answered in O(log n) with a binary search. Deeper
sub-paths (``/pkg/sub/dir`` against an entry at ``/pkg`` when siblings sort
in between) fall back to a scan bounded by the search position.
"""

from bisect import bisect_left
from collections.abc import Sequence
from operator import attrgetter

from vanityurls.model import PathEntry
from vanityurls.routing.match import PathMatch

_entry_path = attrgetter("path")


def _match_prefix(entry: PathEntry, path: str) -> PathMatch | None:
    """Match when ``path`` continues ``entry.path`` past a ``/`` separator."""
    n = len(entry.path)
    if len(path) > n and path[n] == "/" and path.startswith(entry.path):
        return PathMatch(entry, path[n + 1 :])
    return None


def resolve(entries: Sequence[PathEntry], path: str) -> PathMatch | None:
    """Find the most specific entry for a request path.

    ``entries`` must be sorted ascending by path with no duplicates, as
    produced by ``compile_config``. Returns ``None`` when no entry equals
    ``path`` or is a parent of it.

    Examples, given entries ``/a`` and ``/a/b``::

        resolve(entries, "/a/b/c")  # -> /a/b, subpath "c"
        resolve(entries, "/a/x")    # -> /a,   subpath "x"
        resolve(entries, "/z")      # -> None
    """
    i = bisect_left(entries, path, key=_entry_path)

    # Fast path: exact match
    if i < len(entries) and entries[i].path == path:
        return PathMatch(entries[i])

    # Fast path: the entry sorting just before is the direct parent
    if i > 0:
        match = _match_prefix(entries[i - 1], path)
        if match is not None:
            return match

    # Slow path: longest prefix / shortest subpath.
    # Nothing at or after i sorts before path, so nothing there can be
    # a prefix of it. Ascending order keeps the first of equal candidates.
    best: PathMatch | None = None
    for entry in entries[:i]:
        if len(entry.path) >= len(path):
            continue
        match = _match_prefix(entry, path)
        if match is not None and (best is None or len(match.subpath) < len(best.subpath)):
            best = match
    return best


def resolve_brute_force(entries: Sequence[PathEntry], path: str) -> PathMatch | None:
    """Reference O(n) definition of ``resolve``.

    Considers every entry, without relying on sort order. Used to check
    the fast paths and handy when debugging a configuration.
    """
    best: PathMatch | None = None
    for entry in entries:
        if entry.path == path:
            return PathMatch(entry)
        match = _match_prefix(entry, path)
        if match is not None and (best is None or len(entry.path) > len(best.entry.path)):
            best = match
    return best


class PathResolver:
    """Resolver bound to one snapshot's entries.

    Usage::

        resolver = PathResolver(snapshot.entries)
        match = resolver.match("/pkg/sub")
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Sequence[PathEntry]) -> None:
        self._entries = tuple(entries)

    def match(self, path: str) -> PathMatch | None:
        """Resolve ``path``; ``None`` when nothing matches."""
        return resolve(self._entries, path)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)
