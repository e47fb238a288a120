"""Routing: longest-prefix resolution of request paths to configured entries.

Entries arrive sorted from the compiler, so the common cases (exact match
and direct parent) are answered with a binary search.
"""

from vanityurls.routing.match import PathMatch
from vanityurls.routing.resolver import PathResolver, resolve, resolve_brute_force

__all__ = ["PathMatch", "PathResolver", "resolve", "resolve_brute_force"]
