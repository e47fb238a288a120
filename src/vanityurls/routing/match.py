"""PathMatch frozen dataclass."""

from dataclasses import dataclass

from vanityurls.model import PathEntry


@dataclass(frozen=True, slots=True)
class PathMatch:
    """Result of a successful resolution.

    ``subpath`` is what remains of the request path after the entry's
    path and its ``/`` separator, ``""`` for an exact match.
    """

    entry: PathEntry
    subpath: str = ""
