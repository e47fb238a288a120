"""``vanityurls resolve``: show the entry a request path resolves to.

Exits with code 1 when nothing matches.
"""

import argparse
import sys

from vanityurls.cli._load import app_config_from_args, load_snapshot
from vanityurls.routing.resolver import PathResolver


def run_resolve(args: argparse.Namespace) -> None:
    snapshot = load_snapshot(app_config_from_args(args))
    match = PathResolver(snapshot.entries).match(args.path)

    if match is None:
        print(f"{args.path}: no match", file=sys.stderr)
        raise SystemExit(1)

    import_path = snapshot.effective_host("<request host>") + match.entry.path
    print(f"path:    {match.entry.path}")
    print(f"subpath: {match.subpath}")
    print(f"import:  {import_path}")
    print(f"vcs:     {match.entry.vcs}")
    print(f"repo:    {match.entry.repo}")
