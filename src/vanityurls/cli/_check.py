"""``vanityurls check``: configuration validation command.

Fetches and compiles the configuration once and prints the resolved
entries. Exits with code 1 if the configuration does not compile.
"""

import argparse

from vanityurls.cli._load import app_config_from_args, load_snapshot


def run_check(args: argparse.Namespace) -> None:
    snapshot = load_snapshot(app_config_from_args(args))

    print(f"host: {snapshot.host or '(request host)'}")
    print(f"cache-control: {snapshot.cache_control}")
    print(f"fetch interval: {snapshot.fetch_interval}s")
    print(f"{len(snapshot.entries)} path(s):")
    for entry in snapshot.entries:
        print(f"  {entry.path}  {entry.vcs}  {entry.repo}")
        if entry.display:
            print(f"      display: {entry.display}")
