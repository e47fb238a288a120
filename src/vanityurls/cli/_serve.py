"""``vanityurls serve``: load the configuration and start the server.

A configuration that cannot be fetched or compiled is fatal: the process
exits 1 before binding.
"""

import argparse
import logging
import sys

from vanityurls.app import create_app
from vanityurls.cli._load import app_config_from_args
from vanityurls.errors import CompileError, ConfigurationError, FetchError


def serve(args: argparse.Namespace) -> None:
    config = app_config_from_args(args)
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = create_app(config)
        app.run()
    except (FetchError, CompileError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
