"""vanityurls CLI: serve, validate and query a vanity configuration.

Entry point registered as ``vanityurls`` in ``pyproject.toml``::

    [project.scripts]
    vanityurls = "vanityurls.cli:main"
"""

import argparse
import sys


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path to the YAML configuration (default: $VANITY_CONFIG or vanity.yaml)",
    )
    source.add_argument(
        "--url",
        dest="config_url",
        default=None,
        help="URL of the YAML configuration (default: $VANITY_CONFIG_URL)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``vanityurls`` command."""
    parser = argparse.ArgumentParser(
        prog="vanityurls",
        description="Serve Go vanity import paths from a YAML configuration.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- vanityurls serve -------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Start the vanity server")
    _add_source_arguments(serve_parser)
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (debug, info, warning, error)",
    )

    # -- vanityurls check -------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a configuration")
    _add_source_arguments(check_parser)

    # -- vanityurls resolve -----------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve", help="Show which configured path a request path resolves to"
    )
    resolve_parser.add_argument("path", help="Request path (e.g. /pkg/sub)")
    _add_source_arguments(resolve_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from vanityurls.cli._serve import serve

        serve(args)
    elif args.command == "check":
        from vanityurls.cli._check import run_check

        run_check(args)
    elif args.command == "resolve":
        from vanityurls.cli._resolve import run_resolve

        run_resolve(args)
