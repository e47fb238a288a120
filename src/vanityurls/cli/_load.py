"""Shared configuration loading for CLI commands."""

import argparse
import sys

from vanityurls.app import make_fetcher
from vanityurls.compiler import compile_config
from vanityurls.config import AppConfig
from vanityurls.errors import CompileError, ConfigurationError, FetchError
from vanityurls.model import ConfigModel


def app_config_from_args(args: argparse.Namespace) -> AppConfig:
    """Environment-derived AppConfig with CLI flags layered on top."""
    overrides = {
        name: value
        for name in ("config_path", "config_url", "host", "port", "log_level")
        if (value := getattr(args, name, None)) is not None
    }
    if "config_path" in overrides:
        overrides["config_url"] = None
    try:
        return AppConfig.from_env(**overrides)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def load_snapshot(config: AppConfig) -> ConfigModel:
    """Fetch and compile once; exit 1 with the error on failure."""
    try:
        return compile_config(make_fetcher(config).fetch())
    except (FetchError, CompileError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
