"""Process configuration.

AppConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups. It configures the process (bind address, where
the vanity configuration lives); the vanity paths themselves come from the
fetched document.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from vanityurls.errors import ConfigurationError

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=3000, config_path="/etc/vanity.yaml")
    """

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False

    # Configuration source (a URL wins over a path when both are set)
    config_path: str | Path = "vanity.yaml"
    config_url: str | None = None
    fetch_timeout: float = 10.0

    # Refresh: None follows the document's fetch_interval
    refresh: bool = True
    refresh_interval: float | None = None

    # Logging
    log_level: str = "info"

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 65535:
            msg = f"port must be between 0 and 65535, got {self.port}"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            raise ConfigurationError(msg)
        if self.refresh_interval is not None and self.refresh_interval <= 0:
            msg = f"refresh_interval must be positive, got {self.refresh_interval}"
            raise ConfigurationError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> "AppConfig":
        """Build a config from environment variables.

        ``PORT`` and ``HOST`` set the bind address; ``VANITY_CONFIG``,
        ``VANITY_CONFIG_URL``, ``VANITY_DEBUG`` and ``VANITY_LOG_LEVEL``
        the rest. Keyword ``overrides`` win over the environment.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        if port := env.get("PORT"):
            try:
                values["port"] = int(port)
            except ValueError:
                msg = f"PORT must be an integer, got {port!r}"
                raise ConfigurationError(msg) from None
        if host := env.get("HOST"):
            values["host"] = host
        if path := env.get("VANITY_CONFIG"):
            values["config_path"] = path
        if url := env.get("VANITY_CONFIG_URL"):
            values["config_url"] = url
        if debug := env.get("VANITY_DEBUG"):
            values["debug"] = debug.strip().lower() in ("1", "true", "yes", "on")
        if level := env.get("VANITY_LOG_LEVEL"):
            values["log_level"] = level.lower()

        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]
