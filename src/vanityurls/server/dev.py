"""Server startup with pounce.

Runs the live App object on a single pounce worker: the configuration
manager and its refresh task live on that worker's event loop, so every
request reads the same snapshot slot.
"""

from vanityurls.errors import ConfigurationError


def run_server(
    app: object,
    host: str,
    port: int,
    *,
    log_level: str = "info",
) -> None:
    """Start a pounce server with the given ASGI app.

    Args:
        app: ASGI callable (vanityurls App instance).
        host: Bind host address.
        port: Bind port number.
        log_level: pounce log level.
    """
    try:
        from pounce.config import ServerConfig
        from pounce.server import Server
    except ImportError:
        msg = (
            "Serving requires the 'pounce' ASGI server. "
            "Install it with: pip install vanityurls[serve]"
        )
        raise ConfigurationError(msg) from None

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        log_level=log_level,
        health_check_path=None,
    )
    server = Server(config, app)
    server.run()
