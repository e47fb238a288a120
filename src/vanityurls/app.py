"""The vanityurls ASGI application.

Wires a ConfigManager to a Dispatcher and exposes both as an ASGI 3.0
callable. The background refresh task is tied to the ASGI lifespan: it
starts with the server and is cancelled cleanly on shutdown.
"""

import logging

from vanityurls._internal.asgi import Receive, Scope, Send
from vanityurls.config import AppConfig
from vanityurls.fetchers import FileFetcher, URLFetcher
from vanityurls.lifecycle import ConfigFetcher, ConfigManager
from vanityurls.server.dispatcher import Dispatcher
from vanityurls.server.handler import handle_request
from vanityurls.templating.integration import PageRenderer

logger = logging.getLogger("vanityurls.server")


class App:
    """The vanity import path server.

    Construct explicitly and hand to any ASGI server; there is no global
    registry::

        manager = ConfigManager(FileFetcher("vanity.yaml"))
        manager.load()
        app = App(manager)
    """

    __slots__ = ("config", "dispatcher", "manager")

    def __init__(
        self,
        manager: ConfigManager,
        config: AppConfig | None = None,
        *,
        renderer: PageRenderer | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self.manager = manager
        self.dispatcher = Dispatcher(manager, renderer=renderer)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            dispatcher=self.dispatcher,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Startup loads the configuration if it has not been loaded yet (a
        failure aborts startup) and starts the refresh task. Shutdown
        stops it.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    logger.error("startup failed: %s", exc)
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def startup(self) -> None:
        """Ensure a snapshot is loaded and start refreshing."""
        if not self.manager.loaded:
            await self.manager.aload()
        if self.config.refresh:
            self.manager.start()

    async def shutdown(self) -> None:
        await self.manager.aclose()

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve the app with pounce (``pip install vanityurls[serve]``)."""
        from vanityurls.server.dev import run_server

        run_server(
            self,
            host or self.config.host,
            port if port is not None else self.config.port,
            log_level=self.config.log_level,
        )


def make_fetcher(config: AppConfig) -> ConfigFetcher:
    """The fetcher for a process configuration: URL if set, else file."""
    if config.config_url:
        return URLFetcher(config.config_url, timeout=config.fetch_timeout)
    return FileFetcher(config.config_path)


def create_app(config: AppConfig | None = None, *, fetcher: ConfigFetcher | None = None) -> App:
    """Build an App and load its initial configuration.

    Raises ``FetchError`` or a ``CompileError`` subclass when the initial
    configuration cannot be loaded; the service must not start without one.
    """
    config = config or AppConfig()
    manager = ConfigManager(
        fetcher if fetcher is not None else make_fetcher(config),
        interval=config.refresh_interval,
    )
    manager.load()
    return App(manager, config)
