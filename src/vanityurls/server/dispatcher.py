"""Request dispatcher: vanity path lookup against the active snapshot.

Each request takes one snapshot reference up front and works only
against it, so a refresh landing mid-request cannot mix two
configurations in one response.
"""

import logging

from vanityurls.errors import NotFound
from vanityurls.http.request import Request
from vanityurls.http.response import Response
from vanityurls.lifecycle import ConfigManager
from vanityurls.routing.resolver import resolve
from vanityurls.templating.integration import PageRenderer

logger = logging.getLogger("vanityurls.server")


class Dispatcher:
    """Decides between the index page, a vanity document, and 404.

    Owns a reference to the ``ConfigManager``; constructed once and
    handed to the ASGI app explicitly.
    """

    __slots__ = ("manager", "renderer")

    def __init__(self, manager: ConfigManager, *, renderer: PageRenderer | None = None) -> None:
        self.manager = manager
        self.renderer = renderer if renderer is not None else PageRenderer()

    def dispatch(self, request: Request) -> Response:
        """Answer one request.

        Raises ``NotFound`` when nothing matches and the path is not ``/``,
        and ``RenderError`` when a page cannot be rendered.
        """
        snapshot = self.manager.snapshot
        match = resolve(snapshot.entries, request.path)
        host = snapshot.effective_host(request.host)

        if match is None:
            if request.path == "/":
                return Response(self.renderer.index(host, snapshot.paths))
            raise NotFound(f"No vanity path matches {request.path!r}")

        body = self.renderer.vanity(host + match.entry.path, match.entry, match.subpath)
        return Response(body).with_header("Cache-Control", snapshot.cache_control)
