"""ASGI handler: translates ASGI scope/messages to vanityurls types.

The only component that touches raw HTTP scopes directly. Converts the
scope to a Request, dispatches it, and sends the Response back through
ASGI send().
"""

from vanityurls._internal.asgi import Receive, Scope, Send
from vanityurls.errors import HTTPError, RenderError
from vanityurls.http.request import Request
from vanityurls.http.response import Response
from vanityurls.server.dispatcher import Dispatcher
from vanityurls.server.errors import (
    handle_http_error,
    handle_internal_error,
    handle_render_error,
)
from vanityurls.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001
    send: Send,
    *,
    dispatcher: Dispatcher,
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response: Response = dispatcher.dispatch(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request, debug=debug)
    except RenderError as exc:
        response = handle_render_error(exc, request, debug=debug)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug=debug)

    await send_response(response, send, head=request.method == "HEAD")
