"""Error handling pipeline for vanity requests.

Maps HTTPError exceptions, rendering failures and unexpected errors to
plain-text responses. Details stay in the log unless debug is on.
"""

import logging
from http import HTTPStatus

from vanityurls.errors import HTTPError, RenderError
from vanityurls.http.request import Request
from vanityurls.http.response import Response, text_response

logger = logging.getLogger("vanityurls.server")

RENDER_FAILED = "cannot render the page"


def _status_phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return f"Error {status}"


def handle_http_error(exc: HTTPError, request: Request, *, debug: bool = False) -> Response:
    """Map an HTTPError to a Response."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
    body = _status_phrase(exc.status)
    if debug and exc.detail and exc.detail != body:
        body = f"{exc.status}: {exc.detail}"
    response = text_response(body, exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_render_error(exc: RenderError, request: Request, *, debug: bool = False) -> Response:
    """Rendering failed: 500 with a fixed message."""
    logger.error("500 %s %s: %s", request.method, request.path, exc)
    body = f"{RENDER_FAILED}: {exc}" if debug else RENDER_FAILED
    return text_response(body, 500)


def handle_internal_error(exc: Exception, request: Request, *, debug: bool = False) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)
    body = f"Internal Server Error: {type(exc).__name__}: {exc}" if debug else "Internal Server Error"
    return text_response(body, 500)
