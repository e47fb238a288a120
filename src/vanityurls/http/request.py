"""Immutable HTTP request.

Vanity lookups only ever look at the method, the path and the Host
header, so the request carries metadata and no body access.
"""

from dataclasses import dataclass
from typing import Any

from vanityurls.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, frozen at creation."""

    method: str
    path: str
    headers: Headers
    server: tuple[str, int] | None = None

    @property
    def host(self) -> str:
        """The ``Host`` header, falling back to the server address.

        Includes the port when the client sent one, as browsers and the
        ``go`` tool do for non-default ports.
        """
        host = self.headers.get("host")
        if host:
            return host
        if self.server is None:
            return ""
        name, port = self.server
        if port in (80, 443):
            return name
        return f"{name}:{port}"

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> "Request":
        """Create a Request from an ASGI HTTP scope."""
        server = scope.get("server")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            server=tuple(server) if server else None,
        )
