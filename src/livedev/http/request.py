"""Immutable HTTP request.

Only the metadata the dev server routes on: method, decoded path and
query string. Headers and bodies are never read.
"""

from __future__ import annotations

from dataclasses import dataclass

from livedev._internal.asgi import Scope


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request built from an ASGI scope."""

    method: str
    path: str
    query_string: bytes = b""

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Build a Request from an ASGI ``http`` scope.

        ``scope["path"]`` is already percent-decoded by the server.
        """
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            query_string=scope.get("query_string", b""),
        )

    @property
    def url(self) -> str:
        """Request path plus query string, as it appeared on the wire."""
        if self.query_string:
            return f"{self.path}?{self.query_string.decode('latin-1')}"
        return self.path
