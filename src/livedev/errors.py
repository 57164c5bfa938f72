"""livedev exception hierarchy.

Shared by the resolver, middleware, and ASGI handler so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class LiveDevError(Exception):
    """Base for all livedev-specific errors."""


class ConfigurationError(LiveDevError):
    """Raised when the server cannot start with the given configuration.

    Typically raised while constructing ``DevServer`` (e.g. the reload
    script is missing).
    """


@dataclass(frozen=True, slots=True)
class HTTPError(LiveDevError):
    """An error that maps directly to an HTTP status code.

    Raised by middleware or the innermost dispatch. The ASGI handler
    catches these and turns them into a bodiless response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — nothing under the content root matched the request."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
