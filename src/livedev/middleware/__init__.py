"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    AccessLog -- Echo each request path to the console
    StaticFiles -- Serve files from the content root (GET only)
"""

from livedev.middleware.access_log import AccessLog
from livedev.middleware.protocol import Middleware, Next
from livedev.middleware.static import StaticFiles

__all__ = [
    "AccessLog",
    "Middleware",
    "Next",
    "StaticFiles",
]
