"""ASGI handler — translates ASGI scope/messages to livedev types.

The only component that touches raw HTTP ASGI messages. Converts the
scope to a typed Request, dispatches through the middleware chain, and
sends the Response back through ASGI send().
"""

from collections.abc import Callable
from typing import Any

from livedev._internal.asgi import Receive, Scope, Send
from livedev.errors import HTTPError, NotFound
from livedev.http.request import Request
from livedev.http.response import Response
from livedev.middleware.protocol import Next
from livedev.server.errors import handle_http_error, handle_internal_error
from livedev.server.sender import send_response


async def _dispatch(request: Request) -> Response:
    """Innermost handler: reached only when no middleware answered."""
    raise NotFound(f"No file for {request.path}")


def build_pipeline(middleware: tuple[Callable[..., Any], ...]) -> Next:
    """Wrap *middleware* (outermost first) around the not-found dispatch."""
    handler: Next = _dispatch
    for mw in reversed(middleware):
        outer = handler

        async def make_next(req: Request, _mw: Any = mw, _next: Next = outer) -> Response:
            return await _mw(req, _next)

        handler = make_next
    return handler


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    pipeline: Next,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = await pipeline(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send)
