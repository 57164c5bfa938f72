"""Error handling pipeline for livedev requests.

Every non-success outcome becomes a bodiless response. Clients never see
tracebacks or filesystem details; the operator's console does.
"""

import logging

from livedev.errors import HTTPError
from livedev.http.request import Request
from livedev.http.response import Response

logger = logging.getLogger("livedev.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to an empty response with its status and headers."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)
    return Response(status=exc.status).with_headers(exc.headers)


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Log an unexpected failure and answer as if nothing matched."""
    logger.exception("error serving %s %s", request.method, request.path, exc_info=exc)
    return Response(status=404)
