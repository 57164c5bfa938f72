"""Request echo for the operator's console."""

import logging

from livedev.http.request import Request
from livedev.http.response import Response
from livedev.middleware.protocol import Next

logger = logging.getLogger("livedev.server")


class AccessLog:
    """Log every incoming request path before it is handled.

    Runs outermost so requests that end in a 404 are logged too.
    """

    __slots__ = ()

    async def __call__(self, request: Request, next: Next) -> Response:
        logger.info("> > request for %s", request.url)
        return await next(request)
