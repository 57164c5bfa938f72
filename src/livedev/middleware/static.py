"""Static file serving middleware.

Serves every GET request from the content root through a
``StaticResolver``. Other methods and unmatched paths fall through to
the next handler, which answers 404.
"""

from livedev.http.request import Request
from livedev.http.response import Response
from livedev.middleware.protocol import Next
from livedev.resolve import StaticResolver


class StaticFiles:
    """Middleware that serves files from the content root.

    Unlike a production static handler there is no traversal check, no
    caching headers, and no guessed Content-Type: the only header set is
    the one the resolver computes (``image/svg+xml`` for SVG).

    Usage::

        resolver = StaticResolver("./public", ReloadClient.load())
        middleware = (AccessLog(), StaticFiles(resolver))
    """

    __slots__ = ("_resolver",)

    def __init__(self, resolver: StaticResolver) -> None:
        self._resolver = resolver

    async def __call__(self, request: Request, next: Next) -> Response:
        """Serve a file or fall through."""
        if request.method != "GET":
            return await next(request)

        route = self._resolver.route(request.path)
        resolved = self._resolver.resolve(route, directory=request.path.endswith("/"))
        if resolved is None:
            return await next(request)

        return Response(body=resolved.body).with_headers(resolved.headers)
