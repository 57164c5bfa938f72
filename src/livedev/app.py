"""The livedev server: static files over HTTP plus a reload push channel.

``DevServer`` is built once at startup and owns everything the two
listeners need (the cached reload script, the resolver, the middleware
pipeline and the push channel), so there is no module-level state.
"""

from __future__ import annotations

import logging

import anyio

from livedev._internal.asgi import Receive, Scope, Send
from livedev.client import ReloadClient
from livedev.config import ServerConfig
from livedev.middleware.access_log import AccessLog
from livedev.middleware.static import StaticFiles
from livedev.realtime.channel import ReloadChannel
from livedev.resolve import StaticResolver
from livedev.server.handler import build_pipeline, handle_request

logger = logging.getLogger("livedev.server")


class DevServer:
    """A local development file server with live reload.

    Construction loads the reload script and fails fast with
    ``ConfigurationError`` when it is missing::

        server = DevServer(ServerConfig(content_dir="site"))
        server.run()

    The instance is also the HTTP ASGI app, so it can be driven directly
    by ``livedev.testing.TestClient`` or any ASGI server.
    """

    __slots__ = ("_pipeline", "channel", "client", "config", "middleware", "resolver")

    def __init__(
        self,
        config: ServerConfig | None = None,
        *,
        client: ReloadClient | None = None,
    ) -> None:
        self.config: ServerConfig = config or ServerConfig()
        self.client: ReloadClient = client or ReloadClient.load(
            self.config.client_script, push_port=self.config.push_port
        )
        self.resolver = StaticResolver(
            self.config.content_root,
            self.client,
            index=self.config.index,
            max_depth=self.config.max_index_depth,
        )
        self.middleware = (AccessLog(), StaticFiles(self.resolver))
        self._pipeline = build_pipeline(self.middleware)
        self.channel = ReloadChannel(self.config.host, self.config.push_port)

    # -- Push channel --

    def broadcast_reload(self) -> int:
        """Tell every connected browser to reload. Returns the client count."""
        return self.channel.broadcast_reload()

    # -- Lifecycle --

    def run(self) -> None:
        """Serve HTTP and the push channel until interrupted."""
        anyio.run(self.serve)

    async def serve(self) -> None:
        """Open the push channel, then serve HTTP on the same event loop.

        The channel is bound first so a busy push port aborts startup
        before the HTTP listener comes up. When the HTTP server stops,
        the channel is closed with it.
        """
        from livedev.server.dev import configure_logging, serve_http

        configure_logging(self.config.log_level)
        async with self.channel:
            logger.info(
                "Serving %s on http://%s:%d",
                self.config.content_root,
                self.config.host,
                self.config.http_port,
            )
            await serve_http(
                self,
                self.config.host,
                self.config.http_port,
                log_level=self.config.log_level,
            )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point for the HTTP listener."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] == "websocket":
            # The push channel has its own port; nothing to upgrade here.
            await receive()
            await send({"type": "websocket.close", "code": 1000})
            return

        await handle_request(scope, receive, send, pipeline=self._pipeline)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge the ASGI lifespan protocol; there is nothing to set up."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
