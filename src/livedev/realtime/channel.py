"""Push channel: a WebSocket listener that tells browsers to reload.

The injected reload script connects here and reloads its page on any
message. The channel never interprets what clients send; it only keeps
track of who is connected so ``broadcast_reload()`` can reach them all.

Whatever watches the filesystem calls ``broadcast_reload()``::

    async with ReloadChannel("127.0.0.1", 6800) as channel:
        ...
        channel.broadcast_reload()
"""

from __future__ import annotations

import logging
from types import TracebackType

from websockets.asyncio.server import Server, ServerConnection, broadcast, serve
from websockets.protocol import State

logger = logging.getLogger("livedev.realtime")

RELOAD_MESSAGE = "reload"


class ReloadChannel:
    """WebSocket server holding the set of connected browser clients.

    Use as an async context manager: entering binds the listener (so a
    port already in use fails immediately), leaving closes it and every
    open connection.
    """

    __slots__ = ("_server", "clients", "host", "port")

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port
        self.clients: set[ServerConnection] = set()
        self._server: Server | None = None

    @property
    def is_serving(self) -> bool:
        return self._server is not None

    @property
    def bound_port(self) -> int:
        """The port actually bound (differs from ``port`` when it is 0)."""
        if self._server is None:
            return self.port
        return self._server.sockets[0].getsockname()[1]

    async def _handler(self, connection: ServerConnection) -> None:
        self.clients.add(connection)
        logger.debug("reload client connected: %s", connection.remote_address)
        try:
            await connection.wait_closed()
        finally:
            self.clients.discard(connection)
            logger.debug("reload client disconnected: %s", connection.remote_address)

    async def start(self) -> None:
        """Bind the listener and start accepting clients."""
        self._server = await serve(self._handler, self.host, self.port)
        logger.info("Push channel listening on ws://%s:%d", self.host, self.bound_port)

    async def close(self) -> None:
        """Stop accepting clients and close every open connection."""
        if self._server is None:
            return
        server, self._server = self._server, None
        server.close()
        await server.wait_closed()

    def broadcast_reload(self, message: str = RELOAD_MESSAGE) -> int:
        """Send *message* to every connected client.

        Returns the number of clients signalled. Connections that are
        still handshaking or already closing are not counted or sent to.
        """
        clients = [client for client in self.clients if client.state is State.OPEN]
        if clients:
            broadcast(clients, message)
        logger.info("reload signal sent to %d client(s)", len(clients))
        return len(clients)

    async def __aenter__(self) -> ReloadChannel:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
