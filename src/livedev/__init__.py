"""livedev — a local development file server with live reload.

Serves a ``public`` directory over HTTP and appends a small script to
every HTML page that listens on a WebSocket push channel; anything that
watches your files can call ``broadcast_reload()`` to refresh every open
browser tab.

Basic usage::

    from livedev import DevServer, ServerConfig

    server = DevServer(ServerConfig(content_dir="public"))
    server.run()

Or from a shell, in the directory that holds ``public/``::

    python -m livedev
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DevServer",
    "HTTPError",
    "LiveDevError",
    "NotFound",
    "ReloadChannel",
    "ReloadClient",
    "Request",
    "Response",
    "ServerConfig",
    "StaticResolver",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import livedev`` from pulling in uvicorn and websockets.
    """
    if name == "DevServer":
        from livedev.app import DevServer

        return DevServer

    if name == "ServerConfig":
        from livedev.config import ServerConfig

        return ServerConfig

    if name == "ReloadClient":
        from livedev.client import ReloadClient

        return ReloadClient

    if name == "ReloadChannel":
        from livedev.realtime.channel import ReloadChannel

        return ReloadChannel

    if name == "StaticResolver":
        from livedev.resolve import StaticResolver

        return StaticResolver

    if name == "Request":
        from livedev.http.request import Request

        return Request

    if name == "Response":
        from livedev.http.response import Response

        return Response

    if name in ("ConfigurationError", "HTTPError", "LiveDevError", "NotFound"):
        from livedev import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
