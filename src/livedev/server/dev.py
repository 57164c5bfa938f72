"""Development HTTP listener.

Serves the livedev ASGI app with uvicorn on the current event loop, so
the push channel can share the same loop and process.
"""

from __future__ import annotations

import copy
import logging.config
from typing import Any

import uvicorn
from uvicorn.config import LOGGING_CONFIG


def build_log_config(log_level: str) -> dict[str, Any]:
    """uvicorn's logging config plus a console logger for ``livedev``."""
    config = copy.deepcopy(LOGGING_CONFIG)
    config["loggers"]["livedev"] = {
        "handlers": ["default"],
        "level": log_level.upper(),
        "propagate": False,
    }
    return config


def configure_logging(log_level: str) -> None:
    """Route livedev and uvicorn logs to the console before anything binds."""
    logging.config.dictConfig(build_log_config(log_level))


async def serve_http(
    app: object,
    host: str,
    port: int,
    *,
    log_level: str = "info",
) -> None:
    """Run a uvicorn server for *app* until it is told to stop.

    Single worker, no uvicorn reload: livedev reloads browsers, not
    itself. Returns once uvicorn has shut down (Ctrl+C).

    Args:
        app: ASGI callable (a livedev ``DevServer``).
        host: Bind host address.
        port: Bind port number.
        log_level: Level for both uvicorn and livedev loggers.
    """
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=log_level,
        log_config=build_log_config(log_level),
        lifespan="on",
    )
    server = uvicorn.Server(config)
    await server.serve()
