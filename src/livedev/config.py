"""Server configuration.

ServerConfig is a frozen dataclass: immutable after creation, one object
holding every customization point of the dev server.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Dev server configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ServerConfig(http_port=8080, content_dir="dist")
    """

    # Listeners
    host: str = "127.0.0.1"
    http_port: int = 6700
    push_port: int = 6800  # Must match the port the reload script connects to

    # Content
    base_dir: str | Path = field(default_factory=Path.cwd)
    content_dir: str | Path = "public"
    index: str = "index.html"
    max_index_depth: int = 2

    # Reload script; None uses the one bundled with livedev
    client_script: str | Path | None = None

    # Logging
    log_level: str = "info"

    @property
    def content_root(self) -> Path:
        """Directory every request path is joined to."""
        return Path(self.base_dir) / self.content_dir
