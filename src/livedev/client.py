"""Reload client script.

The browser-side half of live reload: a small script that connects to the
push channel and reloads the page on any message. It is read from disk
once at startup and injected verbatim into every HTML response.
"""

from __future__ import annotations

from pathlib import Path

from livedev.errors import ConfigurationError

BUNDLED_SCRIPT = Path(__file__).parent / "assets" / "reload.js"

# Replaced with the configured push port in the bundled script only
PORT_PLACEHOLDER = "__PUSH_PORT__"
DEFAULT_PUSH_PORT = 6800


class ReloadClient:
    """The cached reload script and the ``<script>`` block built from it.

    Usage::

        client = ReloadClient.load()
        html = client.inject(b"<h1>Hi</h1>")
    """

    __slots__ = ("_snippet", "code")

    def __init__(self, code: str) -> None:
        self.code = code
        self._snippet = f"\n\n<script>{code}</script>".encode()

    @classmethod
    def load(
        cls,
        path: str | Path | None = None,
        *,
        push_port: int = DEFAULT_PUSH_PORT,
    ) -> ReloadClient:
        """Read the reload script from *path* (default: the bundled one).

        The bundled script is pointed at *push_port*. A custom script is
        used verbatim and must know the port itself.

        Raises:
            ConfigurationError: The script file cannot be read.
        """
        script_path = Path(path) if path is not None else BUNDLED_SCRIPT
        try:
            code = script_path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot read reload script {script_path}: {exc}"
            raise ConfigurationError(msg) from exc
        if path is None:
            code = code.replace(PORT_PLACEHOLDER, str(push_port))
        return cls(code)

    @property
    def snippet(self) -> bytes:
        """The block appended to HTML bodies."""
        return self._snippet

    def inject(self, body: bytes) -> bytes:
        """Append the reload ``<script>`` block to an HTML body."""
        return body + self._snippet
