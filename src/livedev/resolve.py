"""Static file resolution.

Maps a URL path onto the content root and locates the file to serve::

    /            -> public/index.html
    /docs        -> public/docs/index.html   (directory)
    /about       -> public/about.html        (no suffix, .html inferred)
    /about/      -> 404 unless public/about is a directory
    /logo.svg    -> public/logo.svg

Resolution is recomputed on every request; nothing is cached except the
reload script held by ``ReloadClient``. Paths are normalized syntactically
only and may climb above the content root through ``..`` segments; this
is a development server.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from livedev.client import ReloadClient

logger = logging.getLogger("livedev.server")

HTML_SUFFIX = ".html"


@dataclass(frozen=True, slots=True)
class ResolvedFile:
    """A file located under the content root and the bytes to send for it."""

    path: Path
    body: bytes

    @property
    def headers(self) -> tuple[tuple[str, str], ...]:
        return headers_for(self.path)


def route_for(root: str | Path, url_path: str) -> Path:
    """Join a decoded URL path to *root* and collapse ``.``/``..`` segments."""
    relative = url_path.lstrip("/")
    return Path(os.path.normpath(os.path.join(root, relative)))


def find_file(
    route: Path,
    *,
    index: str = "index.html",
    max_depth: int = 2,
    directory: bool = False,
) -> Path | None:
    """Locate the file that should answer for *route*.

    Directories resolve to their *index* file, following at most
    *max_depth* directory hops so symlinked directory cycles terminate.
    A missing route without a suffix falls back to ``<route>.html``.

    With *directory* set (the URL ended in ``/``) only a directory
    matches, so ``/about/`` does not fall back to ``about.html``.
    """
    candidate = route
    if directory and not candidate.is_dir():
        return None
    for _ in range(max_depth + 1):
        if candidate.is_dir():
            candidate = candidate / index
            continue
        if candidate.is_file():
            return candidate
        if not candidate.exists() and not candidate.suffix:
            html_path = Path(f"{candidate}{HTML_SUFFIX}")
            if html_path.is_file():
                return html_path
        return None
    return None


def headers_for(path: Path) -> tuple[tuple[str, str], ...]:
    """Headers for media types browsers are picky about."""
    if path.suffix == ".svg":
        return (("Content-Type", "image/svg+xml"),)
    return ()


class StaticResolver:
    """Resolves routes to file bytes, injecting the reload script into HTML.

    Any filesystem error (permission denied, a file vanishing between
    stat and read) is reported as not found.
    """

    __slots__ = ("client", "index", "max_depth", "root")

    def __init__(
        self,
        root: str | Path,
        client: ReloadClient,
        *,
        index: str = "index.html",
        max_depth: int = 2,
    ) -> None:
        self.root = Path(root)
        self.client = client
        self.index = index
        self.max_depth = max_depth

    def route(self, url_path: str) -> Path:
        """Filesystem route for a decoded URL path."""
        return route_for(self.root, url_path)

    def resolve(self, route: Path, *, directory: bool = False) -> ResolvedFile | None:
        """Return the file for *route*, or ``None`` when nothing matches."""
        try:
            file_path = find_file(
                route, index=self.index, max_depth=self.max_depth, directory=directory
            )
            if file_path is None:
                return None
            body = file_path.read_bytes()
        except OSError as exc:
            logger.debug("cannot serve %s: %s", route, exc)
            return None

        if file_path.suffix == HTML_SUFFIX:
            body = self.client.inject(body)
        return ResolvedFile(path=file_path, body=body)
