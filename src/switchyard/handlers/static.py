"""Static file handler.

Serves files from a directory. Mount it on a prefix route and it sees
only the sub-path below the mount point::

    app.mount("/proverbs/", StaticFiles("./static"))

Directories resolve to their index file. Missing files answer 404,
unreadable ones 403; the router never sees these as errors.
"""

import logging
import mimetypes
from pathlib import Path

import anyio

from switchyard.errors import ConfigurationError, MethodNotAllowed
from switchyard.http.request import Request
from switchyard.http.response import Response

logger = logging.getLogger("switchyard.static")

_ALLOWED_METHODS = frozenset({"GET", "HEAD"})


class StaticFiles:
    """Handler that serves static files from a directory.

    Security: resolves symlinks and verifies the final path
    is within the configured directory to prevent path traversal.

    Usage::

        # Under a prefix (sub-path is relative to the directory)
        app.mount("/static/", StaticFiles(directory="./static"))

        # Whole site
        app.mount("/", StaticFiles(directory="./public", cache_control="no-cache"))
    """

    __slots__ = ("_cache_control", "_directory", "_index")

    def __init__(
        self,
        directory: str | Path,
        *,
        index: str = "index.html",
        cache_control: str = "public, max-age=3600",
        check_dir: bool = True,
    ) -> None:
        self._directory = Path(directory).resolve()
        self._index = index
        self._cache_control = cache_control
        if check_dir and not self._directory.is_dir():
            msg = f"Static directory {str(directory)!r} does not exist."
            raise ConfigurationError(msg)

    @property
    def directory(self) -> Path:
        return self._directory

    async def __call__(self, request: Request) -> Response:
        """Serve the file named by ``request.path``."""
        if request.method not in _ALLOWED_METHODS:
            raise MethodNotAllowed(_ALLOWED_METHODS)

        relative = request.path.lstrip("/")

        # Resolve the file path and check for traversal
        file_path = await anyio.Path(self._directory / relative).resolve()
        if not Path(file_path).is_relative_to(self._directory):
            logger.warning("Refusing path outside %s: %r", self._directory, request.path)
            return Response.for_status(403)

        # Directory: try index file, redirecting to the trailing-slash URL first
        if await file_path.is_dir():
            index_path = file_path / self._index
            if not await index_path.is_file():
                return Response.not_found()
            if relative and not request.path.endswith("/"):
                return _redirect(request, request.full_path + "/")
            file_path = index_path
        elif not await file_path.is_file():
            return Response.not_found()
        elif request.path.endswith("/"):
            # A file is never served under a directory-style URL
            return _redirect(request, request.full_path.rstrip("/"))

        try:
            body = await file_path.read_bytes()
        except FileNotFoundError:
            # Removed between the stat and the read
            return Response.not_found()
        except PermissionError:
            logger.warning("Permission denied reading %s", file_path)
            return Response.for_status(403)

        content_type, _ = mimetypes.guess_type(str(file_path))
        if content_type is None:
            content_type = "application/octet-stream"

        return Response(body=body, content_type=content_type).with_header(
            "Cache-Control", self._cache_control
        )

    def __repr__(self) -> str:
        return f"StaticFiles({str(self._directory)!r})"


def _redirect(request: Request, location: str) -> Response:
    if request.query_string:
        location = f"{location}?{request.query_string.decode('latin-1')}"
    return Response.for_status(301).with_header("Location", location)
