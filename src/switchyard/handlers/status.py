"""Fixed-response handler.

Answers every request with the same status code. The smallest possible
handler capability::

    app.add("/", StatusHandler(418))

Request logging is the router's job, so the handler itself stays silent.
"""

from switchyard.errors import ConfigurationError
from switchyard.http.request import Request
from switchyard.http.response import Response


class StatusHandler:
    """Respond with a fixed status (and optional body) to any request."""

    __slots__ = ("_body", "status")

    def __init__(self, status: int = 200, body: str | bytes = "") -> None:
        if not 100 <= status <= 599:
            msg = f"Invalid HTTP status code: {status}"
            raise ConfigurationError(msg)
        self.status = status
        self._body = body

    def __call__(self, request: Request) -> Response:
        return Response(body=self._body, status=self.status)

    def __repr__(self) -> str:
        return f"StatusHandler({self.status})"
