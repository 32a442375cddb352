"""Handlers — plain callables, no base class required.

A handler is any callable matching::

    def handler(request: Request) -> Response
    async def handler(request: Request) -> Response

Built-in handlers:
    StatusHandler -- Fixed status code for every request
    StaticFiles -- Serve files from a directory
"""

from switchyard.handlers.static import StaticFiles
from switchyard.handlers.status import StatusHandler

__all__ = [
    "StaticFiles",
    "StatusHandler",
]
