"""ASGI handler — translates ASGI scope/messages to switchyard types.

The only component that touches raw ASGI ``http`` scopes directly.
Converts scope dicts to typed Request objects, dispatches through the
router, and sends the Response back through ASGI send(). Every failure
is resolved here into a status-coded response.
"""

import logging

from switchyard._internal.asgi import Receive, Scope, Send
from switchyard.errors import HTTPError
from switchyard.http.request import Request
from switchyard.http.response import Response
from switchyard.routing.router import Router
from switchyard.server.sender import send_response

logger = logging.getLogger("switchyard.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        response = await router.dispatch(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send, head=request.method == "HEAD")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError raised by a handler to a Response."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)
    response = Response.for_status(exc.status, exc.detail or None)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.error("500 %s %s", request.method, request.path, exc_info=exc)
    return Response.for_status(500)
