"""Shared type aliases used across switchyard modules."""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from switchyard.http.request import Request
    from switchyard.http.response import Response

# Route handler — ``(request) -> response``, plain or coroutine function
Handler: TypeAlias = "Callable[[Request], Response | Awaitable[Response]]"

# Lifecycle hook — zero-argument, sync or async
Hook: TypeAlias = Callable[[], object]
