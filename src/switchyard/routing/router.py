"""Compiled router with exact and longest-prefix path matching.

Routes are registered during setup and compiled into an immutable
lookup structure before the first request. Compiled routers hold no
mutable state, so concurrent ``match()``/``dispatch()`` calls need no
locking.
"""

import logging

from switchyard._internal.invoke import invoke
from switchyard._internal.types import Handler
from switchyard.errors import ConfigurationError, HTTPError, NotFound
from switchyard.http.request import Request
from switchyard.http.response import Response
from switchyard.routing.route import Route, RouteMatch

logger = logging.getLogger("switchyard.server")


def is_prefix_pattern(pattern: str) -> bool:
    """A trailing ``/`` marks a subtree pattern (``/``, ``/proverbs/``)."""
    return pattern.endswith("/")


def validate_pattern(pattern: str) -> None:
    """Reject patterns that could never match a request path."""
    if not pattern:
        msg = "Route pattern must not be empty."
        raise ConfigurationError(msg)
    if not pattern.startswith("/"):
        msg = f"Route pattern {pattern!r} must start with '/'."
        raise ConfigurationError(msg)


class Router:
    """Compiled router: exact routes first, then the longest matching prefix.

    Usage::

        router = Router()
        router.register("/", index)
        router.register("/proverbs/", StaticFiles("./static"))
        router.compile()
        response = await router.dispatch(request)

    Registering the same pattern twice (with the same kind) is rejected
    with ``ConfigurationError`` rather than silently replacing the
    first handler.
    """

    __slots__ = ("_compiled", "_exact", "_prefix_by_pattern", "_prefixes", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._exact: dict[str, Route] = {}
        self._prefix_by_pattern: dict[str, Route] = {}
        # Prefix routes ordered longest pattern first, then registration order
        self._prefixes: tuple[Route, ...] = ()
        self._compiled = False

    def register(self, pattern: str, handler: Handler, *, exact: bool | None = None) -> Route:
        """Add a binding. Must be called before compile().

        ``exact=None`` infers the kind from the pattern: a trailing ``/``
        makes it a prefix route. Pass ``exact=True`` to bind ``/`` (or any
        slash-terminated path) to that path alone.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        validate_pattern(pattern)
        if not callable(handler):
            msg = f"Handler for {pattern!r} is not callable: {handler!r}"
            raise ConfigurationError(msg)

        is_exact = not is_prefix_pattern(pattern) if exact is None else exact
        table = self._exact if is_exact else self._prefix_by_pattern
        if pattern in table:
            existing = table[pattern]
            msg = (
                f"Duplicate {existing.kind} route {pattern!r}: already bound to "
                f"{_handler_name(existing.handler)}."
            )
            raise ConfigurationError(msg)

        route = Route(pattern=pattern, handler=handler, exact=is_exact, order=len(self._routes))
        table[pattern] = route
        self._routes.append(route)
        return route

    @property
    def routes(self) -> list[Route]:
        """All registered routes in registration order."""
        return list(self._routes)

    @property
    def compiled(self) -> bool:
        return self._compiled

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._prefixes = tuple(
            sorted(self._prefix_by_pattern.values(), key=lambda r: (-len(r.pattern), r.order))
        )
        self._compiled = True

    def match(self, path: str) -> RouteMatch:
        """Select the single route responsible for *path*.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route matches the path.
        Raises ``HTTPError(400)`` if *path* is not an absolute path.
        """
        if not self._compiled:
            msg = "Router must be compiled before matching."
            raise RuntimeError(msg)
        if not path or not path.startswith("/"):
            raise HTTPError(400, f"Malformed request path {path!r}")

        route = self._exact.get(path)
        if route is not None:
            return RouteMatch(route=route, sub_path=path)

        for route in self._prefixes:
            if route.matches(path):
                return RouteMatch(route=route, sub_path=path[len(route.pattern) :])

        raise NotFound(f"No route matches {path!r}")

    def redirect_target(self, path: str) -> str | None:
        """Slash-terminated path to redirect to, if only that form is mounted.

        ``/proverbs`` redirects to ``/proverbs/`` when ``/proverbs/`` is a
        prefix route and ``/proverbs`` itself is not registered.
        """
        if not path.startswith("/") or path.endswith("/") or path in self._exact:
            return None
        candidate = path + "/"
        if candidate in self._prefix_by_pattern:
            return candidate
        return None

    async def dispatch(self, request: Request) -> Response:
        """Select one handler for *request* and invoke it.

        Never raises for an unmatched path: the not-found response is
        returned instead and no handler runs. Failures raised by the
        selected handler propagate to the caller unchanged.
        """
        logger.info("%s %s %s", request.remote_addr, request.method, request.url)

        target = self.redirect_target(request.path)
        if target is not None:
            if request.query_string:
                target = f"{target}?{request.query_string.decode('latin-1')}"
            return Response.for_status(301).with_header("Location", target)

        try:
            match = self.match(request.path)
        except NotFound:
            return Response.not_found()
        except HTTPError as exc:
            return Response.for_status(exc.status, exc.detail)

        route = match.route
        if route.exact:
            return await invoke(route.handler, request)
        return await invoke(route.handler, request.with_sub_path(route.pattern, match.sub_path))


def _handler_name(handler: object) -> str:
    return getattr(handler, "__qualname__", None) or type(handler).__name__
