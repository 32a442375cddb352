"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass

from switchyard._internal.types import Handler


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Exact:   ``/``          matches only ``/``
    Prefix:  ``/proverbs/`` matches ``/proverbs/`` and everything below it

    Created by ``Router.register()``; ``order`` is the registration index
    used to break ties between prefixes of equal length.
    """

    pattern: str
    handler: Handler
    exact: bool
    order: int = 0

    @property
    def kind(self) -> str:
        return "exact" if self.exact else "prefix"

    def matches(self, path: str) -> bool:
        if self.exact:
            return path == self.pattern
        return path.startswith(self.pattern)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``sub_path`` is what the handler sees: the full path for exact
    routes, the remainder after the pattern for prefix routes.
    """

    route: Route
    sub_path: str
