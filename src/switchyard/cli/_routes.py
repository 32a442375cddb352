"""``switchyard routes`` — list registered routes.

Resolves an import string to a switchyard App and prints every route
with its kind, pattern, and handler, in registration order.
"""

import argparse
import sys

from switchyard.cli._resolve import resolve_app
from switchyard.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a switchyard app."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = app.router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for route in routes:
        handler_name = getattr(route.handler, "__name__", None) or repr(route.handler)
        rows.append((route.kind, route.pattern, handler_name))

    max_kind = max(max(len(r[0]) for r in rows), 4)  # "KIND" header
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_kind}}}  {{:<{max_pattern}}}  {{}}"
    print(fmt.format("KIND", "PATTERN", "HANDLER"))
    sep_len = max_kind + max_pattern + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for kind, pattern, handler_name in rows:
        print(fmt.format(kind, pattern, handler_name))
