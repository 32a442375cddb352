"""``switchyard run`` and ``switchyard serve`` — start a server.

``run`` resolves an import string to an App and starts either the
development server (single worker, auto-reload) or the production
server (multi-worker). ``serve`` builds an App around a single
``StaticFiles`` handler first.
"""

import argparse
import logging
import sys

from switchyard.app import App
from switchyard.cli import configure_logging
from switchyard.cli._resolve import resolve_app
from switchyard.config import AppConfig
from switchyard.errors import ConfigurationError
from switchyard.handlers.static import StaticFiles

logger = logging.getLogger("switchyard.cli")


def run_server(args: argparse.Namespace) -> None:
    """Start the switchyard server (dev or production mode).

    Resolves ``args.app`` to an App, then delegates to either:
    - ``run_dev_server()`` for development (debug=True)
    - ``run_production_server()`` for production (--production flag or debug=False)

    CLI flags override app config.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    _start(app, args, production=args.production or not app.config.debug, app_path=args.app)


def serve_directory(args: argparse.Namespace) -> None:
    """Serve ``args.directory`` at ``args.prefix`` with production settings."""
    try:
        app = App()
        app.mount(args.prefix, StaticFiles(args.directory))
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    _start(app, args, production=True, app_path=None)


def _start(
    app: App,
    args: argparse.Namespace,
    *,
    production: bool,
    app_path: str | None,
) -> None:
    config: AppConfig = app.config
    host = args.host or config.host
    port = args.port if args.port is not None else config.port
    log_level = args.log_level or config.log_level

    configure_logging(log_level)
    try:
        app._ensure_frozen()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.info("Running...")
    try:
        if production:
            from switchyard.server.production import run_production_server

            run_production_server(
                app,
                host=host,
                port=port,
                workers=args.workers if args.workers is not None else config.workers,
                log_level=log_level,
                log_format=config.log_format,
                keep_alive_timeout=config.keep_alive_timeout,
                request_timeout=config.request_timeout,
            )
        else:
            from switchyard.server.dev import run_dev_server

            run_dev_server(
                app,
                host,
                port,
                reload=config.debug,
                app_path=app_path,
                log_level=log_level,
            )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
