"""Switchyard CLI — serve an app, list its routes, or serve a directory.

Entry point registered as ``switchyard`` in ``pyproject.toml``::

    [project.scripts]
    switchyard = "switchyard.cli:main"
"""

import argparse
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send switchyard's loggers to stderr at *level*."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)


def _add_server_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--host", default=None, help="Bind host address")
    parser.add_argument("--port", type=int, default=None, help="Bind port number")
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count (0=auto-detect, production only)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error", "critical"],
        help="Log level (default: from app config)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``switchyard`` command."""
    parser = argparse.ArgumentParser(
        prog="switchyard",
        description="Switchyard — route requests to handlers and static files.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- switchyard run ---------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start dev or production server")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    _add_server_flags(run_parser)
    run_parser.add_argument(
        "--production",
        action="store_true",
        help="Run in production mode even if the app config has debug=True",
    )

    # -- switchyard routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app)")

    # -- switchyard serve -------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve a directory of static files")
    serve_parser.add_argument("directory", help="Directory to serve")
    serve_parser.add_argument(
        "--prefix",
        default="/",
        help="URL prefix to mount the directory at (default: /)",
    )
    _add_server_flags(serve_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from switchyard.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from switchyard.cli._routes import run_routes

        run_routes(args)
    elif args.command == "serve":
        from switchyard.cli._run import serve_directory

        serve_directory(args)
