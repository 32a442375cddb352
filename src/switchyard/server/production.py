"""Production server.

Starts a multi-worker pounce server. Pounce owns socket binding,
keep-alive, and the per-worker event loops; switchyard hands it the
frozen ASGI app. Failing to bind is fatal: the process exits with
status 1.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from switchyard.errors import ConfigurationError

if TYPE_CHECKING:
    from switchyard.app import App

logger = logging.getLogger("switchyard.server")


def serve(app: object, app_path: str | None = None, **server_options: Any) -> None:
    """Build a pounce ``ServerConfig`` from *server_options* and run *app*.

    Raises ``ConfigurationError`` if pounce is not installed and
    ``SystemExit(1)`` if the listening socket cannot be bound.
    """
    try:
        from pounce.config import ServerConfig
        from pounce.server import Server
    except ImportError as exc:
        msg = (
            "Serving requires the pounce ASGI server. "
            "Install it with: pip install switchyard[server]"
        )
        raise ConfigurationError(msg) from exc

    config = ServerConfig(**server_options)
    if app_path is None:
        server = Server(config, app)
    else:
        server = Server(config, app, app_path=app_path)

    logger.info(
        "Running on http://%s:%s", server_options.get("host"), server_options.get("port")
    )
    try:
        server.run()
    except OSError as exc:
        logger.error(
            "Cannot listen on %s:%s: %s",
            server_options.get("host"),
            server_options.get("port"),
            exc,
        )
        raise SystemExit(1) from exc


def run_production_server(
    app: App,
    host: str = "0.0.0.0",
    port: int = 9000,
    workers: int = 0,  # 0 = auto-detect from CPU count
    *,
    log_level: str = "info",
    log_format: str = "text",
    keep_alive_timeout: float = 5.0,
    request_timeout: float = 30.0,
) -> None:
    """Run a switchyard app with multiple pounce workers.

    Args:
        app: Switchyard App instance.
        host: Bind address (default: 0.0.0.0 for all interfaces).
        port: Bind port (default: 9000).
        workers: Worker count (0 = auto-detect from CPU count).
        log_level: Log level (debug, info, warning, error, critical).
        log_format: Access log format ("json" or "text").
        keep_alive_timeout: Keep-alive connection timeout (seconds).
        request_timeout: Individual request timeout (seconds).

    Example:
        >>> from myapp import app
        >>> from switchyard.server.production import run_production_server
        >>> run_production_server(app, workers=4)
    """
    serve(
        app,
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
        log_format=log_format,
        keep_alive_timeout=keep_alive_timeout,
        request_timeout=request_timeout,
    )
