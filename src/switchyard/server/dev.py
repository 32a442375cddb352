"""Development server with hot reload.

Starts a pounce ASGI server with the live switchyard App object.
Uses single-worker mode with reload enabled for development.
"""

from switchyard.server.production import serve


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = True,
    app_path: str | None = None,
    log_level: str = "debug",
) -> None:
    """Start a pounce dev server with the given switchyard App.

    Args:
        app: ASGI callable (switchyard App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes (default True).
        app_path: Optional ``"module:attribute"`` import string.  When
            provided, pounce reimports the app on each reload cycle so
            that code changes on disk take effect immediately.
        log_level: Log level forwarded to pounce.
    """
    serve(
        app,
        app_path=app_path,
        host=host,
        port=port,
        workers=1,
        reload=reload,
        log_level=log_level,
    )
