"""Switchyard — route HTTP requests to handlers and static files.

One Router, explicit registration, longest-prefix matching, and an
ASGI app served by pounce.

Basic usage::

    from switchyard import App, Response, StaticFiles

    app = App()

    @app.route("/")
    def index(request):
        return Response(status=200)

    app.mount("/proverbs/", StaticFiles("./static"))

    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "Response",
    "Route",
    "Router",
    "StaticFiles",
    "StatusHandler",
    "SwitchyardError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import switchyard`` fast while providing a clean top-level API.
    """
    if name == "App":
        from switchyard.app import App

        return App

    if name == "AppConfig":
        from switchyard.config import AppConfig

        return AppConfig

    if name == "Request":
        from switchyard.http.request import Request

        return Request

    if name == "Response":
        from switchyard.http.response import Response

        return Response

    if name in ("Route", "Router"):
        from switchyard.routing import route as _route
        from switchyard.routing import router as _router

        return getattr(_route, name, None) or getattr(_router, name)

    if name in ("StaticFiles", "StatusHandler"):
        from switchyard import handlers as _handlers

        return getattr(_handlers, name)

    if name in (
        "ConfigurationError",
        "HTTPError",
        "MethodNotAllowed",
        "NotFound",
        "SwitchyardError",
    ):
        from switchyard import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
