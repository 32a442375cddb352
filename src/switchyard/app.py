"""Switchyard application class.

Mutable during setup (route registration, lifecycle hooks).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import inspect
import logging
import threading
from collections.abc import Callable
from pathlib import Path

from switchyard._internal.asgi import Receive, Scope, Send
from switchyard._internal.types import Handler, Hook
from switchyard.config import AppConfig
from switchyard.handlers.static import StaticFiles
from switchyard.routing.route import Route
from switchyard.routing.router import Router
from switchyard.server.handler import handle_request

logger = logging.getLogger("switchyard.server")


class App:
    """The switchyard application: one Router behind an ASGI 3.0 callable.

    Mutable during setup (route registration, hooks).
    Frozen at runtime when ``app.run()`` or ``__call__()`` is first invoked.

    Usage::

        app = App()

        @app.route("/", exact=True)
        def index(request):
            return Response(status=200)

        app.mount("/proverbs/", StaticFiles("./static"))

    Thread safety:
        The setup phase is single-threaded (registration at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the router, even when several pounce workers
        call ``__call__()`` concurrently on their first request.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._router: Router = Router()
        self._startup_hooks: list[Hook] = []
        self._shutdown_hooks: list[Hook] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Route registration --

    def add(self, pattern: str, handler: Handler, *, exact: bool | None = None) -> Route:
        """Bind *handler* to *pattern*.

        A trailing ``/`` makes *pattern* a prefix route unless
        ``exact=True`` is passed. Raises ``ConfigurationError`` for
        duplicate or malformed patterns.
        """
        self._check_not_frozen()
        return self._router.register(pattern, handler, exact=exact)

    def route(self, pattern: str, *, exact: bool | None = None) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator."""

        def decorator(func: Handler) -> Handler:
            self.add(pattern, func, exact=exact)
            return func

        return decorator

    def mount(self, prefix: str, handler: Handler) -> Route:
        """Bind *handler* to everything below *prefix*, prefix stripped.

        A missing trailing ``/`` is added: ``"/proverbs"`` mounts at
        ``"/proverbs/"``.
        """
        if not prefix.endswith("/"):
            prefix += "/"
        return self.add(prefix, handler, exact=False)

    def mount_static(
        self,
        prefix: str | None = None,
        directory: str | Path | None = None,
    ) -> Route:
        """Mount a ``StaticFiles`` handler using config defaults.

        Falls back to ``config.static_prefix`` and ``config.static_dir``.
        """
        return self.mount(
            prefix or self.config.static_prefix,
            StaticFiles(
                directory or self.config.static_dir,
                cache_control=self.config.cache_control,
            ),
        )

    @property
    def router(self) -> Router:
        return self._router

    # -- Lifecycle hooks --

    def on_startup(self, func: Hook) -> Hook:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order during ASGI lifespan startup,
        before the server begins accepting HTTP requests.
        """
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Hook) -> Hook:
        """Register an async or sync shutdown hook via decorator."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the server (dev or production based on config.debug).

        Compiles the route table, then serves until interrupted.

        - **Development mode** (debug=True): Single worker with auto-reload
        - **Production mode** (debug=False): Multi-worker

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        self._ensure_frozen()

        _host = host or self.config.host
        _port = port if port is not None else self.config.port

        if self.config.debug:
            from switchyard.server.dev import run_dev_server

            run_dev_server(self, _host, _port, reload=True, log_level=self.config.log_level)
        else:
            from switchyard.server.production import run_production_server

            run_production_server(
                self,
                host=_host,
                port=_port,
                workers=self.config.workers,
                log_level=self.config.log_level,
                log_format=self.config.log_format,
                keep_alive_timeout=self.config.keep_alive_timeout,
                request_timeout=self.config.request_timeout,
            )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan scopes directly, then delegates HTTP scopes to
        the request handler pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        self._ensure_frozen()

        await handle_request(scope, receive, send, router=self._router)

    async def _handle_lifespan(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before first HTTP request), then
        runs registered startup/shutdown hooks and signals completion
        back to the server.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                    await self.startup()
                    await send({"type": "lifespan.startup.complete"})
                except Exception as exc:
                    logger.error("Startup failed: %s", exc)
                    await send(
                        {
                            "type": "lifespan.startup.failed",
                            "message": str(exc),
                        }
                    )
                    return

            elif msg_type == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def startup(self) -> None:
        """Run startup hooks in registration order."""
        for hook in self._startup_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result

    async def shutdown(self) -> None:
        """Run shutdown hooks in registration order."""
        for hook in self._shutdown_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        self._router.compile()
        self._frozen = True
        logger.debug("Compiled %d route(s)", len(self._router.routes))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and hooks before calling app.run()."
            )
            raise RuntimeError(msg)
