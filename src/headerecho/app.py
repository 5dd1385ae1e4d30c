"""headerecho application class.

Mutable during setup (route registration, lifecycle hooks).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import inspect
import logging
import threading
from collections.abc import Callable, Iterable

from headerecho._internal.asgi import Receive, Scope, Send
from headerecho._internal.types import Handler, Hook
from headerecho.config import AppConfig
from headerecho.logger import configure_logger
from headerecho.routing.route import Route
from headerecho.routing.router import Router
from headerecho.server.handler import handle_request


class App:
    """The headerecho application.

    Mutable during setup (route registration, hooks).
    Frozen at runtime when ``app.run()`` or ``__call__()`` is first invoked.

    The logger is a collaborator: pass one in, or the App builds it
    from ``config`` with ``configure_logger``.

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        caller compiles the route table.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
        "logger",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self.logger: logging.Logger = logger or configure_logger(self.config)
        self._router: Router = Router()
        self._startup_hooks: list[Hook] = []
        self._shutdown_hooks: list[Hook] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Route registration --

    def register(self, method: str, template: str, handler: Handler) -> Route:
        """Append a single ``(method, template) -> handler`` binding."""
        self._check_not_frozen()
        return self._router.register(method, template, handler)

    def route(
        self,
        path: str,
        *,
        methods: Iterable[str] | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: URL path template. Use ``:name`` for a path parameter.
            methods: HTTP methods. Defaults to ``["GET"]``. One Route is
                appended per method, in the order given.
        """

        def decorator(func: Handler) -> Handler:
            for method in methods or ("GET",):
                self.register(method, path, func)
            return func

        return decorator

    def get(self, path: str) -> Callable[[Handler], Handler]:
        """Shorthand for ``route(path, methods=["GET"])``."""
        return self.route(path, methods=("GET",))

    def post(self, path: str) -> Callable[[Handler], Handler]:
        """Shorthand for ``route(path, methods=["POST"])``."""
        return self.route(path, methods=("POST",))

    def put(self, path: str) -> Callable[[Handler], Handler]:
        """Shorthand for ``route(path, methods=["PUT"])``."""
        return self.route(path, methods=("PUT",))

    def delete(self, path: str) -> Callable[[Handler], Handler]:
        """Shorthand for ``route(path, methods=["DELETE"])``."""
        return self.route(path, methods=("DELETE",))

    def patch(self, path: str) -> Callable[[Handler], Handler]:
        """Shorthand for ``route(path, methods=["PATCH"])``."""
        return self.route(path, methods=("PATCH",))

    @property
    def router(self) -> Router:
        return self._router

    # -- Lifecycle hooks --

    def on_startup(self, func: Hook) -> Hook:
        """Register a hook to run when the server starts (sync or async)."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Hook) -> Hook:
        """Register a hook to run when the server stops (sync or async)."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the route table and serve with uvicorn."""
        from headerecho.server.runner import run_server

        self._ensure_frozen()
        run_server(self, host or self.config.host, port or self.config.port)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes
        to the request pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            logger=self.logger,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before the first HTTP request), then
        runs registered startup/shutdown hooks and signals completion
        back to the server.
        """
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    self.logger.exception("Startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def startup(self) -> None:
        """Run startup hooks, then announce the listening port."""
        self._ensure_frozen()
        for hook in self._startup_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result
        self.logger.info("Listening on port %d", self.config.port)

    async def shutdown(self) -> None:
        """Run shutdown hooks."""
        for hook in self._shutdown_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result
        self.logger.info("Shut down")

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the route table. MUST only be called while holding _freeze_lock."""
        self._router.compile()
        self._frozen = True
        self.logger.debug("Compiled %d routes", len(self._router.routes))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and hooks before calling app.run()."
            )
            raise RuntimeError(msg)
