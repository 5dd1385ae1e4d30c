"""Tests for headerecho.app — App lifecycle, registration, and ASGI entry."""

import io
import logging

import pytest

from headerecho.app import App
from headerecho.config import AppConfig
from headerecho.errors import ConfigurationError
from headerecho.http.request import Request
from headerecho.http.sink import ResponseSink
from headerecho.testing import TestClient


@pytest.fixture
def app(logger: logging.Logger) -> App:
    return App(AppConfig(), logger=logger)


class TestAppRegistration:
    def test_register(self, app: App) -> None:
        def handler(response: ResponseSink) -> None:
            response.send("ok")

        route = app.register("get", "/web/home", handler)
        assert route.method == "GET"
        assert app.router.routes == (route,)

    def test_route_decorator_defaults_to_get(self, app: App) -> None:
        @app.route("/")
        def index():
            return "hello"

        assert [r.method for r in app.router.routes] == ["GET"]

    def test_route_decorator_one_route_per_method(self, app: App) -> None:
        @app.route("/api/headers", methods=["GET", "POST", "PUT"])
        def headers():
            return {}

        assert [(r.method, r.template) for r in app.router.routes] == [
            ("GET", "/api/headers"),
            ("POST", "/api/headers"),
            ("PUT", "/api/headers"),
        ]

    def test_method_shorthands(self, app: App) -> None:
        def handler():
            return ""

        app.get("/a")(handler)
        app.post("/a")(handler)
        app.put("/a")(handler)
        app.delete("/a")(handler)
        app.patch("/a")(handler)
        assert [r.method for r in app.router.routes] == ["GET", "POST", "PUT", "DELETE", "PATCH"]

    def test_rejects_unsupported_method(self, app: App) -> None:
        with pytest.raises(ConfigurationError):
            app.register("TRACE", "/", lambda: "")

    def test_cannot_register_after_freeze(self, app: App) -> None:
        app._ensure_frozen()
        with pytest.raises(RuntimeError, match="Cannot modify the app"):
            app.register("GET", "/late", lambda: "")

    def test_builds_logger_from_config_when_not_given(self) -> None:
        app = App(AppConfig(logger_name="headerecho.test.app", log_level="error"))
        assert app.logger.name == "headerecho.test.app"
        assert app.logger.level == logging.ERROR


class TestHandlerInvocation:
    async def test_sink_handler(self, app: App) -> None:
        @app.route("/x")
        def handler(request: Request, response: ResponseSink) -> None:
            response.status(201).send({"path": request.path})

        async with TestClient(app) as client:
            response = await client.get("/x")
        assert response.status == 201
        assert response.text == '{"path": "/x"}'

    async def test_async_handler(self, app: App) -> None:
        @app.route("/x")
        async def handler(response):
            response.send("async")

        async with TestClient(app) as client:
            assert (await client.get("/x")).text == "async"

    async def test_return_value_is_negotiated(self, app: App) -> None:
        @app.route("/x")
        def handler():
            return {"ok": True}

        async with TestClient(app) as client:
            response = await client.get("/x")
        assert response.content_type.startswith("application/json")
        assert response.text == '{"ok": true}'

    async def test_params_mapping_and_named_param(self, app: App) -> None:
        @app.route("/items/:id")
        def handler(params, id: str):
            return {"params": dict(params), "id": id}

        async with TestClient(app) as client:
            response = await client.get("/items/abc")
        assert response.text == '{"params": {"id": "abc"}, "id": "abc"}'

    async def test_handler_without_response_is_500(self, app: App, log_stream: io.StringIO) -> None:
        @app.route("/x")
        def handler(response):
            pass

        async with TestClient(app) as client:
            response = await client.get("/x")
        assert response.status == 500
        assert response.text == "Internal Server Error"
        assert "neither sent nor returned" in log_stream.getvalue()

    async def test_double_send_is_500(self, app: App) -> None:
        @app.route("/x")
        def handler(response):
            response.send("one")
            response.send("two")

        async with TestClient(app) as client:
            assert (await client.get("/x")).status == 500

    async def test_handler_exception_is_500_and_not_fatal(self, app: App) -> None:
        @app.route("/boom")
        def boom():
            raise ValueError("kaboom")

        @app.route("/ok")
        def ok():
            return "fine"

        async with TestClient(app) as client:
            assert (await client.get("/boom")).status == 500
            assert (await client.get("/ok")).status == 200

    async def test_debug_includes_exception_text(self, logger: logging.Logger) -> None:
        app = App(AppConfig(debug=True), logger=logger)

        @app.route("/boom")
        def boom():
            raise ValueError("kaboom")

        async with TestClient(app) as client:
            assert "kaboom" in (await client.get("/boom")).text


class TestLifespan:
    async def test_startup_and_shutdown_hooks(self, app: App, log_stream: io.StringIO) -> None:
        calls: list[str] = []

        @app.on_startup
        async def start() -> None:
            calls.append("start")

        @app.on_shutdown
        def stop() -> None:
            calls.append("stop")

        messages = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[dict] = []

        async def receive() -> dict:
            return next(messages)

        async def send(message: dict) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)

        assert calls == ["start", "stop"]
        assert [m["type"] for m in sent] == [
            "lifespan.startup.complete",
            "lifespan.shutdown.complete",
        ]
        assert "Listening on port 8000" in log_stream.getvalue()

    async def test_failed_startup_is_reported(self, app: App) -> None:
        @app.on_startup
        def start() -> None:
            raise RuntimeError("no socket")

        sent: list[dict] = []

        async def receive() -> dict:
            return {"type": "lifespan.startup"}

        async def send(message: dict) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)
        assert sent == [{"type": "lifespan.startup.failed", "message": "no socket"}]

    async def test_non_http_scope_is_ignored(self, app: App) -> None:
        sent: list[dict] = []

        async def receive() -> dict:
            return {}

        async def send(message: dict) -> None:
            sent.append(message)

        await app({"type": "websocket"}, receive, send)
        assert sent == []
