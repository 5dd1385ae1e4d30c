"""Tests for headerecho.server.handler — dispatch and handler kwargs."""

import logging

from headerecho.http.headers import Headers
from headerecho.http.request import Request
from headerecho.http.sink import ResponseSink
from headerecho.routing.router import Router
from headerecho.server.handler import _build_handler_kwargs, dispatch


def _request(method: str = "GET", path: str = "/", **headers: str) -> Request:
    return Request(method=method, path=path, headers=Headers.from_pairs(headers))


class TestDispatch:
    async def test_match_runs_handler(self, logger: logging.Logger) -> None:
        router = Router()
        router.register("GET", "/api/headers/:id", lambda id: f"item {id}")
        router.compile()

        response = await dispatch(router, _request(path="/api/headers/9"), logger=logger)
        assert response.status == 200
        assert response.text == "item 9"

    async def test_params_bind_from_request_segments(self, logger: logging.Logger) -> None:
        router = Router()
        router.register("GET", "/api/headers/:id", lambda id: f"item {id}")
        router.compile()
        request = Request.from_asgi(
            {
                "type": "http",
                "method": "GET",
                "path": "/api/headers/a/b",
                "raw_path": b"/api/headers/a%2Fb",
            }
        )

        response = await dispatch(router, request, logger=logger)
        assert response.status == 200
        assert response.text == "item a/b"

    async def test_no_match_is_404(self, logger: logging.Logger) -> None:
        router = Router()
        router.compile()

        response = await dispatch(router, _request(path="/missing"), logger=logger)
        assert response.status == 404
        assert response.text == "Cannot GET /missing"
        assert response.content_type.startswith("text/plain")

    async def test_http_error_from_handler_keeps_status(self, logger: logging.Logger) -> None:
        from headerecho.errors import HTTPError

        def teapot():
            raise HTTPError(status=418, detail="short and stout", headers=(("X-Pot", "1"),))

        router = Router()
        router.register("GET", "/tea", teapot)

        response = await dispatch(router, _request(path="/tea"), logger=logger)
        assert response.status == 418
        assert response.text == "short and stout"
        assert ("X-Pot", "1") in response.headers

    async def test_same_request_same_response(self, logger: logging.Logger) -> None:
        router = Router()
        router.register("GET", "/", lambda request: request.headers.to_dict())
        request = _request(**{"X-Test": "value123"})

        first = await dispatch(router, request, logger=logger)
        second = await dispatch(router, request, logger=logger)
        assert first == second


class TestBuildHandlerKwargs:
    def test_by_name(self) -> None:
        def handler(request, response, params, id):
            pass

        request = _request()
        sink = ResponseSink()
        kwargs = _build_handler_kwargs(handler, request, sink, {"id": "1"})
        assert kwargs == {"request": request, "response": sink, "params": {"id": "1"}, "id": "1"}

    def test_by_annotation(self) -> None:
        def handler(req: Request, out: ResponseSink):
            pass

        request = _request()
        sink = ResponseSink()
        assert _build_handler_kwargs(handler, request, sink, {}) == {"req": request, "out": sink}

    def test_unknown_names_are_skipped(self) -> None:
        def handler(other=None):
            pass

        assert _build_handler_kwargs(handler, _request(), ResponseSink(), {}) == {}
