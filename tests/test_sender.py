"""Tests for headerecho.server.sender response emission rules."""

from headerecho.http.response import Response
from headerecho.server.sender import send_response


class TestSendResponse:
    async def test_200_preserves_body(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(Response("ok"), send)

        assert messages[0]["type"] == "http.response.start"
        assert messages[0]["status"] == 200
        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"2"
        assert headers[b"content-type"] == b"text/html; charset=utf-8"
        assert messages[1] == {"type": "http.response.body", "body": b"ok"}

    async def test_header_names_are_lowercased(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(Response("ok").with_header("X-Custom", "v"), send)
        assert (b"x-custom", b"v") in messages[0]["headers"]

    async def test_204_drops_body(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(Response("unexpected-body").with_status(204), send)

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"
        assert messages[1]["body"] == b""
