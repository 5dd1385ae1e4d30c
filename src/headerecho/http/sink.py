"""Write-once response sink handed to route handlers.

A handler sets a status and headers, then makes exactly one terminal
call (``send``, ``send_json`` or ``send_status``). The sink turns that
call into an immutable ``Response`` for the sender.
"""

from __future__ import annotations

import json as json_module
from http import HTTPStatus
from typing import Any

from headerecho.errors import ResponseAlreadySent
from headerecho.http.response import (
    HTML_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    TEXT_CONTENT_TYPE,
    Response,
)


class ResponseSink:
    """Collects one response from a handler.

    Usage::

        def handler(request, response):
            response.status(200).send({"ok": True})
    """

    __slots__ = ("_headers", "_response", "_status")

    def __init__(self) -> None:
        self._status = 200
        self._headers: list[tuple[str, str]] = []
        self._response: Response | None = None

    # -- Non-terminal --

    def status(self, code: int) -> ResponseSink:
        """Set the status code for the eventual response. Chainable."""
        self._check_open()
        self._status = code
        return self

    def set_header(self, name: str, value: str) -> ResponseSink:
        """Add a response header. Chainable."""
        self._check_open()
        self._headers.append((name, value))
        return self

    # -- Terminal --

    def send(self, body: Any = "", *, content_type: str | None = None) -> None:
        """Send the response.

        ``dict`` and ``list`` bodies are serialized as JSON, ``bytes`` go
        out as ``application/octet-stream``, anything else as text.
        """
        if isinstance(body, dict | list):
            self.send_json(body)
            return
        if isinstance(body, bytes):
            self._finish(body, content_type or "application/octet-stream")
            return
        self._finish(str(body), content_type or HTML_CONTENT_TYPE)

    def send_json(self, value: Any) -> None:
        """Serialize *value* as JSON and send it."""
        self._finish(json_module.dumps(value, default=str), JSON_CONTENT_TYPE)

    def send_status(self, code: int) -> None:
        """Send *code* with its reason phrase as a plain-text body."""
        self.status(code)
        try:
            phrase = HTTPStatus(code).phrase
        except ValueError:
            phrase = str(code)
        self._finish(phrase, TEXT_CONTENT_TYPE)

    # -- State --

    @property
    def sent(self) -> bool:
        """True once a terminal call has been made."""
        return self._response is not None

    @property
    def response(self) -> Response:
        """The response built by the terminal call.

        Raises ``RuntimeError`` if nothing has been sent yet.
        """
        if self._response is None:
            msg = "No response has been sent on this sink."
            raise RuntimeError(msg)
        return self._response

    def _finish(self, body: str | bytes, content_type: str) -> None:
        self._check_open()
        self._response = Response(
            body=body,
            status=self._status,
            content_type=content_type,
            headers=tuple(self._headers),
        )

    def _check_open(self) -> None:
        if self._response is not None:
            msg = "Response already sent; a handler may send only once."
            raise ResponseAlreadySent(msg)
