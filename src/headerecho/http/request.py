"""Immutable HTTP request view.

Frozen metadata only. Path parameters are not attached here; the
dispatcher passes them to handlers as a separate mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from headerecho.http.headers import Headers
from headerecho.routing.router import split_path, split_raw_path


@dataclass(frozen=True, slots=True)
class Request:
    """A read-only view of an inbound HTTP request.

    ``path`` is the decoded path, for display and logging. ``segments``
    is what routing matches against: split from the undecoded path when
    the server provides one, so ``%2F`` stays inside its segment.
    """

    method: str
    path: str
    headers: Headers
    query_string: str = ""
    http_version: str = "1.1"
    server: tuple[str, int] | None = None
    client: tuple[str, int] | None = None
    segments: tuple[str, ...] | None = None

    @property
    def accept(self) -> str | None:
        """The Accept header value."""
        return self.headers.get("accept")

    @property
    def url(self) -> str:
        """Request path plus query string."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    @property
    def path_segments(self) -> tuple[str, ...]:
        """Decoded path segments, split from ``path`` if none were given."""
        if self.segments is None:
            return split_path(self.path)
        return self.segments

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        server = scope.get("server")
        client = scope.get("client")
        raw_path = scope.get("raw_path")
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b"").decode("latin-1"),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
            segments=split_raw_path(raw_path) if raw_path else split_path(scope["path"]),
        )
