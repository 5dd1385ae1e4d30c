"""headerecho exception hierarchy.

Shared across Router, App, handler, and sink so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class HeaderEchoError(Exception):
    """Base for all headerecho-specific errors."""


class ConfigurationError(HeaderEchoError):
    """Raised when the route table or app configuration is invalid.

    Typically raised while routes are registered at startup.
    """


class ResponseAlreadySent(HeaderEchoError):  # noqa: N818
    """A terminal send was called twice on the same ResponseSink."""


@dataclass(frozen=True, slots=True)
class HTTPError(HeaderEchoError):
    """An error that maps directly to an HTTP status code.

    Raised by the router or by handlers. The ASGI handler catches
    these and turns them into a plain-text response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no registered route matches the request method and path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
