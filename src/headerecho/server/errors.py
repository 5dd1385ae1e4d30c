"""Error handling pipeline for requests.

Maps HTTPError exceptions and unexpected failures to plain-text
Response objects. Nothing here is fatal to the process.
"""

import logging

from headerecho.errors import HTTPError
from headerecho.http.request import Request
from headerecho.http.response import TEXT_CONTENT_TYPE, Response


def handle_http_error(
    exc: HTTPError,
    request: Request,
    logger: logging.Logger,
) -> Response:
    """Map an HTTPError to its default response."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    body = exc.detail or f"Error {exc.status}"
    resp = Response(body=body, status=exc.status, content_type=TEXT_CONTENT_TYPE)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(
    exc: Exception,
    request: Request,
    logger: logging.Logger,
    debug: bool,
) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.error("500 %s %s", request.method, request.path, exc_info=exc)

    body = f"Internal Server Error: {exc}" if debug else "Internal Server Error"
    return Response(body=body, status=500, content_type=TEXT_CONTENT_TYPE)
