"""ASGI handler — translates ASGI scope/messages to headerecho types.

The only component that touches raw ASGI HTTP messages directly.
Converts scope dicts to Request views, dispatches through the router,
and sends the Response back through ASGI send().
"""

import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

from headerecho._internal.asgi import Receive, Scope, Send
from headerecho._internal.invoke import invoke
from headerecho.errors import HTTPError
from headerecho.http.request import Request
from headerecho.http.response import Response
from headerecho.http.sink import ResponseSink
from headerecho.logger import TRACE
from headerecho.routing.route import RouteMatch
from headerecho.routing.router import Router
from headerecho.server.errors import handle_http_error, handle_internal_error
from headerecho.server.negotiation import negotiate
from headerecho.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001
    send: Send,
    *,
    router: Router,
    logger: logging.Logger,
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)
    response = await dispatch(router, request, logger=logger, debug=debug)
    logger.log(TRACE, "%s %s -> %d", request.method, request.url, response.status)
    await send_response(response, send)


async def dispatch(
    router: Router,
    request: Request,
    *,
    logger: logging.Logger,
    debug: bool = False,
) -> Response:
    """Match *request* against *router* and run the bound handler.

    Always returns a Response: a missing route becomes a 404 and any
    other failure a 500. No state is kept between calls.
    """
    try:
        match = router.match(request.method, request.path, request.path_segments)
        return await _invoke_handler(match, request)
    except HTTPError as exc:
        return handle_http_error(exc, request, logger)
    except Exception as exc:
        return handle_internal_error(exc, request, logger, debug)


async def _invoke_handler(match: RouteMatch, request: Request) -> Response:
    """Call the matched route handler with a fresh sink."""
    handler = match.route.handler
    sink = ResponseSink()

    kwargs = _build_handler_kwargs(handler, request, sink, match.params)
    result = await invoke(handler, **kwargs)

    if sink.sent:
        return sink.response
    if result is not None:
        return negotiate(result)
    name = getattr(handler, "__name__", repr(handler))
    msg = f"Handler {name!r} for {match.route.template!r} neither sent nor returned a response."
    raise RuntimeError(msg)


def _build_handler_kwargs(
    handler: Callable[..., Any],
    request: Request,
    sink: ResponseSink,
    params: Mapping[str, str],
) -> dict[str, Any]:
    """Inspect handler signature and build kwargs.

    Resolution order:
    1. ``request`` parameter (by name or ``Request`` annotation)
    2. ``response`` parameter (by name or ``ResponseSink`` annotation)
    3. ``params`` — the full path-parameter mapping
    4. Individual path parameters, by name, as strings
    """
    sig = inspect.signature(handler, eval_str=True)
    kwargs: dict[str, Any] = {}

    for name, param in sig.parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif name == "response" or param.annotation is ResponseSink:
            kwargs[name] = sink
        elif name == "params":
            kwargs[name] = params
        elif name in params:
            kwargs[name] = params[name]

    return kwargs
