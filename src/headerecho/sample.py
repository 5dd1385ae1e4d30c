"""The header-echo sample: two handlers and two route tables.

``create_app("full")`` builds the complete table (frontend pages, the
API under every method, one level of ``:id`` depth). ``create_app("simple")``
builds the reduced four-route table.
"""

import logging

from headerecho.app import App
from headerecho.config import AppConfig
from headerecho.errors import ConfigurationError
from headerecho.http.accept import best_match
from headerecho.http.request import Request
from headerecho.http.response import TEXT_CONTENT_TYPE
from headerecho.http.sink import ResponseSink

API_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")

# Advertised by GET / exactly as written, independent of the table.
ADVERTISED_ROUTES = (
    "/web/home",
    "/web/home/:id",
    "/api/headers",
    "/api/headers/:id",
)

ECHO_MEDIA_TYPES = ("application/json", "text/plain")

VARIANTS = ("full", "simple")


def echo_headers(request: Request, response: ResponseSink) -> None:
    """Send the request's own headers back with status 200."""
    headers = request.headers.to_dict()
    response.status(200)
    if best_match(request.accept, ECHO_MEDIA_TYPES) == "text/plain":
        body = "".join(f"{name}: {value}\n" for name, value in headers.items())
        response.send(body, content_type=TEXT_CONTENT_TYPE)
    else:
        response.send_json(headers)


def list_routes(response: ResponseSink) -> None:
    response.status(200).send({"routes": list(ADVERTISED_ROUTES)})


def register_full(app: App) -> None:
    """Bind the full sample table onto *app*."""
    app.register("GET", "/", list_routes)

    # Frontend
    app.register("GET", "/web/home", echo_headers)
    app.register("GET", "/web/home/:id", echo_headers)
    app.register("GET", "/web/user", echo_headers)

    # API
    app.route("/api/headers", methods=API_METHODS)(echo_headers)

    # API depth 2
    app.route("/api/headers/:id", methods=API_METHODS)(echo_headers)


def register_simple(app: App) -> None:
    """Bind the simplified four-route table onto *app*."""
    for path in ("/web/home", "/web/home2", "/api/headers", "/api/headers/2"):
        app.register("GET", path, echo_headers)


def create_app(
    variant: str = "full",
    *,
    config: AppConfig | None = None,
    logger: logging.Logger | None = None,
) -> App:
    """Build a sample App for *variant* (``"full"`` or ``"simple"``).

    Without an explicit config the process environment is read, so
    ``LOG_LEVEL`` controls verbosity.
    """
    if variant not in VARIANTS:
        msg = f"Unknown sample variant {variant!r}. Choose one of: {', '.join(VARIANTS)}."
        raise ConfigurationError(msg)

    app = App(config or AppConfig.from_env(), logger=logger)
    if variant == "full":
        register_full(app)
    else:
        register_simple(app)
    return app
