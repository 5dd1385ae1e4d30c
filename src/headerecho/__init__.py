"""headerecho — a sample HTTP server that demonstrates request routing.

Routes echo the incoming request's headers back as JSON; ``GET /``
lists the available path templates.

Basic usage::

    from headerecho import App

    app = App()

    @app.route("/api/headers/:id", methods=["GET", "POST"])
    def echo(request, response):
        response.status(200).send_json(request.headers.to_dict())

    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "HeaderEchoError",
    "NotFound",
    "Request",
    "Response",
    "ResponseAlreadySent",
    "ResponseSink",
    "configure_logger",
    "create_app",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import headerecho`` fast while providing a clean top-level API.
    """
    if name == "App":
        from headerecho.app import App

        return App

    if name == "AppConfig":
        from headerecho.config import AppConfig

        return AppConfig

    if name == "Request":
        from headerecho.http.request import Request

        return Request

    if name == "Response":
        from headerecho.http.response import Response

        return Response

    if name == "ResponseSink":
        from headerecho.http.sink import ResponseSink

        return ResponseSink

    if name == "configure_logger":
        from headerecho.logger import configure_logger

        return configure_logger

    if name == "create_app":
        from headerecho.sample import create_app

        return create_app

    if name in (
        "ConfigurationError",
        "HTTPError",
        "HeaderEchoError",
        "NotFound",
        "ResponseAlreadySent",
    ):
        from headerecho import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
