"""Ordered router with first-match path dispatch.

Routes are appended in registration order and scanned in that order
at match time. The table is frozen by ``compile()``.
"""

from collections.abc import Callable
from types import MappingProxyType
from typing import Any
from urllib.parse import unquote

from headerecho.errors import ConfigurationError, NotFound
from headerecho.routing.route import Literal, Param, Route, RouteMatch, Segment

SUPPORTED_METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "DELETE", "PATCH"})


def split_path(path: str) -> tuple[str, ...]:
    """Split a URL path into its segments.

    One leading and at most one trailing slash are ignored. Interior
    empty segments are kept so they fail literal and parameter matching::

        "/"                -> ()
        "/api/headers/"    -> ("api", "headers")
        "/web//home"       -> ("web", "", "home")
        "/api/headers//"   -> ("api", "headers", "")
    """
    path = path.removeprefix("/")
    path = path.removesuffix("/")
    if not path:
        return ()
    return tuple(path.split("/"))


def split_raw_path(raw_path: bytes) -> tuple[str, ...]:
    """Split an undecoded ASGI ``raw_path``, then percent-decode each segment.

    Splitting before decoding keeps an encoded slash inside one segment::

        b"/api/headers/a%2Fb"  -> ("api", "headers", "a/b")
    """
    return tuple(unquote(part) for part in split_path(raw_path.decode("latin-1")))


def parse_pattern(template: str) -> tuple[Segment, ...]:
    """Parse a route template into literal and parameter segments.

    Examples::

        "/web/home"        -> (Literal("web"), Literal("home"))
        "/web/home/:id"    -> (Literal("web"), Literal("home"), Param("id"))
        "/"                -> ()
    """
    segments: list[Segment] = []
    seen: set[str] = set()
    for part in split_path(template):
        if not part:
            msg = f"Route {template!r} has an empty path segment."
            raise ConfigurationError(msg)
        if not part.startswith(":"):
            segments.append(Literal(part))
            continue
        name = part[1:]
        if not name:
            msg = f"Route {template!r} has a parameter segment with no name."
            raise ConfigurationError(msg)
        if name in seen:
            msg = f"Route {template!r} declares parameter {name!r} more than once."
            raise ConfigurationError(msg)
        seen.add(name)
        segments.append(Param(name))
    return tuple(segments)


class Router:
    """Ordered route table.

    Usage::

        router = Router()
        router.register("GET", "/web/home", handler)
        router.register("GET", "/web/home/:id", handler)
        router.compile()
        match = router.match("GET", "/web/home/42")
        match.params  # {"id": "42"}
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._compiled = False

    def register(self, method: str, template: str, handler: Callable[..., Any]) -> Route:
        """Build a Route from its parts and append it to the table."""
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            allowed = ", ".join(sorted(SUPPORTED_METHODS))
            msg = f"Unsupported method {method!r} for {template!r}. Use one of: {allowed}."
            raise ConfigurationError(msg)
        route = Route(
            method=method,
            pattern=parse_pattern(template),
            handler=handler,
            template=template,
        )
        self.add(route)
        return route

    def add(self, route: Route) -> None:
        """Append a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        self._routes.append(route)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    @property
    def compiled(self) -> bool:
        return self._compiled

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in registration order."""
        return tuple(self._routes)

    @property
    def templates(self) -> tuple[str, ...]:
        """Distinct route templates in first-registration order."""
        return tuple(dict.fromkeys(route.template for route in self._routes))

    def match(
        self,
        method: str,
        path: str,
        segments: tuple[str, ...] | None = None,
    ) -> RouteMatch:
        """Find the first route whose method and pattern match the request.

        *segments* are the already-split, decoded path segments; when
        omitted, *path* is split with ``split_path``.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` when nothing matches, including the case where
        the path exists under a different method.
        """
        method = method.upper()
        parts = split_path(path) if segments is None else segments
        for route in self._routes:
            if route.method != method:
                continue
            params = route.match(parts)
            if params is not None:
                return RouteMatch(route=route, params=MappingProxyType(params))
        raise NotFound(f"Cannot {method} {path}")
