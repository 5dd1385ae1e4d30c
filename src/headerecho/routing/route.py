"""Route, RouteMatch, and path segment frozen dataclasses."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class Literal:
    """A static path segment: ``/web`` matches only ``web``."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Param:
    """A named parameter segment: ``/:id`` matches any non-empty segment."""

    name: str

    def __str__(self) -> str:
        return f":{self.name}"


Segment: TypeAlias = Literal | Param


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created during app setup, appended to the router's table and never
    mutated afterwards.
    """

    method: str
    pattern: tuple[Segment, ...]
    handler: Callable[..., Any]
    template: str

    def match(self, parts: tuple[str, ...]) -> dict[str, str] | None:
        """Match already-split path parts against this route's pattern.

        Returns the bound parameters on success, ``None`` otherwise.
        Method is not checked here.
        """
        if len(parts) != len(self.pattern):
            return None
        params: dict[str, str] = {}
        for segment, part in zip(self.pattern, parts, strict=True):
            match segment:
                case Literal(value=value):
                    if part != value:
                        return None
                case Param(name=name):
                    if not part:
                        return None
                    params[name] = part
        return params


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    params: Mapping[str, str]
