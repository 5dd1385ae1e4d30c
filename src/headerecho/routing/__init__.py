"""Routing — ordered route table with first-match dispatch.

Routes are registered during setup and frozen into a read-only
table when the app compiles.
"""

from headerecho.routing.route import Literal, Param, Route, RouteMatch, Segment
from headerecho.routing.router import (
    SUPPORTED_METHODS,
    Router,
    parse_pattern,
    split_path,
    split_raw_path,
)

__all__ = [
    "SUPPORTED_METHODS",
    "Literal",
    "Param",
    "Route",
    "RouteMatch",
    "Router",
    "Segment",
    "parse_pattern",
    "split_path",
    "split_raw_path",
]
