"""``headerecho routes`` — list registered routes.

Builds the sample App for the chosen variant and prints its route
table with method, path, and handler name, in registration order.
"""

import argparse
import logging

from headerecho.config import AppConfig
from headerecho.sample import create_app


def format_routes(rows: list[tuple[str, str, str]]) -> str:
    """Render (method, path, handler) rows as an aligned table."""
    max_method = max([len(r[0]) for r in rows] + [6])  # "METHOD" header
    max_path = max([len(r[1]) for r in rows] + [4])  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    lines = [fmt.format("METHOD", "PATH", "HANDLER")]
    sep_len = max_method + max_path + 4 + max((len(r[2]) for r in rows), default=0)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(*row) for row in rows)
    return "\n".join(lines)


def run_routes(args: argparse.Namespace) -> None:
    """Print the route table for ``args.variant``."""
    # Quiet logger: listing routes should print only the table.
    logger = logging.getLogger("headerecho.cli")
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    logger.propagate = False

    app = create_app(args.variant, config=AppConfig(), logger=logger)
    rows = [
        (route.method, route.template, getattr(route.handler, "__name__", str(route.handler)))
        for route in app.router.routes
    ]
    if not rows:
        print("No routes registered.")
        return
    print(format_routes(rows))
