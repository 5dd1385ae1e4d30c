"""headerecho CLI — run the sample server or list its routes.

Entry point registered as ``headerecho`` in ``pyproject.toml``::

    [project.scripts]
    headerecho = "headerecho.cli:main"
"""

import argparse
import sys

from headerecho.sample import VARIANTS


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``headerecho`` command."""
    parser = argparse.ArgumentParser(
        prog="headerecho",
        description="Sample HTTP server that echoes request headers.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- headerecho run ----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the sample server on port 8000")
    run_parser.add_argument(
        "--variant",
        choices=VARIANTS,
        default="full",
        help="Which route table to serve (default: full)",
    )

    # -- headerecho routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the registered routes")
    routes_parser.add_argument("--variant", choices=VARIANTS, default="full")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from headerecho.cli._run import run_sample

        run_sample(args)
    elif args.command == "routes":
        from headerecho.cli._routes import run_routes

        run_routes(args)
