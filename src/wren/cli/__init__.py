"""Wren CLI: inspect a dispatcher's pages and page resolution.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren: page dispatch with hook chains, module search, and a login gate.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren pages -------------------------------------------------------
    pages_parser = subparsers.add_parser("pages", help="List registered page handlers")
    pages_parser.add_argument(
        "dispatcher",
        help="Import string (e.g. myapp:dispatcher)",
    )

    # -- wren resolve -----------------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve", help="Show which handler a page name dispatches to"
    )
    resolve_parser.add_argument(
        "dispatcher",
        help="Import string (e.g. myapp:dispatcher)",
    )
    resolve_parser.add_argument("page", help="Requested page name")
    resolve_parser.add_argument(
        "--logged-in",
        action="store_true",
        help="Resolve as an authenticated user",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "pages":
        from wren.cli._pages import run_pages

        run_pages(args)
    elif args.command == "resolve":
        from wren.cli._pages import run_resolve

        run_resolve(args)
