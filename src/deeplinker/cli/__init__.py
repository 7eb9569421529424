"""deeplinker CLI — check link tables and resolve URIs from a shell.

Entry point registered as ``deeplinker`` in ``pyproject.toml``::

    [project.scripts]
    deeplinker = "deeplinker.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``deeplinker`` command."""
    parser = argparse.ArgumentParser(
        prog="deeplinker",
        description="deeplinker — resolve deep-link URIs to application destinations.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # -- deeplinker resolve ----------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve URIs against a link table")
    resolve_parser.add_argument("table", help="Path to a YAML link table")
    resolve_parser.add_argument("uris", nargs="+", metavar="URI", help="URI(s) to resolve")
    resolve_parser.add_argument(
        "--fallback-on-malformed",
        action="store_true",
        help="Resolve malformed parameters to the default destination instead of failing",
    )
    resolve_parser.add_argument(
        "--scheme",
        action="append",
        default=[],
        help="Only match URIs with this scheme (repeatable)",
    )
    resolve_parser.add_argument(
        "--host",
        action="append",
        default=[],
        help="Only match URIs with this host (repeatable)",
    )
    resolve_parser.add_argument(
        "--default",
        default=None,
        help="Default destination when the table has no empty template",
    )

    # -- deeplinker routes -----------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the destinations in a link table")
    routes_parser.add_argument("table", help="Path to a YAML link table")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "resolve":
        from deeplinker.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "routes":
        from deeplinker.cli._routes import run_routes

        run_routes(args)
