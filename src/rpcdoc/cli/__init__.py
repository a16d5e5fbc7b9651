"""rpcdoc CLI — OpenAPI generation and route listing.

Entry point registered as ``rpcdoc`` in ``pyproject.toml``::

    [project.scripts]
    rpcdoc = "rpcdoc.cli:main"
"""

import argparse
import logging
import sys

from rpcdoc.config import DocumentConfig

_DEFAULTS = DocumentConfig()


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``rpcdoc`` command."""
    parser = argparse.ArgumentParser(
        prog="rpcdoc",
        description="rpcdoc — OpenAPI 3.1 documents for RPC procedure trees.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log traversal details to stderr",
    )
    # Also accepted after the subcommand; SUPPRESS keeps the top-level value
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log traversal details to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- rpcdoc generate --------------------------------------------------
    generate_parser = subparsers.add_parser(
        "generate", parents=[common], help="Write an OpenAPI document"
    )
    generate_parser.add_argument(
        "tree",
        help="Import string (e.g. myapp:router)",
    )
    generate_parser.add_argument("--title", default=_DEFAULTS.api_title, help="info.title")
    generate_parser.add_argument("--version", default=_DEFAULTS.api_version, help="info.version")
    generate_parser.add_argument(
        "--base-path",
        default=_DEFAULTS.base_path,
        help=f"Route prefix, used verbatim (default: {_DEFAULTS.base_path})",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file (default: stdout)",
    )
    generate_parser.add_argument(
        "--indent",
        type=int,
        default=_DEFAULTS.indent,
        help=f"JSON indentation (default: {_DEFAULTS.indent})",
    )
    generate_parser.add_argument(
        "--sort-keys",
        action="store_true",
        help="Sort object keys in the output",
    )

    # -- rpcdoc routes ----------------------------------------------------
    routes_parser = subparsers.add_parser(
        "routes", parents=[common], help="List documented routes"
    )
    routes_parser.add_argument(
        "tree",
        help="Import string (e.g. myapp:router)",
    )
    routes_parser.add_argument(
        "--base-path",
        default=_DEFAULTS.base_path,
        help=f"Route prefix, used verbatim (default: {_DEFAULTS.base_path})",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "generate":
        from rpcdoc.cli._generate import run_generate

        run_generate(args)
    elif args.command == "routes":
        from rpcdoc.cli._routes import run_routes

        run_routes(args)
