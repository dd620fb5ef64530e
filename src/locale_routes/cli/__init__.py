"""locale-routes CLI — inspect generated routes and resolve route names.

Entry point registered as ``locale-routes`` in ``pyproject.toml``::

    [project.scripts]
    locale-routes = "locale_routes.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``locale-routes`` command."""
    parser = argparse.ArgumentParser(
        prog="locale-routes",
        description="locale-routes — one route declaration, one route per locale.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- locale-routes routes ---------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List generated routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:routes)")
    routes_parser.add_argument("--locale", default=None, help="Only show this locale")

    # -- locale-routes path -----------------------------------------------
    path_parser = subparsers.add_parser("path", help="Resolve a route name to a path")
    path_parser.add_argument("app", help="Import string (e.g. myapp:routes)")
    path_parser.add_argument("name", help="Route name (base name for localized routes)")
    path_parser.add_argument("--locale", default=None, help="Explicit locale")
    path_parser.add_argument("--current", default=None, help="Active locale")
    path_parser.add_argument(
        "--param",
        action="append",
        metavar="NAME=VALUE",
        help="Path parameter (repeatable)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from locale_routes.cli._routes import run_routes

        run_routes(args)
    elif args.command == "path":
        from locale_routes.cli._path import run_path

        run_path(args)
