"""``locale-routes path`` — resolve a route name to a path."""

import argparse
import sys

from locale_routes.cli._resolve import resolve_routes
from locale_routes.errors import LocaleRoutesError


def _parse_params(pairs: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Invalid parameter {pair!r}, expected NAME=VALUE"
            raise ValueError(msg)
        params[key] = value
    return params


def run_path(args: argparse.Namespace) -> None:
    """Print the path ``path_for`` builds for ``args.name``."""
    try:
        routes = resolve_routes(args.app)
        params = _parse_params(args.param or [])
    except (ModuleNotFoundError, AttributeError, TypeError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        path = routes.path_for(
            args.name,
            locale=args.locale,
            current_locale=args.current,
            **params,
        )
    except LocaleRoutesError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(path)
