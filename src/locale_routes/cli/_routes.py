"""``locale-routes routes`` — list generated routes.

Resolves an import string to a LocalizedRoutes instance and prints every
registered variant in registration (precedence) order.
"""

import argparse
import sys

from locale_routes.cli._resolve import resolve_routes
from locale_routes.errors import LocaleRoutesError


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of LOCALE, METHOD, PATH and NAME."""
    try:
        routes = resolve_routes(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        registered = routes.router.routes
    except LocaleRoutesError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.locale:
        registered = [r for r in registered if r.locale == args.locale]
    if not registered:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = [
        (route.locale or "-", ", ".join(sorted(route.methods)), route.path, route.name or "")
        for route in registered
    ]

    widths = [
        max(len(header), *(len(row[i]) for row in rows))
        for i, header in enumerate(("LOCALE", "METHOD", "PATH"))
    ]
    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format("LOCALE", "METHOD", "PATH", "NAME"))
    sep_len = sum(widths) + 6 + max((len(r[3]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row).rstrip())
