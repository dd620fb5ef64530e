"""Active locale via ContextVar.

Provides:
- ``locale_var``: the locale of the current request or task.
- ``use_locale``: context manager that sets it for a block.

Only the integration edge (``LocalizedRoutes.path_for``) reads it, and it
passes the value explicitly to the name resolver.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

locale_var: ContextVar[str] = ContextVar("locale_routes_locale")
"""The active locale. Set by middleware or ``use_locale``."""


def get_locale(default: str) -> str:
    """Return the active locale, or *default* outside any locale context."""
    return locale_var.get(default)


@contextmanager
def use_locale(locale: str) -> Iterator[str]:
    """Make *locale* the active locale inside the ``with`` block.

    Usage::

        with use_locale("fr"):
            routes.path_for("about")  # "/fr/a-propos"
    """
    token = locale_var.set(locale)
    try:
        yield locale
    finally:
        locale_var.reset(token)
