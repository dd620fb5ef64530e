"""Route set import resolution — ``"module:attribute"`` to LocalizedRoutes.

Shared utility used by ``locale-routes routes`` and ``locale-routes path``.
"""

import importlib

from locale_routes.app import LocalizedRoutes


def resolve_routes(import_string: str) -> LocalizedRoutes:
    """Resolve an import string to a ``LocalizedRoutes`` instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"routes"`` (e.g. ``"myapp"`` resolves to
    ``myapp.routes``).

    Supports factory functions: if the resolved object is callable and
    not a LocalizedRoutes instance, it is called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a ``LocalizedRoutes``.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, LocalizedRoutes):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, LocalizedRoutes):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a LocalizedRoutes instance"
        raise TypeError(msg)

    return obj
