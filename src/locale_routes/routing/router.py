"""Ordered route table with named routes and path building.

Routes are registered during setup in precedence order and the table is
frozen with the route set. Registration order is the only precedence
there is: a host framework that matches first-registered-first sees the
routes in exactly this order.
"""

import re

from locale_routes.errors import BuildError
from locale_routes.routing.params import CONVERTERS, format_param
from locale_routes.routing.route import Route

# Suffixes of the helper names exposed for every named route
HELPER_SUFFIXES: tuple[str, ...] = ("path", "url")

# {name} or {name:type}
_PARAM = re.compile(r"\{(?P<name>[^}:]+)(?::(?P<type>[^}]+))?\}")


class Router:
    """Ordered table of registered routes.

    Usage::

        router = Router()
        router.add(Route("/fr/utilisateurs/{id:int}", handler, name="user_fr"))
        router.add(Route("/users/{id:int}", handler, name="user_en"))
        router.freeze()
        router.url_for("user_fr", id=42)  # "/fr/utilisateurs/42"

    Also acts as the name registry for route generation: ``names`` lists
    registered route names, ``add_helper`` records localized base names,
    and ``has_helper`` is the capability probe for the name resolver.
    """

    __slots__ = ("_frozen", "_helpers", "_names", "_order", "_owners")

    def __init__(self) -> None:
        self._frozen = False
        self._order: list[Route] = []
        self._names: dict[str, Route] = {}
        self._helpers: set[str] = set()
        # (method, path) -> first route registered for it
        self._owners: dict[tuple[str, str], Route] = {}

    def add(self, route: Route) -> None:
        """Append *route*. Must be called before ``freeze()``.

        The first route registered for a path and method, and the first
        route registered under a name, keep them. Later ones are still
        listed in ``routes``.
        """
        if self._frozen:
            msg = "Cannot add routes after the router is frozen."
            raise RuntimeError(msg)

        self._order.append(route)
        if route.name:
            self._names.setdefault(route.name, route)
        for method in route.methods:
            self._owners.setdefault((method, route.path), route)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def routes(self) -> list[Route]:
        """All registered routes in registration order."""
        return list(self._order)

    @property
    def names(self) -> frozenset[str]:
        """Names of every named route registered so far."""
        return frozenset(self._names)

    def get(self, name: str) -> Route | None:
        return self._names.get(name)

    def owner(self, method: str, path: str) -> Route | None:
        """The route that took *path* for *method* first, if any."""
        return self._owners.get((method.upper(), path))

    # -- Localized helpers --

    def add_helper(self, name: str | None) -> None:
        """Record *name* as a base name with per-locale helpers."""
        if name:
            self._helpers.add(name)

    def is_localized(self, name: str) -> bool:
        return name in self._helpers

    def has_helper(self, helper_name: str) -> bool:
        """Capability probe: does ``<route name>_<suffix>`` exist?"""
        route_name, _, suffix = helper_name.rpartition("_")
        return suffix in HELPER_SUFFIXES and route_name in self._names

    # -- Path building --

    def url_for(self, name: str, **params: object) -> str:
        """Build the path of the route named *name*.

        Raises ``BuildError`` for an unknown name, a missing parameter, or
        a value that does not fit the parameter's converter. Parameters
        not used by the template are ignored.
        """
        route = self._names.get(name)
        if route is None:
            msg = f"No route named {name!r}."
            raise BuildError(msg)

        def substitute(m: re.Match[str]) -> str:
            param_name, param_type = m["name"], m["type"] or "str"
            if param_name not in params:
                msg = f"Route {name!r} requires parameter {param_name!r}."
                raise BuildError(msg)
            if param_type not in CONVERTERS:
                msg = f"Route {name!r} uses unknown converter {param_type!r}."
                raise BuildError(msg)
            value = format_param(params[param_name], param_type)
            if value is None:
                msg = (
                    f"Value {params[param_name]!r} for {param_name!r} does not "
                    f"match converter {param_type!r} in route {name!r}."
                )
                raise BuildError(msg)
            return value

        built = _PARAM.sub(substitute, route.path)
        return "/" + built.strip("/")
