"""LocalizedRoutes — declare routes once, register one variant per locale.

Mutable during setup (route registration).
Frozen on first lookup: every pending route is run through the route
generator and its variants are added to a ``Router`` in precedence order.
"""

import dataclasses
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from locale_routes._internal.types import Handler
from locale_routes.config import LocaleConfig
from locale_routes.context import get_locale
from locale_routes.generation.generator import RouteGenerator
from locale_routes.helpers import resolve_name
from locale_routes.host import locale_from_host
from locale_routes.routing.route import Route
from locale_routes.routing.router import Router
from locale_routes.translation.backend import TranslationBackend
from locale_routes.translation.catalog import TranslationCatalog, load_catalog
from locale_routes.translation.path import CatalogPathTranslator

logger = logging.getLogger("locale_routes.app")


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting for the route set to freeze."""

    path: str
    handler: Handler
    methods: list[str] | None
    name: str | None
    scope: tuple[str, ...]
    options: dict[str, Any] = field(default_factory=dict)
    constraints: Any = None
    localized: bool = True


class LocalizedRoutes:
    """A localized route set.

    Usage::

        routes = LocalizedRoutes(config, translations_dir="locales")

        @routes.route("/about", name="about")
        def about():
            ...

        routes.path_for("about", current_locale="fr")  # "/fr/a-propos"

    Thread safety:
        Registration is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread generates and registers the variants.
    """

    __slots__ = (
        "_backend",
        "_freeze_lock",
        "_frozen",
        "_pending_routes",
        "_router",
        "config",
    )

    def __init__(
        self,
        config: LocaleConfig | None = None,
        *,
        backend: TranslationBackend | None = None,
        catalog: TranslationCatalog | None = None,
        translations_dir: str | Path | None = None,
    ) -> None:
        self.config: LocaleConfig = config or LocaleConfig()
        if backend is None:
            if catalog is None:
                catalog = load_catalog(translations_dir) if translations_dir else TranslationCatalog()
            backend = CatalogPathTranslator(catalog, self.config)
        self._backend: TranslationBackend = backend
        self._pending_routes: list[_PendingRoute] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        self._router: Router | None = None

    # -- Route registration --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
        scope: tuple[str, ...] = ("routes",),
        options: dict[str, Any] | None = None,
        constraints: Any = None,
        localized: bool = True,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: Untranslated URL path pattern. Use ``{param}`` for path
                parameters.
            methods: HTTP methods. Defaults to ``["GET"]``.
            name: Base route name. Variants are named ``<name>_<locale>``.
            scope: Translation scope passed to the backend.
            options: Route defaults. Each variant gets the locale key set
                unless already present.
            constraints: Mapping (copied and pinned to the locale) or an
                opaque matcher (passed through).
            localized: When False, the route is registered once, as-is.
        """

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._pending_routes.append(
                _PendingRoute(
                    path,
                    func,
                    methods,
                    name,
                    scope,
                    dict(options or {}),
                    {} if constraints is None else constraints,
                    localized,
                )
            )
            return func

        return decorator

    # -- Lookup --

    @property
    def router(self) -> Router:
        """The populated router. Freezes the route set on first access."""
        self._ensure_frozen()
        assert self._router is not None
        return self._router

    def locale_for_host(self, host: str) -> str | None:
        """Locale configured for *host* in ``config.host_locales``."""
        return locale_from_host(host, self.config.host_locales)

    def path_for(
        self,
        name: str,
        *args: Any,
        locale: str | None = None,
        current_locale: str | None = None,
        **params: Any,
    ) -> str:
        """Build the path of route *name*.

        For a localized base name the variant is chosen by the name
        resolver. *current_locale* defaults to the active locale from
        ``locale_routes.context``. An explicit *locale* is passed to the
        resolver as a call-site argument when host locales are configured;
        otherwise it replaces the current locale.
        """
        return self._build(name, "path", args, locale, current_locale, params)

    def url_for(
        self,
        name: str,
        *args: Any,
        host: str,
        scheme: str = "http",
        locale: str | None = None,
        current_locale: str | None = None,
        **params: Any,
    ) -> str:
        """Like ``path_for``, prefixed with ``scheme://host``."""
        path = self._build(name, "url", args, locale, current_locale, params)
        return f"{scheme}://{host}{path}"

    def _build(
        self,
        name: str,
        suffix: str,
        args: tuple[Any, ...],
        locale: str | None,
        current_locale: str | None,
        params: dict[str, Any],
    ) -> str:
        router = self.router
        key = self.config.locale_param_key
        values: dict[str, Any] = {}
        for arg in args:
            if isinstance(arg, dict):
                values.update(arg)
        values.update(params)

        if not router.is_localized(name):
            if locale is not None:
                values[key] = locale
            return router.url_for(name, **values)

        call_args: tuple[Any, ...] = args
        active = current_locale or get_locale(self.config.default_locale)
        if locale is not None:
            if self.config.host_locales:
                call_args = (*args, {key: locale})
            else:
                active = locale
        helper = resolve_name(
            call_args,
            name,
            suffix,
            router.has_helper,
            current_locale=active,
            config=self.config,
        )
        route_name = helper.removesuffix(f"_{suffix}")
        variant = router.get(route_name)
        if variant is not None and variant.locale is not None:
            # Fills a {locale} segment; ignored by templates without one
            values[key] = variant.locale
        return router.url_for(route_name, **values)

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Generate variants and fill the router in precedence order.

        MUST only be called while holding _freeze_lock.
        """
        router = Router()
        generator = RouteGenerator(self.config, self._backend, router)

        for pending in self._pending_routes:
            methods = frozenset(m.upper() for m in (pending.methods or ["GET"]))
            route = Route(
                path=pending.path,
                handler=pending.handler,
                methods=methods,
                name=pending.name,
                scope=pending.scope,
                options=pending.options,
                constraints=pending.constraints,
            )
            if not pending.localized:
                router.add(route)
                continue

            for variant in generator.translations_for(route):
                router.add(
                    dataclasses.replace(
                        route,
                        path=variant.path,
                        name=variant.name,
                        options=variant.options,
                        constraints=variant.constraints,
                        locale=variant.locale,
                    )
                )

        router.freeze()
        self._router = router
        self._frozen = True
        logger.info(
            "Registered %d routes from %d declarations",
            len(router.routes),
            len(self._pending_routes),
        )

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot register routes after the route set is frozen."
            raise RuntimeError(msg)
