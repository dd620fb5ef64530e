"""locale-routes — declare a route once, register it once per locale.

Generates locale-specific variants of routes in an order that keeps
route-matching precedence correct, drops redundant duplicates, and
resolves locale-suffixed route names with fallback chains.

Basic usage::

    from locale_routes import LocaleConfig, LocalizedRoutes

    config = LocaleConfig(
        default_locale="en",
        available_locales=("en", "fr", "fr-CA"),
        fallbacks={"fr-CA": ("fr",)},
        deduplicate_routes=True,
    )
    routes = LocalizedRoutes(config, translations_dir="locales")

    @routes.route("/about", name="about")
    def about():
        ...

    routes.path_for("about", current_locale="fr-CA")  # "/fr/a-propos"

Core generation without the route set::

    from locale_routes import RouteGenerator, Router

    router = Router()
    generator = RouteGenerator(config, backend, router)
    for variant in generator.generate_deduplicated(route):
        ...
"""

__version__ = "0.1.0"
__all__ = [
    "BuildError",
    "CatalogPathTranslator",
    "ConfigurationError",
    "LocaleConfig",
    "LocaleRoutesError",
    "LocalizedRoutes",
    "MissingTranslation",
    "Route",
    "RouteGenerator",
    "Router",
    "TranslatedVariant",
    "TranslationCatalog",
    "load_catalog",
    "load_config",
    "resolve_name",
    "use_locale",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import locale_routes`` fast while providing a clean top-level API.
    """
    if name == "LocalizedRoutes":
        from locale_routes.app import LocalizedRoutes

        return LocalizedRoutes

    if name in ("LocaleConfig", "load_config"):
        from locale_routes import config as _config

        return getattr(_config, name)

    if name in ("Route", "TranslatedVariant"):
        from locale_routes.routing import route as _route

        return getattr(_route, name)

    if name == "Router":
        from locale_routes.routing.router import Router

        return Router

    if name == "RouteGenerator":
        from locale_routes.generation.generator import RouteGenerator

        return RouteGenerator

    if name in ("TranslationCatalog", "load_catalog"):
        from locale_routes.translation import catalog as _catalog

        return getattr(_catalog, name)

    if name == "CatalogPathTranslator":
        from locale_routes.translation.path import CatalogPathTranslator

        return CatalogPathTranslator

    if name == "resolve_name":
        from locale_routes.helpers import resolve_name

        return resolve_name

    if name == "use_locale":
        from locale_routes.context import use_locale

        return use_locale

    if name in ("BuildError", "ConfigurationError", "LocaleRoutesError", "MissingTranslation"):
        from locale_routes import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
