"""Route generation — drive translation, deduplication and variant building.

Both generators are lazy. The consumer registers each variant before the
next one is built, so derived names are checked against names registered
earlier in the same run.

Two orders are needed for deduplicated generation. Ownership of a path
is decided with the default and fallback locales first, so plain locales
are judged redundant against them. Registration happens with plain
locales first and the default last, so a prefix-less default route does
not shadow the more specific ones. ``generate_deduplicated`` therefore
walks the locales twice.
"""

import logging
from collections.abc import Collection, Iterator
from typing import Protocol

from locale_routes.config import LocaleConfig
from locale_routes.generation.dedup import PathOwners, SeenPaths, allowed_to_deduplicate
from locale_routes.generation.variants import build_variant
from locale_routes.locales import available_locales, collection_order, registration_order
from locale_routes.routing.route import Route, TranslatedVariant
from locale_routes.translation.backend import Missing, TranslationBackend, translate_path

logger = logging.getLogger("locale_routes.generation")


class NameRegistry(Protocol):
    """Named-route registry maintained by the host router."""

    @property
    def names(self) -> Collection[str]: ...

    def add_helper(self, name: str | None) -> None: ...


class RouteGenerator:
    """Generates locale variants of routes for one configuration.

    Usage::

        generator = RouteGenerator(config, backend, router)
        for variant in generator.translations_for(route):
            router.add(...)
    """

    __slots__ = ("backend", "config", "registry")

    def __init__(
        self,
        config: LocaleConfig,
        backend: TranslationBackend,
        registry: NameRegistry,
    ) -> None:
        self.config = config
        self.backend = backend
        self.registry = registry

    def translations_for(self, route: Route) -> Iterator[TranslatedVariant]:
        """Pick the generator matching ``config.deduplicate_routes``."""
        if self.config.deduplicate_routes:
            return self.generate_deduplicated(route)
        return self.generate(route)

    def generate(self, route: Route) -> Iterator[TranslatedVariant]:
        """Single pass over the locales, default locale last.

        The deduplication predicate is still consulted, so this drops
        redundant plain locales when ``deduplicate_routes`` is set.

        A ``MissingTranslation`` raised for a later locale does not take
        back variants already yielded for earlier ones.
        """
        self.registry.add_helper(route.name)
        seen = SeenPaths()

        for locale in available_locales(self.config):
            result = translate_path(self.backend, route.path, locale, route.scope, self.config)
            if isinstance(result, Missing):
                continue
            if allowed_to_deduplicate(locale, result.path, seen, self.config):
                logger.debug("Dropping %s variant of %s: %s already generated", locale, route.path, result.path)
                continue

            seen.mark(result.path)
            yield self._build(route, locale, result.path)

    def generate_deduplicated(self, route: Route) -> Iterator[TranslatedVariant]:
        """Two passes: collect path owners, then yield in registration order.

        Fails before yielding anything if a translation is missing and
        ``disable_fallback`` is off.
        """
        self.registry.add_helper(route.name)
        owners = PathOwners()

        for locale in collection_order(self.config):
            result = translate_path(self.backend, route.path, locale, route.scope, self.config)
            if isinstance(result, Missing):
                continue
            if allowed_to_deduplicate(locale, result.path, owners, self.config):
                logger.debug(
                    "Dropping %s variant of %s: %s owned by %s",
                    locale,
                    route.path,
                    result.path,
                    ", ".join(owners.owners(result.path)),
                )
                continue
            owners.add(result.path, locale)

        for locale in registration_order(self.config):
            result = translate_path(self.backend, route.path, locale, route.scope, self.config)
            if isinstance(result, Missing):
                continue
            if not owners.owns(result.path, locale):
                continue
            yield self._build(route, locale, result.path)

    def _build(self, route: Route, locale: str, path: str) -> TranslatedVariant:
        return build_variant(
            route,
            locale,
            path,
            self.registry.names,
            self.config.locale_param_key,
        )
