"""Catalog-backed path translation — the default translation backend.

Translates a route template segment by segment::

    "/users/{id}/edit"  --fr-->  "/fr/utilisateurs/{id}/modifier"

Parameter segments are kept as-is. Segments containing dots
(``feed.rss``) are translated phrase by phrase.
"""

from locale_routes.config import LocaleConfig
from locale_routes.errors import MissingTranslation
from locale_routes.locales import locale_segment
from locale_routes.translation.catalog import TranslationCatalog


class CatalogPathTranslator:
    """Implements ``TranslationBackend`` over a ``TranslationCatalog``.

    A phrase without a translation for the locale:

    - raises ``MissingTranslation`` when ``disable_fallback`` is set and
      the locale is not the default locale;
    - otherwise resolves through the locale's fallback chain, then the
      default locale, then falls back to the untranslated phrase.
    """

    __slots__ = ("catalog", "config")

    def __init__(self, catalog: TranslationCatalog, config: LocaleConfig) -> None:
        self.catalog = catalog
        self.config = config

    def translate(self, path: str, locale: str, scope: tuple[str, ...]) -> str:
        segments: list[str] = []
        for part in path.strip("/").split("/"):
            if not part:
                continue
            if _is_param(part):
                segments.append(part)
                continue
            segments.append(".".join(self._translate_phrase(phrase, locale, scope) for phrase in part.split(".")))

        if self._display_locale(locale, path):
            segments.insert(0, locale_segment(locale))
        return "/" + "/".join(segments)

    def _translate_phrase(self, phrase: str, locale: str, scope: tuple[str, ...]) -> str:
        if not phrase or _is_param(phrase):
            return phrase
        translated = self.catalog.lookup(locale, scope, phrase)
        if translated is not None:
            return translated

        if self.config.disable_fallback and locale != self.config.default_locale:
            raise MissingTranslation(locale, phrase, scope)

        for fallback in (*self.config.fallback_chain(locale), self.config.default_locale):
            translated = self.catalog.lookup(fallback, scope, phrase)
            if translated is not None:
                return translated
        return phrase

    def _display_locale(self, locale: str, path: str) -> bool:
        if self.config.hide_locale:
            return False
        key = self.config.locale_param_key
        if f"{{{key}}}" in path or f"{{{key}:" in path:
            return False
        if self.config.force_locale:
            return True
        return locale != self.config.default_locale


def _is_param(part: str) -> bool:
    return part.startswith("{") and part.endswith("}")
