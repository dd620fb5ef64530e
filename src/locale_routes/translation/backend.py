"""Translation backend protocol and the path translation adapter.

Backends raise ``MissingTranslation`` when a locale has no translation.
``translate_path`` turns that one condition into an explicit result or
lets it abort the route, depending on ``LocaleConfig.disable_fallback``.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from locale_routes.config import LocaleConfig
from locale_routes.errors import MissingTranslation

logger = logging.getLogger("locale_routes.translation")


class TranslationBackend(Protocol):
    """Translates a path template for a locale within a scope.

    Must be deterministic: the same inputs always give the same path.
    """

    def translate(self, path: str, locale: str, scope: tuple[str, ...]) -> str: ...


@dataclass(frozen=True, slots=True)
class Translated:
    """The backend produced a path for the locale."""

    path: str


@dataclass(frozen=True, slots=True)
class Missing:
    """The locale has no translation and is skipped."""

    locale: str


TranslationResult = Translated | Missing


def translate_path(
    backend: TranslationBackend,
    path: str,
    locale: str,
    scope: tuple[str, ...],
    config: LocaleConfig,
) -> TranslationResult:
    """Translate *path* for *locale*.

    Returns ``Missing`` for a missing translation when
    ``config.disable_fallback`` is set. Otherwise ``MissingTranslation``
    propagates and aborts generation for the whole route. Other errors
    always propagate.
    """
    try:
        return Translated(backend.translate(path, locale, scope))
    except MissingTranslation as exc:
        if not config.disable_fallback:
            raise
        logger.debug("Skipping locale %s for %s: %s", locale, path, exc)
        return Missing(locale)
