"""Locale traversal orders and locale name normalization.

Default-locale templates are usually registered without a locale prefix
and match like a wildcard, so every order that decides registration puts
the default locale last.
"""

import re

from locale_routes.config import LocaleConfig

_SEPARATORS = re.compile(r"[^0-9a-zA-Z]+")


def normalize_locale(locale: str) -> str:
    """Return the identifier form of *locale*: ``"pt-BR"`` -> ``"pt_br"``."""
    return _SEPARATORS.sub("_", str(locale)).strip("_").lower()


def locale_segment(locale: str) -> str:
    """Return the path prefix form of *locale*: ``"pt-BR"`` -> ``"pt-br"``."""
    return str(locale).lower()


def available_locales(config: LocaleConfig) -> list[str]:
    """Configured locales with the default locale moved to the end.

    The default locale appears exactly once, even when it is not listed
    in ``config.available_locales``.
    """
    default = config.default_locale
    locales = [locale for locale in dict.fromkeys(config.available_locales) if locale != default]
    locales.append(default)
    return locales


def _without(items: list[str] | tuple[str, ...], excluded: set[str]) -> list[str]:
    return [item for item in items if item not in excluded]


def collection_order(config: LocaleConfig) -> list[str]:
    """Order used to decide which locale owns a generated path.

    ``[default] + (fallback - {default}) + (available - fallback)``
    """
    default = config.default_locale
    fallback = config.fallback_locales
    return (
        [default]
        + _without(fallback, {default})
        + _without(available_locales(config), {*fallback, default})
    )


def registration_order(config: LocaleConfig) -> list[str]:
    """Order used to hand variants to the router.

    ``(available - fallback) + (fallback - {default}) + [default]``
    """
    default = config.default_locale
    fallback = config.fallback_locales
    return (
        _without(available_locales(config), {*fallback, default})
        + _without(fallback, {default})
        + [default]
    )
