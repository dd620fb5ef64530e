"""Build the translated variant of a route for one locale."""

import copy
from collections.abc import Collection, MutableMapping
from typing import Any

from locale_routes.locales import normalize_locale
from locale_routes.routing.route import Route, TranslatedVariant


def translate_name(name: str | None, locale: str, existing_names: Collection[str]) -> str | None:
    """Return ``<name>_<locale>``, or ``None`` if unnamed or already taken.

    A taken name is not an error: the variant is registered unnamed.
    """
    if not name:
        return None
    translated = f"{name}_{normalize_locale(locale)}"
    if translated in existing_names:
        return None
    return translated


def translate_options(options: dict[str, Any], locale: str, key: str = "locale") -> dict[str, Any]:
    """Shallow copy of *options* with *key* defaulting to the locale."""
    translated = dict(options)
    translated.setdefault(key, str(locale))
    return translated


def translate_constraints(constraints: Any, locale: str, key: str = "locale") -> Any:
    """Shallow copy of *constraints* pinned to the locale.

    Only mutable mappings are copied and updated. Anything else (read-only
    mappings, compiled patterns, callables) passes through unchanged.
    """
    if not isinstance(constraints, MutableMapping):
        return constraints
    translated = copy.copy(constraints)
    translated[key] = str(locale)
    return translated


def build_variant(
    route: Route,
    locale: str,
    translated_path: str,
    existing_names: Collection[str],
    key: str = "locale",
) -> TranslatedVariant:
    return TranslatedVariant(
        locale=locale,
        name=translate_name(route.name, locale, existing_names),
        path=translated_path,
        constraints=translate_constraints(route.constraints, locale, key),
        options=translate_options(route.options, locale, key),
    )
