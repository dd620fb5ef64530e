"""Route name resolution for localized helpers.

A localized route named ``users`` is registered as ``users_en``,
``users_fr`` and so on. Calling its ``path`` helper picks one of those
at call time::

    resolve_name((), "users", "path", router.has_helper,
                 current_locale="fr-CA", config=config)
    # "users_fr_ca_path" if it exists, else a fallback, else the default

The resolver is pure: the active locale and the capability probe are
passed in, nothing is read from global state.
"""

from collections.abc import Sequence
from typing import Any

from locale_routes._internal.types import NameProbe
from locale_routes.config import LocaleConfig
from locale_routes.locales import normalize_locale


def locale_from_args(args: Sequence[Any], config: LocaleConfig) -> str | None:
    """Explicit locale among the call-site arguments, if any.

    Only honoured when host locales are configured; otherwise the
    active locale always decides.
    """
    if not config.host_locales:
        return None
    for arg in args:
        if isinstance(arg, dict):
            locale = arg.get(config.locale_param_key)
            return str(locale) if locale else None
    return None


def fallback_route_locale_name(
    current_locale: str,
    base_name: str,
    suffix: str,
    probe: NameProbe,
    config: LocaleConfig,
) -> str | None:
    """First fallback of *current_locale* whose helper exists, normalized."""
    if not config.deduplicate_routes:
        return None
    for fallback in config.fallback_chain(current_locale):
        candidate = normalize_locale(fallback)
        if probe(f"{base_name}_{candidate}_{suffix}"):
            return candidate
    return None


def resolve_name(
    args: Sequence[Any],
    base_name: str,
    suffix: str,
    probe: NameProbe,
    *,
    current_locale: str,
    config: LocaleConfig,
) -> str:
    """Return the helper name ``<base>_<locale>_<suffix>`` to call.

    Resolution order:
    1. Explicit locale in *args* (host locales only)
    2. The current locale, if its helper exists
    3. The first fallback with an existing helper (deduplication only)
    4. The default locale
    """
    explicit = locale_from_args(args, config)
    current = normalize_locale(current_locale)

    if explicit:
        locale = normalize_locale(explicit)
    elif probe(f"{base_name}_{current}_{suffix}"):
        locale = current
    else:
        locale = fallback_route_locale_name(
            current_locale, base_name, suffix, probe, config
        ) or normalize_locale(config.default_locale)

    return f"{base_name}_{locale}_{suffix}"
