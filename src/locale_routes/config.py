"""Locale configuration.

LocaleConfig is a frozen dataclass — immutable after creation, validated
on construction, no string-key dict lookups at generation time.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from locale_routes.errors import ConfigurationError

logger = logging.getLogger("locale_routes.config")


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Locale and route generation settings. Immutable after creation.

    Override what you need::

        config = LocaleConfig(
            default_locale="en",
            available_locales=("en", "fr", "fr-CA"),
            fallbacks={"fr-CA": ("fr",)},
            deduplicate_routes=True,
        )
    """

    default_locale: str = "en"
    available_locales: tuple[str, ...] = ("en",)
    # locale -> ordered fallback locales (the locale itself is not included)
    fallbacks: dict[str, tuple[str, ...]] = field(default_factory=dict)

    # Drop plain locale variants whose path another locale already produced
    deduplicate_routes: bool = False
    # Skip locales without their own translation instead of failing the route
    disable_fallback: bool = False

    # Path prefix
    hide_locale: bool = False  # Never prefix paths with the locale
    force_locale: bool = False  # Prefix the default locale too

    locale_param_key: str = "locale"
    # host glob pattern -> locale, e.g. {"*.fr": "fr"}
    host_locales: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.default_locale:
            msg = "default_locale must be a non-empty locale tag."
            raise ConfigurationError(msg)

        known = {*self.available_locales, self.default_locale}
        for locale, chain in self.fallbacks.items():
            if locale not in known:
                msg = f"Fallbacks declared for unknown locale {locale!r}."
                raise ConfigurationError(msg)
            for target in chain:
                if target == locale:
                    msg = f"Locale {locale!r} cannot fall back to itself."
                    raise ConfigurationError(msg)
                if target not in known:
                    msg = (
                        f"Locale {locale!r} falls back to {target!r}, "
                        f"which is not an available locale."
                    )
                    raise ConfigurationError(msg)

    def fallback_chain(self, locale: str) -> tuple[str, ...]:
        """Return the ordered fallback locales configured for *locale*."""
        return tuple(self.fallbacks.get(locale, ()))

    @property
    def fallback_locales(self) -> tuple[str, ...]:
        """Every locale that is a fallback target of some locale.

        Ordered by first appearance, walking ``available_locales`` and each
        chain in turn, so derived traversal orders are deterministic.
        """
        seen: dict[str, None] = {}
        for locale in (*self.available_locales, self.default_locale):
            for target in self.fallback_chain(locale):
                seen.setdefault(target, None)
        return tuple(seen)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LocaleConfig":
        """Build a config from plain data (e.g. parsed YAML or JSON).

        Lists become tuples. Unknown keys raise ``ConfigurationError``.
        """
        allowed = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - allowed)
        if unknown:
            msg = f"Unknown locale config keys: {', '.join(unknown)}"
            raise ConfigurationError(msg)

        kwargs: dict[str, Any] = dict(data)
        if "available_locales" in kwargs:
            kwargs["available_locales"] = tuple(
                _locale_tag(x, "available_locales") for x in _as_list(kwargs["available_locales"])
            )
        if "fallbacks" in kwargs:
            kwargs["fallbacks"] = {
                _locale_tag(locale, "fallbacks"): tuple(_locale_tag(x, f"fallbacks.{locale}") for x in _as_list(chain))
                for locale, chain in (kwargs["fallbacks"] or {}).items()
            }
        if "host_locales" in kwargs:
            kwargs["host_locales"] = {
                str(host): _locale_tag(locale, f"host_locales.{host}")
                for host, locale in (kwargs["host_locales"] or {}).items()
            }
        if "default_locale" in kwargs:
            kwargs["default_locale"] = _locale_tag(kwargs["default_locale"], "default_locale")
        return cls(**kwargs)


def _locale_tag(value: Any, where: str) -> str:
    # YAML 1.1 reads bare `no`, `on`, `yes` as booleans
    if not isinstance(value, str):
        msg = (
            f"Locale in {where} must be a string, got {value!r}. "
            f"Quote locale tags in YAML, e.g. \"no\"."
        )
        raise ConfigurationError(msg)
    return value


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def load_config(path: str | Path) -> LocaleConfig:
    """Load a ``LocaleConfig`` from a YAML file.

    Expected format::

        default_locale: en
        available_locales: [en, fr, fr-CA]
        fallbacks:
          fr-CA: [fr]
        deduplicate_routes: true

    Raises ``ConfigurationError`` if the file is missing, unparsable, or
    does not describe a valid config.
    """
    config_path = Path(path)
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        msg = f"Cannot read locale config {config_path}: {exc}"
        raise ConfigurationError(msg) from exc
    except yaml.YAMLError as exc:
        msg = f"Failed to parse {config_path}: {exc}"
        raise ConfigurationError(msg) from exc

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        msg = f"Locale config {config_path} must be a mapping, got {type(data).__name__}"
        raise ConfigurationError(msg)

    config = LocaleConfig.from_mapping(data)
    logger.info(
        "Loaded locale config from %s (default=%s, locales=%d)",
        config_path,
        config.default_locale,
        len(config.available_locales),
    )
    return config
