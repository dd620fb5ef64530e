"""YAML translation catalogs for path segments.

One catalog holds every locale. Files are named ``<locale>.yml`` or
``<domain>.<locale>.yml``; all files for a locale are merged::

    # routes.fr.yml
    routes:
      about: a-propos
      users:
        edit: modifier
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from locale_routes.errors import ConfigurationError

logger = logging.getLogger("locale_routes.catalog")


class TranslationCatalog:
    """Nested per-locale messages with scoped lookup."""

    __slots__ = ("_messages",)

    def __init__(self, messages: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._messages: dict[str, dict[str, Any]] = {}
        for locale, data in (messages or {}).items():
            self.merge(locale, data)

    @property
    def locales(self) -> list[str]:
        return sorted(self._messages)

    def merge(self, locale: str, data: Mapping[str, Any]) -> None:
        """Deep-merge *data* into the messages for *locale*. Later wins."""
        _deep_merge(self._messages.setdefault(locale, {}), data)

    def lookup(self, locale: str, scope: tuple[str, ...], key: str) -> str | None:
        """Find *key* for *locale*, from the most to the least specific scope.

        ``scope=("routes", "users")`` tries ``routes.users.<key>`` and then
        ``routes.<key>``. Returns ``None`` when nothing matches.
        """
        tree = self._messages.get(locale)
        if tree is None:
            return None
        for depth in range(len(scope), 0, -1):
            node: Any = tree
            for part in scope[:depth]:
                node = node.get(part) if isinstance(node, Mapping) else None
            if isinstance(node, Mapping):
                value = node.get(key)
                if isinstance(value, str):
                    return value
        return None


def _deep_merge(target: dict[str, Any], data: Mapping[str, Any]) -> None:
    for key, value in data.items():
        key = str(key)
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _deep_merge(target[key], value)
        else:
            target[key] = value


def load_catalog(directory: str | Path) -> TranslationCatalog:
    """Load every ``*.yml`` file under *directory* into one catalog.

    The locale is the last dot-separated part of the file stem
    (``routes.fr-CA.yml`` -> ``fr-CA``). Files load in sorted order.

    Raises ``ConfigurationError`` if the directory does not exist or a
    file cannot be parsed.
    """
    root = Path(directory)
    if not root.is_dir():
        msg = f"Translations directory not found: {root}"
        raise ConfigurationError(msg)

    catalog = TranslationCatalog()
    files = sorted(root.glob("*.yml")) + sorted(root.glob("*.yaml"))
    for yaml_file in files:
        locale = yaml_file.stem.split(".")[-1]
        try:
            with open(yaml_file, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            msg = f"Failed to parse {yaml_file}: {exc}"
            raise ConfigurationError(msg) from exc
        if data is None:
            continue
        if not isinstance(data, Mapping):
            msg = f"Translation file {yaml_file} must contain a mapping"
            raise ConfigurationError(msg)
        catalog.merge(locale, data)

    logger.info("Loaded %d translation files for %d locales from %s", len(files), len(catalog.locales), root)
    return catalog
