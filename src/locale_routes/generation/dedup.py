"""Path indexes and the deduplication predicate.

An index lives for one route's generation and is discarded afterward.
``SeenPaths`` serves the single-pass generator, ``PathOwners`` the
two-pass one, where a path may be owned by several locales.
"""

from typing import Protocol

from locale_routes.config import LocaleConfig


class PathIndex(Protocol):
    def __contains__(self, path: object) -> bool: ...


class SeenPaths:
    """Paths already yielded in a single-pass generation."""

    __slots__ = ("_paths",)

    def __init__(self) -> None:
        self._paths: set[str] = set()

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def mark(self, path: str) -> None:
        self._paths.add(path)


class PathOwners:
    """Locales that own each translated path, in collection order."""

    __slots__ = ("_owners",)

    def __init__(self) -> None:
        self._owners: dict[str, list[str]] = {}

    def __contains__(self, path: object) -> bool:
        return bool(self._owners.get(path))  # type: ignore[call-overload]

    def __len__(self) -> int:
        return len(self._owners)

    def add(self, path: str, locale: str) -> None:
        self._owners.setdefault(path, []).append(locale)

    def owners(self, path: str) -> tuple[str, ...]:
        return tuple(self._owners.get(path, ()))

    def owns(self, path: str, locale: str) -> bool:
        return locale in self._owners.get(path, ())


def allowed_to_deduplicate(
    locale: str,
    translated_path: str,
    index: PathIndex,
    config: LocaleConfig,
) -> bool:
    """Return True if *locale*'s variant is redundant and should be dropped.

    Only plain locales are ever dropped. The default locale and fallback
    locales keep their own named variant even when the path collides,
    since callers may ask for their named route explicitly.
    """
    if not config.deduplicate_routes:
        return False
    if locale == config.default_locale:
        return False
    if translated_path not in index:
        return False
    return locale not in config.fallback_locales
