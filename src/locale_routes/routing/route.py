"""Route and TranslatedVariant frozen dataclasses."""

from dataclasses import dataclass, field
from typing import Any

from locale_routes._internal.types import Handler


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Declared once with an untranslated path. Each registered locale
    variant is a copy carrying the translated path, derived name and
    ``locale``.

    ``scope`` is passed to the translation backend as-is.
    ``constraints`` may be a mapping or an opaque matcher object.
    """

    path: str
    handler: Handler
    methods: frozenset[str] = frozenset({"GET"})
    name: str | None = None
    scope: tuple[str, ...] = ("routes",)
    options: dict[str, Any] = field(default_factory=dict)
    constraints: Any = field(default_factory=dict)
    locale: str | None = None


@dataclass(frozen=True, slots=True)
class TranslatedVariant:
    """One locale-specific instantiation of a route."""

    locale: str
    name: str | None
    path: str
    constraints: Any
    options: dict[str, Any]
