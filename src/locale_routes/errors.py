"""locale-routes exception hierarchy.

Shared across config, translation, generation and the router so every
module raises and catches the same types.
"""


class LocaleRoutesError(Exception):
    """Base for all locale-routes errors."""


class ConfigurationError(LocaleRoutesError):
    """Raised when the locale configuration is invalid.

    Surfaced at construction or load time, never retried.
    """


class MissingTranslation(LocaleRoutesError):  # noqa: N818
    """A translation backend has no translation for *key* in *locale*.

    Only ``translate_path`` inspects this error. Depending on
    ``LocaleConfig.disable_fallback`` it either skips the locale or lets
    the error abort generation for the whole route.
    """

    def __init__(self, locale: str, key: str, scope: tuple[str, ...] = ()) -> None:
        self.locale = locale
        self.key = key
        self.scope = scope
        dotted = ".".join((*scope, key))
        super().__init__(f"Translation missing: {locale}.{dotted}")


class BuildError(LocaleRoutesError):
    """Raised when a URL cannot be built for a named route."""
