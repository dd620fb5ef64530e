"""Tests for locale_routes.generation.generator — single and two-pass generation."""

import pytest

from locale_routes.config import LocaleConfig
from locale_routes.errors import MissingTranslation
from locale_routes.generation.generator import RouteGenerator
from locale_routes.routing.route import Route, TranslatedVariant
from locale_routes.routing.router import Router


def _handler() -> str:
    return "ok"


class _TableBackend:
    """Translation backend over a fixed ``{(path, locale): translated}`` table."""

    def __init__(self, table: dict[tuple[str, str], str]) -> None:
        self.table = table
        self.calls: list[str] = []

    def translate(self, path: str, locale: str, scope: tuple[str, ...]) -> str:
        self.calls.append(locale)
        try:
            return self.table[(path, locale)]
        except KeyError:
            raise MissingTranslation(locale, path.strip("/"), scope) from None


ABOUT = Route(path="/about", handler=_handler, name="about")

FRENCH_TABLE = {
    ("/about", "en"): "/about",
    ("/about", "fr"): "/a-propos",
    ("/about", "fr-CA"): "/a-propos",
    ("/about", "fr-BE"): "/a-propos",
}


def _config(**overrides: object) -> LocaleConfig:
    settings: dict[str, object] = {
        "default_locale": "en",
        "available_locales": ("en", "fr", "fr-CA"),
        "fallbacks": {"fr-CA": ("fr",)},
        "deduplicate_routes": True,
    }
    settings.update(overrides)
    return LocaleConfig(**settings)  # type: ignore[arg-type]


def _summary(variants: list[TranslatedVariant]) -> list[tuple[str, str, str | None]]:
    return [(v.locale, v.path, v.name) for v in variants]


class TestGenerate:
    def test_no_dedup_yields_every_locale_default_last(self) -> None:
        generator = RouteGenerator(_config(deduplicate_routes=False), _TableBackend(FRENCH_TABLE), Router())
        assert _summary(list(generator.generate(ABOUT))) == [
            ("fr", "/a-propos", "about_fr"),
            ("fr-CA", "/a-propos", "about_fr_ca"),
            ("en", "/about", "about_en"),
        ]

    def test_dedup_flag_is_still_honoured(self) -> None:
        generator = RouteGenerator(_config(), _TableBackend(FRENCH_TABLE), Router())
        assert _summary(list(generator.generate(ABOUT))) == [
            ("fr", "/a-propos", "about_fr"),
            ("en", "/about", "about_en"),
        ]

    def test_registers_helper_name(self) -> None:
        router = Router()
        generator = RouteGenerator(_config(), _TableBackend(FRENCH_TABLE), router)
        list(generator.generate(ABOUT))
        assert router.is_localized("about")

    def test_lazy(self) -> None:
        backend = _TableBackend(FRENCH_TABLE)
        generator = RouteGenerator(_config(deduplicate_routes=False), backend, Router())
        variants = generator.generate(ABOUT)
        assert backend.calls == []
        next(variants)
        assert backend.calls == ["fr"]

    def test_missing_skipped_when_fallback_disabled(self) -> None:
        cfg = _config(available_locales=("en", "fr", "de"), fallbacks={}, disable_fallback=True)
        generator = RouteGenerator(cfg, _TableBackend(FRENCH_TABLE), Router())
        assert [v.locale for v in generator.generate(ABOUT)] == ["fr", "en"]

    def test_missing_aborts_without_retracting_earlier_variants(self) -> None:
        cfg = _config(available_locales=("en", "fr", "de"), fallbacks={}, disable_fallback=False)
        generator = RouteGenerator(cfg, _TableBackend(FRENCH_TABLE), Router())
        produced: list[str] = []

        with pytest.raises(MissingTranslation) as exc_info:
            for variant in generator.generate(ABOUT):
                produced.append(variant.locale)

        assert exc_info.value.locale == "de"
        assert produced == ["fr"]

    def test_names_see_consumer_registrations(self) -> None:
        """A name registered by the consumer mid-run counts as a collision."""
        router = Router()
        generator = RouteGenerator(_config(deduplicate_routes=False), _TableBackend(FRENCH_TABLE), router)
        names = []
        for variant in generator.generate(ABOUT):
            names.append(variant.name)
            router.add(Route(path=variant.path, handler=_handler, name="about_fr_ca"))
        assert names == ["about_fr", None, "about_en"]


class TestGenerateDeduplicated:
    def test_plain_locale_dropped_against_fallback(self) -> None:
        """fr-CA has fallbacks but nobody falls back to it, so it is a plain locale.

        allowed_to_deduplicate drops any plain locale whose path another locale
        already owns. Only fallback targets and the default keep a colliding path,
        see test_fallback_locales_sharing_a_path_are_all_kept.
        """
        generator = RouteGenerator(_config(), _TableBackend(FRENCH_TABLE), Router())
        assert _summary(list(generator.generate_deduplicated(ABOUT))) == [
            ("fr", "/a-propos", "about_fr"),
            ("en", "/about", "about_en"),
        ]

    def test_fallback_locales_sharing_a_path_are_all_kept(self) -> None:
        cfg = _config(
            available_locales=("en", "fr", "fr-CA", "fr-BE"),
            fallbacks={"fr-CA": ("fr",), "fr-BE": ("fr-CA", "fr")},
        )
        generator = RouteGenerator(cfg, _TableBackend(FRENCH_TABLE), Router())
        assert _summary(list(generator.generate_deduplicated(ABOUT))) == [
            ("fr", "/a-propos", "about_fr"),
            ("fr-CA", "/a-propos", "about_fr_ca"),
            ("en", "/about", "about_en"),
        ]

    def test_plain_locales_register_before_fallbacks(self) -> None:
        table = {
            ("/about", "en"): "/about",
            ("/about", "fr"): "/fr/a-propos",
            ("/about", "fr-CA"): "/fr-ca/a-propos",
            ("/about", "de"): "/de/ueber",
        }
        cfg = _config(available_locales=("en", "fr", "fr-CA", "de"))
        generator = RouteGenerator(cfg, _TableBackend(table), Router())
        assert [v.locale for v in generator.generate_deduplicated(ABOUT)] == ["fr-CA", "de", "fr", "en"]

    def test_dedup_disabled_keeps_everything(self) -> None:
        generator = RouteGenerator(_config(deduplicate_routes=False), _TableBackend(FRENCH_TABLE), Router())
        assert _summary(list(generator.generate_deduplicated(ABOUT))) == [
            ("fr-CA", "/a-propos", "about_fr_ca"),
            ("fr", "/a-propos", "about_fr"),
            ("en", "/about", "about_en"),
        ]

    def test_plain_locale_matching_default_path_is_dropped(self) -> None:
        table = {("/api", "en"): "/api", ("/api", "de"): "/api", ("/api", "fr"): "/api"}
        cfg = _config(available_locales=("en", "de", "fr"), fallbacks={})
        route = Route(path="/api", handler=_handler, name="api")
        generator = RouteGenerator(cfg, _TableBackend(table), Router())
        assert [v.locale for v in generator.generate_deduplicated(route)] == ["en"]

    def test_default_is_always_last(self) -> None:
        table = {("/x", loc): f"/{loc}/x" for loc in ("en", "de", "fr", "it")}
        cfg = _config(available_locales=("en", "de", "fr", "it"), fallbacks={"it": ("fr",)})
        generator = RouteGenerator(cfg, _TableBackend(table), Router())
        variants = list(generator.generate_deduplicated(Route(path="/x", handler=_handler)))
        assert variants[-1].locale == "en"
        assert [v.name for v in variants] == [None, None, None, None]

    def test_missing_skipped_when_fallback_disabled(self) -> None:
        cfg = _config(available_locales=("en", "fr", "de"), fallbacks={}, disable_fallback=True)
        generator = RouteGenerator(cfg, _TableBackend(FRENCH_TABLE), Router())
        assert [v.locale for v in generator.generate_deduplicated(ABOUT)] == ["fr", "en"]

    def test_missing_fails_before_anything_is_yielded(self) -> None:
        cfg = _config(available_locales=("en", "fr", "de"), fallbacks={}, disable_fallback=False)
        generator = RouteGenerator(cfg, _TableBackend(FRENCH_TABLE), Router())
        produced: list[str] = []

        with pytest.raises(MissingTranslation):
            for variant in generator.generate_deduplicated(ABOUT):
                produced.append(variant.locale)

        assert produced == []

    def test_translates_each_locale_once_per_pass(self) -> None:
        backend = _TableBackend(FRENCH_TABLE)
        generator = RouteGenerator(_config(), backend, Router())
        list(generator.generate_deduplicated(ABOUT))
        assert backend.calls == ["en", "fr", "fr-CA", "fr-CA", "fr", "en"]


class TestDeterminism:
    @pytest.mark.parametrize("mode", ["generate", "generate_deduplicated"])
    def test_same_input_same_sequence(self, mode: str) -> None:
        cfg = _config(available_locales=("en", "fr", "fr-CA", "fr-BE"))
        generator = RouteGenerator(cfg, _TableBackend(FRENCH_TABLE), Router())
        first = list(getattr(generator, mode)(ABOUT))
        second = list(getattr(generator, mode)(ABOUT))
        assert first == second


class TestTranslationsFor:
    def test_picks_two_pass_when_deduplicating(self) -> None:
        table = {("/about", "en"): "/about", ("/about", "fr"): "/fr/a-propos"}
        cfg = _config(available_locales=("en", "fr", "fr-CA"), fallbacks={"fr-CA": ("fr",)})
        table[("/about", "fr-CA")] = "/fr-ca/a-propos"
        generator = RouteGenerator(cfg, _TableBackend(table), Router())
        assert [v.locale for v in generator.translations_for(ABOUT)] == ["fr-CA", "fr", "en"]

    def test_picks_single_pass_otherwise(self) -> None:
        table = {
            ("/about", "en"): "/about",
            ("/about", "fr"): "/fr/a-propos",
            ("/about", "fr-CA"): "/fr-ca/a-propos",
        }
        generator = RouteGenerator(_config(deduplicate_routes=False), _TableBackend(table), Router())
        assert [v.locale for v in generator.translations_for(ABOUT)] == ["fr", "fr-CA", "en"]
