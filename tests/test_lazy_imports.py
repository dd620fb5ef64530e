"""Tests for locale_routes.__init__ — lazy imports cover all public names."""

import pytest

import locale_routes


@pytest.mark.parametrize("name", locale_routes.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(locale_routes, name)
    assert obj is not None, f"locale_routes.{name} resolved to None"


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        locale_routes.__getattr__("ThisDoesNotExist")
