"""Tests for perch.__init__ — every public name resolves lazily."""

import pytest

import perch


@pytest.mark.parametrize("name", perch.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(perch, name)
    assert obj is not None, f"perch.{name} resolved to None"


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        perch.__getattr__("ThisDoesNotExist")


def test_version_is_pep440() -> None:
    """The package version matches the PEP 440 string in pyproject.toml."""
    assert perch.__version__ == "0.1.0.dev0"
