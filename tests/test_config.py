"""Tests for the rendering configuration."""

from collections.abc import Iterator

import pytest

import pyfold as pf


@pytest.fixture
def restore_config() -> Iterator[None]:
    """Restore the default config after a test changes it."""
    previous = pf.get_config()
    yield
    pf.set_config(
        max_repr_chars=previous.max_repr_chars,
        repr_depth=previous.repr_depth,
        repr_width=previous.repr_width,
    )


def test_defaults() -> None:
    """Test the default values."""
    assert pf.get_config() == pf.Config()
    assert pf.get_config().max_repr_chars == 80


@pytest.mark.usefixtures("restore_config")
def test_set_config_returns_previous() -> None:
    """Test that set_config() hands back the replaced config."""
    before = pf.get_config()
    previous = pf.set_config(max_repr_chars=10)
    assert previous is before
    assert pf.get_config().max_repr_chars == 10


@pytest.mark.usefixtures("restore_config")
def test_long_payload_is_truncated() -> None:
    """Test that __str__ cuts long payloads."""
    pf.set_config(max_repr_chars=4)
    assert str(pf.Either.right(123456)) == "Either[status: RIGHT, value: 1234...]"
    assert str(pf.Result.ok("abcdef")) == "Result[status: OK, value: 'abc...]"


@pytest.mark.usefixtures("restore_config")
def test_depth_limits_nesting() -> None:
    """Test that nested payloads are elided past the configured depth."""
    pf.set_config(repr_depth=1)
    assert str(pf.Optional.of([[1], [2]])) == "Optional[value: [[...], [...]]]"


@pytest.mark.usefixtures("restore_config")
def test_config_does_not_affect_equality() -> None:
    """Test that equality ignores rendering settings."""
    pf.set_config(max_repr_chars=1)
    assert pf.Optional.of("long value") == pf.Optional.of("long value")


def test_invalid_config() -> None:
    """Test that non-positive rendering settings are rejected."""
    with pytest.raises(ValueError, match="max_repr_chars"):
        pf.Config(max_repr_chars=0)
    with pytest.raises(ValueError, match="repr_depth"):
        pf.Config(repr_depth=0)
    with pytest.raises(ValueError, match="repr_width"):
        pf.Config(repr_width=0)
    with pytest.raises(AttributeError):
        pf.get_config().max_repr_chars = 3  # type: ignore[misc]


@pytest.mark.parametrize("field", ["repr_depth", "repr_width"])
def test_set_config_rejects_bad_pformat_settings(field: str) -> None:
    """Test that a rejected change leaves rendering working."""
    before = pf.get_config()
    with pytest.raises(ValueError, match=field):
        pf.set_config(**{field: 0})
    assert pf.get_config() is before
    assert str(pf.Optional.of([1])) == "Optional[value: [1]]"
