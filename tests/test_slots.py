"""Tests for slot usage in pyfold containers."""

import pyfold as pf


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(pf.Optional.of(42))
    assert _check_slots(pf.Optional.empty())
    assert _check_slots(pf.Either.left(42))
    assert _check_slots(pf.Either.right(42))
    assert _check_slots(pf.Result.ok(42))
    assert _check_slots(pf.Result.error(ValueError(42)))
    assert _check_slots(pf.get_config())
