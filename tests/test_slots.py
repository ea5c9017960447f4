"""Tests for slot usage in optres classes."""

import optres as opr


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(opr.Some(42))
    assert _check_slots(opr.NoneOption())
    assert _check_slots(opr.NONE)
    assert _check_slots(opr.Err[int, object](42))
    assert _check_slots(opr.Ok[int, object](42))
