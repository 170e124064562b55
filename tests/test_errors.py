import dataclasses

import pytest

from fab_errors.application.error import ChainMismatchError
from fab_errors.errors import AppError


def test_app_error_str() -> None:
    err = AppError("msg", code="X", context={"foo": "bar"})
    assert str(err) == "msg"
    assert err.code == "X" and err.context == {"foo": "bar"}


def test_app_error_is_frozen() -> None:
    err = AppError("msg")
    with pytest.raises(dataclasses.FrozenInstanceError):
        err.code = "Y"  # type: ignore[misc]


def test_app_error_equality_is_identity() -> None:
    assert AppError("msg") != AppError("msg")
    err = AppError("msg", context={"a": 1})
    assert {err: 1}[err] == 1


def test_chain_mismatch_error_has_fixed_code() -> None:
    err = ChainMismatchError(message="boom")
    assert err.code == "FAB_CHAIN_MISMATCH"
    assert str(err) == "boom"
    assert isinstance(err, AppError)


def test_app_error_can_be_raised_from_cause() -> None:
    cause = RuntimeError("inner")
    with pytest.raises(AppError) as info:
        raise AppError("outer") from cause
    assert info.value.__cause__ is cause


def test_app_error_fields_cannot_be_deleted() -> None:
    err = AppError("msg", code="X")
    with pytest.raises(dataclasses.FrozenInstanceError):
        del err.code
    assert err.code == "X"


def test_app_error_accepts_notes() -> None:
    err = AppError("msg")
    err.add_note("first")
    err.add_note("second")
    assert err.__notes__ == ["first", "second"]


def test_app_error_cause_can_be_reassigned() -> None:
    err = AppError("outer")
    first, second = KeyError("a"), KeyError("b")
    err.__cause__ = first
    err.__cause__ = second
    assert err.__cause__ is second


def test_chain_mismatch_error_keeps_implicit_context() -> None:
    with pytest.raises(ChainMismatchError) as info:
        try:
            raise ValueError("first")
        except ValueError:
            raise ChainMismatchError(message="second")
    assert isinstance(info.value.__context__, ValueError)
