"""Queries over causally linked errors.

A chain starts at a given error and follows ``__cause__`` for as long as it
holds an exception. ``__context__`` (implicit chaining) is not followed.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, NoReturn

from fab_errors.application.error import ChainMismatchError
from fab_errors.container import get_setting
from fab_errors.domain.models import ErrorCriteria, ExpectedChainLevel


def _get_attr(obj: Any, name: str, default: Any = None) -> Any:
    try:
        return getattr(obj, name)
    except Exception:
        return default


def _next_in_chain(error: object) -> BaseException | None:
    cause = _get_attr(error, "__cause__")
    return cause if isinstance(cause, BaseException) else None


def _message_of(error: object) -> str | None:
    message = _get_attr(error, "message")
    if isinstance(message, str):
        return message
    if isinstance(error, BaseException):
        try:
            return str(error)
        except Exception:
            return None
    return None


def _code_of(error: object) -> str | None:
    code = _get_attr(error, "code")
    return code if isinstance(code, str) else None


def _type_name(tp: object) -> str:
    return _get_attr(tp, "__name__") or repr(tp)


def _is_instance(error: object, tp: Any) -> bool:
    try:
        return isinstance(error, tp)
    except TypeError:
        return False


def _fragments(expected: str | Sequence[str]) -> Sequence[object]:
    if isinstance(expected, str) or not isinstance(expected, Sequence):
        return (expected,)
    return expected


def _contains(message: str, fragment: object) -> bool:
    return isinstance(fragment, str) and fragment.casefold() in message.casefold()


def _matches(error: object, criteria: Mapping[str, Any]) -> bool:
    code = criteria.get("code")
    if code is not None and _code_of(error) != code:
        return False

    tp = criteria.get("type")
    if tp is not None and not _is_instance(error, tp):
        return False

    expected_message = criteria.get("message")
    if expected_message is not None:
        message = _message_of(error)
        if message is None:
            return False
        return all(_contains(message, part) for part in _fragments(expected_message))
    return True


def has_error_in_chain(
    error: BaseException | None, criteria: ErrorCriteria
) -> bool:
    """Return ``True`` if *error* or any of its causes satisfies every given criterion.

    Never raises: malformed criteria or nodes simply do not match. The walk
    stops at a node already visited or after ``max_chain_depth`` nodes.
    """
    if not isinstance(criteria, Mapping):
        return False

    max_depth = get_setting("max_chain_depth")
    seen: set[int] = set()
    current: object | None = error
    while current is not None:
        if id(current) in seen or len(seen) >= max_depth:
            return False
        seen.add(id(current))

        if _matches(current, criteria):
            return True
        current = _next_in_chain(current)

    return False


def _fail(message: str) -> NoReturn:
    raise ChainMismatchError(message=message)


def _check_level(node: object, level: Mapping[str, Any], prefix: str) -> None:
    message = _message_of(node)

    expected_code = level.get("code")
    if expected_code is not None:
        actual_code = _get_attr(node, "code")
        if not isinstance(actual_code, str) or actual_code != expected_code:
            _fail(
                f"{prefix}: Expected code '{expected_code}', got '{actual_code}'. "
                f'Message: "{message}"'
            )

    expected_type = level.get("type")
    if expected_type is not None and not _is_instance(node, expected_type):
        _fail(
            f"{prefix}: Expected type '{_type_name(expected_type)}', "
            f"got '{type(node).__name__}'. "
            f'Message: "{message}"'
        )

    expected_message = level.get("message")
    if expected_message is None:
        return
    if message is None:
        _fail(
            f"{prefix}: Error message is not a string or missing "
            f"for code '{_code_of(node) or 'unknown'}'."
        )
    for fragment in _fragments(expected_message):
        if not _contains(message, fragment):
            _fail(
                f"{prefix}: Message does not contain expected text '{fragment}'. "
                f'Full message: "{message}"'
            )


def check_error_chain(
    error: BaseException | None, expected_levels: Sequence[ExpectedChainLevel]
) -> bool:
    """Assert that the chain from *error* matches *expected_levels* position by position.

    Level ``i`` is checked against the node at depth ``i``. The chain must end
    right after the last expected level.

    Returns:
        ``True`` when every level matches.

    Raises:
        ChainMismatchError: on the first mismatch; the message says which one.
    """
    if isinstance(expected_levels, (str, bytes)) or not isinstance(
        expected_levels, Sequence
    ):
        _fail("check_error_chain: expected_levels must be a sequence.")

    current: object | None = error
    for index, level in enumerate(expected_levels):
        prefix = f"Error chain mismatch at level {index}"
        if not isinstance(level, Mapping):
            _fail(f"{prefix}: Expected level must be a mapping, got {type(level).__name__}.")
        if current is None:
            _fail(
                f"{prefix}: Expected level with code '{level.get('code') or 'any'}' "
                "but error chain ended."
            )
        _check_level(current, level, prefix)
        current = _next_in_chain(current)

    if current is not None:
        code = _code_of(current)
        label = f"{type(current).__name__} [{code}]" if code else type(current).__name__
        _fail(
            "Error chain validation failed: Error chain has more levels than "
            f'expected ({len(expected_levels)}). Next level error: {label} "{_message_of(current)}"'
        )

    return True
