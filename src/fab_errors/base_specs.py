"""Ready-made specs for common failures."""

from __future__ import annotations

from typing import Any, NotRequired, TypedDict

from fab_errors.domain.models import ErrorSpec

# ---------- contexts ----------


class InvalidArgumentContext(TypedDict):
    argument_name: str
    reason: str
    argument_value: NotRequired[Any]
    expected: NotRequired[str]


class OperationFailedContext(TypedDict):
    operation_name: str
    reason: NotRequired[str]
    details: NotRequired[dict[str, Any]]


class NotImplementedContext(TypedDict):
    feature_name: str
    planned_version: NotRequired[str]


class UnexpectedErrorContext(TypedDict):
    situation: str
    details: NotRequired[dict[str, Any]]


# ---------- specs ----------

INVALID_ARGUMENT_SPEC = ErrorSpec(
    code="FAB_INVALID_ARGUMENT",
    message_template="Invalid argument: {argument_name}. Reason: {reason}.",
    docs="https://example.com/fab-errors-docs#invalid-argument",
)

OPERATION_FAILED_SPEC = ErrorSpec(
    code="FAB_OPERATION_FAILED",
    message_template='Operation "{operation_name}" failed. Reason: {reason}',
    docs="https://example.com/fab-errors-docs#operation-failed",
)

NOT_IMPLEMENTED_SPEC = ErrorSpec(
    code="FAB_NOT_IMPLEMENTED",
    message_template="Feature not implemented: {feature_name}.",
    docs="https://example.com/fab-errors-docs#not-implemented",
)

UNEXPECTED_ERROR_SPEC = ErrorSpec(
    code="FAB_UNEXPECTED_ERROR",
    message_template="An unexpected error occurred during {situation}.",
    docs="https://example.com/fab-errors-docs#unexpected-error",
)
