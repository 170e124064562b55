from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, TypedDict

from pydantic import BaseModel, ConfigDict, field_validator


class ConfiguredBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True)


def _plain_fields(spec: ErrorSpec) -> dict[str, Any]:
    data = {name: getattr(spec, name) for name in type(spec).model_fields}
    if spec.default_context is not None:
        data["default_context"] = dict(spec.default_context)
    return data


def _rebuild_spec(cls: type[ErrorSpec], data: dict[str, Any]) -> ErrorSpec:
    return cls(**data)


class ErrorSpec(ConfiguredBaseModel):
    """Declarative blueprint of an error kind.

    ``message_template`` may contain ``{key}`` placeholders filled from the
    error context. ``default_context`` supplies values the caller did not
    pass; it is stored as a read-only copy. ``code`` is opaque; uniqueness is
    left to the caller.
    """

    code: str
    message_template: str
    default_context: Mapping[str, Any] | None = None
    docs: str | None = None

    @field_validator("default_context", mode="after")
    @classmethod
    def _freeze_default_context(
        cls, value: Mapping[str, Any] | None
    ) -> Mapping[str, Any] | None:
        if value is None:
            return None
        return MappingProxyType(dict(value))

    def __deepcopy__(self, memo: dict[int, Any] | None = None) -> ErrorSpec:
        return type(self)(**copy.deepcopy(_plain_fields(self), memo))

    def __reduce__(self) -> tuple[Any, ...]:
        return (_rebuild_spec, (type(self), _plain_fields(self)))


class ErrorCriteria(TypedDict, total=False):
    """Match conditions for a single chain node. Every key is optional.

    ``message`` is a case-insensitive substring, or a sequence of substrings
    that must all be present.
    """

    code: str
    type: type[BaseException]
    message: str | Sequence[str]


ExpectedChainLevel = ErrorCriteria
