from __future__ import annotations

import inspect
import traceback
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from fab_errors.container import get_setting
from fab_errors.domain.formatting import format_message
from fab_errors.domain.models import ErrorSpec
from fab_errors.errors import AppError


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def format_stack(error: BaseException) -> str | None:
    """Return the formatted traceback of *error* alone, ``None`` if never raised."""
    if error.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(error, chain=False))


@dataclass(slots=True, eq=False, init=False)
class FabError(AppError):
    """Error built from an :class:`ErrorSpec`.

    The message is rendered once from ``spec.message_template`` and the merged
    context (caller values win over ``spec.default_context``). The context is
    exposed read-only. The predecessor error, if any, lives in the native
    ``__cause__`` slot so ``raise ... from`` and tracebacks keep working.
    """

    spec: ErrorSpec
    docs: str | None

    def __init__(
        self,
        spec: ErrorSpec,
        context: Mapping[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        full_context = {**(spec.default_context or {}), **(context or {})}
        message = format_message(spec.message_template, full_context)

        Exception.__init__(self, message)
        self.message = message
        self.code = spec.code
        self.context = MappingProxyType(full_context)
        self.spec = spec
        self.docs = spec.docs
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.spec, dict(self.context or {}), self.__cause__))

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def to_structured(self) -> dict[str, Any]:
        """Serialize the error, and recursively its cause, for logging or transport."""
        include_stack = get_setting("include_stack")
        data: dict[str, Any] = {
            "name": self.name,
            "code": self.code,
            "message": self.message,
            "context": dict(self.context or {}),
        }
        if self.docs is not None:
            data["docs"] = self.docs
        if include_stack:
            stack = format_stack(self)
            if stack is not None:
                data["stack"] = stack

        spec: dict[str, Any] = {
            "code": self.spec.code,
            "message_template": self.spec.message_template,
        }
        if self.spec.docs is not None:
            spec["docs"] = self.spec.docs
        data["spec"] = spec

        cause = structure_cause(self.__cause__, include_stack=include_stack)
        if cause is not None:
            data["cause"] = cause
        return data


def structure_cause(value: object, *, include_stack: bool = True) -> dict[str, Any] | None:
    """Plain form of a cause value.

    :class:`FabError` recurses, other exceptions keep name/message/stack only,
    mappings and plain objects are shallow-copied, anything else is wrapped as
    ``{"value": str(value)}``. ``None`` means there is no cause.
    """
    if value is None:
        return None
    if isinstance(value, FabError):
        return value.to_structured()
    if isinstance(value, BaseException):
        data: dict[str, Any] = {"name": type(value).__name__, "message": _safe_str(value)}
        stack = format_stack(value) if include_stack else None
        if stack is not None:
            data["stack"] = stack
        return data
    if isinstance(value, Mapping):
        return dict(value)
    if (
        hasattr(value, "__dict__")
        and not inspect.isroutine(value)
        and not inspect.isclass(value)
        and not inspect.ismodule(value)
    ):
        return dict(vars(value))
    return {"value": _safe_str(value)}
