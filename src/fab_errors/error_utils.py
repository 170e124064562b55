from __future__ import annotations

import asyncio
import functools
import inspect
import traceback
from collections.abc import Callable, Mapping
from typing import Any, NoReturn, ParamSpec, TypeVar

from fab_errors.container import get_logger
from fab_errors.domain.fab_error import FabError
from fab_errors.domain.models import ErrorSpec

P = ParamSpec("P")
R = TypeVar("R")


def _format_tail(exc: BaseException, *, limit: int = 6) -> str:
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return "".join(tb[-limit:])


def log_and_wrap(
    exc: BaseException,
    spec: ErrorSpec,
    context: Mapping[str, Any] | None = None,
) -> NoReturn:
    """Log a short traceback of *exc* and raise it wrapped as ``FabError(spec)``."""
    get_logger().error(f"{spec.code} <- {type(exc).__name__}\n{_format_tail(exc)}")
    raise FabError(spec, context, exc) from exc


def _passes_through(exc: BaseException, spec: ErrorSpec) -> bool:
    return isinstance(exc, FabError) and exc.code == spec.code


def wrap_errors(
    spec: ErrorSpec, **context: Any
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator re-raising any failure of the wrapped callable as ``FabError(spec)``.

    *context* is merged over ``spec.default_context``; the original exception
    becomes the cause. Errors already carrying ``spec.code`` are not rewrapped.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
                try:
                    return await func(*args, **kwargs)
                except asyncio.CancelledError:
                    raise
                except Exception as exc:
                    if _passes_through(exc, spec):
                        raise
                    log_and_wrap(exc, spec, context)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                if _passes_through(exc, spec):
                    raise
                log_and_wrap(exc, spec, context)

        return sync_wrapper  # type: ignore[return-value]

    return decorator
