from __future__ import annotations

import inspect
import re
from collections.abc import Mapping
from typing import Any

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")
_PRIMITIVES = (str, int, float, bool)


def _has_custom_str(value: object) -> bool:
    cls = type(value)
    return cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__


def _render(value: Any, placeholder: str) -> str:
    if value is None:
        return placeholder
    if inspect.isroutine(value) or inspect.isclass(value) or inspect.ismodule(value):
        return placeholder
    if not isinstance(value, _PRIMITIVES) and not _has_custom_str(value):
        # default object repr carries nothing useful
        return placeholder
    try:
        return str(value)
    except Exception:
        return placeholder


def format_message(template: str, context: Mapping[str, Any]) -> str:
    """Fill ``{key}`` placeholders of *template* from *context*.

    A placeholder stays verbatim when its key is missing, its value is
    ``None``, or the value has no informative string form. A non-string
    *template* yields an empty string.
    """
    if not isinstance(template, str):
        return ""
    if not isinstance(context, Mapping):
        context = {}

    def substitute(match: re.Match[str]) -> str:
        return _render(context.get(match.group(1)), match.group(0))

    return _PLACEHOLDER_RE.sub(substitute, template)
