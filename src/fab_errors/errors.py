from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, fields
from typing import Any, Mapping


def _field_names(error: AppError) -> frozenset[str]:
    return frozenset(f.name for f in fields(error))


@dataclass(slots=True, eq=False)
class AppError(Exception):
    """Base error for all layers.

    Dataclass fields are write-once: the first assignment (from ``__init__``)
    sticks, later ones raise :class:`FrozenInstanceError`. Exception slots such
    as ``__cause__``, ``__context__``, ``__traceback__`` and ``__notes__`` stay
    writable so ``raise ... from``, context managers and ``add_note`` work.

    Attributes:
        message: Human-readable message describing the error.
        code: Optional machine-readable code for monitoring/alerts.
        context: Optional structured context for diagnostics.
    """

    message: str
    code: str | None = None
    context: Mapping[str, Any] | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _field_names(self) and hasattr(self, name):
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        Exception.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        if name in _field_names(self):
            raise FrozenInstanceError(f"cannot delete field {name!r}")
        Exception.__delattr__(self, name)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message
