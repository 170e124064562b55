from __future__ import annotations

from dataclasses import dataclass, field

from fab_errors.errors import AppError


@dataclass(slots=True, eq=False, kw_only=True)
class ChainMismatchError(AppError):
    """Raised by ``check_error_chain`` for every kind of mismatch.

    The message is the only thing telling the cases apart.
    """

    message: str
    code: str = field(init=False, default="FAB_CHAIN_MISMATCH")
