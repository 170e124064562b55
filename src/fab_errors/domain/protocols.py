"""Domain-level protocols for pluggable collaborators."""

from __future__ import annotations

from typing import Any, Protocol


class LoggerLike(Protocol):
    """Minimal logger accepted by the dependency slot.

    loguru's ``logger`` satisfies it as is. The first
    argument is either a message or a structured object. A ``critical``
    method may also exist; the library never calls it.
    """

    def trace(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...
