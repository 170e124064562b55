from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from fab_errors.container import reset_dependencies, set_dependencies


class RecordingLogger:
    """LoggerLike fake collecting ``(level, message)`` pairs."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def _record(self, level: str, msg: Any) -> None:
        self.records.append((level, str(msg)))

    def trace(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._record("trace", msg)

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._record("debug", msg)

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._record("info", msg)

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._record("warning", msg)

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._record("error", msg)

    def messages(self, level: str) -> list[str]:
        return [msg for lvl, msg in self.records if lvl == level]


@pytest.fixture(autouse=True)
def clean_dependencies(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[None]:
    """Isolate every test from overrides, env vars and stray .env files."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FAB_ERRORS_MAX_CHAIN_DEPTH", raising=False)
    monkeypatch.delenv("FAB_ERRORS_INCLUDE_STACK", raising=False)
    reset_dependencies()
    yield
    reset_dependencies()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Install a recording logger into the dependency slot."""
    fake = RecordingLogger()
    set_dependencies(logger=fake)
    return fake
