from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dependency_injector import containers, providers
from loguru import logger
from pydantic import ValidationError

from fab_errors.config import Settings
from fab_errors.domain.protocols import LoggerLike
from fab_errors.errors import AppError


@dataclass(slots=True, eq=False, kw_only=True)
class UnknownDependencyError(AppError):
    names: tuple[str, ...]
    message: str = field(init=False)
    code: str = field(init=False, default="FAB_UNKNOWN_DEPENDENCY")

    def __post_init__(self) -> None:  # pragma: no cover - formatting helper
        object.__setattr__(
            self, "message", f"Unknown dependency slot(s): {', '.join(self.names)}"
        )
        object.__setattr__(self, "context", {"names": self.names})


# ---------- DI container ----------
class FabErrorsContainer(containers.DeclarativeContainer):
    """Process-wide dependencies of the library."""

    settings = providers.Singleton(Settings)
    logger = providers.Object(None)


dependencies = FabErrorsContainer()


# ---------- override helpers ----------


def set_dependencies(**overrides: Any) -> None:
    """Override some or all dependency slots; slots not named keep their value.

    Not thread-safe: call it from setup/teardown code only.
    """
    unknown = tuple(sorted(set(overrides) - set(dependencies.providers)))
    if unknown:
        raise UnknownDependencyError(names=unknown)
    for name, value in overrides.items():
        dependencies.providers[name].override(providers.Object(value))


def reset_dependencies() -> None:
    """Drop every override and the cached settings instance."""
    for provider in dependencies.providers.values():
        provider.reset_override()
    dependencies.settings.reset()


def get_settings() -> Settings:
    return dependencies.settings()


def get_setting(name: str) -> Any:
    """Read one setting, falling back to its default when the environment is malformed."""
    try:
        return getattr(get_settings(), name)
    except ValidationError:
        return Settings.model_fields[name].default


def get_logger() -> LoggerLike:
    """Return the injected logger, falling back to loguru's."""
    injected = dependencies.logger()
    if injected is not None:
        return injected
    return logger
