from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    max_chain_depth: int = Field(default=1000, ge=1)
    include_stack: bool = Field(default=True)

    @field_validator("include_stack", mode="before")
    @classmethod
    def _parse_include_stack(cls, v: bool | str) -> bool | str:
        if v == "":
            return True
        return v

    model_config = SettingsConfigDict(
        env_prefix="FAB_ERRORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
