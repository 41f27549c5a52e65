"""Spoofer configuration using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import ClassVar, Literal

from pydantic import Field, PositiveInt, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_BOUNDS = ("core_package", "user_package", "job", "version")


class SpoofSettings(BaseSettings):
    """Process settings and dataset bounds for the spoofer."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="SPOOF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind address for the spoofer.")
    port: PositiveInt = Field(default=9636, description="Port for the spoofer.")
    log_level: Literal["critical", "error", "warning", "info", "debug"] = Field(
        default="info",
        description="Log level for the spoofer and uvicorn.",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the dataset generator; unset means a fresh dataset each run.",
    )
    core_package_min: PositiveInt = Field(default=100, description="Fewest packages in core.")
    core_package_max: PositiveInt = Field(default=999, description="Most packages in core.")
    user_package_min: PositiveInt = Field(
        default=2, description="Fewest packages in the user's origin."
    )
    user_package_max: PositiveInt = Field(
        default=10, description="Most packages in the user's origin."
    )
    job_min: PositiveInt = Field(default=1, description="Fewest jobs per project.")
    job_max: PositiveInt = Field(default=100, description="Most jobs per project.")
    version_min: PositiveInt = Field(default=1, description="Fewest versions per project.")
    version_max: PositiveInt = Field(default=10, description="Most versions per project.")

    @model_validator(mode="after")
    def _check_bounds(self) -> SpoofSettings:
        for prefix in _BOUNDS:
            low = getattr(self, f"{prefix}_min")
            high = getattr(self, f"{prefix}_max")
            if low > high:
                msg = f"{prefix}_min ({low}) must not exceed {prefix}_max ({high})"
                raise ValueError(msg)
        return self


@lru_cache
def get_settings() -> SpoofSettings:
    """Return memoized spoofer settings."""
    return SpoofSettings()
