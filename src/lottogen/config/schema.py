"""Pydantic schema for generator configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GeneratorConfig(BaseModel):
    """Validated runtime configuration with defaults."""

    model_config = ConfigDict(extra="forbid")

    history_csv: Path = Field(default=Path("lotto-draw-history.csv"))
    encoding: str = Field(default="utf-8", min_length=1)
    number_min: int = Field(default=1, ge=0)
    number_max: int = Field(default=59, gt=0)
    recent_n: int | None = Field(default=None, gt=0)
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}.")
        return level

    @model_validator(mode="after")
    def _check_number_range(self) -> GeneratorConfig:
        if self.number_min > self.number_max:
            raise ValueError("number_min cannot be greater than number_max.")
        return self
