"""Pydantic schema for generator configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_STORAGE_KEY = "lottoCombinations"


class GeneratorConfig(BaseModel):
    """Validated generator configuration with defaults."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    number_count: int = Field(default=6, gt=0)
    max_number: int = Field(default=49, gt=0)
    bonus_number: int = Field(default=10, gt=0)
    smart_filters_enabled: bool = True
    max_attempts: int = Field(default=100, gt=0)
    storage_key: str = Field(default=DEFAULT_STORAGE_KEY, min_length=1)

    @model_validator(mode="after")
    def _check_drawable(self) -> GeneratorConfig:
        if self.number_count > self.max_number:
            raise ValueError(
                f"number_count={self.number_count} cannot exceed max_number={self.max_number}."
            )
        return self
