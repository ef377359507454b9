"""Configuration — factor weights and ranking defaults."""

from __future__ import annotations

import math

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings


class FactorWeights(BaseModel):
    interests: float = Field(default=0.30, ge=0.0, le=1.0)
    location: float = Field(default=0.25, ge=0.0, le=1.0)
    demographics: float = Field(default=0.15, ge=0.0, le=1.0)
    denomination: float = Field(default=0.10, ge=0.0, le=1.0)
    popularity: float = Field(default=0.10, ge=0.0, le=1.0)
    profession: float = Field(default=0.05, ge=0.0, le=1.0)
    recovery: float = Field(default=0.05, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_total(self) -> FactorWeights:
        total = sum(self.model_dump().values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"factor weights must sum to 1.0, got {total:.6f}")
        return self


class Settings(BaseSettings):
    factor_weights: FactorWeights = FactorWeights()

    top_k: int = Field(default=10, ge=1)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }


settings = Settings()
