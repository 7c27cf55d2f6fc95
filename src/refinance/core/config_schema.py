"""Pydantic models for config validation.

Opt-in schema validation for ``Config.config_data``.  Call
``Config.validated()`` to obtain a typed, validated ``RefinanceConfig``
instance.  Dict-based access through ``Config.get`` keeps working unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class PathsConfig(BaseModel):
    """File-system paths used by the application."""

    data_dir: Path
    log_dir: Path | None = None

    @field_validator("data_dir", "log_dir", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if v == "":
            return None
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v


class LoggingConfig(BaseModel):
    """Log level and optional log file.

    A relative ``file`` is placed under ``paths.log_dir``.
    """

    level: str = "WARNING"
    file: str = ""
    rotation: str = "10 MB"
    retention: str = "7 days"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return level


class SolverConfig(BaseModel):
    """Bisection bounds and tolerances for the rate solver."""

    min_rate: float = 0.0
    max_rate: float = 20.0
    max_iterations: int = 100
    rate_tolerance: float = 0.0001
    interest_tolerance: float = 10.0
    payment_tolerance: float = 0.01

    @model_validator(mode="after")
    def _bracket_is_ordered(self) -> SolverConfig:
        if self.min_rate < 0:
            raise ValueError(f"min_rate must be >= 0, got {self.min_rate}")
        if self.max_rate <= self.min_rate:
            raise ValueError(f"max_rate ({self.max_rate}) must exceed min_rate ({self.min_rate})")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")
        return self


class ComparisonConfig(BaseModel):
    """Refinance comparison knobs."""

    # Fraction of the original loan's remaining interest the suggested rate should save
    savings_goal: float = 0.20

    @field_validator("savings_goal")
    @classmethod
    def _goal_in_range(cls, v: float) -> float:
        if not 0 <= v < 1:
            raise ValueError(f"savings_goal must be in [0, 1), got {v}")
        return v


class StorageConfig(BaseModel):
    """Where the loan snapshot lives."""

    snapshot_key: str = "refinancing-loan-data"


class RefinanceConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so consumers can bolt on custom sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    paths: PathsConfig = PathsConfig(data_dir=Path("~/.refinance-data"))
    logging: LoggingConfig = LoggingConfig()
    solver: SolverConfig = SolverConfig()
    comparison: ComparisonConfig = ComparisonConfig()
    storage: StorageConfig = StorageConfig()
