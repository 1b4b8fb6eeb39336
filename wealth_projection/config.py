"""Configuration for wealth-projection."""

from __future__ import annotations

import os
from dataclasses import dataclass

from wealth_projection.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class ProjectionSettings:
    """Defaults and bounds applied by callers before the engine runs."""

    default_end_year: int = 2060
    min_end_year: int = 2024
    max_end_year: int = 2100
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.min_end_year > self.max_end_year:
            raise ConfigurationError(
                f"min_end_year {self.min_end_year} is after max_end_year {self.max_end_year}"
            )
        if not self.min_end_year <= self.default_end_year <= self.max_end_year:
            raise ConfigurationError(
                f"default_end_year {self.default_end_year} outside "
                f"[{self.min_end_year}, {self.max_end_year}]"
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"log_format must be one of {LOG_FORMATS}, got {self.log_format!r}")

    @classmethod
    def from_env(cls) -> "ProjectionSettings":
        """Create settings from environment variables."""
        return cls(
            default_end_year=_int_env("WEALTH_DEFAULT_END_YEAR", 2060),
            min_end_year=_int_env("WEALTH_MIN_END_YEAR", 2024),
            max_end_year=_int_env("WEALTH_MAX_END_YEAR", 2100),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard").lower(),
        )
