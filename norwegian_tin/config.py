"""Library configuration via pydantic-settings.

Values are read from ``TIN_``-prefixed environment variables (or a ``.env``
file). Nothing here is required: the defaults validate numbers exactly as
Skatteetaten issues them today.
"""

from __future__ import annotations

import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_TIN_PATTERN = re.compile(r"^[0-9]{11}$")


class TinSettings(BaseSettings):
    """Settings for TIN validation.

    Usage:
        settings = TinSettings()
        settings.accept_2032_format
        settings.extra_test_ids
    """

    model_config = SettingsConfigDict(env_prefix="TIN_", env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO")
    accept_2032_format: bool = Field(
        default=True,
        description="Accept first control digits leaving remainder 1–3 (numbers issued from 2032)",
    )
    extra_test_ids: list[str] = Field(
        default_factory=list,
        description="Additional reserved synthetic test IDs, as a JSON list of 11-digit strings",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @field_validator("extra_test_ids")
    @classmethod
    def validate_extra_test_ids(cls, v: list[str]) -> list[str]:
        cleaned = [tin.strip() for tin in v]
        bad = [tin for tin in cleaned if not _TIN_PATTERN.match(tin)]
        if bad:
            msg = f"Reserved test IDs must be 11 digits: {bad}"
            raise ValueError(msg)
        return cleaned


# Module-level singleton — import this wherever settings are needed.
settings = TinSettings()
