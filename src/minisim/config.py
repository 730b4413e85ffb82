"""Application settings via pydantic-settings. Loads from environment and .env file."""

from __future__ import annotations

import pathlib

from pydantic import field_validator
from pydantic_settings import BaseSettings

PACKAGE_ROOT = pathlib.Path(__file__).resolve().parent

# Bundled four-team roster used when no teams file is configured.
DEFAULT_TEAMS_PATH = PACKAGE_ROOT / "data" / "teams.json"

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """minisim configuration.

    All values can be overridden via environment variables or .env file.
    """

    # Environment
    minisim_env: str = "development"

    # Roster source (JSON or YAML file)
    minisim_teams_path: pathlib.Path = DEFAULT_TEAMS_PATH

    # Seed for the score simulator; unset means a fresh unseeded generator
    minisim_random_seed: int | None = None

    # Logging
    minisim_log_level: str = "INFO"

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}

    @field_validator("minisim_log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """Accept any casing; reject names the logging module doesn't know."""
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            msg = f"minisim_log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {value!r}"
            raise ValueError(msg)
        return level
