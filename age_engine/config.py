"""Runtime configuration for the age_engine package.

Settings are loaded in priority order:
  1. Environment variables (highest priority)
  2. .env file in the project root
  3. Field defaults

Only the conversational agent needs ``MODEL_ARN``; the form works without it.

Usage::

    from age_engine.config import settings

    print(settings.min_birth_year)
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    model_arn: str | None = Field(
        None,
        alias="MODEL_ARN",
        description="AWS Bedrock application inference profile ARN used by the chat agent.",
    )
    min_birth_year: int = Field(
        1900,
        alias="MIN_BIRTH_YEAR",
        ge=1,
        description="Earliest birth year the form accepts.",
    )
    leap_day_rule: Literal["feb28", "mar1"] = Field(
        "feb28",
        alias="LEAP_DAY_RULE",
        description="Day on which a Feb 29 birthday is observed in non-leap years.",
    )
    preferences_file: Path = Field(
        Path.home() / ".age_engine" / "preferences.json",
        alias="PREFERENCES_FILE",
        description="JSON key-value file holding the theme preference.",
    )
    prefers_dark: bool = Field(
        False,
        alias="PREFERS_DARK",
        description="Host colour-scheme preference used when no theme has been saved.",
    )


settings = Settings()
