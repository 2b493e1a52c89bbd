"""Runtime settings for the issue batch creator.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

The batch definition itself (owner, repo, issues) lives in the TOML file passed
on the command line, see :mod:`github_issue_batch.models`.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for a batch run.

    Environment variables:
    - GITHUB_TOKEN      (required at runtime, checked by the CLI)
    - GITHUB_BASE_URL   (optional)
    - LOG_LEVEL         (optional)

    Notes:
        The token defaults to an empty string so the CLI can report a missing
        token with its own message instead of a validation error.
    """

    github_token: str = Field(
        default="",
        validation_alias="GITHUB_TOKEN",
        description="GitHub token used for API authentication",
    )
    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_BASE_URL",
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )

    log_level: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def has_token(self) -> bool:
        """Whether a usable token was provided."""

        return bool(self.github_token.strip())
