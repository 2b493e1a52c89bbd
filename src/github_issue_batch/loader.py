"""Read and decode the batch definition file.

Either the whole file decodes into a :class:`RepoConfig` or an error is raised
before anything is sent to GitHub.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from github_issue_batch.models import RepoConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base class for batch file failures."""


class ConfigReadError(ConfigError):
    """Raised when the batch file cannot be opened or read."""

    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"Error reading config file: {cause}")
        self.path = path
        self.cause = cause


class ConfigParseError(ConfigError):
    """Raised when the batch file is not valid TOML or does not match the schema."""

    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"Error parsing config file: {cause}")
        self.path = path
        self.cause = cause


def parse_repo_config(text: str, *, path: Path = Path("<string>")) -> RepoConfig:
    """Decode TOML text into a :class:`RepoConfig`.

    Raises:
        ConfigParseError: on malformed TOML or a missing/mistyped field.
    """

    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(path, e) from e

    try:
        return RepoConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigParseError(path, e) from e


def load_repo_config(path: Path) -> RepoConfig:
    """Read `path` as UTF-8 text and decode it.

    Raises:
        ConfigReadError: if the file cannot be read.
        ConfigParseError: if the content does not decode.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path, e) from e

    config = parse_repo_config(text, path=path)
    logger.debug(
        "Loaded batch definition",
        extra={"path": str(path), "repo": config.full_name, "issue_count": len(config.issues)},
    )
    return config
