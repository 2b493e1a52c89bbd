"""Test configuration and fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import Mock

import pytest

from github_issue_batch.github.client import CreatedIssue, GitHubClient


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test in an empty directory with no GitHub settings in the environment."""
    for name in ("GITHUB_TOKEN", "GITHUB_BASE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo handler and level changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write TOML text to a file and return its path."""

    def _write(text: str, name: str = "issues.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_created_issue() -> Callable[..., CreatedIssue]:
    """Build CreatedIssue values the way GitHub would return them."""

    def _make(number: int, title: str, repository: str = "acme/widgets") -> CreatedIssue:
        return CreatedIssue(
            repository=repository,
            number=number,
            title=title,
            html_url=f"https://github.com/{repository}/issues/{number}",
        )

    return _make


@pytest.fixture
def mock_github() -> Mock:
    """Provide a GitHubClient double."""
    return Mock(spec=GitHubClient)
