"""CLI entrypoint for the issue batch creator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from github import GithubException
from pydantic import ValidationError

from github_issue_batch import __version__
from github_issue_batch.config import Settings
from github_issue_batch.github.client import GitHubClient
from github_issue_batch.loader import ConfigError, load_repo_config
from github_issue_batch.logging import configure_logging
from github_issue_batch.submitter import submit_issues

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-issue-batch",
        description="Create GitHub issues in one repository from a TOML file",
    )
    parser.add_argument(
        "--version", action="version", version=f"github-issue-batch {__version__}"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        required=True,
        metavar="FILE",
        help="Path to the TOML file describing the repository and its issues",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error:", file=sys.stderr)
        print(e, file=sys.stderr)
        return 1

    if not settings.has_token:
        print("Error: GITHUB_TOKEN environment variable not set", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)

    try:
        config = load_repo_config(args.config)
    except ConfigError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        github = GitHubClient(token=settings.github_token, base_url=settings.github_base_url)
    except (ValueError, GithubException) as e:
        logger.debug("Failed to construct GitHub client", exc_info=True)
        print(f"Error: failed to create GitHub client: {e}", file=sys.stderr)
        return 1

    try:
        result = submit_issues(github, config)
    finally:
        github.close()

    logger.debug(
        "Submission complete",
        extra={"created": len(result.created), "failed": len(result.failed)},
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
