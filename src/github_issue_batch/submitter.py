"""Map issue definitions to requests and submit them one at a time.

A failed create call is reported and the batch moves on to the next issue.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

import requests
from github import GithubException

from github_issue_batch.github.client import CreatedIssue, GitHubClient, IssueRequest
from github_issue_batch.models import IssueConfig, RepoConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FailedIssue:
    title: str
    error: str


@dataclass(slots=True)
class BatchResult:
    """Outcome of a batch run, in file order."""

    created: list[CreatedIssue] = field(default_factory=list)
    failed: list[FailedIssue] = field(default_factory=list)


def build_issue_request(issue: IssueConfig) -> IssueRequest:
    """Build the create-issue payload, substituting empty values for omitted fields."""

    return IssueRequest(
        title=issue.title,
        body=issue.body if issue.body is not None else "",
        labels=list(issue.labels) if issue.labels is not None else [],
        assignee=issue.assignee if issue.assignee is not None else "",
        assignees=list(issue.assignees) if issue.assignees is not None else [],
        milestone=None,
    )


def submit_issues(
    client: GitHubClient,
    config: RepoConfig,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> BatchResult:
    """Create every issue in `config`, sequentially and in file order.

    Each success prints `Created issue #<number>: <url>` to `out`; each failure
    prints the issue title and error to `err`. Failures never stop the loop.
    """

    out = out or sys.stdout
    err = err or sys.stderr
    result = BatchResult()

    for issue in config.issues:
        request = build_issue_request(issue)
        try:
            created = client.create_issue(owner=config.owner, repo=config.repo, request=request)
        except (GithubException, requests.RequestException, ValueError) as e:
            logger.info(
                "Issue creation failed",
                extra={"repo": config.full_name, "title": issue.title, "error": str(e)},
            )
            result.failed.append(FailedIssue(title=issue.title, error=str(e)))
            print(f"Failed to create issue '{issue.title}': {e}", file=err)
            continue

        result.created.append(created)
        print(f"Created issue #{created.number}: {created.html_url}", file=out)

    logger.info(
        "Batch finished",
        extra={
            "repo": config.full_name,
            "created": len(result.created),
            "failed": len(result.failed),
        },
    )
    return result
