"""GitHub API integration."""

from github_issue_batch.github.client import CreatedIssue, GitHubClient

__all__ = [
    "CreatedIssue",
    "GitHubClient",
]
