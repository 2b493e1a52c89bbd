"""GitHub API client wrapper.

This wraps PyGithub to keep GitHub calls out of CLI code and make tests easy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlparse

from github import Auth, Github

from github_issue_batch import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"github-issue-batch/{__version__}"


@dataclass(frozen=True, slots=True)
class IssueRequest:
    """Payload for a single create-issue call."""

    title: str
    body: str = ""
    labels: list[str] = field(default_factory=list)
    assignee: str = ""
    assignees: list[str] = field(default_factory=list)
    # Always unset.
    milestone: None = None


@dataclass(frozen=True, slots=True)
class CreatedIssue:
    """Minimal issue metadata returned from GitHub."""

    repository: str
    number: int
    title: str
    html_url: str


class GitHubClient:
    """Small wrapper around PyGithub for creating issues.

    Construction performs no network call; repositories are resolved lazily
    so the first request is the create call itself.
    """

    def __init__(
        self,
        *,
        token: str,
        base_url: str = "https://api.github.com",
        github_api: Github | None = None,
    ) -> None:
        if not token.strip():
            raise ValueError("GitHub token is required")
        if not base_url.strip():
            raise ValueError("GitHub base URL is required")
        parsed = urlparse(base_url.strip())
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"GitHub base URL is invalid: {base_url!r}")

        self._base_url = base_url.rstrip("/")

        if github_api is not None:
            self._github = github_api
            logger.debug("Using injected Github instance")
            return

        auth = Auth.Token(token)
        self._github = Github(auth=auth, base_url=self._base_url, user_agent=USER_AGENT)
        logger.debug("GitHub client constructed", extra={"base_url": self._base_url})

    @property
    def base_url(self) -> str:
        return self._base_url

    def create_issue(self, *, owner: str, repo: str, request: IssueRequest) -> CreatedIssue:
        """Create one issue in `owner/repo`.

        Empty optional fields are left out of the POST body rather than sent as
        empty values. The milestone is never sent.

        Raises:
            github.GithubException: the API rejected the request.
            requests.RequestException: the transport failed.
        """

        repository = f"{owner}/{repo}"
        gh_repo = self._github.get_repo(repository, lazy=True)

        kwargs: dict[str, Any] = {"title": request.title}
        if request.body:
            kwargs["body"] = request.body
        if request.labels:
            kwargs["labels"] = list(request.labels)
        if request.assignee:
            kwargs["assignee"] = request.assignee
        if request.assignees:
            kwargs["assignees"] = list(request.assignees)

        logger.info("Creating issue", extra={"repo": repository, "title": request.title})
        issue = gh_repo.create_issue(**kwargs)

        return CreatedIssue(
            repository=repository,
            number=issue.number,
            title=issue.title,
            html_url=issue.html_url,
        )

    def close(self) -> None:
        self._github.close()
