"""Schema of the batch definition file."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class IssueConfig(BaseModel):
    """One `[[issues]]` entry.

    Only `title` is required; omitted optional fields are resolved to empty
    values when the request is built, not here.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    body: str | None = Field(default=None)
    labels: list[str] | None = Field(default=None)
    assignee: str | None = Field(default=None)
    assignees: list[str] | None = Field(default=None)


class RepoConfig(BaseModel):
    """Target repository plus the issues to create, in file order."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    owner: str
    repo: str
    issues: list[IssueConfig] = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
