"""Data models for comment events, team members and milestones (Pydantic)."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CommentAction = Literal["created", "edited", "deleted"]


class CommentEvent(BaseModel):
    """A comment-like event on an issue or PR.

    Covers issue comments, review comments, review bodies and the
    description of a newly opened issue or PR.
    """

    model_config = ConfigDict(frozen=True)

    action: CommentAction
    body: str = ""
    author: str = Field(description="Login of the comment author")
    org: str = Field(description="Repository owner login")
    repo: str = Field(description="Repository name (without owner)")
    number: int = Field(description="Issue or PR number")
    html_url: str = Field(default="", description="Permalink of the comment")

    @property
    def full_name(self) -> str:
        return f"{self.org}/{self.repo}"


class TeamMember(BaseModel):
    """Member of a GitHub team."""

    login: str


class Milestone(BaseModel):
    """Repository milestone (title and number used by the issues API)."""

    title: str
    number: int
