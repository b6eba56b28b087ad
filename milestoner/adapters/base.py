"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import List

from milestoner.models import Milestone, TeamMember

# Team membership role scope that includes both members and maintainers
ROLE_ALL = "all"


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class GitPlatformAdapter(ABC):
    """Operations the command plugins need from a Git hosting platform."""

    @abstractmethod
    def create_comment(self, org: str, repo: str, number: int, body: str) -> None:
        """Post a comment on an issue or PR."""
        ...

    @abstractmethod
    def list_team_members_by_slug(self, org: str, team_slug: str, role: str = ROLE_ALL) -> List[TeamMember]:
        """List members of an organization team addressed by slug."""
        ...

    @abstractmethod
    def list_team_members_by_id(self, org: str, team_id: int, role: str = ROLE_ALL) -> List[TeamMember]:
        """List members of an organization team addressed by numeric ID."""
        ...

    @abstractmethod
    def list_milestones(self, org: str, repo: str) -> List[Milestone]:
        """List the repository's milestones."""
        ...

    @abstractmethod
    def set_milestone(self, org: str, repo: str, number: int, milestone_number: int) -> None:
        """Set the milestone of an issue or PR."""
        ...

    @abstractmethod
    def clear_milestone(self, org: str, repo: str, number: int) -> None:
        """Remove the milestone from an issue or PR."""
        ...

    @abstractmethod
    def add_label(self, org: str, repo: str, number: int, label: str) -> None:
        """Add a label to an issue or PR."""
        ...
