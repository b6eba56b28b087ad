"""Git platform adapters."""

from milestoner.adapters.base import ROLE_ALL, GitPlatformAdapter, GitPlatformError
from milestoner.adapters.github import GitHubAdapter

__all__ = ["ROLE_ALL", "GitPlatformAdapter", "GitPlatformError", "GitHubAdapter"]
