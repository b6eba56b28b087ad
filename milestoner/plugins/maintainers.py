"""Resolve and check the milestone maintainers team of a repository.

Each repository maps to a GitHub team (``repo_milestone`` in config);
repositories without their own entry use the entry under the empty key.
Only members of that team may issue /milestone and /status.
"""

import logging
from typing import Iterable, List, Mapping

from milestoner.adapters.base import ROLE_ALL, GitPlatformAdapter
from milestoner.config import MilestoneTeam
from milestoner.models import TeamMember

DEFAULT_KEY = ""

MUST_BE_AUTHORIZED = (
    "You must be a member of the [{org}/{team}](https://github.com/orgs/{org}/teams/{team}/members) "
    "GitHub team to {action}. If you believe you should be able to issue the /{command} command, "
    "please contact your {friendly_name} and have them propose you as an additional delegate "
    "for this responsibility."
)


class MaintainersTeamNotConfigured(LookupError):
    """Neither the repository nor the default entry names a maintainers team."""

    pass


def resolve_milestone_team(
    repo_milestone: Mapping[str, MilestoneTeam],
    org: str,
    repo: str,
    default_key: str = DEFAULT_KEY,
) -> MilestoneTeam:
    """Return the team configured for org/repo, else the default entry."""
    full_name = f"{org}/{repo}"
    if full_name in repo_milestone:
        return repo_milestone[full_name]
    if default_key in repo_milestone:
        return repo_milestone[default_key]
    raise MaintainersTeamNotConfigured(f"No milestone maintainers team configured for {full_name} and no default")


def determine_maintainers(
    adapter: GitPlatformAdapter,
    team: MilestoneTeam,
    org: str,
) -> List[TeamMember]:
    """List the team's members by slug when set, otherwise by ID.

    Raises GitPlatformError when the listing fails.
    """
    if team.maintainers_team:
        return adapter.list_team_members_by_slug(org, team.maintainers_team, ROLE_ALL)
    return adapter.list_team_members_by_id(org, team.maintainers_id, ROLE_ALL)


def norm_login(login: str) -> str:
    """Normalize a login for comparison (GitHub logins are case-insensitive)."""
    return login.strip().lstrip("@").lower()


def is_maintainer(login: str, members: Iterable[TeamMember]) -> bool:
    normalized = norm_login(login)
    return any(norm_login(member.login) == normalized for member in members)


def must_be_authorized_message(org: str, team: MilestoneTeam, command: str, action: str) -> str:
    """Rejection text for a requester who is not in the maintainers team."""
    return MUST_BE_AUTHORIZED.format(
        org=org,
        team=team.maintainers_team,
        action=action,
        command=command,
        friendly_name=team.maintainers_friendly_name,
    )


def authorize(
    adapter: GitPlatformAdapter,
    repo_milestone: Mapping[str, MilestoneTeam],
    org: str,
    repo: str,
    login: str,
    log: logging.Logger | None = None,
) -> tuple[MilestoneTeam, bool]:
    """Resolve the repository's team and check whether login belongs to it.

    Returns the resolved team (needed for the rejection message) and the
    verdict. Configuration and API errors propagate.
    """
    logger = log or logging.getLogger("milestoner.plugins.maintainers")
    team = resolve_milestone_team(repo_milestone, org, repo)
    members = determine_maintainers(adapter, team, org)
    allowed = is_maintainer(login, members)
    if not allowed:
        logger.info(
            "%s is not in the maintainers team %s of %s/%s",
            login,
            team.maintainers_team or team.maintainers_id,
            org,
            repo,
        )
    return team, allowed
