"""
The /milestone command: maintainers set or clear the milestone of an issue or PR.

``/milestone v1.10`` applies the repository milestone titled ``v1.10``;
``/milestone clear`` removes the current milestone. Anyone outside the
repository's milestone maintainers team gets a reply explaining who can add
them. An unknown title gets a reply listing the repository's milestones.
"""

import logging
from typing import Dict, List, Mapping

from milestoner.adapters.base import GitPlatformAdapter, GitPlatformError
from milestoner.config import MilestoneTeam
from milestoner.models import CommentEvent, Milestone
from milestoner.plugins.commands import MILESTONE_TRIGGER
from milestoner.plugins.maintainers import authorize, must_be_authorized_message
from milestoner.plugins.response import format_response_raw

PLUGIN_NAME = "milestone"
CLEAR_KEYWORD = "clear"

INVALID_MILESTONE = (
    "The provided milestone is not valid for this repository. Milestones in this repository: [{milestones}]\n\n"
    "Use `/milestone {clear}` to clear the milestone."
)


def build_milestone_map(milestones: List[Milestone]) -> Dict[str, int]:
    """Map milestone title to number; a later duplicate title wins."""
    return {ms.title: ms.number for ms in milestones}


def invalid_milestone_message(milestone_map: Mapping[str, int]) -> str:
    titles = sorted(f"`{title}`" for title in milestone_map)
    return INVALID_MILESTONE.format(milestones=", ".join(titles), clear=CLEAR_KEYWORD)


def handle_milestone(
    adapter: GitPlatformAdapter,
    event: CommentEvent,
    repo_milestone: Mapping[str, MilestoneTeam],
    log: logging.Logger | None = None,
) -> None:
    """Apply a /milestone command from a newly created comment.

    Team resolution and milestone listing errors propagate; a failed
    set/clear is only logged.
    """
    logger = log or logging.getLogger("milestoner.plugins.milestone")
    if event.action != "created":
        return
    matches = MILESTONE_TRIGGER.match(event.body)
    if not matches:
        return
    proposed = matches[0]
    org, repo, number = event.org, event.repo, event.number

    team, allowed = authorize(adapter, repo_milestone, org, repo, event.author, log=logger)
    if not allowed:
        msg = must_be_authorized_message(org, team, command="milestone", action="set the milestone")
        adapter.create_comment(org, repo, number, format_response_raw(event.body, event.html_url, event.author, msg))
        return

    try:
        milestones = adapter.list_milestones(org, repo)
    except GitPlatformError as e:
        logger.error("Error listing the milestones in the %s/%s repo: %s", org, repo, e)
        raise

    if proposed == CLEAR_KEYWORD:
        try:
            adapter.clear_milestone(org, repo, number)
            logger.info("Cleared the milestone of %s/%s#%s", org, repo, number)
        except GitPlatformError as e:
            logger.error("Error clearing the milestone for %s/%s#%s: %s", org, repo, number, e)
        return

    milestone_map = build_milestone_map(milestones)
    milestone_number = milestone_map.get(proposed)
    if milestone_number is None:
        msg = invalid_milestone_message(milestone_map)
        adapter.create_comment(org, repo, number, format_response_raw(event.body, event.html_url, event.author, msg))
        return

    try:
        adapter.set_milestone(org, repo, number, milestone_number)
        logger.info("Set milestone %s (#%s) on %s/%s#%s", proposed, milestone_number, org, repo, number)
    except GitPlatformError as e:
        logger.error("Error adding the milestone %s to %s/%s#%s: %s", proposed, org, repo, number, e)
