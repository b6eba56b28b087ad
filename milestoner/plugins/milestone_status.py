"""
The /status command: maintainers add a ``status/*`` label to an issue or PR.

Every ``/status <keyword>`` line of a comment is applied. Keywords outside
STATUS_LABELS are skipped without a reply.
"""

import logging
from typing import Mapping

from milestoner.adapters.base import GitPlatformAdapter, GitPlatformError
from milestoner.config import MilestoneTeam
from milestoner.models import CommentEvent
from milestoner.plugins.commands import STATUS_TRIGGER
from milestoner.plugins.maintainers import authorize, must_be_authorized_message
from milestoner.plugins.response import format_response_raw

PLUGIN_NAME = "milestonestatus"

STATUS_LABELS = {
    "approved-for-milestone": "status/approved-for-milestone",
    "in-progress": "status/in-progress",
    "in-review": "status/in-review",
}


def handle_status(
    adapter: GitPlatformAdapter,
    event: CommentEvent,
    repo_milestone: Mapping[str, MilestoneTeam],
    log: logging.Logger | None = None,
) -> None:
    """Apply the /status commands of a newly created comment."""
    logger = log or logging.getLogger("milestoner.plugins.milestone_status")
    if event.action != "created":
        return
    keywords = STATUS_TRIGGER.match(event.body)
    if not keywords:
        return
    org, repo, number = event.org, event.repo, event.number

    team, allowed = authorize(adapter, repo_milestone, org, repo, event.author, log=logger)
    if not allowed:
        msg = must_be_authorized_message(org, team, command="status", action="add status labels")
        adapter.create_comment(org, repo, number, format_response_raw(event.body, event.html_url, event.author, msg))
        return

    for keyword in keywords:
        label = STATUS_LABELS.get(keyword)
        if label is None:
            logger.debug("Ignoring unknown status %r on %s/%s#%s", keyword, org, repo, number)
            continue
        try:
            adapter.add_label(org, repo, number, label)
            logger.info("Added label %s to %s/%s#%s", label, org, repo, number)
        except GitPlatformError as e:
            logger.error("Error adding the label %r to %s/%s#%s: %s", label, org, repo, number, e)
