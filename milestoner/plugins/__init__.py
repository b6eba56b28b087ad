"""Comment command plugins (/milestone, /status) and their dispatcher."""

import logging
from typing import Callable, Dict, Iterable, Mapping

from milestoner.adapters.base import GitPlatformAdapter, GitPlatformError
from milestoner.config import MilestoneTeam
from milestoner.models import CommentEvent
from milestoner.plugins.maintainers import MaintainersTeamNotConfigured
from milestoner.plugins.milestone import PLUGIN_NAME as MILESTONE_PLUGIN
from milestoner.plugins.milestone import handle_milestone
from milestoner.plugins.milestone_status import PLUGIN_NAME as STATUS_PLUGIN
from milestoner.plugins.milestone_status import handle_status

CommentHandler = Callable[..., None]

COMMENT_HANDLERS: Dict[str, CommentHandler] = {
    MILESTONE_PLUGIN: handle_milestone,
    STATUS_PLUGIN: handle_status,
}


def dispatch_comment_event(
    adapter: GitPlatformAdapter,
    event: CommentEvent,
    repo_milestone: Mapping[str, MilestoneTeam],
    enabled: Iterable[str],
    log: logging.Logger | None = None,
) -> None:
    """Run every enabled plugin on the event.

    Plugins are independent: an error in one is logged and the others
    still run.
    """
    logger = log or logging.getLogger("milestoner.plugins")
    for name in enabled:
        handler = COMMENT_HANDLERS.get(name)
        if handler is None:
            logger.warning("Unknown plugin %r in config; skipping", name)
            continue
        try:
            handler(adapter, event, repo_milestone, log=log)
        except (GitPlatformError, MaintainersTeamNotConfigured) as e:
            logger.error("Plugin %s failed on %s#%s: %s", name, event.full_name, event.number, e)


__all__ = ["COMMENT_HANDLERS", "dispatch_comment_event", "handle_milestone", "handle_status"]
