"""Handle GitHub webhook events.

Turns comment-like deliveries into CommentEvent and hands them to the
enabled command plugins. Each delivery is handled on its own; nothing is
kept between calls.
"""

import logging
from typing import Any, Dict

from milestoner.adapters.base import GitPlatformAdapter
from milestoner.adapters.github import GitHubAdapter
from milestoner.config import AppConfig
from milestoner.plugins import dispatch_comment_event
from milestoner.plugins.maintainers import norm_login
from milestoner.webhook.events import comment_event_from_payload


def _make_adapter(config: AppConfig, log: logging.Logger) -> GitPlatformAdapter | None:
    token = config.github_token_resolved
    if not token:
        log.warning("No GitHub token; cannot process comment commands")
        return None
    return GitHubAdapter(token=token, api_url=config.github.api_url)


def handle_github_event(
    config: AppConfig,
    event: str,
    payload: Dict[str, Any],
    adapter: GitPlatformAdapter | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Handle a GitHub webhook event.

    Supported events: issue_comment, pull_request_review_comment,
    pull_request_review, issues and pull_request. Only newly created
    text reaches the plugins; edits, deletions and the bot's own comments
    are ignored. Plugins log through their own loggers unless ``log`` is
    given.
    """
    logger = log or logging.getLogger("milestoner.webhook.handlers")
    comment_event = comment_event_from_payload(event, payload)
    if comment_event is None:
        logger.debug("Ignoring %s event (action=%s)", event, payload.get("action"))
        return
    if comment_event.action != "created":
        logger.debug(
            "Ignoring %s %s on %s#%s",
            event,
            comment_event.action,
            comment_event.full_name,
            comment_event.number,
        )
        return
    bot_login = config.bot.github_username
    if bot_login and norm_login(comment_event.author) == norm_login(bot_login):
        logger.debug("Ignoring own comment on %s#%s", comment_event.full_name, comment_event.number)
        return

    if adapter is None:
        adapter = _make_adapter(config, logger)
        if adapter is None:
            return
    dispatch_comment_event(adapter, comment_event, config.repo_milestone, config.plugins, log=log)
