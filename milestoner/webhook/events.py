"""Build CommentEvent from GitHub webhook payloads.

Handled deliveries (anything with a text body a command can live in):
- issue_comment: comment created/edited/deleted on an issue or PR
- pull_request_review_comment: line comment on a PR diff
- pull_request_review: review body submitted/edited/dismissed
- issues / pull_request: description of an opened/edited issue or PR
"""

import logging
from typing import Any, Dict

from pydantic import ValidationError

from milestoner.models import CommentAction, CommentEvent

LOG = logging.getLogger("milestoner.webhook.events")

_ACTIONS: Dict[str, CommentAction] = {
    "created": "created",
    "opened": "created",
    "submitted": "created",
    "edited": "edited",
    "deleted": "deleted",
    "dismissed": "deleted",
}


def generalize_comment_action(action: str) -> CommentAction | None:
    """Map a webhook action to created/edited/deleted; None if the action
    does not concern the text body (e.g. labeled, assigned)."""
    return _ACTIONS.get(action or "")


def _source(event: str, payload: Dict[str, Any]) -> tuple[Dict[str, Any], Dict[str, Any]] | None:
    """Return (text object, issue-or-PR object) for the event type."""
    if event == "issue_comment":
        return payload.get("comment") or {}, payload.get("issue") or {}
    if event == "pull_request_review_comment":
        return payload.get("comment") or {}, payload.get("pull_request") or {}
    if event == "pull_request_review":
        return payload.get("review") or {}, payload.get("pull_request") or {}
    if event == "issues":
        issue = payload.get("issue") or {}
        return issue, issue
    if event == "pull_request":
        pull = payload.get("pull_request") or {}
        return pull, pull
    return None


def comment_event_from_payload(event: str, payload: Dict[str, Any]) -> CommentEvent | None:
    """Generalize a webhook delivery into a CommentEvent.

    Returns None for unsupported event types, unrelated actions and
    payloads missing required fields.
    """
    action = generalize_comment_action(payload.get("action", ""))
    if action is None:
        return None
    source = _source(event, payload)
    if source is None:
        return None
    text_obj, target = source

    repo_payload = payload.get("repository") or {}
    owner = repo_payload.get("owner") or {}
    user = text_obj.get("user") or {}
    try:
        return CommentEvent(
            action=action,
            body=text_obj.get("body") or "",
            author=user.get("login", ""),
            org=owner.get("login", ""),
            repo=repo_payload.get("name", ""),
            number=target.get("number"),
            html_url=text_obj.get("html_url") or "",
        )
    except ValidationError as e:
        LOG.warning("Failed to parse %s payload: %s", event, e)
        return None
