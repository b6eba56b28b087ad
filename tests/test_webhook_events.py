"""Tests for webhook payload parsing (comment_event_from_payload)."""

import pytest

from milestoner.webhook.events import comment_event_from_payload, generalize_comment_action

REPOSITORY = {"name": "kubernetes", "full_name": "kubernetes/kubernetes", "owner": {"login": "kubernetes"}}


@pytest.mark.parametrize(
    ("action", "expected"),
    [
        ("created", "created"),
        ("opened", "created"),
        ("submitted", "created"),
        ("edited", "edited"),
        ("deleted", "deleted"),
        ("dismissed", "deleted"),
        ("labeled", None),
        ("", None),
    ],
)
def test_generalize_comment_action(action: str, expected: str | None) -> None:
    assert generalize_comment_action(action) == expected


def test_issue_comment_on_issue() -> None:
    payload = {
        "action": "created",
        "comment": {
            "body": "/milestone v1.10",
            "user": {"login": "alice"},
            "html_url": "https://github.com/kubernetes/kubernetes/issues/5#issuecomment-1",
        },
        "issue": {"number": 5},
        "repository": REPOSITORY,
    }
    event = comment_event_from_payload("issue_comment", payload)
    assert event is not None
    assert event.action == "created"
    assert event.body == "/milestone v1.10"
    assert event.author == "alice"
    assert (event.org, event.repo, event.number) == ("kubernetes", "kubernetes", 5)
    assert event.full_name == "kubernetes/kubernetes"
    assert event.html_url.endswith("issuecomment-1")


def test_issue_comment_on_pr() -> None:
    payload = {
        "action": "edited",
        "comment": {"body": "x", "user": {"login": "bob"}},
        "issue": {"number": 6, "pull_request": {"url": "..."}},
        "repository": REPOSITORY,
    }
    event = comment_event_from_payload("issue_comment", payload)
    assert event is not None
    assert (event.action, event.number) == ("edited", 6)


def test_review_submitted() -> None:
    payload = {
        "action": "submitted",
        "review": {"body": "/status in-review", "user": {"login": "carol"}, "html_url": "u"},
        "pull_request": {"number": 8},
        "repository": REPOSITORY,
    }
    event = comment_event_from_payload("pull_request_review", payload)
    assert event is not None
    assert (event.action, event.author, event.number) == ("created", "carol", 8)


def test_review_comment() -> None:
    payload = {
        "action": "created",
        "comment": {"body": "/status in-progress", "user": {"login": "dave"}},
        "pull_request": {"number": 9},
        "repository": REPOSITORY,
    }
    event = comment_event_from_payload("pull_request_review_comment", payload)
    assert event is not None
    assert event.number == 9
    assert event.body == "/status in-progress"


def test_opened_issue_uses_description() -> None:
    payload = {
        "action": "opened",
        "issue": {"number": 10, "body": "/milestone v1.9", "user": {"login": "erin"}, "html_url": "h"},
        "repository": REPOSITORY,
    }
    event = comment_event_from_payload("issues", payload)
    assert event is not None
    assert (event.action, event.body, event.author, event.html_url) == ("created", "/milestone v1.9", "erin", "h")


def test_opened_pr_with_null_body() -> None:
    payload = {
        "action": "opened",
        "pull_request": {"number": 11, "body": None, "user": {"login": "erin"}},
        "repository": REPOSITORY,
    }
    event = comment_event_from_payload("pull_request", payload)
    assert event is not None
    assert event.body == ""


def test_unrelated_action_or_event_returns_none() -> None:
    assert comment_event_from_payload("issues", {"action": "labeled", "issue": {"number": 1}}) is None
    assert comment_event_from_payload("push", {"action": "created"}) is None


def test_missing_number_returns_none() -> None:
    payload = {"action": "created", "comment": {"body": "x", "user": {"login": "a"}}, "repository": REPOSITORY}
    assert comment_event_from_payload("issue_comment", payload) is None


def test_event_is_immutable() -> None:
    payload = {
        "action": "created",
        "comment": {"body": "x", "user": {"login": "a"}},
        "issue": {"number": 1},
        "repository": REPOSITORY,
    }
    event = comment_event_from_payload("issue_comment", payload)
    assert event is not None
    with pytest.raises(Exception):
        event.body = "changed"  # type: ignore[misc]
