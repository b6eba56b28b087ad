"""Tests for plugin help (plugin_help)."""

from milestoner.config import AppConfig, MilestoneTeam
from milestoner.plugins.help import plugin_help


def _config(**kwargs: object) -> AppConfig:
    return AppConfig(
        repo_milestone={
            "": MilestoneTeam(maintainers_team="milestone-maintainers"),
            "kubernetes/kubernetes": MilestoneTeam(maintainers_team="k8s-milestone", maintainers_id=7),
        },
        **kwargs,
    )


def test_help_for_all_enabled_plugins() -> None:
    help_ = plugin_help(_config(), ["kubernetes/kubernetes", "kubernetes/other"])

    assert set(help_) == {"milestone", "milestonestatus"}
    milestone = help_["milestone"]
    assert milestone["config"] == {
        "kubernetes/kubernetes": 'The milestone maintainers team is the GitHub team "k8s-milestone" with ID: 7.',
        "": 'The milestone maintainers team is the GitHub team "milestone-maintainers" with ID: 0.',
    }
    assert milestone["commands"][0]["usage"] == "/milestone <version> or /milestone clear"
    assert "/milestone clear" in milestone["commands"][0]["examples"]

    status = help_["milestonestatus"]
    assert status["commands"][0]["usage"] == "/status (approved-for-milestone|in-progress|in-review)"
    assert status["config"][""] == 'The milestone maintainers team is the GitHub team "milestone-maintainers".'


def test_help_skips_disabled_plugins() -> None:
    help_ = plugin_help(_config(plugins=["milestonestatus"]))
    assert list(help_) == ["milestonestatus"]
    assert list(help_["milestonestatus"]["config"]) == [""]
