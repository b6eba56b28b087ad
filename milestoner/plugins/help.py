"""Help text for the command plugins, including each repository's team."""

from typing import Any, Dict, Iterable

from milestoner.config import AppConfig, MilestoneTeam
from milestoner.plugins import milestone, milestone_status
from milestoner.plugins.maintainers import DEFAULT_KEY


def _milestone_team_msg(team: MilestoneTeam) -> str:
    return f'The milestone maintainers team is the GitHub team "{team.maintainers_team}" with ID: {team.maintainers_id}.'


def _status_team_msg(team: MilestoneTeam) -> str:
    return f'The milestone maintainers team is the GitHub team "{team.maintainers_team}".'


PLUGIN_HELP: Dict[str, Dict[str, Any]] = {
    milestone.PLUGIN_NAME: {
        "description": (
            "The milestone plugin allows members of a configurable GitHub team to set the milestone "
            "on an issue or pull request."
        ),
        "usage": f"/milestone <version> or /milestone {milestone.CLEAR_KEYWORD}",
        "command_description": "Updates the milestone for an issue or PR",
        "who_can_use": "Members of the milestone maintainers GitHub team can use the '/milestone' command.",
        "examples": ["/milestone v1.10", "/milestone v1.9", f"/milestone {milestone.CLEAR_KEYWORD}"],
        "team_msg": _milestone_team_msg,
    },
    milestone_status.PLUGIN_NAME: {
        "description": (
            "The milestonestatus plugin allows members of the milestone maintainers GitHub team to "
            "specify the 'status/*' label that should apply to a pull request."
        ),
        "usage": "/status (" + "|".join(milestone_status.STATUS_LABELS) + ")",
        "command_description": "Applies the 'status/' label to a PR.",
        "who_can_use": "Members of the milestone maintainers GitHub team can use the '/status' command.",
        "examples": [f"/status {keyword}" for keyword in milestone_status.STATUS_LABELS],
        "team_msg": _status_team_msg,
    },
}


def plugin_help(config: AppConfig, repos: Iterable[str] = ()) -> Dict[str, Dict[str, Any]]:
    """Describe every enabled plugin and the team configured per repository.

    ``repos`` are "org/repo" names to report on in addition to the default;
    repositories without their own entry are left out.
    """
    result: Dict[str, Dict[str, Any]] = {}
    for name in config.plugins:
        info = PLUGIN_HELP.get(name)
        if info is None:
            continue
        team_msg = info["team_msg"]
        teams: Dict[str, str] = {}
        for repo in repos:
            team = config.repo_milestone.get(repo)
            if team is not None:
                teams[repo] = team_msg(team)
        if DEFAULT_KEY in config.repo_milestone:
            teams[DEFAULT_KEY] = team_msg(config.repo_milestone[DEFAULT_KEY])
        result[name] = {
            "description": info["description"],
            "config": teams,
            "commands": [
                {
                    "usage": info["usage"],
                    "description": info["command_description"],
                    "who_can_use": info["who_can_use"],
                    "examples": list(info["examples"]),
                }
            ],
        }
    return result
