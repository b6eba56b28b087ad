"""Tests for config loading (load_config, secrets, repo_milestone)."""

from pathlib import Path

import pytest

from milestoner.config import DEFAULT_FRIENDLY_NAME, AppConfig, MilestoneTeam, load_config

CONFIG_YAML = """
github:
  token: ${TEST_GH_TOKEN}
logging:
  level: DEBUG
plugins:
  - milestone
repo_milestone:
  "":
    maintainers_id: 12345
  kubernetes/kubernetes:
    maintainers_team: milestone-maintainers
    maintainers_friendly_name: Release Team
"""


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "absent.yaml")
    assert isinstance(config, AppConfig)
    assert config.plugins == ["milestone", "milestonestatus"]
    assert config.repo_milestone == {}


def test_load_repo_milestone(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEST_GH_TOKEN", "from-env")
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML)

    config = load_config(path)

    assert config.github.token == "from-env"
    assert config.github_token_resolved == "from-env"
    assert config.logging.level == "DEBUG"
    assert config.plugins == ["milestone"]
    assert config.repo_milestone[""] == MilestoneTeam(maintainers_id=12345)
    assert config.repo_milestone[""].maintainers_friendly_name == DEFAULT_FRIENDLY_NAME
    k8s = config.repo_milestone["kubernetes/kubernetes"]
    assert k8s.maintainers_team == "milestone-maintainers"
    assert k8s.maintainers_id == 0
    assert k8s.maintainers_friendly_name == "Release Team"


def test_null_key_is_default_entry(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("repo_milestone:\n  ~:\n    maintainers_team: t\n")
    assert load_config(path).repo_milestone[""].maintainers_team == "t"


def test_secret_from_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    secret_file = tmp_path / "secret"
    secret_file.write_text("hook-secret\n")
    monkeypatch.delenv("WEBHOOK_SECRET", raising=False)
    monkeypatch.setenv("WEBHOOK_SECRET_FILE", str(secret_file))
    path = tmp_path / "config.yaml"
    path.write_text("bot:\n  webhook_secret: ${WEBHOOK_SECRET}\n")

    config = load_config(path)

    assert config.webhook_secret_resolved == "hook-secret"


def test_unresolved_token_placeholder_falls_back_to_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TEST_GH_TOKEN", raising=False)
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML)
    assert load_config(path).github_token_resolved == "env-token"


def test_negative_team_id_is_rejected() -> None:
    with pytest.raises(ValueError):
        MilestoneTeam(maintainers_id=-1)
