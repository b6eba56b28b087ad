"""Configuration loading from YAML and environment.

Secrets (tokens) are taken from environment variables or from files
(Docker secrets). Never put real tokens in config files committed to the
repo.
"""

from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FRIENDLY_NAME = "SIG Chairs/TLs"
DEFAULT_PLUGINS = ["milestone", "milestonestatus"]


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


# Injected by load_config so properties can read env/file
_current_env: dict[str, str] = {}


class MilestoneTeam(BaseModel):
    """GitHub team whose members may use /milestone and /status on a repo.

    The team is addressed by slug or by numeric ID; the slug wins when both
    are set.
    """

    maintainers_team: str = Field(default="", description="Team slug, e.g. milestone-maintainers")
    maintainers_id: int = Field(default=0, ge=0, description="Numeric team ID (used when slug is empty)")
    maintainers_friendly_name: str = Field(
        default=DEFAULT_FRIENDLY_NAME,
        description="Who to contact to be added to the team (shown in rejection comments)",
    )


class BotConfig(BaseSettings):
    """Bot identity."""

    model_config = SettingsConfigDict(env_prefix="BOT_", extra="ignore")

    github_username: str | None = Field(default=None, description="Bot GitHub login (its own comments are ignored)")
    webhook_secret: str = Field(default="", description="Secret for webhook verification")


class GitHubConfig(BaseSettings):
    """GitHub API and webhook settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT or app token; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    webhook_path: str = Field(default="/webhook/github", description="Webhook URL path")


class WebhookConfig(BaseSettings):
    """Webhook server settings."""

    model_config = SettingsConfigDict(env_prefix="WEBHOOK_", extra="ignore")

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")
    enabled: bool = Field(default=True, description="Enable webhook server")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    bot: BotConfig = Field(default_factory=BotConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    webhook: WebhookConfig = Field(default_factory=WebhookConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    plugins: List[str] = Field(default_factory=lambda: list(DEFAULT_PLUGINS), description="Enabled plugins")
    # Keyed by "org/repo"; the "" entry is the default for every other repo
    repo_milestone: Dict[str, MilestoneTeam] = Field(default_factory=dict)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from env or Docker secret file."""
        t = self.github.token
        if t and not t.startswith("${"):
            return t
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")

    @property
    def webhook_secret_resolved(self) -> str:
        """Resolve webhook secret from env or Docker secret file."""
        s = self.bot.webhook_secret
        if s and not s.startswith("${") and s != "your-webhook-secret-here":
            return s
        return _read_secret("WEBHOOK_SECRET", "WEBHOOK_SECRET_FILE") or ""


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    Secrets: GITHUB_TOKEN or GITHUB_TOKEN_FILE, WEBHOOK_SECRET or WEBHOOK_SECRET_FILE.
    """
    global _current_env
    import os

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    raw = _substitute_env(raw)

    bot = BotConfig(**(raw.get("bot") or {}))
    github = GitHubConfig(**(raw.get("github") or {}))
    webhook = WebhookConfig(**(raw.get("webhook") or {}))
    logging = LoggingConfig(**(raw.get("logging") or {}))

    # YAML null keys (e.g. `~:`) are treated as the default entry
    repo_milestone_raw = raw.get("repo_milestone") or {}
    repo_milestone = {
        str(key) if key is not None else "": MilestoneTeam(**(val or {})) for key, val in repo_milestone_raw.items()
    }

    plugins = raw.get("plugins")
    if plugins is None:
        plugins = list(DEFAULT_PLUGINS)

    return AppConfig(
        bot=bot,
        github=github,
        webhook=webhook,
        logging=logging,
        plugins=plugins,
        repo_milestone=repo_milestone,
    )
