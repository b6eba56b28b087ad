"""Milestoner entry point.

Runs the webhook server that applies /milestone and /status commands.
Usage: milestoner [--config PATH] [--check].
"""

import argparse
import logging
import sys
from pathlib import Path

from milestoner.config import AppConfig, load_config
from milestoner.logging import MilestonerLogging
from milestoner.plugins.maintainers import DEFAULT_KEY


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="milestoner",
        description="Milestoner - /milestone and /status commands for GitHub issues and PRs",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def run(config: AppConfig) -> None:
    """Configure logging and serve webhooks."""
    from milestoner.webhook.server import run_webhook_server

    MilestonerLogging(config.logging).setup()
    log = logging.getLogger("milestoner.main")

    if not config.webhook.enabled:
        log.warning("Webhook disabled in config; nothing to do.")
        return
    if DEFAULT_KEY not in config.repo_milestone:
        log.warning("No default entry in repo_milestone; commands on unlisted repos will fail")
    log.info(
        "Milestoner started | plugins=%s | repos=%s",
        ",".join(config.plugins),
        ",".join(sorted(k or "<default>" for k in config.repo_milestone)),
    )
    run_webhook_server(config)


def main(argv: list[str] | None = None) -> int:
    """Entry point for milestoner."""
    args = parse_args(argv)
    config_path = args.config
    if not config_path.is_file() and config_path == Path("config.yaml"):
        if Path("config.example.yaml").is_file():
            config_path = Path("config.example.yaml")
            logging.basicConfig(level=logging.INFO)
            logging.getLogger("milestoner.main").warning("config.yaml not found, using config.example.yaml")

    config = load_config(config_path)

    if args.check:
        print("Config OK:", ",".join(config.plugins), f"{len(config.repo_milestone)} team(s)")
        return 0

    try:
        run(config)
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        logging.getLogger("milestoner.main").exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
