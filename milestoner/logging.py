"""Logging from config and env.

Levels (inclusive):
- ERROR: failed API calls (milestone/label mutations, listings)
- WARNING: rejected or malformed webhook deliveries, and ERROR
- INFO: handled commands, WARNING, and ERROR
- DEBUG: ignored events, every GitHub HTTP request, and all levels above

Configure via config.yaml (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
"""

import logging

from milestoner.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# HTTP client loggers; one record per GitHub API call
HTTP_LOGGERS = ("urllib3", "requests")


def _resolve_level(level: str) -> int:
    """Map level name to logging constant.

    Falls back to INFO if unknown.
    """
    return LEVELS.get(level.upper().strip(), logging.INFO)


class MilestonerLogging:
    """Configures logging from LoggingConfig (YAML + env LOGGING_*).

    HTTP client loggers stay at WARNING unless the configured level is
    DEBUG.
    """

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        """Apply level and format to the root logger and tune HTTP loggers."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            force=True,
        )
        http_level = logging.DEBUG if self._level == logging.DEBUG else logging.WARNING
        for name in HTTP_LOGGERS:
            logging.getLogger(name).setLevel(http_level)
