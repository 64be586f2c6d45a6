"""
Configuration for the LFA library.

Settings are read from the process environment, optionally populated from a
``.env`` file via python-dotenv. Only ambient concerns (logging) are
configurable this way; numerical behaviour is always set explicitly through
constructor arguments.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

ENV_DEBUG = "LFA_DEBUG"
ENV_LOG_LEVEL = "LFA_LOG_LEVEL"
ENV_LOG_FILE = "LFA_LOG_FILE"
ENV_LOG_DIR = "LFA_LOG_DIR"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings resolved from the environment.
    """

    debug: bool
    """Whether verbose logging is enabled"""

    log_level: str
    """Log level name used when debug is enabled"""

    log_file: Optional[str]
    """Explicit log file path, or None for a timestamped file"""

    log_dir: str
    """Directory that relative log files are placed in"""

    @staticmethod
    def from_env(dotenv_path: Optional[str] = None) -> 'LoggingConfig':
        """
        Build a config from environment variables.

        Args:
            dotenv_path: Optional path to a .env file; the default search is
                used when omitted

        Returns:
            LoggingConfig populated from LFA_* variables
        """
        # Existing environment variables take precedence over the .env file
        load_dotenv(dotenv_path=dotenv_path, override=False)

        return LoggingConfig(
            debug=_env_flag(ENV_DEBUG),
            log_level=os.getenv(ENV_LOG_LEVEL, "info").lower(),
            log_file=os.getenv(ENV_LOG_FILE) or None,
            log_dir=os.getenv(ENV_LOG_DIR) or os.path.join(os.getcwd(), "logs"),
        )
