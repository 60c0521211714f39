"""Environment-based settings for laravel-eol.

The command takes no flags; the few knobs it has are read from the
environment:

- LARAVEL_EOL_LOG_LEVEL: DEBUG, INFO, WARNING or ERROR (default WARNING)
- LARAVEL_EOL_LOG_JSON: emit structured JSON log lines (default false)

Color output is controlled by Rich itself (NO_COLOR, FORCE_COLOR).
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError
from .logging_config import DEFAULT_LOG_LEVEL, VALID_LOG_LEVELS


@dataclass(frozen=True)
class Settings:
    """Runtime settings loaded from the environment."""

    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = False

    def validate(self) -> None:
        """
        Validate settings.

        Raises:
            ConfigurationError: If the log level is not recognized
        """
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid LARAVEL_EOL_LOG_LEVEL '{self.log_level}'. Expected one of: {', '.join(VALID_LOG_LEVELS)}"
            )


def evaluate_boolean(value: str) -> bool:
    """
    Evaluate string values as boolean.

    Args:
        value: String value to evaluate

    Returns:
        Boolean result
    """
    return value.lower() in ["true", "yes", "yeah", "1"]


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Load and validate settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If a setting is invalid
    """
    env = os.environ if environ is None else environ
    settings = Settings(
        log_level=env.get("LARAVEL_EOL_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper(),
        log_json=evaluate_boolean(env.get("LARAVEL_EOL_LOG_JSON", "False")),
    )
    settings.validate()
    return settings
