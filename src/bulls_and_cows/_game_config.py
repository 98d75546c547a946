# Area: Shared
"""
bulls_and_cows._game_config — Game Configuration
================================================

Game constants, the validated GameConfig model, and loading of
configuration from a JSON file plus environment variables.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError

logger = logging.getLogger("bulls_and_cows.config")

# Length of the secret number and of every valid guess
NUMBER_LENGTH = 4

# Inclusive range the secret is drawn from
SECRET_MIN = 10 ** (NUMBER_LENGTH - 1)
SECRET_MAX = 10 ** NUMBER_LENGTH - 1

# At most one reveal per digit position
MAX_CHEAT_ATTEMPTS = NUMBER_LENGTH

HIDDEN_DIGIT = "X"

# Keyword commands (matched after strip(), case-insensitive)
HELP_COMMAND = "help"
RESTART_COMMAND = "restart"
TOP_COMMAND = "top"
EXIT_COMMANDS = {"exit", "quit"}

# Environment variable -> GameConfig field
ENV_MAPPINGS = {
    "BULLS_AND_COWS_PLAYER_NAME": "player_name",
    "BULLS_AND_COWS_SEED": "seed",
    "BULLS_AND_COWS_LOG_FILE": "log_file",
    "BULLS_AND_COWS_LOG_LEVEL": "log_level",
    "BULLS_AND_COWS_LEADERBOARD_SIZE": "leaderboard_size",
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class GameConfig(BaseModel):
    """Validated runtime settings for one process."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    player_name: Optional[str] = None
    seed: Optional[int] = None
    log_file: str = "bulls_and_cows.log"
    log_level: str = "INFO"
    use_colors: bool = True
    leaderboard_size: int = Field(default=5, ge=1)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("player_name")
    @classmethod
    def _strip_player_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


def _read_config_file(config_path: Optional[str]) -> Dict[str, Any]:
    if not config_path:
        return {}

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    return data


def _read_environment() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            values[config_key] = os.environ[env_key]

    if os.environ.get("BULLS_AND_COWS_NO_COLOR", "").lower() in ("true", "1", "yes"):
        values["use_colors"] = False
    return values


def build_config(**values: Any) -> GameConfig:
    """
    Validate raw values into a GameConfig.

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return GameConfig(**values)
    except ValidationError as e:
        details = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError("Invalid configuration", details) from e


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> GameConfig:
    """
    Load configuration from file, environment and explicit overrides.

    Later sources win: defaults < JSON file < environment (.env included)
    < overrides. Overrides whose value is None are ignored.

    Args:
        config_path: Optional path to a JSON config file
        overrides: Values from the command line

    Returns:
        The validated GameConfig

    Raises:
        ConfigurationError: If the file is unreadable or a value is invalid
    """
    load_dotenv()

    values: Dict[str, Any] = {}
    values.update(_read_config_file(config_path))
    values.update(_read_environment())
    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    config = build_config(**values)
    logger.debug(f"Loaded configuration: {config.model_dump()}")
    return config
