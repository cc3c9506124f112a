"""Load Show Runner configuration from a JSON file."""

import json
import logging
import os
from dataclasses import fields
from pathlib import Path
from typing import Any

from show_runner.exceptions import ConfigurationError

from .config import ShowRunnerConfig

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "GEMINI_API_KEY"


def load_config(path: Path, **overrides) -> ShowRunnerConfig:
    """Load configuration from a JSON file.

    The Gemini API key falls back to the GEMINI_API_KEY environment
    variable when the file does not set one. Keyword overrides win
    over both.

    Args:
        path: Path to the JSON configuration file
        **overrides: Values that replace those read from the file

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: If the file is missing, unreadable, or has unknown keys
    """
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

    data.update(overrides)
    _check_known_keys(data)

    if not data.get("gemini_api_key"):
        env_key = os.environ.get(API_KEY_ENV_VAR, "")
        if env_key:
            logger.debug(f"Using Gemini API key from {API_KEY_ENV_VAR}")
            data["gemini_api_key"] = env_key

    try:
        return ShowRunnerConfig(**data)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e


def _check_known_keys(data: dict[str, Any]) -> None:
    """Reject keys that are not configuration fields."""
    known = {f.name for f in fields(ShowRunnerConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
