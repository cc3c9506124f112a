"""Configuration management for Show Runner."""

from .config import ShowRunnerConfig
from .defaults import create_default_config
from .loader import load_config

__all__ = ["ShowRunnerConfig", "create_default_config", "load_config"]
