"""Default configuration values for Show Runner."""

from .config import ShowRunnerConfig


def create_default_config(**overrides) -> ShowRunnerConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        ShowRunnerConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            roster_id="episodes.csv",
            drop_folder_id="/srv/podcast/drop",
        )
    """
    return ShowRunnerConfig(**overrides)
