"""Orchestration processors for coordinating services."""

from .drop_folder_processor import DropFolderProcessor
from .episode_processor import EpisodeProcessor
from .factory import create_processor

__all__ = ["DropFolderProcessor", "EpisodeProcessor", "create_processor"]
