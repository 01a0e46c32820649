"""Utility modules for the Study Session Scheduler."""

from .config import settings, Settings
from .logger import logger, setup_logger

__all__ = ["settings", "Settings", "logger", "setup_logger"]
