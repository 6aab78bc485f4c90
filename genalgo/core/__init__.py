"""
🔧 genalgo Core Module
Configuration, logging et exceptions partagés
"""

from .config import Settings, get_settings
from .exceptions import ConfigurationError, EmptyPopulationError, GenAlgoError
from .logger import get_event_logger, get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "GenAlgoError",
    "ConfigurationError",
    "EmptyPopulationError",
    "get_logger",
    "get_event_logger",
    "setup_logging",
]
