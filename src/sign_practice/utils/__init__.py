"""
Utility modules for the sign practice system.
"""

from .config import ConfigManager
from .logger import Logger

__all__ = [
    "ConfigManager",
    "Logger",
]
