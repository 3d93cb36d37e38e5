"""
Initializes the config package.

The config package is responsible for loading and managing application-wide
configurations, making them accessible throughout the application.
"""

# This import is done to facilitate cleaner imports in the project
# `from config import AppConfig` instead of `from config.app import AppConfig`
from .app import AppConfig

__all__ = ["AppConfig"]
