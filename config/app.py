"""
A module for managing application configurations.

Classes:
- AppConfig: Holds configurations for the command-line tools.
"""

import os

from pydantic import BaseModel, Field


class AppConfig(BaseModel):
    """A class for accessing the configuration of the command-line tools."""

    DEFAULT_LOG_LEVEL: str = Field(
        default_factory=lambda: os.environ.get("CHAINSPEC_LOG_LEVEL", "INFO")
    )
    """The log level used when none is given on the command line."""

    BUILTIN_FILE_GLOB: str = "*.json"
    """Pattern of the files holding builtin declarations when checking a directory."""
