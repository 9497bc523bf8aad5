"""Configuration models.

This module provides Pydantic models for assembly configuration sections
and the main AssembleConfig container.
"""

from fabricator_assemble.config._models._common import LogFormat, LogLevel
from fabricator_assemble.config._models._config import (
    AssembleConfig,
    BeautifierConfig,
    KeysConfig,
)
from fabricator_assemble.config._models._logging import LoggingConfig

__all__ = [
    "AssembleConfig",
    "BeautifierConfig",
    "KeysConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
]
