"""Assembly configuration.

This module provides the public API for configuration management: loading,
layered merging and typed access to option values.

Example:
    >>> from fabricator_assemble.config import load_config
    >>> config = load_config({"dest": "public", "logErrors": True})
    >>> config.log_errors
    True
"""

from fabricator_assemble.exceptions import ConfigError, ConfigLoadError

from ._load import CONFIG_FILENAME, load_config, normalize_option_keys
from ._loader import (
    deep_merge,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    set_nested_key,
)
from ._models import (
    AssembleConfig,
    BeautifierConfig,
    KeysConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "CONFIG_FILENAME",
    "AssembleConfig",
    "BeautifierConfig",
    "ConfigError",
    "ConfigLoadError",
    "KeysConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "deep_merge",
    "load_config",
    "normalize_option_keys",
    "parse_env_vars",
    "parse_string_value",
    "read_toml_file",
    "set_nested_key",
]
