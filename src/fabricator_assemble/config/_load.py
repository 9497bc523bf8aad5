# pyright: reportExplicitAny=false, reportAny=false
"""Layered configuration loading.

Sources are merged in order (later values override earlier):
1. Model defaults
2. Config file (explicit path, or ``fabricator.toml`` in the base directory)
3. Environment variables (``FABRICATOR_<SECTION>__<KEY>``)
4. Explicit overrides (the options passed to ``assemble``)
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fabricator_assemble.exceptions import ConfigError, ConfigLoadError

from ._loader import deep_merge, parse_env_vars, read_toml_file
from ._models import AssembleConfig

CONFIG_FILENAME = "fabricator.toml"

_ALIASES: dict[str, str] = {
    field.alias: name
    for name, field in AssembleConfig.model_fields.items()
    if field.alias is not None
}


def normalize_option_keys(values: Mapping[str, Any]) -> dict[str, Any]:
    """Rename camelCase option keys to their snake_case field names.

    Example:
        >>> normalize_option_keys({"buildData": {"a": 1}, "dest": "out"})
        {'build_data': {'a': 1}, 'dest': 'out'}
    """
    return {_ALIASES.get(key, key): value for key, value in values.items()}


def _find_config_file(config_path: Path | None, base_dir: Path | None) -> Path | None:
    if config_path is not None:
        if not config_path.exists():
            msg = f"Config file not found: {config_path}"
            raise ConfigLoadError(msg, path=config_path)
        return config_path

    candidate = (base_dir if base_dir is not None else Path()) / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_config(
    overrides: Mapping[str, Any] | None = None,
    *,
    config_path: Path | None = None,
    include_env: bool = True,
) -> AssembleConfig:
    """Load and validate assembly configuration.

    Args:
        overrides: Explicit options, camelCase or snake_case. A ``base_dir``
            here also decides where ``fabricator.toml`` is looked up.
        config_path: Explicit config file; must exist when given.
        include_env: Whether to read ``FABRICATOR_*`` environment variables.

    Returns:
        The validated, frozen configuration.

    Raises:
        ConfigLoadError: If the config file is missing or malformed.
        ConfigError: If the merged options fail validation.
    """
    explicit = normalize_option_keys(overrides or {})
    base_dir = explicit.get("base_dir")

    merged: dict[str, Any] = {}

    config_file = _find_config_file(
        config_path, Path(base_dir) if base_dir is not None else None
    )
    if config_file is not None:
        merged = deep_merge(merged, normalize_option_keys(read_toml_file(config_file)))

    if include_env:
        merged = deep_merge(merged, normalize_option_keys(parse_env_vars()))

    merged = deep_merge(merged, explicit)

    try:
        return AssembleConfig.model_validate(merged)
    except ValidationError as e:
        msg = f"Invalid assembly configuration: {e}"
        raise ConfigError(msg) from e
