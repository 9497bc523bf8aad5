# pyright: reportExplicitAny=false, reportAny=false
"""Single entry point for running an assembly."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from fabricator_assemble.assembly import (
    AssembleResult,
    Assembler,
    CallbackErrorSink,
    ErrorSink,
    handle_error,
)
from fabricator_assemble.config import ConfigError, load_config, normalize_option_keys


def _fallback_sink(options: Mapping[str, Any]) -> ErrorSink | None:
    callback = options.get("on_error")
    if callable(callback):
        return CallbackErrorSink(callback)
    return None


def assemble(
    options: Mapping[str, Any] | None = None,
    /,
    *,
    config_path: Path | None = None,
    error_sink: ErrorSink | None = None,
    **overrides: Any,
) -> AssembleResult | None:
    """Assemble views using materials, data and docs.

    Options may use the camelCase names of fabricator toolkits
    (``buildData``, ``destMap``, ``onError`` ...) or their snake_case field
    names, either as a mapping or as keyword arguments.

    Args:
        options: Assembly options.
        config_path: Optional TOML config file merged under the options.
        error_sink: Receives errors that abort the run. Defaults to the
            ``onError`` callback, if any.
        **overrides: Options given as keyword arguments.

    Returns:
        The assembly result, or None if the run failed and the error was
        handled.

    Raises:
        SystemExit: If the run failed and neither an error handler nor
            ``logErrors`` was configured.

    Example:
        >>> from fabricator_assemble import assemble
        >>> assemble({"dest": "dist", "logErrors": True})
    """
    merged = normalize_option_keys({**(options or {}), **overrides})

    try:
        config = load_config(merged, config_path=config_path)
    except ConfigError as e:
        handle_error(
            e,
            sink=error_sink or _fallback_sink(merged),
            log_errors=bool(merged.get("log_errors")),
        )
        return None

    return Assembler(config, error_sink=error_sink).run()

