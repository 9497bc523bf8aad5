"""Shared utilities for fabricator-assemble."""

from ._json import JSON_SUFFIXES, load_json
from ._logging import LogFormatType, create_assemble_logger
from ._naming import get_name, slugify, to_title_case
from ._paths import ensure_parent_dir, expand_braces, expand_patterns, read_text

__all__ = [
    "JSON_SUFFIXES",
    "LogFormatType",
    "create_assemble_logger",
    "ensure_parent_dir",
    "expand_braces",
    "expand_patterns",
    "get_name",
    "load_json",
    "read_text",
    "slugify",
    "to_title_case",
]
