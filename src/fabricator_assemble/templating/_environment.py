"""Jinja2 Environment factory."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader

from ._extensions import TemplateFunction, TemplateTag


@dataclass(slots=True, frozen=True)
class EnvironmentConfig:
    """Configuration for Jinja2 Environment.

    Attributes:
        autoescape: Enable autoescaping (default: True, output is HTML).
        trim_blocks: Remove first newline after a block tag.
        lstrip_blocks: Strip leading whitespace before block tags.
        keep_trailing_newline: Preserve trailing newline in templates.
    """

    autoescape: bool = True
    trim_blocks: bool = False
    lstrip_blocks: bool = False
    keep_trailing_newline: bool = True


def create_environment(
    search_paths: Sequence[Path],
    *,
    templates: Mapping[str, str] | None = None,
    tags: Sequence[TemplateTag] = (),
    functions: Sequence[TemplateFunction] = (),
    config: EnvironmentConfig | None = None,
) -> Environment:
    """Create a Jinja2 Environment for rendering views.

    Templates are looked up on disk under ``search_paths`` first, then by id
    in ``templates`` (layouts and materials collected from the source tree),
    so ``{% extends "default" %}`` resolves a layout by its id.

    Args:
        search_paths: Template search roots, highest precedence first.
        templates: In-memory templates keyed by id.
        tags: Extensions providing custom tags.
        functions: Callables exposed as template globals.
        config: Optional environment configuration. If None, uses defaults.

    Returns:
        Configured Jinja2 Environment.
    """
    if config is None:
        config = EnvironmentConfig()

    loader = ChoiceLoader(
        [
            FileSystemLoader([str(p) for p in search_paths]),
            DictLoader(dict(templates or {})),
        ]
    )
    env = Environment(
        loader=loader,
        autoescape=config.autoescape,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
        keep_trailing_newline=config.keep_trailing_newline,
        extensions=[tag.func for tag in tags],
    )

    for function in functions:
        env.globals[function.key] = function.func

    return env
