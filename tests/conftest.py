"""Shared test fixtures for fabricator-assemble tests."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import structlog
from rich.console import Console
from structlog.testing import CapturingLogger

from fabricator_assemble.config import AssembleConfig, load_config

SOURCE_FILES: dict[str, str] = {
    "src/views/index.html": "---\ntitle: Home\n---\n<h1>{{ title }}</h1>\n",
    "src/views/pages/02-about.html": (
        "---\ntitle: About\nnotes: Internal only\n---\n"
        "<p>{{ title }} {{ baseurl }}</p>\n"
    ),
    "src/views/layouts/default.html": (
        "<html>{% block content %}{% endblock %}</html>\n"
    ),
    "src/views/layouts/includes/footer.html": "<footer>{{ site.name }}</footer>",
    "src/data/site.yml": "name: Toolkit\nversion: 1\n",
    "src/data/colors.json": '{"primary": "red"}',
    "src/materials/components/01-button.html": (
        "---\nnotes: A *primary* button\nlabel: Go\n---\n"
        "<button>{{ label }}</button>"
    ),
    "src/materials/badge.html": "---\ntone: info\n---\n<span>badge</span>",
    "src/docs/01-getting-started.md": "# Getting started\n\nRun the *build*.\n",
}


@dataclass(frozen=True, slots=True)
class SourceTree:
    """A source tree written under a temporary directory."""

    root: Path

    @property
    def dist(self) -> Path:
        return self.root / "dist"

    def write(self, relative: str, content: str) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_text(content, encoding="utf-8")
        return path

    def config(self, **options: Any) -> AssembleConfig:  # pyright: ignore[reportExplicitAny]
        values: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
            "base_dir": self.root,
            "views": ["src/views/**/*", "!src/views/layouts/**"],
        }
        values.update(options)
        return load_config(values, include_env=False)


def write_tree(root: Path, files: Mapping[str, str]) -> SourceTree:
    tree = SourceTree(root=root)
    for relative, content in files.items():
        _ = tree.write(relative, content)
    return tree


@pytest.fixture
def source_tree(tmp_path: Path) -> SourceTree:
    """Create a small toolkit source tree.

    Structure:
        tmp_path/
            src/
                views/
                    index.html
                    pages/02-about.html
                    layouts/default.html
                    layouts/includes/footer.html
                data/site.yml, data/colors.json
                materials/components/01-button.html
                materials/badge.html
                docs/01-getting-started.md
    """
    return write_tree(tmp_path, SOURCE_FILES)


@pytest.fixture
def empty_tree(tmp_path: Path) -> SourceTree:
    """An empty source tree rooted at tmp_path."""
    return SourceTree(root=tmp_path)


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


@dataclass(frozen=True, slots=True)
class CapturedLogs:
    """A logger and the structlog CapturingLogger behind it."""

    logger: Any  # pyright: ignore[reportExplicitAny]
    capturing: CapturingLogger

    def events(self, name: str) -> list[dict[str, Any]]:  # pyright: ignore[reportExplicitAny]
        return [call.kwargs for call in self.capturing.calls if call.kwargs.get("event") == name]


def _passthrough(
    _logger: object, _method: str, event_dict: dict[str, Any]  # pyright: ignore[reportExplicitAny]
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    return event_dict


@pytest.fixture
def captured_logs() -> CapturedLogs:
    """Logger whose events are recorded instead of written."""
    capturing = CapturingLogger()
    logger = structlog.wrap_logger(
        capturing,
        processors=[_passthrough],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        context_class=dict,
    )
    return CapturedLogs(logger=logger, capturing=capturing)
