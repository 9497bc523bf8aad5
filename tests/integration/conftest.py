from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from fabricator_assemble.cli import create_app


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def assemble_cli(console: Console) -> Callable[..., int]:
    """Create the CLI app for testing; the returned callable gives the exit code."""

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app(list(args))
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run
