"""Command-line interface for fabricator-assemble."""

from ._app import app, create_app, main
from ._exit_codes import EXIT_ASSEMBLY_ERROR, EXIT_CONFIG_ERROR, EXIT_SUCCESS

__all__ = [
    "EXIT_ASSEMBLY_ERROR",
    "EXIT_CONFIG_ERROR",
    "EXIT_SUCCESS",
    "app",
    "create_app",
    "main",
]
