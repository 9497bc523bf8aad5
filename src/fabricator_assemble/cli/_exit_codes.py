"""Exit codes for the fabricator-assemble CLI."""

EXIT_SUCCESS: int = 0
"""All views were assembled."""

EXIT_ASSEMBLY_ERROR: int = 1
"""Assembly aborted on a scan or write error."""

EXIT_CONFIG_ERROR: int = 2
"""Configuration could not be loaded or validated."""
