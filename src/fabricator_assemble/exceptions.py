"""fabricator-assemble exceptions."""

from pathlib import Path


class AssembleError(Exception):
    """Base exception for assembly errors.

    Attributes:
        reason: Short machine-friendly reason, surfaced in error reports.
    """

    reason: str = ""


class ConfigError(AssembleError):
    """Base exception for configuration errors."""

    reason = "config"


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ScanError(AssembleError):
    """Raised when a source file cannot be read or decoded during a scan."""

    reason = "scan"

    def __init__(self, message: str, *, path: Path) -> None:
        """Initialize with error message and the offending file."""
        super().__init__(message)
        self.path: Path = path


class AssembleRenderError(AssembleError):
    """A single view failed to render.

    Render failures are recorded on the assembly result and never abort a run.
    """

    reason = "render"

    def __init__(self, message: str, *, source: Path) -> None:
        """Initialize with error message and the view that failed."""
        super().__init__(message)
        self.source: Path = source


class AssembleWriteError(AssembleError):
    """Raised when rendered output cannot be written."""

    reason = "write"

    def __init__(self, message: str, *, source: Path, destination: Path) -> None:
        """Initialize with error message, source view and destination."""
        super().__init__(message)
        self.source: Path = source
        self.destination: Path = destination
