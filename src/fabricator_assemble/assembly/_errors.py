"""Top-level error reporting for assembly runs."""

import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from rich.console import Console
from rich.traceback import Traceback

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

EXIT_FAILURE = 1


@dataclass(slots=True, frozen=True)
class ErrorReport:
    """Normalized description of an error that reached the top level.

    Attributes:
        name: Error type name.
        reason: Short reason tag (``scan``, ``write``, ``config`` ...).
        message: Human-readable message.
        error: The original exception.
    """

    name: str = "Error"
    reason: str = ""
    message: str = "An error occurred"
    error: BaseException | None = None

    @classmethod
    def from_exception(cls, error: BaseException) -> "ErrorReport":  # noqa: UP037
        """Build a report from an exception, keeping defaults for empty fields."""
        defaults = cls()
        return cls(
            name=type(error).__name__ or defaults.name,
            reason=str(getattr(error, "reason", "") or defaults.reason),
            message=str(error) or defaults.message,
            error=error,
        )


@runtime_checkable
class ErrorSink(Protocol):
    """Receives errors that reached the top-level boundary."""

    def report(self, report: ErrorReport) -> bool:
        """Handle an error report.

        Returns:
            True if the error is handled and the process must not exit.
        """
        ...


class CallbackErrorSink:
    """Adapts an ``on_error`` callback to the ErrorSink protocol."""

    def __init__(self, callback: Callable[[ErrorReport], object]) -> None:
        self._callback: Callable[[ErrorReport], object] = callback

    def report(self, report: ErrorReport) -> bool:
        self._callback(report)
        return True


def print_error(report: ErrorReport, console: Console | None = None) -> None:
    """Print an error report and its traceback to stderr."""
    if console is None:
        console = Console(stderr=True)

    console.print(
        f"[bold red]Error (fabricator-assemble): {report.message}[/bold red]",
        markup=True,
        highlight=False,
    )
    error = report.error
    if error is not None and error.__traceback__ is not None:
        console.print(Traceback.from_exception(type(error), error, error.__traceback__))


def handle_error(
    error: BaseException,
    *,
    sink: ErrorSink | None = None,
    log_errors: bool = False,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    console: Console | None = None,
) -> ErrorReport:
    """Report an error that reached the top level of a run.

    The sink and logging are independent: either one marks the error as
    handled. With neither, the error is printed and the process exits with
    status 1.

    Args:
        error: The exception that aborted the run.
        sink: Caller-supplied error sink.
        log_errors: Whether to print and log the error.
        logger: Logger receiving an ``assembly_failed`` event.
        console: Console used for printing; stderr when omitted.

    Returns:
        The normalized report, when the error was handled.

    Raises:
        SystemExit: If the error was not handled.
    """
    report = ErrorReport.from_exception(error)
    handled = False

    if sink is not None:
        handled = sink.report(report)

    if log_errors:
        if logger is not None:
            logger.error(
                "assembly_failed",
                error=report.name,
                reason=report.reason,
                message=report.message,
            )
        print_error(report, console)
        handled = True

    if not handled:
        print_error(report, console)
        sys.exit(EXIT_FAILURE)

    return report
