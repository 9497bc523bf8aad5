"""The command-line interface for fabricator-assemble."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from fabricator_assemble.assembly import Assembler, ErrorReport
from fabricator_assemble.config import ConfigError, load_config

from ._exit_codes import EXIT_ASSEMBLY_ERROR, EXIT_CONFIG_ERROR

_HELP = "Assemble static toolkit pages from views, materials, data and docs."


class _RecordingSink:
    """Error sink that keeps reports so the command can pick its exit code."""

    def __init__(self) -> None:
        self.reports: list[ErrorReport] = []

    def report(self, report: ErrorReport) -> bool:
        self.reports.append(report)
        return True


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="fabricator-assemble",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.command(name="build")
    def _build(  # pyright: ignore[reportUnusedFunction]
        *,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to a TOML config file")
        ] = None,
        base_dir: Annotated[
            Path | None,
            Parameter(name="--base-dir", help="Directory patterns are resolved against"),
        ] = None,
        dest: Annotated[
            str | None, Parameter(name="--dest", help="Output directory")
        ] = None,
        log_errors: Annotated[
            bool, Parameter(
                name="--log-errors",
                help="Print fatal errors with their traceback and log them",
            )
        ] = False,
        verbose: Annotated[bool, Parameter(help="Enable debug logging")] = False,
    ) -> None:
        """Assemble every view into the output directory.

        Args:
            config: Explicit path to config file.
            base_dir: Directory that globs and output paths are relative to.
            dest: Output directory, overriding the configured one.
            log_errors: Print fatal errors with their traceback and send them to
                the assembly log instead of a one-line summary.
            verbose: Enable debug logging.
        """
        overrides: dict[str, object] = {}
        if base_dir is not None:
            overrides["base_dir"] = base_dir
        if dest is not None:
            overrides["dest"] = dest
        if log_errors:
            overrides["log_errors"] = True
        if verbose:
            overrides["logging"] = {"level": "debug"}

        try:
            loaded = load_config(overrides, config_path=config)
        except ConfigError as e:
            error_console.print(f"[red]Error:[/red] {e}", highlight=False)
            raise SystemExit(EXIT_CONFIG_ERROR) from e

        sink = _RecordingSink()
        result = Assembler(
            loaded,
            error_sink=None if log_errors else sink,
            console=error_console,
        ).run()

        if result is None:
            for report in sink.reports:
                error_console.print(f"[red]Error:[/red] {report.message}", highlight=False)
            raise SystemExit(EXIT_ASSEMBLY_ERROR)

        for skipped in result.skipped:
            error_console.print(
                f"[yellow]Skipped[/yellow] {skipped.source}: {skipped.error}",
                highlight=False,
            )
        console.print(
            f"Assembled {len(result.written)} view(s) into {loaded.dest_dir}",
            highlight=False,
        )

    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `fabricator-assemble` CLI."""
    app()


if __name__ == "__main__":
    main()
