"""The assembly pipeline: collect once, then render and write every view."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment

from fabricator_assemble.config import AssembleConfig
from fabricator_assemble.exceptions import AssembleRenderError, AssembleWriteError
from fabricator_assemble.templating import (
    EnvironmentConfig,
    create_environment,
    render_template_string,
)
from fabricator_assemble.utils import create_assemble_logger, expand_patterns, get_name

from ._collector import collect, collection_for, read_matter
from ._context import build_context
from ._errors import CallbackErrorSink, ErrorSink, handle_error
from ._layout import wrap_page
from ._module import apply_module_wrapper, matches_module_pattern
from ._store import AssemblyStore
from ._writer import copy_path, default_output_path, resolve_output_path, write_output

if TYPE_CHECKING:
    from rich.console import Console
    from structlog.typing import FilteringBoundLogger

BASEURL_KEY = "baseurl"
LAYOUT_KEY = "layout"


@dataclass(slots=True, frozen=True)
class SkippedView:
    """A view whose output was not written because rendering failed."""

    source: Path
    error: AssembleRenderError


@dataclass(slots=True)
class AssembleResult:
    """Outcome of one assembly pass.

    Attributes:
        written: Primary output files, in view order.
        copies: Files written because of ``dest-copy``.
        skipped: Views that failed to render.
    """

    written: list[Path] = field(default_factory=list)
    copies: list[Path] = field(default_factory=list)
    skipped: list[SkippedView] = field(default_factory=list)


class Assembler:
    """A single build session.

    Owns the configuration, the assembly store and the template environment
    for one run. Nothing is shared between sessions.

    Example:
        >>> assembler = Assembler(load_config({"dest": "public"}))
        >>> result = assembler.run()
    """

    def __init__(
        self,
        config: AssembleConfig,
        *,
        error_sink: ErrorSink | None = None,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
        console: "Console | None" = None,  # noqa: UP037
    ) -> None:
        self.config: AssembleConfig = config
        self.store: AssemblyStore = AssemblyStore()
        if error_sink is None and config.on_error is not None:
            error_sink = CallbackErrorSink(config.on_error)
        self.error_sink: ErrorSink | None = error_sink
        self.logger: FilteringBoundLogger = logger or create_assemble_logger(
            level=config.logging.level.value,
            log_format=config.logging.format.value,  # type: ignore[arg-type]
            log_file=config.logging.file,
        )
        self._console: Console | None = console
        self._env: Environment | None = None

    def setup(self) -> Environment:
        """Populate the store and create the template environment.

        Returns:
            The environment views are rendered with.
        """
        collect(self.store, self.config)
        env = create_environment(
            self.config.search_paths,
            templates=self.store.templates(),
            tags=self.config.custom_tags,
            functions=self.config.custom_functions,
            config=EnvironmentConfig(autoescape=self.config.autoescape),
        )
        self._env = env
        self.logger.debug("scan_completed", **self.store.counts())
        return env

    def assemble(self) -> AssembleResult:
        """Render and write every view.

        Calls ``setup`` first if it has not run yet.

        Raises:
            ScanError: If a view cannot be read or parsed.
            AssembleWriteError: If an output file cannot be written.
        """
        env = self._env if self._env is not None else self.setup()

        result = AssembleResult()
        self.config.dest_dir.mkdir(parents=True, exist_ok=True)

        for view_file in expand_patterns(self.config.views, base_dir=self.config.base_dir):
            self._assemble_view(view_file, env, result)

        self.logger.info(
            "assembly_completed",
            written=len(result.written),
            copies=len(result.copies),
            skipped=len(result.skipped),
        )
        return result

    def run(self) -> AssembleResult | None:
        """Run setup and assembly behind the top-level error boundary.

        Returns:
            The result, or None if the run failed and the error was handled
            by the error sink or by logging.

        Raises:
            SystemExit: If the run failed and nothing handled the error.
        """
        try:
            _ = self.setup()
            return self.assemble()
        except Exception as e:  # noqa: BLE001
            handle_error(
                e,
                sink=self.error_sink,
                log_errors=self.config.log_errors,
                logger=self.logger,
                console=self._console,
            )
            return None

    def _assemble_view(
        self, view_file: Path, env: Environment, result: AssembleResult
    ) -> None:
        config = self.config
        view_id = get_name(view_file)
        collection = collection_for(view_file, config.keys.views)
        output_path = default_output_path(view_file, collection, config)

        page = read_matter(view_file)
        view_data = dict(page.data)
        inner_content: str | None = None
        module_values: dict[str, object] | None = None

        if matches_module_pattern(view_file, config):
            metadata, inner_content = apply_module_wrapper(
                page,
                view_id=view_id,
                view_file=view_file,
                output_path=output_path,
                collection=collection,
                config=config,
            )
            module_values = metadata.as_front_matter()
            view_data.update(module_values)

        if collection:
            view_data[BASEURL_KEY] = ".."
        view_data.setdefault(LAYOUT_KEY, config.layout)

        source = wrap_page(page.content, inner_content)
        context = build_context(view_data, self.store, config, extra=module_values)

        try:
            text = render_template_string(source, context, env=env)
        except Exception as e:  # noqa: BLE001
            self.logger.error("render_failed", source=str(view_file), error=str(e))
            error = AssembleRenderError(
                f"Failed to render {view_file}: {e}", source=view_file
            )
            error.__cause__ = e
            result.skipped.append(SkippedView(source=view_file, error=error))
            return

        destination = resolve_output_path(view_file, collection, view_data, config)
        self._write(view_file, destination, text)
        result.written.append(destination)
        self.logger.debug("view_written", source=str(view_file), dest=str(destination))

        copy = copy_path(view_data, config)
        if copy is not None:
            self._write(view_file, copy, text)
            result.copies.append(copy)
            self.logger.debug("view_copied", source=str(view_file), dest=str(copy))

    def _write(self, view_file: Path, destination: Path, text: str) -> None:
        try:
            write_output(destination, text)
        except OSError as e:
            self.logger.error(
                "write_failed", source=str(view_file), dest=str(destination), error=str(e)
            )
            msg = f"Error while compiling template {view_file}: {e}"
            raise AssembleWriteError(msg, source=view_file, destination=destination) from e
