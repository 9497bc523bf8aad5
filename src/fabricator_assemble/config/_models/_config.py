"""Assembly configuration models.

Every option keeps the camelCase name used by fabricator toolkits as an
alias, so option mappings written for the JavaScript assembler validate
unchanged.
"""

import re
from collections.abc import Callable
from pathlib import Path
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fabricator_assemble.config._models._logging import LoggingConfig
from fabricator_assemble.templating._extensions import TemplateFunction, TemplateTag

type Patterns = tuple[str, ...]


class KeysConfig(BaseModel):
    """Names the store namespaces are exposed under in template contexts.

    ``views`` doubles as the name of the top-level views directory: a view
    whose parent directory has this name belongs to no collection. The same
    holds for ``materials``.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    materials: str = "materials"
    views: str = "views"
    docs: str = "docs"


class BeautifierConfig(BaseModel):
    """Formatting options handed to an HTML formatter.

    Unknown keys are kept so formatter-specific options pass through.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="allow")

    indent_size: int = 1
    indent_char: str = "\t"
    indent_with_tabs: bool = True


class AssembleConfig(BaseModel):
    """Immutable configuration for one assembly run.

    Glob patterns and output paths are resolved against ``base_dir``.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    base_dir: Path = Field(default=Path(), alias="baseDir")
    layout: str = "default"
    layouts: Patterns = ("src/views/layouts/*",)
    layout_includes: Patterns = Field(
        default=("src/views/layouts/includes/*",), alias="layoutIncludes"
    )
    views: Patterns = ("src/views/**/*",)
    src: Patterns = ("src/views",)
    materials: Patterns = ("src/materials/**/*",)
    data: Patterns = ("src/data/**/*.{json,yml}",)
    build_data: dict[str, Any] = Field(default_factory=dict, alias="buildData")  # pyright: ignore[reportExplicitAny]
    docs: Patterns = ("src/docs/**/*.md",)
    keys: KeysConfig = Field(default_factory=KeysConfig)
    dest: Path = Path("dist")
    extension: str = ".html"
    dest_map: dict[str, str] = Field(default_factory=dict, alias="destMap")
    beautifier: BeautifierConfig = Field(default_factory=BeautifierConfig)
    on_error: Callable[..., object] | None = Field(default=None, alias="onError")
    log_errors: bool = Field(default=False, alias="logErrors")
    auto_fabricator: str | None = Field(default=None, alias="autoFabricator")
    module_wrapper: Path | None = Field(default=None, alias="moduleWrapper")
    module_assemble: Callable[..., object] | None = Field(
        default=None, alias="moduleAssemble"
    )
    custom_tags: tuple[TemplateTag, ...] = Field(default=(), alias="customTags")
    custom_functions: tuple[TemplateFunction, ...] = Field(
        default=(), alias="customFunctions"
    )
    autoescape: bool = True
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator(
        "layouts",
        "layout_includes",
        "views",
        "src",
        "materials",
        "data",
        "docs",
        mode="before",
    )
    @classmethod
    def _coerce_patterns(cls, value: object) -> object:
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator("extension")
    @classmethod
    def _normalize_extension(cls, value: str) -> str:
        if value and not value.startswith("."):
            return f".{value}"
        return value

    @field_validator("auto_fabricator")
    @classmethod
    def _check_auto_fabricator(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as e:
                msg = f"autoFabricator is not a valid regular expression: {e}"
                raise ValueError(msg) from e
        return value

    @model_validator(mode="after")
    def _check_module_wrapper(self) -> Self:
        if self.auto_fabricator and self.module_wrapper is None:
            msg = "autoFabricator requires moduleWrapper to be set"
            raise ValueError(msg)
        return self

    def resolve(self, path: str | Path) -> Path:
        """Resolve a configured or front-matter path against ``base_dir``."""
        return self.base_dir / path

    @property
    def dest_dir(self) -> Path:
        """Output root resolved against ``base_dir``."""
        return self.resolve(self.dest)

    @property
    def search_paths(self) -> tuple[Path, ...]:
        """Template engine search roots resolved against ``base_dir``."""
        return tuple(self.resolve(root) for root in self.src)
