"""Module wrapping: render a view inside a documentation shell.

A view whose path matches ``auto_fabricator`` is rendered inside the
configured ``module_wrapper`` template. The wrapper sees the view's raw
source, output path and front matter through the ``module_*`` keys, so a
documentation page can show a component's code next to a live instance.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path

from fabricator_assemble.config import AssembleConfig
from fabricator_assemble.templating import FrontMatter, YAMLFrontmatter
from fabricator_assemble.utils import slugify

from ._collector import read_matter


@dataclass(slots=True, frozen=True)
class ModuleRequest:
    """Argument passed to the ``module_assemble`` callback."""

    name: str
    path: Path


@dataclass(slots=True, frozen=True)
class ModuleMetadata:
    """Metadata describing a view rendered as a module.

    Attributes:
        name: View id.
        slug: View id with whitespace runs replaced by dashes.
        path: Default output path of the view.
        source: Raw body of the view.
        collection: Collection the view belongs to.
        data: Copy of the view's front matter before wrapping. The
            ``module_data`` snapshot adds the module keys to it.
        assemble: Result of the ``module_assemble`` callback, if configured.
    """

    name: str
    slug: str
    path: Path
    source: str
    collection: str
    data: YAMLFrontmatter = field(default_factory=dict)
    assemble: object = None

    def as_front_matter(self) -> YAMLFrontmatter:
        """Front matter keys injected into the view being wrapped."""
        values: YAMLFrontmatter = {
            "fabricator": True,
            "module_name": self.name,
            "module_slug": self.slug,
            "module_path": str(self.path),
            "module_source": self.source,
            "collection": self.collection,
        }
        values["module_data"] = {**self.data, **values}
        if self.assemble is not None:
            values["assemble"] = self.assemble
        return values


def matches_module_pattern(view_file: Path, config: AssembleConfig) -> bool:
    """Whether ``view_file`` should be wrapped as a module."""
    if not config.auto_fabricator:
        return False
    try:
        relative = view_file.relative_to(config.base_dir)
    except ValueError:
        relative = view_file
    return re.search(config.auto_fabricator, relative.as_posix()) is not None


def apply_module_wrapper(
    page: FrontMatter,
    *,
    view_id: str,
    view_file: Path,
    output_path: Path,
    collection: str,
    config: AssembleConfig,
) -> tuple[ModuleMetadata, str]:
    """Prepare a view to be rendered inside the module wrapper.

    Args:
        page: The view's parsed front matter and body.
        view_id: The view's id.
        view_file: Path of the view source.
        output_path: Default output path computed for the view.
        collection: The view's collection.
        config: Assembly configuration; ``module_wrapper`` must be set.

    Returns:
        The module metadata and the wrapper body to render.

    Raises:
        ScanError: If the wrapper template cannot be read or parsed.
    """
    if config.module_wrapper is None:
        msg = "module wrapping requires module_wrapper to be configured"
        raise ValueError(msg)

    wrapper = read_matter(config.resolve(config.module_wrapper))

    assemble: object = None
    if config.module_assemble is not None:
        assemble = config.module_assemble(
            ModuleRequest(name=view_id, path=view_file.parent)
        )

    metadata = ModuleMetadata(
        name=view_id,
        slug=slugify(view_id) if view_id else view_id,
        path=output_path,
        source=page.content,
        collection=collection,
        data=dict(page.data),
        assemble=assemble,
    )
    return metadata, wrapper.content
