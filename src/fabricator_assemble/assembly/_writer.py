"""Output path resolution and file writing."""

from collections.abc import Mapping
from pathlib import Path

from fabricator_assemble.config import AssembleConfig
from fabricator_assemble.utils import ensure_parent_dir

DEST_KEY = "dest"
DEST_COPY_KEY = "dest-copy"


def default_output_path(view_file: Path, collection: str, config: AssembleConfig) -> Path:
    """Output path of a view before any override: ``dest/collection/name``."""
    return config.dest_dir / collection / view_file.name


def force_extension(path: Path, extension: str) -> Path:
    """Replace the suffix of ``path`` with ``extension``, appending if absent."""
    if path.suffix:
        return path.with_suffix(extension)
    return path.with_name(f"{path.name}{extension}")


def resolve_output_path(
    view_file: Path,
    collection: str,
    view_data: Mapping[str, object],
    config: AssembleConfig,
) -> Path:
    """Decide where a rendered view is written.

    Precedence, highest first:
    1. The view's ``dest`` front matter
    2. ``dest_map[collection]`` joined with the view's file name
    3. ``dest/collection/name``

    The resulting suffix is always the configured output extension.
    """
    dest = view_data.get(DEST_KEY)
    mapped = config.dest_map.get(collection)

    if dest:
        path = config.resolve(str(dest))
    elif mapped:
        path = config.resolve(mapped) / view_file.name
    else:
        path = default_output_path(view_file, collection, config)

    return force_extension(path, config.extension)


def copy_path(view_data: Mapping[str, object], config: AssembleConfig) -> Path | None:
    """Path of the secondary copy requested by ``dest-copy``, if any."""
    value = view_data.get(DEST_COPY_KEY)
    return config.resolve(str(value)) if value else None


def write_output(path: Path, text: str) -> None:
    """Write rendered text, creating parent directories as needed."""
    ensure_parent_dir(path)
    path.write_text(text, encoding="utf-8")
