"""Scanners that populate the assembly store from the source tree.

Each scanner clears its namespace, expands its configured patterns and
decodes every matching file. A file that cannot be read or decoded raises
ScanError and aborts the scan; there is no per-file recovery.
"""

from pathlib import Path

import orjson
import yaml

from fabricator_assemble.config import AssembleConfig
from fabricator_assemble.exceptions import ScanError
from fabricator_assemble.templating import (
    FrontMatter,
    YAMLFrontmatter,
    load_frontmatter_file,
    render_markdown,
)
from fabricator_assemble.utils import (
    JSON_SUFFIXES,
    expand_patterns,
    get_name,
    load_json,
    read_text,
    to_title_case,
)

from ._store import AssemblyStore, Collection, CollectionItem, DocEntry

NOTES_KEY = "notes"


def collection_for(path: Path, keyword: str) -> str:
    """Name of the collection a file belongs to.

    The collection is the file's parent directory name, or ``""`` when that
    directory is the top-level directory named ``keyword``.
    """
    dirname = path.parent.name
    return "" if dirname == keyword else dirname


def read_source(path: Path) -> str:
    """Read a source file, raising ScanError on failure."""
    try:
        return read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Failed to read {path}: {e}"
        raise ScanError(msg, path=path) from e


def read_matter(path: Path) -> FrontMatter:
    """Read a source file and split its front matter, raising ScanError."""
    try:
        return load_frontmatter_file(path)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValueError) as e:
        msg = f"Failed to parse front matter in {path}: {e}"
        raise ScanError(msg, path=path) from e


def _without_notes(data: YAMLFrontmatter) -> YAMLFrontmatter:
    return {key: value for key, value in data.items() if key != NOTES_KEY}


def _ensure_collection(namespace: dict[str, Collection], name: str) -> Collection:
    if name not in namespace:
        namespace[name] = Collection(name=to_title_case(name))
    return namespace[name]


def parse_layouts(store: AssemblyStore, config: AssembleConfig) -> None:
    """Store the raw text of each layout file by id."""
    store.layouts = {}
    for file in expand_patterns(config.layouts, base_dir=config.base_dir):
        store.layouts[get_name(file)] = read_source(file)


def parse_layout_includes(store: AssemblyStore, config: AssembleConfig) -> None:
    """Store the raw text of each layout include (partial) by id."""
    store.layout_includes = {}
    for file in expand_patterns(config.layout_includes, base_dir=config.base_dir):
        store.layout_includes[get_name(file)] = read_source(file)


def parse_data(store: AssemblyStore, config: AssembleConfig) -> None:
    """Decode each JSON or YAML data file and store it by id.

    Files with a ``.json`` suffix are decoded as JSON, everything else as YAML.
    """
    store.data = {}
    for file in expand_patterns(config.data, base_dir=config.base_dir):
        content = read_source(file)
        try:
            if file.suffix.lower() in JSON_SUFFIXES:
                store.data[get_name(file)] = load_json(content)
            else:
                store.data[get_name(file)] = yaml.safe_load(content)
        except (orjson.JSONDecodeError, yaml.YAMLError) as e:
            msg = f"Failed to parse data file {file}: {e}"
            raise ScanError(msg, path=file) from e


def parse_materials(store: AssemblyStore, config: AssembleConfig) -> None:
    """Collect materials, grouped by collection, and their front matter.

    Every material's front matter (minus ``notes``) lands in
    ``material_data`` and its body in ``material_sources``; only materials
    inside a collection directory are listed in ``materials``.
    """
    store.materials = {}
    store.material_data = {}
    store.material_sources = {}

    for file in expand_patterns(config.materials, base_dir=config.base_dir):
        material_id = get_name(file)
        collection = collection_for(file, config.keys.materials)
        matter = read_matter(file)
        data = _without_notes(matter.data)
        store.material_data[material_id] = data
        store.material_sources[material_id] = matter.content

        if not collection:
            continue

        notes = matter.data.get(NOTES_KEY)
        _ensure_collection(store.materials, collection).items[material_id] = (
            CollectionItem(
                name=to_title_case(material_id),
                data=data,
                notes=render_markdown(str(notes)) if notes else None,
                content=matter.content,
            )
        )


def parse_views(store: AssemblyStore, config: AssembleConfig) -> None:
    """Collect metadata for views that belong to a collection.

    View ids keep their ordering prefix so ``01-intro`` and ``intro`` stay
    distinct.
    """
    store.views = {}

    for file in expand_patterns(config.views, base_dir=config.base_dir):
        view_id = get_name(file, preserve_numbers=True)
        collection = collection_for(file, config.keys.views)
        matter = read_matter(file)

        if collection:
            _ensure_collection(store.views, collection).items[view_id] = (
                CollectionItem(
                    name=to_title_case(view_id),
                    data=_without_notes(matter.data),
                )
            )


def parse_docs(store: AssemblyStore, config: AssembleConfig) -> None:
    """Render each markdown document to HTML and store it by id."""
    store.docs = {}
    for file in expand_patterns(config.docs, base_dir=config.base_dir):
        doc_id = get_name(file)
        store.docs[doc_id] = DocEntry(
            name=to_title_case(doc_id),
            content=render_markdown(read_source(file)),
        )


def collect(store: AssemblyStore, config: AssembleConfig) -> None:
    """Run every scanner, filling the store completely."""
    parse_layouts(store, config)
    parse_layout_includes(store, config)
    parse_data(store, config)
    parse_materials(store, config)
    parse_views(store, config)
    parse_docs(store, config)
