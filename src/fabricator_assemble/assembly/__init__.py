"""Content collection, context composition and view rendering."""

from ._collector import (
    collect,
    collection_for,
    parse_data,
    parse_docs,
    parse_layout_includes,
    parse_layouts,
    parse_materials,
    parse_views,
)
from ._context import build_context
from ._errors import CallbackErrorSink, ErrorReport, ErrorSink, handle_error
from ._layout import wrap_page
from ._module import (
    ModuleMetadata,
    ModuleRequest,
    apply_module_wrapper,
    matches_module_pattern,
)
from ._pipeline import AssembleResult, Assembler, SkippedView
from ._store import AssemblyStore, Collection, CollectionItem, DocEntry
from ._writer import default_output_path, force_extension, resolve_output_path

__all__ = [
    "AssembleResult",
    "Assembler",
    "AssemblyStore",
    "CallbackErrorSink",
    "Collection",
    "CollectionItem",
    "DocEntry",
    "ErrorReport",
    "ErrorSink",
    "ModuleMetadata",
    "ModuleRequest",
    "SkippedView",
    "apply_module_wrapper",
    "build_context",
    "collect",
    "collection_for",
    "default_output_path",
    "force_extension",
    "handle_error",
    "matches_module_pattern",
    "parse_data",
    "parse_docs",
    "parse_layout_includes",
    "parse_layouts",
    "parse_materials",
    "parse_views",
    "resolve_output_path",
    "wrap_page",
]
