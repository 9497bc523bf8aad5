# pyright: reportExplicitAny=false
"""In-memory store of everything collected from the source tree."""

from dataclasses import dataclass, field
from typing import Any

from fabricator_assemble.templating import YAMLFrontmatter


@dataclass(slots=True)
class CollectionItem:
    """One view or material inside a collection.

    Attributes:
        name: Display name derived from the item id.
        data: Front matter without the ``notes`` field.
        notes: Material notes rendered to HTML, if any.
        content: Material body, if any.
    """

    name: str
    data: YAMLFrontmatter = field(default_factory=dict)
    notes: str | None = None
    content: str | None = None


@dataclass(slots=True)
class Collection:
    """Items grouped by the sub-directory they live in."""

    name: str
    items: dict[str, CollectionItem] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class DocEntry:
    """A markdown document rendered to HTML."""

    name: str
    content: str


@dataclass(slots=True)
class AssemblyStore:
    """Namespaces populated by the collectors for one build session.

    The store is filled completely before the first view renders and is only
    read afterwards.
    """

    layouts: dict[str, str] = field(default_factory=dict)
    layout_includes: dict[str, str] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)
    materials: dict[str, Collection] = field(default_factory=dict)
    material_data: dict[str, YAMLFrontmatter] = field(default_factory=dict)
    material_sources: dict[str, str] = field(default_factory=dict)
    views: dict[str, Collection] = field(default_factory=dict)
    docs: dict[str, DocEntry] = field(default_factory=dict)

    def templates(self) -> dict[str, str]:
        """Template sources addressable by id from the template engine.

        Layouts win over layout includes, which win over materials.
        """
        templates: dict[str, str] = dict(self.material_sources)
        templates.update(self.layout_includes)
        templates.update(self.layouts)
        return templates

    def counts(self) -> dict[str, int]:
        """Number of entries per namespace, for logging."""
        return {
            "layouts": len(self.layouts),
            "layout_includes": len(self.layout_includes),
            "data": len(self.data),
            "materials": sum(len(c.items) for c in self.materials.values()),
            "material_data": len(self.material_data),
            "views": sum(len(c.items) for c in self.views.values()),
            "docs": len(self.docs),
        }
