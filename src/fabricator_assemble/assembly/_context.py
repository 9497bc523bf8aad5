"""Template context composition."""

from collections.abc import Mapping
from types import MappingProxyType

from fabricator_assemble.config import AssembleConfig

from ._store import AssemblyStore


def build_context(
    view_data: Mapping[str, object],
    store: AssemblyStore,
    config: AssembleConfig,
    extra: Mapping[str, object] | None = None,
) -> dict[str, object]:
    """Compose the context a view is rendered with.

    Layers are merged in order (later values override earlier):
    1. The view's own front matter
    2. Every data file, keyed by id
    3. Every material's front matter, keyed by id
    4. Build-wide ``build_data``
    5. The materials, views and docs namespaces under their configured keys
    6. ``extra``, synthesized for this render only

    Args:
        view_data: The view's front matter.
        store: The populated assembly store.
        config: Assembly configuration.
        extra: Outermost overrides.

    Returns:
        A new flat context dictionary.
    """
    namespaces: dict[str, object] = {
        config.keys.materials: MappingProxyType(store.materials),
        config.keys.views: MappingProxyType(store.views),
        config.keys.docs: MappingProxyType(store.docs),
    }
    return {
        **view_data,
        **store.data,
        **store.material_data,
        **config.build_data,
        **namespaces,
        **(extra or {}),
    }
