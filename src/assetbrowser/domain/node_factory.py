from __future__ import annotations

"""
Node Factory Contract.

The scanner never instantiates nodes itself: it asks a factory, which lets
callers attach UI state to nodes and decide which file extensions count as
assets.
"""

from typing import List, Optional, Protocol, Sequence

from assetbrowser.domain.asset_models import AssetNode, CategoryNode

# -----------------------------------------------------------------------------
# CONTRACT
# -----------------------------------------------------------------------------

class NodeFactory(Protocol):
    """
    Structural interface required by the asset scanner.

    'get_asset_extensions' returns suffixes in match-priority order, or None
    to accept any extension found after the last dot of a file name.
    """

    def get_asset_extensions(self) -> Optional[Sequence[str]]:
        ...

    def create_category_node(self, parent: CategoryNode, name: str) -> CategoryNode:
        ...

    def create_asset_node(self, parent: CategoryNode, name: str) -> AssetNode:
        ...


# -----------------------------------------------------------------------------
# DEFAULT IMPLEMENTATION
# -----------------------------------------------------------------------------

class DefaultNodeFactory:
    """
    Factory producing plain CategoryNode/AssetNode instances.

    Args:
        extensions: Ordered asset suffixes. When one entry is a suffix of
                    another (e.g. '.html' and '.doc.html') the longer one must
                    be listed first. None enables "any extension" mode.
    """

    def __init__(self, extensions: Optional[Sequence[str]] = None) -> None:
        self._extensions: Optional[List[str]] = list(extensions) if extensions is not None else None

    def get_asset_extensions(self) -> Optional[List[str]]:
        if self._extensions is None:
            return None
        return list(self._extensions)

    def create_category_node(self, parent: CategoryNode, name: str) -> CategoryNode:
        return CategoryNode(name=name, parent=parent)

    def create_asset_node(self, parent: CategoryNode, name: str) -> AssetNode:
        return AssetNode(name=name, parent=parent)
