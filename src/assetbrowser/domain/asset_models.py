from __future__ import annotations

"""
Asset Tree Data Models.

Provides the node types produced by the asset scanner. A scan yields a
RootNode whose children are CategoryNodes (folders) and AssetNodes
(extension-free file base names). Node kinds are queried through 'kind()',
never through isinstance checks, so factories may return subclasses that
carry arbitrary UI state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class NodeKind(str, Enum):
    CATEGORY = "category"
    ASSET = "asset"


# -----------------------------------------------------------------------------
# BASE NODE
# -----------------------------------------------------------------------------

@dataclass
class Node:
    """
    Common capability set of every tree node.

    Attributes:
        name: Display name (folder name or asset base name).
        parent: Owning category. Excluded from equality and repr.
    """
    name: str
    parent: Optional["CategoryNode"] = field(default=None, compare=False, repr=False)

    def kind(self) -> NodeKind:
        raise NotImplementedError

    def is_category(self) -> bool:
        return self.kind() is NodeKind.CATEGORY

    def is_asset(self) -> bool:
        return self.kind() is NodeKind.ASSET

    @property
    def path(self) -> str:
        """Slash-joined names from the root down to this node."""
        parts: List[str] = []
        node: Optional[Node] = self
        while node is not None:
            if node.name:
                parts.append(node.name)
            node = node.parent
        return "/".join(reversed(parts))


# -----------------------------------------------------------------------------
# CONCRETE NODES
# -----------------------------------------------------------------------------

@dataclass
class AssetNode(Node):
    """A logical asset: one base name, whatever the number of backing files."""

    def kind(self) -> NodeKind:
        return NodeKind.ASSET


@dataclass
class CategoryNode(Node):
    """
    A folder of the scanned tree.

    Attributes:
        children: Ordered sub-categories and assets. After a scan all
                  categories precede all assets, each group sorted
                  case-insensitively by name.
    """
    children: List[Node] = field(default_factory=list)

    def kind(self) -> NodeKind:
        return NodeKind.CATEGORY

    @property
    def categories(self) -> List["CategoryNode"]:
        return [c for c in self.children if c.is_category()]  # type: ignore[misc]

    @property
    def assets(self) -> List[AssetNode]:
        return [c for c in self.children if c.is_asset()]  # type: ignore[misc]

    def iter_assets(self) -> Iterator[AssetNode]:
        """Yield every asset below this category, depth-first in child order."""
        for child in self.children:
            if child.is_category():
                yield from child.iter_assets()  # type: ignore[attr-defined]
            else:
                yield child  # type: ignore[misc]

    def count_assets(self) -> int:
        return sum(1 for _ in self.iter_assets())

    def find(self, path: str) -> Optional[Node]:
        """
        Resolve a slash-separated path relative to this category.

        Intermediate segments only match categories. The last segment matches
        the first child carrying that name, so a category wins over an asset
        of the same name.

        Args:
            path: Relative path such as 'Social/Profiles/Get Profile'.

        Returns:
            Optional[Node]: The matching node, or None if any segment is missing.
        """
        segments = [s for s in path.split("/") if s]
        current: Node = self
        for i, segment in enumerate(segments):
            if not current.is_category():
                return None
            last = i == len(segments) - 1
            match = None
            for child in current.children:  # type: ignore[attr-defined]
                if child.name == segment and (last or child.is_category()):
                    match = child
                    break
            if match is None:
                return None
            current = match
        return current


@dataclass
class RootNode(CategoryNode):
    """Synthetic, unnamed root of a scanned tree."""
    name: str = ""
