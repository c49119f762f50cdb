from __future__ import annotations

"""
Asset Tree Renderer.

Converts scanned asset trees into ASCII lines or JSON-serialisable
dictionaries. Children are emitted in the order the scanner left them in;
nothing is re-sorted here.
"""

from typing import Any, Dict, List, Optional

from assetbrowser.domain.asset_models import CategoryNode, Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_asset_tree(
        node: CategoryNode,
        lines: Optional[List[str]] = None,
        prefix: str = "",
) -> List[str]:
    """
    Recursively transform a category into connector-drawn text lines.

    Categories are suffixed with '/' so that a folder and an asset sharing a
    name stay distinguishable.

    Args:
        node: Category whose children are rendered (the category itself is not).
        lines: Accumulator; a new list is created if omitted.
        prefix: Indentation prefix for the current recursion level.

    Returns:
        List[str]: The accumulator.
    """
    if lines is None:
        lines = []

    total = len(node.children)
    for i, child in enumerate(node.children):
        is_last = i == total - 1
        connector = "└── " if is_last else "├── "

        if child.is_category():
            lines.append(f"{prefix}{connector}{child.name}/")
            render_asset_tree(
                child,  # type: ignore[arg-type]
                lines,
                prefix=prefix + ("    " if is_last else "│   "),
            )
        else:
            lines.append(f"{prefix}{connector}{child.name}")

    return lines


def tree_to_dict(node: Node) -> Dict[str, Any]:
    """Serialise a node and its descendants for JSON output."""
    data: Dict[str, Any] = {
        "name": node.name,
        "kind": node.kind().value,
        "path": node.path,
    }
    if node.is_category():
        data["children"] = [tree_to_dict(c) for c in node.children]  # type: ignore[attr-defined]
    return data
