from __future__ import annotations

"""
Asset Tree Builder.

Walks a virtual file system depth-first and turns it into a tree of
categories (folders) and assets (files whose name ends with one of the
factory's extensions). Files sharing a base name inside one folder collapse
into a single asset, which is how multi-file samples (markup, script, style,
docs) show up as one entry in a sample browser.
"""

import logging
from typing import List, Optional, Set, Tuple

from assetbrowser.core.services.callbacks import ScanCallback
from assetbrowser.domain.asset_models import CategoryNode, Node, RootNode
from assetbrowser.domain.errors import AssetScanError
from assetbrowser.domain.node_factory import NodeFactory
from assetbrowser.domain.vfs import VFSFile

logger = logging.getLogger(__name__)

PROGRESS_MESSAGE = "Reading Folder: {path}"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_asset_tree(
        root: VFSFile,
        factory: NodeFactory,
        callback: Optional[ScanCallback] = None,
        root_node: Optional[RootNode] = None,
) -> RootNode:
    """
    Scan a VFS folder into a sorted asset tree.

    Args:
        root: Folder to scan. The folder itself is not represented by a node.
        factory: Supplies the asset extensions and creates every node.
        callback: Optional progress/cancellation hook, polled once per folder.
        root_node: Existing root to populate (keeps UI node identity stable).

    Returns:
        RootNode: The populated root; partial if the scan was cancelled.

    Raises:
        AssetScanError: If a folder listing fails. When 'root_node' was
                        supplied it holds whatever was collected before the
                        failure.
    """
    return AssetBrowser(root, factory).read_assets(callback=callback, root_node=root_node)


class AssetBrowser:
    """
    Reusable scanner bound to one root folder and one node factory.

    The factory's extension list is captured at construction time.
    """

    def __init__(self, root_directory: VFSFile, factory: NodeFactory) -> None:
        self.root_directory = root_directory
        self.factory = factory
        extensions = factory.get_asset_extensions()
        self.extensions: Optional[List[str]] = list(extensions) if extensions is not None else None
        self._stopped_early = False

    def read_assets(
            self,
            callback: Optional[ScanCallback] = None,
            root_node: Optional[RootNode] = None,
    ) -> RootNode:
        root = root_node if root_node is not None else RootNode()
        self._stopped_early = False
        logger.info(f"Scanning assets in: {self.root_directory.path}")

        self._browse_directory(self.root_directory, root, callback)

        if self._stopped_early:
            logger.info(f"Asset scan cancelled. Partial tree holds {root.count_assets()} assets.")
        else:
            logger.info(f"Asset scan finished: {root.count_assets()} assets found.")
        return root

    def is_extension(self, ext: str) -> bool:
        """Return True if 'ext' is one of the configured asset extensions."""
        if self.extensions is None:
            return False
        return ext in self.extensions

    def get_extension(self, name: str) -> Optional[str]:
        """
        Find the asset extension of a file name.

        With a configured list the first entry that 'name' ends with wins; no
        longest-match resolution is attempted. Without a list, everything
        after the last dot is the extension.

        Returns:
            Optional[str]: The matched extension, or None if the file is not an asset.
        """
        if self.extensions is not None:
            for ext in self.extensions:
                if ext and name.endswith(ext):
                    return ext
            return None

        pos = name.rfind(".")
        if pos >= 0:
            return name[pos + 1:]
        return None

    @staticmethod
    def get_name_without_extension(name: str, ext: str) -> str:
        """Strip 'ext' and the separator preceding it from 'name'."""
        # A leading dot in 'ext' is itself the separator
        cut = len(ext) if ext.startswith(".") else len(ext) + 1
        return name[:max(len(name) - cut, 0)]

    # -------------------------------------------------------------------------
    # TRAVERSAL
    # -------------------------------------------------------------------------

    def _browse_directory(
            self,
            folder: VFSFile,
            node: CategoryNode,
            callback: Optional[ScanCallback],
    ) -> None:
        if callback is not None:
            if callback.is_cancelled():
                self._stopped_early = True
                return
            callback.update(PROGRESS_MESSAGE.format(path=folder.path))

        logger.debug(f"Reading folder: {folder.path}")
        try:
            children = folder.get_children()
        except OSError as e:
            logger.error(f"Failed to list folder '{folder.path}': {e}")
            raise AssetScanError(folder.path, f"Failed to read folder '{folder.path}': {e}") from e

        seen: Set[str] = set()
        for entry in children:
            if entry.is_folder():
                category = self.factory.create_category_node(node, entry.name)
                node.children.append(category)
                self._browse_directory(entry, category, callback)
            elif entry.is_file():
                ext = self.get_extension(entry.name)
                if ext is None:
                    continue
                base_name = self.get_name_without_extension(entry.name, ext)
                if not base_name or base_name in seen:
                    continue
                node.children.append(self.factory.create_asset_node(node, base_name))
                seen.add(base_name)

        node.children.sort(key=_sort_key)


def _sort_key(node: Node) -> Tuple[bool, str]:
    # Categories first, then case-insensitive name
    return node.is_asset(), node.name.lower()
