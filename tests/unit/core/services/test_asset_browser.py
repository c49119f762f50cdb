from __future__ import annotations

"""
Unit tests for the Asset Tree Builder.

Verifies:
1. Folder mirroring, extension matching and base-name deduplication.
2. Sibling ordering (categories first, case-insensitive names).
3. Cancellation, progress messages and listing failures.
4. Reuse of a caller-supplied root node.
"""

import logging
from typing import List

import pytest

from assetbrowser.core.services.asset_browser import AssetBrowser, build_asset_tree
from assetbrowser.core.services.callbacks import EventScanCallback
from assetbrowser.domain.asset_models import AssetNode, CategoryNode, NodeKind, RootNode
from assetbrowser.domain.errors import AssetScanError
from assetbrowser.domain.node_factory import DefaultNodeFactory


def names(node: CategoryNode) -> List[str]:
    return [c.name for c in node.children]


class RecordingCallback:
    def __init__(self, cancel_after: int = -1) -> None:
        self.messages: List[str] = []
        self._cancel_after = cancel_after

    def is_cancelled(self) -> bool:
        return 0 <= self._cancel_after <= len(self.messages)

    def update(self, message: str) -> None:
        self.messages.append(message)


# -----------------------------------------------------------------------------
# Structure
# -----------------------------------------------------------------------------

def test_folders_without_matching_files_mirror_hierarchy(make_vfs):
    root_dir = make_vfs({
        "b": {"deep": {"notes.md": None}},
        "a": {},
        "image.png": None,
    })

    tree = build_asset_tree(root_dir, DefaultNodeFactory([".js"]))

    assert isinstance(tree, RootNode)
    assert names(tree) == ["a", "b"]
    assert names(tree.children[1]) == ["deep"]
    assert tree.children[1].children[0].children == []
    assert tree.count_assets() == 0


def test_duplicate_base_name_keeps_first_match(make_vfs):
    root_dir = make_vfs({"a.sample": None, "a.snippet": None})

    tree = build_asset_tree(root_dir, DefaultNodeFactory([".sample", ".snippet"]))

    assert names(tree) == ["a"]
    assert tree.children[0].is_asset()


def test_multi_file_sample_collapses_into_one_asset(make_vfs):
    root_dir = make_vfs({
        "Get Profile.js": None,
        "Get Profile.html": None,
        "Get Profile.doc.html": None,
        "Get Profile.css": None,
    })
    factory = DefaultNodeFactory([".doc.html", ".html", ".js", ".css"])

    tree = build_asset_tree(root_dir, factory)

    assert names(tree) == ["Get Profile"]


def test_extension_order_is_priority_not_longest_match(make_vfs):
    root_dir = make_vfs({"page.doc.html": None})

    tree = build_asset_tree(root_dir, DefaultNodeFactory([".html", ".doc.html"]))

    # '.html' matches first, leaving '.doc' in the base name
    assert names(tree) == ["page.doc"]


def test_duplicates_are_scoped_per_folder(make_vfs):
    root_dir = make_vfs({
        "one": {"hello.js": None},
        "two": {"hello.js": None},
    })

    tree = build_asset_tree(root_dir, DefaultNodeFactory([".js"]))

    assert [a.path for a in tree.iter_assets()] == ["one/hello", "two/hello"]


def test_category_and_asset_with_same_name_coexist(make_vfs):
    root_dir = make_vfs({"Files.js": None, "Files": {"Upload.js": None}})

    tree = build_asset_tree(root_dir, DefaultNodeFactory([".js"]))

    assert [(c.name, c.kind()) for c in tree.children] == [
        ("Files", NodeKind.CATEGORY),
        ("Files", NodeKind.ASSET),
    ]


def test_sibling_ordering_categories_first_case_insensitive(make_vfs):
    root_dir = make_vfs({
        "omega.js": None,
        "Zeta": {},
        "alpha.js": None,
        "Beta": {},
    })

    tree = build_asset_tree(root_dir, DefaultNodeFactory([".js"]))

    assert names(tree) == ["Beta", "Zeta", "alpha", "omega"]


def test_nested_folders_are_sorted_too(make_vfs):
    root_dir = make_vfs({"outer": {"b.js": None, "A.js": None, "sub": {}}})

    tree = build_asset_tree(root_dir, DefaultNodeFactory([".js"]))

    assert names(tree.children[0]) == ["sub", "A", "b"]


def test_any_extension_mode_strips_last_suffix(make_vfs):
    root_dir = make_vfs({"readme.txt": None, "archive.tar.gz": None, "Makefile": None})

    tree = build_asset_tree(root_dir, DefaultNodeFactory(None))

    assert names(tree) == ["archive.tar", "readme"]


def test_undotted_extension_drops_separator(make_vfs):
    root_dir = make_vfs({"snippet.js": None})

    tree = build_asset_tree(root_dir, DefaultNodeFactory(["js"]))

    assert names(tree) == ["snippet"]


def test_files_with_empty_base_name_are_skipped(make_vfs):
    root_dir = make_vfs({".js": None, ".bashrc": None})

    assert build_asset_tree(root_dir, DefaultNodeFactory([".js"])).children == []
    assert build_asset_tree(root_dir, DefaultNodeFactory(None)).children == []


def test_nodes_are_linked_to_their_parent(make_vfs):
    root_dir = make_vfs({"Social": {"Profiles": {"Get Profile.js": None}}})

    tree = build_asset_tree(root_dir, DefaultNodeFactory([".js"]))

    asset = tree.find("Social/Profiles/Get Profile")
    assert isinstance(asset, AssetNode)
    assert asset.parent is tree.children[0].children[0]
    assert asset.path == "Social/Profiles/Get Profile"


def test_build_is_idempotent(make_vfs):
    layout = {"x": {"b.js": None, "a.css": None}, "y.js": None}
    factory = DefaultNodeFactory([".js", ".css"])

    first = build_asset_tree(make_vfs(layout), factory)
    second = build_asset_tree(make_vfs(layout), factory)

    assert first == second
    assert first is not second


# -----------------------------------------------------------------------------
# Factory usage
# -----------------------------------------------------------------------------

def test_extensions_are_captured_at_construction(make_vfs):
    class MutableFactory(DefaultNodeFactory):
        def __init__(self):
            super().__init__([".js"])
            self.calls = 0

        def get_asset_extensions(self):
            self.calls += 1
            return super().get_asset_extensions()

    factory = MutableFactory()
    browser = AssetBrowser(make_vfs({"a.js": None, "sub": {"b.js": None}}), factory)
    browser.read_assets()

    assert factory.calls == 1


def test_custom_factory_nodes_are_used(make_vfs):
    class TaggedAsset(AssetNode):
        pass

    class TaggingFactory(DefaultNodeFactory):
        def create_asset_node(self, parent, name):
            return TaggedAsset(name=name, parent=parent)

    tree = build_asset_tree(make_vfs({"a.js": None}), TaggingFactory([".js"]))

    assert type(tree.children[0]) is TaggedAsset


def test_is_extension(make_vfs):
    browser = AssetBrowser(make_vfs({}), DefaultNodeFactory([".js", ".html"]))

    assert browser.is_extension(".js")
    assert not browser.is_extension(".css")
    assert not AssetBrowser(make_vfs({}), DefaultNodeFactory(None)).is_extension("js")


# -----------------------------------------------------------------------------
# Callback, cancellation and failures
# -----------------------------------------------------------------------------

def test_progress_message_for_every_folder(make_vfs):
    root_dir = make_vfs({"a": {"b": {}}, "c": {}}, path="/samples")
    cb = RecordingCallback()

    build_asset_tree(root_dir, DefaultNodeFactory([".js"]), cb)

    assert cb.messages == [
        "Reading Folder: /samples",
        "Reading Folder: /samples/a",
        "Reading Folder: /samples/a/b",
        "Reading Folder: /samples/c",
    ]


def test_cancelled_before_start_returns_empty_root(make_vfs):
    root_dir = make_vfs({"a": {}, "b.js": None})
    cb = EventScanCallback()
    cb.cancel()

    tree = build_asset_tree(root_dir, DefaultNodeFactory([".js"]), cb)

    assert tree.children == []
    assert root_dir.list_calls == 0
    assert cb.messages == 0


def test_cancel_mid_scan_keeps_partial_tree(make_vfs):
    root_dir = make_vfs({
        "first": {"one.js": None},
        "second": {"two.js": None},
        "top.js": None,
    })
    # Root and 'first' are read, 'second' is not expanded
    cb = RecordingCallback(cancel_after=2)

    tree = build_asset_tree(root_dir, DefaultNodeFactory([".js"]), cb)

    assert names(tree) == ["first", "second", "top"]
    assert names(tree.children[0]) == ["one"]
    assert tree.children[1].children == []


def test_cancel_after_last_folder_is_logged_as_finished(make_vfs, caplog):
    root_dir = make_vfs({"top.js": None})
    # Flips to cancelled once the only folder has been read
    cb = RecordingCallback(cancel_after=1)
    caplog.set_level(logging.INFO, logger="assetbrowser.core.services.asset_browser")

    tree = build_asset_tree(root_dir, DefaultNodeFactory([".js"]), cb)

    assert names(tree) == ["top"]
    assert "Asset scan finished: 1 assets found." in caplog.text
    assert "cancelled" not in caplog.text


def test_cancel_mid_scan_is_logged_as_partial(make_vfs, caplog):
    root_dir = make_vfs({"first": {"one.js": None}, "second": {"two.js": None}})
    cb = RecordingCallback(cancel_after=2)
    caplog.set_level(logging.INFO, logger="assetbrowser.core.services.asset_browser")

    build_asset_tree(root_dir, DefaultNodeFactory([".js"]), cb)

    assert "Asset scan cancelled. Partial tree holds 1 assets." in caplog.text


def test_listing_failure_reports_folder_path(make_vfs, broken):
    root_dir = make_vfs({"ok": {"a.js": None}, "locked": {"inner": broken}})

    with pytest.raises(AssetScanError) as exc_info:
        build_asset_tree(root_dir, DefaultNodeFactory([".js"]))

    assert exc_info.value.path == "/samples/locked/inner"
    assert isinstance(exc_info.value, OSError)
    assert isinstance(exc_info.value.__cause__, PermissionError)


def test_supplied_root_node_is_populated_and_returned(make_vfs):
    existing = RootNode()

    tree = build_asset_tree(make_vfs({"a.js": None}), DefaultNodeFactory([".js"]), root_node=existing)

    assert tree is existing
    assert names(existing) == ["a"]


def test_supplied_root_holds_partial_tree_after_failure(make_vfs, broken):
    existing = RootNode()
    root_dir = make_vfs({"a.js": None, "bad": broken})

    with pytest.raises(AssetScanError):
        build_asset_tree(root_dir, DefaultNodeFactory([".js"]), root_node=existing)

    # Collected before the failure, left unsorted
    assert names(existing) == ["a", "bad"]
