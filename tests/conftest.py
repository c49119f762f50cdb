from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An in-memory VFS builder so scanner tests control listing order and
   can inject listing failures.
3. Isolation of the per-user configuration file.
"""

import os
import sys
from typing import Any, Callable, Dict, List, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from assetbrowser.domain.vfs import VFSFile  # noqa: E402

# Marker value: a folder whose listing raises OSError
BROKEN = object()


class FakeEntry(VFSFile):
    """
    In-memory VFS entry.

    'content' is None for a file, a dict {child name: content} for a folder
    (dict order is the listing order) or BROKEN for an unreadable folder.
    """

    def __init__(self, name: str, path: str, content: Any) -> None:
        self._name = name
        self._path = path
        self._content = content
        self.list_calls = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return self._path

    def is_folder(self) -> bool:
        return self._content is not None

    def is_file(self) -> bool:
        return self._content is None

    def get_children(self) -> List[VFSFile]:
        self.list_calls += 1
        if self._content is BROKEN:
            raise PermissionError(13, "Permission denied", self._path)
        return [
            FakeEntry(name, f"{self._path}/{name}", content)
            for name, content in self._content.items()
        ]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_vfs() -> Callable[..., FakeEntry]:
    """
    Return a builder turning a nested dict into a FakeEntry root folder.

    Example:
        make_vfs({"Social": {"Get Profile.js": None}, "readme.txt": None})
    """
    def _build(layout: Dict[str, Any], name: str = "samples", path: Optional[str] = None) -> FakeEntry:
        return FakeEntry(name, path or f"/{name}", layout)

    return _build


@pytest.fixture
def broken() -> object:
    return BROKEN


@pytest.fixture
def isolated_config(tmp_path, monkeypatch) -> str:
    """Point the configuration module at a throwaway config.json."""
    config_file = str(tmp_path / "config" / "config.json")
    monkeypatch.setattr("assetbrowser.domain.config.CONFIG_FILE", config_file)
    return config_file
