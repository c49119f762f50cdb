from __future__ import annotations

"""
Zip Archive VFS Backend.

Presents the content of a zip archive as a read-only folder tree. Folders
are derived from member paths, so archives without explicit directory
entries browse the same way as those that have them. Children keep the
order in which members first appear in the archive.
"""

import logging
import os
import zipfile
from typing import Dict, List

from assetbrowser.domain.vfs import VFSFile

logger = logging.getLogger(__name__)


class ZipArchiveFile(VFSFile):
    """
    Root folder of a zip archive.

    The archive is opened on construction and stays open until 'close' is
    called; the handle is usable as a context manager.

    Args:
        archive_path: Path of the .zip file.

    Raises:
        OSError: If the archive cannot be opened.
        zipfile.BadZipFile: If the file is not a valid zip archive.
    """

    def __init__(self, archive_path: str) -> None:
        self._archive_path = os.path.abspath(archive_path)
        self._zip = zipfile.ZipFile(self._archive_path)
        self._index: Dict[str, Dict[str, bool]] = _build_index(self._zip)
        self._closed = False
        logger.debug(f"Opened archive {self._archive_path} ({len(self._zip.infolist())} members)")

    @property
    def name(self) -> str:
        return os.path.basename(self._archive_path)

    @property
    def path(self) -> str:
        return self._archive_path

    def is_folder(self) -> bool:
        return True

    def is_file(self) -> bool:
        return False

    def get_children(self) -> List[VFSFile]:
        return self.list_entries("")

    def list_entries(self, inner_path: str) -> List[VFSFile]:
        """List the members directly below 'inner_path' ('' for the archive root)."""
        if self._closed:
            raise OSError(f"Archive is closed: {self._archive_path}")
        members = self._index.get(inner_path)
        if members is None:
            raise NotADirectoryError(f"Not a folder in archive: {self.display_path(inner_path)}")
        return [ZipEntry(self, child, is_dir) for child, is_dir in members.items()]

    def display_path(self, inner_path: str) -> str:
        return f"{self._archive_path}/{inner_path}" if inner_path else self._archive_path

    def close(self) -> None:
        if not self._closed:
            self._zip.close()
            self._closed = True

    def __enter__(self) -> "ZipArchiveFile":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class ZipEntry(VFSFile):
    """A member (file or implied folder) of an open archive."""

    def __init__(self, archive: ZipArchiveFile, inner_path: str, is_dir: bool) -> None:
        self._archive = archive
        self._inner_path = inner_path
        self._is_dir = is_dir

    @property
    def name(self) -> str:
        return self._inner_path.rsplit("/", 1)[-1]

    @property
    def path(self) -> str:
        return self._archive.display_path(self._inner_path)

    def is_folder(self) -> bool:
        return self._is_dir

    def is_file(self) -> bool:
        return not self._is_dir

    def get_children(self) -> List[VFSFile]:
        return self._archive.list_entries(self._inner_path)


def _build_index(zf: zipfile.ZipFile) -> Dict[str, Dict[str, bool]]:
    """Map every folder path to its ordered {child path: is_dir} members."""
    index: Dict[str, Dict[str, bool]] = {"": {}}
    for info in zf.infolist():
        parts = [p for p in info.filename.split("/") if p and p != "."]
        for i in range(len(parts)):
            parent = "/".join(parts[:i])
            child = "/".join(parts[:i + 1])
            is_dir = i < len(parts) - 1 or info.is_dir()
            siblings = index.setdefault(parent, {})
            siblings[child] = siblings.get(child, False) or is_dir
            if is_dir:
                index.setdefault(child, {})
    return index
