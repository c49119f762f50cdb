from __future__ import annotations

import os

from assetbrowser.domain.vfs import VFSFile

from .local import LocalFile
from .zip_archive import ZipArchiveFile, ZipEntry


def open_vfs(path: str) -> VFSFile:
    """Open a local folder, or a .zip archive as a read-only folder."""
    if os.path.isfile(path) and path.lower().endswith(".zip"):
        return ZipArchiveFile(path)
    return LocalFile(path)


__all__ = [
    "LocalFile",
    "ZipArchiveFile",
    "ZipEntry",
    "open_vfs",
]
