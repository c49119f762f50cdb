from __future__ import annotations

"""
Local Disk VFS Backend.

Exposes a directory of the host filesystem through the VFSFile contract.
Children are returned in the order the operating system lists them.
Symbolic links to folders are not followed, so a link pointing back up the
tree cannot make the scan recurse.
"""

import os
from typing import List, Optional

from assetbrowser.domain.vfs import VFSFile


class LocalFile(VFSFile):
    """
    A file or folder on the local disk.

    Args:
        path: Filesystem path; stored in absolute form.
    """

    def __init__(self, path: str, *, _is_dir: Optional[bool] = None) -> None:
        self._path = os.path.abspath(path)
        self._is_dir = _is_dir

    @property
    def name(self) -> str:
        return os.path.basename(self._path) or self._path

    @property
    def path(self) -> str:
        return self._path

    def is_folder(self) -> bool:
        if self._is_dir is None:
            self._is_dir = os.path.isdir(self._path)
        return self._is_dir

    def is_file(self) -> bool:
        return not self.is_folder() and os.path.isfile(self._path)

    def get_children(self) -> List[VFSFile]:
        children: List[VFSFile] = []
        with os.scandir(self._path) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(LocalFile(entry.path, _is_dir=is_dir))
        return children
