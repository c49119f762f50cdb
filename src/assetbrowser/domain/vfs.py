from __future__ import annotations

"""
Virtual File System Contract.

Declares the read-only directory abstraction consumed by the asset scanner.
Concrete backends (local disk, zip archives) live in 'assetbrowser.infra.vfs'.
"""

from abc import ABC, abstractmethod
from typing import List

# -----------------------------------------------------------------------------
# ABSTRACT ENTRY
# -----------------------------------------------------------------------------

class VFSFile(ABC):
    """
    A single entry (folder or file) of a virtual file system.

    Implementations must be read-only from the scanner's perspective. The
    order of 'get_children' is backend-defined and is never assumed sorted.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Entry name without any parent path component."""

    @property
    @abstractmethod
    def path(self) -> str:
        """Display path of the entry, used in progress and error messages."""

    @abstractmethod
    def is_folder(self) -> bool:
        """Return True if the entry can hold children."""

    @abstractmethod
    def is_file(self) -> bool:
        """Return True if the entry is a regular file."""

    @abstractmethod
    def get_children(self) -> List["VFSFile"]:
        """
        List the direct children of a folder.

        Raises:
            OSError: If the backing store cannot be read.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"
