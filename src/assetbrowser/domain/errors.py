from __future__ import annotations

"""
Asset Browser Domain Errors.

Defines the exception hierarchy raised by the scanning subsystem. Cancellation
is not an error and has no exception type.
"""


class AssetBrowserError(Exception):
    """Base class for all errors raised by the asset browser."""


class AssetScanError(AssetBrowserError, OSError):
    """
    Raised when a directory listing fails during a scan.

    Attributes:
        path: VFS path of the directory whose children could not be read.
    """

    def __init__(self, path: str, message: str = "") -> None:
        self.path = path
        super().__init__(message or f"Failed to read folder: {path}")
