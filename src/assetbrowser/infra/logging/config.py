from __future__ import annotations

"""
Logging Settings for the Asset Browser.

The command line only decides how verbose the scan log is and where it goes.
Formats and rotation limits are fixed here.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 3


@dataclass(frozen=True)
class LoggingConfig:
    """
    Where scan diagnostics are written.

    Attributes:
        level: Minimum severity ('DEBUG', 'INFO', ...). Unknown names mean INFO.
        console: Echo records to stderr.
        log_file: Rotating log file, or None for console only.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
