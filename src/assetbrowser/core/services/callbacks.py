from __future__ import annotations

"""
Scan Progress and Cancellation Callbacks.

The scanner polls 'is_cancelled' once per folder and reports the folder it is
about to read through 'update'. Cancellation is cooperative: a set flag stops
further folders from being expanded but keeps everything collected so far.
"""

import logging
import threading
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONTRACT
# -----------------------------------------------------------------------------

class ScanCallback(Protocol):
    def is_cancelled(self) -> bool:
        ...

    def update(self, message: str) -> None:
        ...


# -----------------------------------------------------------------------------
# IMPLEMENTATIONS
# -----------------------------------------------------------------------------

class EventScanCallback:
    """
    Callback whose cancellation flag is a threading.Event.

    The event may be set from another thread (e.g. a UI controller) or from a
    signal handler while the scan runs on the calling thread.

    Args:
        event: Shared cancellation flag. A private one is created if omitted.
        on_update: Optional sink for progress messages.
    """

    def __init__(
            self,
            event: Optional[threading.Event] = None,
            on_update: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.event = event if event is not None else threading.Event()
        self._on_update = on_update
        self.messages = 0

    def cancel(self) -> None:
        if not self.event.is_set():
            logger.info("Scan cancellation requested.")
            self.event.set()

    def is_cancelled(self) -> bool:
        return self.event.is_set()

    def update(self, message: str) -> None:
        self.messages += 1
        logger.debug(message)
        if self._on_update is not None:
            self._on_update(message)


class LoggingScanCallback:
    """Never cancels; writes each progress message to a logger."""

    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self._log = log or logger
        self._level = level

    def is_cancelled(self) -> bool:
        return False

    def update(self, message: str) -> None:
        self._log.log(self._level, message)
