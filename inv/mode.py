"""
Debug-tier switch.

Invariants whose name starts with the debug marker are only evaluated while
the switch is enabled. The switch starts enabled and can only be turned off;
there is no way to turn it back on.
"""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class DebugMode:
    """One-way switch controlling whether debug-tier invariants run."""

    def __init__(self):
        self._disabled = threading.Event()
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return not self._disabled.is_set()

    def disable(self) -> None:
        """Stop evaluating debug-tier invariants. Cannot be undone."""
        with self._lock:
            if self._disabled.is_set():
                return
            self._disabled.set()
        logger.info("debug-tier invariants disabled")

    def __repr__(self) -> str:
        return f"DebugMode(enabled={self.enabled})"


# Process-wide switch used when no mode is passed to an entry point.
DEFAULT_MODE = DebugMode()


def disable_debug() -> None:
    """Disable debug-tier invariants for the rest of the process."""
    DEFAULT_MODE.disable()


def debug_enabled() -> bool:
    return DEFAULT_MODE.enabled
