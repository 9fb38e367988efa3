"""Thread-safe progress counter."""

from __future__ import annotations

import threading
from collections.abc import Callable

REPORT_MASK = 0xFFFFFF


class Progress:
    """Counts steps and reports every 2**24 steps to a callback."""

    def __init__(self, maximum: int, callback: Callable[[int, int], object]) -> None:
        self.maximum = maximum
        self.current = 0
        self._callback = callback
        self._lock = threading.Lock()

    def inc(self) -> None:
        """Count one step, reporting (current, maximum) when the step is due."""
        with self._lock:
            self.current += 1
            if self.current & REPORT_MASK == REPORT_MASK:
                self._callback(self.current, self.maximum)