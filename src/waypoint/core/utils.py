"""
Utility functions for search operations.
"""

import gc
import logging
import math
import os
import time
from typing import Optional

import psutil  # type: ignore # Missing stubs

logger = logging.getLogger(__name__)

# Seconds between two memory samples
MEMORY_CHECK_INTERVAL = 0.1


def get_memory_usage() -> int:
    """Get current resident memory of this process in bytes."""
    return psutil.Process(os.getpid()).memory_info().rss


class MemoryManager:
    """Samples process memory during a search and enforces an optional ceiling."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.monotonic()

    def check_memory(self) -> None:
        """
        Sample memory usage and compare it against the ceiling.

        Sampling is rate limited to one reading per ``MEMORY_CHECK_INTERVAL``.

        Raises:
            MemoryError: If usage grew beyond the ceiling even after a collection.
        """
        now = time.monotonic()
        if now - self._last_check < MEMORY_CHECK_INTERVAL:
            return
        self._last_check = now

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)
        if not self.max_memory or current - self.start_memory <= self.max_memory:
            return

        gc.collect()
        current = get_memory_usage()
        if current - self.start_memory > self.max_memory:
            logger.warning("Search memory limit exceeded: %.1fMB", current / 1024 / 1024)
            raise MemoryError(
                f"Memory usage {current / 1024 / 1024:.1f}MB exceeds "
                f"limit of {self.max_memory / 1024 / 1024:.1f}MB"
            )

    @property
    def peak_memory(self) -> int:
        """Peak memory seen so far, in bytes."""
        return self._peak_memory

    @property
    def peak_memory_mb(self) -> float:
        return self._peak_memory / 1024 / 1024


def is_finite(value: float) -> bool:
    return not (math.isinf(value) or math.isnan(value))
