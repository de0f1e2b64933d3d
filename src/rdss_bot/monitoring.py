"""
Supervisor coverage monitoring settings.

The check interval is process-wide and may be changed at runtime by the
``set_coverage_timer`` command, so reads and writes go through a lock.
"""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class CoverageInterval:
    """Lock-guarded interval (in whole minutes) between coverage checks."""

    def __init__(self, minutes: int) -> None:
        if minutes < 1:
            raise ValueError("Coverage check interval must be at least 1 minute")
        self._minutes = minutes
        self._lock = threading.Lock()

    @property
    def minutes(self) -> int:
        with self._lock:
            return self._minutes

    def set_minutes(self, minutes: int) -> int:
        """Replace the interval, returning the previous value."""
        if minutes < 1:
            raise ValueError("Coverage check interval must be at least 1 minute")
        with self._lock:
            previous, self._minutes = self._minutes, minutes
        logger.info("Coverage check interval changed from %d to %d minutes", previous, minutes)
        return previous


__all__ = ["CoverageInterval"]
