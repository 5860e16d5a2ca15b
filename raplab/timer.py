"""A stopwatch over processor time."""

from __future__ import annotations

import sys
import time


class SimpleTimer:
    """Measures processor time elapsed since the last ``start()``."""

    def __init__(self) -> None:
        self._start = time.process_time()

    def start(self) -> "SimpleTimer":
        """Restart the timer and return it."""
        self._start = time.process_time()
        return self

    def duration_seconds(self) -> float:
        """Processor seconds since the last start."""
        return time.process_time() - self._start

    def print_duration(self) -> float:
        """Write the elapsed time to standard output and return it."""
        elapsed = self.duration_seconds()
        sys.stdout.write(f" System Clock Duration: {elapsed}\n")
        return elapsed