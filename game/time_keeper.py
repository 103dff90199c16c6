from __future__ import annotations

import time


class SearchTimeout(Exception):
    """Raised when the search runs out of time."""


class TimeKeeper:
    """Wall-clock budget started on construction, polled between units of work."""

    def __init__(self, time_threshold: float) -> None:
        self.start_time = time.perf_counter()
        self.time_threshold = time_threshold  # milliseconds

    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self.start_time) * 1000.0

    def is_time_over(self) -> bool:
        return self.elapsed_ms() >= self.time_threshold

    def check(self) -> None:
        if self.is_time_over():
            raise SearchTimeout
