"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable


class Ticker:
    """Measures the time between successive ``elapsed`` calls."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._ticking = False
        self._stamp = 0.0

    def start(self) -> None:
        self._ticking = True
        self._stamp = self._clock()

    def reset(self) -> None:
        self._stamp = self._clock()

    def elapsed(self) -> float:
        """Seconds since the last start, reset or ``elapsed`` call."""
        now = self._clock()
        delta = now - self._stamp
        self._stamp = now
        return delta

    def is_ticking(self) -> bool:
        return self._ticking