"""Bang at random intervals."""

from __future__ import annotations

import random
import threading
from typing import Callable, Optional

from minobjects.beat_pattern import Metro


def _at_least_one(value: float) -> float:
    value = float(value)
    return 1.0 if value < 1.0 else value


class BeatRandom:
    """Emit bangs separated by intervals drawn uniformly between min and max ms."""

    def __init__(
        self,
        minimum: float = 250.0,
        maximum: float = 1500.0,
        on_bang: Optional[Callable[[], None]] = None,
        on_interval: Optional[Callable[[float], None]] = None,
    ):
        self._on_bang = on_bang
        self._on_interval = on_interval
        self._lock = threading.RLock()
        self._min = 250.0
        self._max = 1500.0
        self.min = minimum
        self.max = maximum
        self._on = False
        self.metro = Metro(self.tick)

    @property
    def min(self) -> float:
        """Lower bound of the random interval, never below 1 ms."""
        return self._min

    @min.setter
    def min(self, value: float) -> None:
        self._min = _at_least_one(value)

    @property
    def max(self) -> float:
        """Upper bound of the random interval, never below 1 ms."""
        return self._max

    @max.setter
    def max(self, value: float) -> None:
        self._max = _at_least_one(value)

    @property
    def on(self) -> bool:
        return self._on

    @on.setter
    def on(self, value: bool) -> None:
        self._on = bool(value)
        if self._on:
            self.metro.delay(0.0)  # fire the first one straight away
        else:
            self.metro.stop()

    def toggle(self, value) -> None:
        """Turn the timer on or off."""
        self.on = bool(value)

    def tick(self) -> None:
        """Send a random interval and a bang, then schedule the next one."""
        with self._lock:
            interval = random.uniform(self._min, self._max)
            if self._on_interval is not None:
                self._on_interval(interval)
            if self._on_bang is not None:
                self._on_bang()
            self.metro.delay(interval)