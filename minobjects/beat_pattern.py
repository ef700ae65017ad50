"""Bang at intervals in a repeating pattern."""

from __future__ import annotations

import threading
from typing import Callable, Iterable, Optional

DEFAULT_PATTERN = (250.0, 250.0, 250.0, 250.0, 500.0, 500.0, 500.0, 500.0)


class Metro:
    """A one-shot timer that calls an action after a delay given in milliseconds.

    Scheduling again before the timer fires replaces the pending call.
    """

    def __init__(self, action: Callable[[], None]):
        self._action = action
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self.interval: Optional[float] = None

    @property
    def running(self) -> bool:
        """True while a call is pending."""
        with self._lock:
            return self._timer is not None

    def delay(self, milliseconds: float) -> None:
        """Schedule the action to run once after the given number of milliseconds."""
        milliseconds = float(milliseconds)
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self.interval = milliseconds
            timer = threading.Timer(
                max(0.0, milliseconds) / 1000.0, self._fire, args=(self._generation,)
            )
            timer.daemon = True
            self._timer = timer
            timer.start()

    def stop(self) -> None:
        """Cancel any pending call."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._generation += 1

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
        self._action()


class BeatPattern:
    """Emit bangs whose spacing follows a repeating list of intervals."""

    def __init__(
        self,
        on_bang: Optional[Callable[[], None]] = None,
        on_interval: Optional[Callable[[float], None]] = None,
    ):
        self._on_bang = on_bang
        self._on_interval = on_interval
        self._lock = threading.RLock()
        self._sequence = list(DEFAULT_PATTERN)
        self._index = 0
        self._on = False
        self.metro = Metro(self.tick)

    @property
    def pattern(self) -> list[float]:
        with self._lock:
            return list(self._sequence)

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
        """Turn the internal timer on or off."""
        self.on = bool(value)

    def set_pattern(self, pattern: Iterable[float]) -> None:
        """Replace the list of intervals, in milliseconds."""
        sequence = [float(item) for item in pattern]
        if not sequence:
            raise ValueError("pattern must hold at least one interval")
        with self._lock:
            self._sequence = sequence
            if self._index >= len(sequence):
                self._index = 0

    def tick(self) -> None:
        """Send the current interval and a bang, then schedule the next one."""
        with self._lock:
            interval = self._sequence[self._index]
            if self._on_interval is not None:
                self._on_interval(interval)
            if self._on_bang is not None:
                self._on_bang()
            self.metro.delay(interval)
            self._index += 1
            if self._index == len(self._sequence):
                self._index = 0