"""Detect logical transitions in a signal."""

from __future__ import annotations

import enum
from typing import Callable, Iterable, Optional


class Priority(enum.Enum):
    """Where output is delivered: the scheduler thread or the main thread."""

    HIGH = "scheduler"
    LOW = "main"


class EdgeDetector:
    """Call on_rise when the signal leaves zero and on_fall when it returns to zero."""

    def __init__(
        self,
        on_rise: Optional[Callable[[], None]] = None,
        on_fall: Optional[Callable[[], None]] = None,
        priority: Priority = Priority.HIGH,
    ):
        self._on_rise = on_rise
        self._on_fall = on_fall
        self.priority = Priority(priority)
        self._prev = 0.0

    def __call__(self, sample: float) -> None:
        """Process one sample."""
        if sample != 0.0 and self._prev == 0.0:
            if self._on_rise is not None:
                self._on_rise()
        elif sample == 0.0 and self._prev != 0.0:
            if self._on_fall is not None:
                self._on_fall()
        self._prev = sample

    def process(self, samples: Iterable[float]) -> None:
        """Process a run of samples in order."""
        for sample in samples:
            self(sample)