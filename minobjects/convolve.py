"""Convolution of a list with a kernel."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence


def convolve(values: Sequence[float], kernel: Sequence[float]) -> list[float]:
    """Return the causal convolution of values with kernel, same length as values."""
    values = [float(v) for v in values]
    kernel = [float(k) for k in kernel]
    return [
        sum(values[i - k] * weight for k, weight in enumerate(kernel) if i - k >= 0)
        for i in range(len(values))
    ]


class Convolve:
    """Convolve each incoming list with the kernel and send the result."""

    def __init__(
        self,
        kernel: Iterable[float] = (1.0, 0.0),
        on_output: Optional[Callable[[list[float]], None]] = None,
    ):
        self.kernel = [float(k) for k in kernel]
        self._on_output = on_output

    def list(self, values: Sequence[float]) -> list[float]:
        """Convolve values with the kernel, send and return the result."""
        result = convolve(values, self.kernel)
        if self._on_output is not None:
            self._on_output(result)
        return result