"""Limit matrix values to a range."""

from __future__ import annotations

from typing import Sequence, Union


def _clamp(value, low, high):
    return min(max(value, low), high)


def _to_char(value: float) -> int:
    return int(_clamp(255.0 * float(value), 0.0, 255.0))


Cell = Union[tuple, bytes]


class JitClamp:
    """Clip every plane of every cell to the range [min, max].

    The limits are held as 8-bit values, so min and max read back in steps of 1/255.
    """

    def __init__(self, minimum: float = 0.0, maximum: float = 1.0):
        self._cmin = 0
        self._cmax = 255
        self.min = minimum
        self.max = maximum

    @property
    def min(self) -> float:
        """The value below which clipping occurs."""
        return self._cmin / 255.0

    @min.setter
    def min(self, value: float) -> None:
        self._cmin = _to_char(value)

    @property
    def max(self) -> float:
        """The value above which clipping occurs."""
        return self._cmax / 255.0

    @max.setter
    def max(self, value: float) -> None:
        self._cmax = _to_char(value)

    def calc_cell(self, cell: Sequence) -> tuple:
        """Clamp a cell of numeric planes; integer planes use integer limits."""
        fmin = self.min
        fmax = self.max
        return tuple(
            _clamp(value, int(fmin), int(fmax))
            if isinstance(value, int)
            else _clamp(float(value), fmin, fmax)
            for value in cell
        )

    def calc_pixel(self, pixel: Union[bytes, bytearray, Sequence[int]]) -> bytes:
        """Clamp a four-plane 8-bit cell to the cached 0-255 limits."""
        planes = bytes(pixel)
        if len(planes) != 4:
            raise ValueError("a pixel has exactly four planes")
        return bytes(_clamp(plane, self._cmin, self._cmax) for plane in planes)

    def process(self, matrix: Sequence[Sequence[Cell]]) -> list[list[Cell]]:
        """Clamp every cell of a matrix given as rows of cells; bytes cells are pixels."""
        return [
            [
                self.calc_pixel(cell) if isinstance(cell, (bytes, bytearray)) else self.calc_cell(cell)
                for cell in row
            ]
            for row in matrix
        ]