"""Five-point stencil averaging over a matrix."""

from __future__ import annotations

from typing import Sequence, Union

Cell = Union[tuple, bytes]


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


def _non_negative_int(value) -> int:
    value = float(value)
    return int(0.0 if value < 0 else value)


def _shape(matrix: Sequence[Sequence[Cell]]) -> tuple[int, int]:
    if not matrix or not matrix[0]:
        raise ValueError("matrix must hold at least one cell")
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("all rows of a matrix must have the same length")
    return width, len(matrix)


class JitStencil:
    """Average each cell with four neighbours at horizontal distance x and vertical distance y.

    Neighbours beyond the edge are taken from the nearest edge cell.
    """

    def __init__(self, x: int = 0, y: int = 0):
        self._x = 0
        self._y = 0
        self.x = x
        self.y = y

    @property
    def x(self) -> int:
        return self._x

    @x.setter
    def x(self, value) -> None:
        self._x = _non_negative_int(value)

    @property
    def y(self) -> int:
        return self._y

    @y.setter
    def y(self, value) -> None:
        self._y = _non_negative_int(value)

    def calc_cell(self, matrix: Sequence[Sequence[Cell]], column: int, row: int) -> Cell:
        """Return the stencil result for the cell at (column, row)."""
        width, height = _shape(matrix)
        if not (0 <= column < width and 0 <= row < height):
            raise IndexError(f"no cell at ({column}, {row})")

        def neighbour(c: int, r: int) -> Cell:
            return matrix[_clamp(r, 0, height - 1)][_clamp(c, 0, width - 1)]

        here = matrix[row][column]
        neighbours = (
            neighbour(column, row - self._y),
            neighbour(column + self._x, row),
            neighbour(column, row + self._y),
            neighbour(column - self._x, row),
        )
        result = []
        for plane, value in enumerate(here):
            average = sum((cell[plane] for cell in neighbours), value) / 5.0
            result.append(int(average) if isinstance(value, int) else average)
        if isinstance(here, (bytes, bytearray)):
            return bytes(result)
        return tuple(result)

    def process(self, matrix: Sequence[Sequence[Cell]]) -> list[list[Cell]]:
        """Apply the stencil to every cell, reading only from the input matrix."""
        _shape(matrix)
        return [
            [self.calc_cell(matrix, column, row) for column, _ in enumerate(cells)]
            for row, cells in enumerate(matrix)
        ]