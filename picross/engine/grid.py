"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from ..core.constants import Cell


Line = Tuple[Cell, ...]


class Grid:
    """Height x width matrix of tri-state cells.

    Branches of the search own independent copies; nothing shares a grid
    that is still being written to.
    """

    def __init__(self, height: int, width: int, fill: Cell = Cell.UNKNOWN) -> None:
        if height < 0 or width < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {height}x{width}")
        self.height = height
        self.width = width
        self.cells: List[List[Cell]] = [[fill] * width for _ in range(height)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Build a grid from the boundary encoding (1, 0, anything else unknown)."""

        height = len(rows)
        width = len(rows[0]) if rows else 0
        grid = cls(height, width)
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {r + 1} has {len(row)} cells, expected {width}")
            grid.cells[r] = [_decode(value) for value in row]
        return grid

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def set(self, row: int, col: int, value: Cell) -> None:
        self.cells[row][col] = value

    def row(self, index: int) -> Line:
        return tuple(self.cells[index])

    def column(self, index: int, stop: int | None = None) -> Line:
        rows = self.cells if stop is None else self.cells[:stop]
        return tuple(row[index] for row in rows)

    def set_row(self, index: int, line: Iterable[Cell]) -> None:
        values = list(line)
        if len(values) != self.width:
            raise ValueError(f"Row {index + 1} needs {self.width} cells, got {len(values)}")
        self.cells[index] = values

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def unknown_count(self) -> int:
        return sum(1 for row in self.cells for value in row if value == Cell.UNKNOWN)

    def is_complete(self) -> bool:
        return self.unknown_count() == 0

    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone.height = self.height
        clone.width = self.width
        clone.cells = [list(row) for row in self.cells]
        return clone

    def to_jsonable(self) -> List[List[int]]:
        return [[int(value) for value in row] for row in self.cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells and self.width == other.width

    def __repr__(self) -> str:
        return f"Grid({self.height}x{self.width}, unknown={self.unknown_count()})"


def _decode(value: int) -> Cell:
    if value == Cell.FILLED:
        return Cell.FILLED
    if value == Cell.EMPTY:
        return Cell.EMPTY
    return Cell.UNKNOWN
