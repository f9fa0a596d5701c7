"""Pretty-print helpers for picross grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, Sequence

from ..core.constants import Cell

if TYPE_CHECKING:
    from ..engine.grid import Grid
    from ..io.runner import SolveOutcome


SYMBOLS = {
    Cell.FILLED: "#",
    Cell.EMPTY: ".",
    Cell.UNKNOWN: "?",
}


def format_grid(grid: Grid, row_hints: Optional[Sequence[Sequence[int]]] = None) -> str:
    """Render the grid one row per line, optionally followed by its hint."""

    lines = []
    for r in range(grid.height):
        row_render = " ".join(SYMBOLS[Cell(value)] for value in grid.row(r))
        if row_hints is not None:
            hint = " ".join(str(n) for n in row_hints[r]) or "0"
            row_render = f"{row_render}   {hint}"
        lines.append(row_render)
    return "\n".join(lines)


def pretty_print_grid(grid: Grid, *, label: str | None = None, stream=None) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def print_solve_stats(
    outcome: SolveOutcome,
    *,
    backend: str = "search",
    row_hints: Optional[Sequence[Sequence[int]]] = None,
    stream=None,
) -> None:
    """Print the solution, each row followed by its hint, then a short summary."""

    stream = stream or sys.stdout
    grid = outcome.grid
    filled = sum(1 for r in range(grid.height) for value in grid.row(r) if value == Cell.FILLED)
    total = grid.height * grid.width

    print(format_grid(grid, row_hints), file=stream)
    print(file=stream)
    print("--- Solve ---", file=stream)
    print(f"  Size:          {grid.height} x {grid.width} ({total} cells)", file=stream)
    if total:
        print(f"  Filled:        {filled} ({filled / total * 100:.0f}%)", file=stream)
    print(f"  Backend:       {backend}", file=stream)
    print(f"  Trials:        {outcome.count}", file=stream)
    if outcome.partial_events:
        print(f"  Progress:      {outcome.partial_events} partial updates", file=stream)
