"""Iterative line-by-line constraint propagation.

Each line keeps an explicit list of the fully determined lines still
compatible with the grid. A pass filters the lines queued as dirty against
the cells fixed so far, writes every cell on which all survivors agree, and
queues the orthogonal lines those writes touch. Rows and columns alternate
until neither queue holds anything. Nothing here ever guesses; cells that
are still open at the fixpoint are left for the search.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Set

from ..core.constants import Axis, Cell
from ..core.exceptions import PropagationContradiction
from ..core.models import ErrorTarget
from ..utils.logger import get_logger
from .grid import Grid, Line
from .lines import certainties, enumerate_line_possibilities, filter_by_fixed


LOGGER = get_logger(__name__)

Enumerator = Callable[[int, Sequence[int]], List[Line]]


@dataclass
class PropagationResult:
    grid: Grid
    row_possibilities: List[List[Line]]
    col_possibilities: List[List[Line]]
    pass_count: int

    @property
    def solved(self) -> bool:
        return self.grid.is_complete()


class ConstraintPropagator:
    """Runs propagation to a fixpoint; not interruptible mid-run."""

    def __init__(self, enumerator: Enumerator = enumerate_line_possibilities) -> None:
        self.enumerator = enumerator

    def propagate(
        self,
        row_hints: Sequence[Sequence[int]],
        col_hints: Sequence[Sequence[int]],
        grid: Optional[Grid] = None,
    ) -> PropagationResult:
        """Narrow every line and fill all forced cells.

        ``grid`` may carry cells fixed earlier (for instance a previous
        fixpoint); it is copied, never modified. Raises
        :class:`PropagationContradiction` naming the first line whose
        possibility set empties.
        """

        height = len(row_hints)
        width = len(col_hints)
        grid = grid.copy() if grid is not None else Grid(height, width)
        row_poss = [self.enumerator(width, hints) for hints in row_hints]
        col_poss = [self.enumerator(height, hints) for hints in col_hints]
        LOGGER.info(
            "Propagating %dx%d: %d row and %d column possibilities",
            height,
            width,
            sum(len(p) for p in row_poss),
            sum(len(p) for p in col_poss),
        )

        dirty_rows: Set[int] = set(range(height))
        dirty_cols: Set[int] = set(range(width))
        pass_count = 0
        while dirty_rows or dirty_cols:
            pass_count += 1
            dirty_cols |= self._narrow(Axis.ROW, dirty_rows, row_poss, grid, pass_count)
            dirty_rows.clear()
            dirty_rows |= self._narrow(Axis.COL, dirty_cols, col_poss, grid, pass_count)
            dirty_cols.clear()
            LOGGER.debug(
                "Pass %d: %d rows queued, %d cells open",
                pass_count,
                len(dirty_rows),
                grid.unknown_count(),
            )

        LOGGER.info(
            "Propagation reached fixpoint after %d passes (%d cells open)",
            pass_count,
            grid.unknown_count(),
        )
        return PropagationResult(grid, row_poss, col_poss, pass_count)

    @staticmethod
    def _narrow(
        axis: Axis,
        dirty: Set[int],
        possibilities: List[List[Line]],
        grid: Grid,
        pass_count: int,
    ) -> Set[int]:
        """Filter and fix the dirty lines of one axis; return touched orthogonal indices."""

        touched: Set[int] = set()
        for index in sorted(dirty):
            fixed = grid.row(index) if axis is Axis.ROW else grid.column(index)
            possibilities[index] = filter_by_fixed(possibilities[index], fixed)
            certain = certainties(possibilities[index])
            if certain is None:
                target = ErrorTarget(axis, index)
                LOGGER.warning("Contradiction in %s after %d passes", target.describe(), pass_count)
                raise PropagationContradiction(
                    f"Contradiction in {target.describe()}", target, pass_count
                )
            for pos, value in enumerate(certain):
                if value == Cell.UNKNOWN or fixed[pos] != Cell.UNKNOWN:
                    continue
                if axis is Axis.ROW:
                    grid.set(index, pos, value)
                else:
                    grid.set(pos, index, value)
                touched.add(pos)
        return touched
