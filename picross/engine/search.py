"""Depth-first row assignment with column-prefix pruning.

The search walks rows top to bottom, trying each row's remaining candidates
in enumeration order. A candidate is kept only if every column, read from
the top down to the current row, is still a valid prefix of its hint. The
recursion is kept on an explicit stack of frames so the walk can pause at
every event and resume when the consumer pulls again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence

from ..core.constants import PARTIAL_EVENT_INTERVAL
from ..core.exceptions import NoSolutionError
from ..core.models import SolverEvent
from ..utils.logger import get_logger
from .grid import Grid, Line
from .lines import is_valid_line, is_valid_prefix


LOGGER = get_logger(__name__)


@dataclass
class _Frame:
    row: int
    candidates: Iterator[Line]
    grid: Grid


class BacktrackingSearch:
    """Produces partial/solution/error events for one search run.

    ``base_count`` is added to the node counter on every event so the counts
    continue from the propagation stage. The event iterator is single use;
    start a new search to run again.
    """

    def __init__(
        self,
        col_hints: Sequence[Sequence[int]],
        row_candidates: Sequence[Sequence[Line]],
        grid: Grid,
        base_count: int = 0,
        partial_interval: int = PARTIAL_EVENT_INTERVAL,
    ) -> None:
        if partial_interval <= 0:
            raise ValueError("partial_interval must be positive")
        self.col_hints = [list(hints) for hints in col_hints]
        self.row_candidates = [list(cands) for cands in row_candidates]
        self.grid = grid
        self.base_count = base_count
        self.partial_interval = partial_interval
        self.nodes = 0

    @property
    def count(self) -> int:
        return self.base_count + self.nodes

    def events(self) -> Iterator[SolverEvent]:
        height = len(self.row_candidates)
        LOGGER.info(
            "Searching %d rows, candidates per row: %s",
            height,
            [len(c) for c in self.row_candidates],
        )
        stack: List[_Frame] = [self._frame(0, self.grid.copy())]
        while stack:
            frame = stack[-1]
            if frame.row == height:
                stack.pop()
                if self._columns_match(frame.grid):
                    LOGGER.info("Solution found after %d search nodes", self.nodes)
                    yield SolverEvent.solution(frame.grid.copy(), self.count)
                    return
                continue

            candidate = next(frame.candidates, None)
            if candidate is None:
                stack.pop()
                continue

            branch = frame.grid.copy()
            branch.set_row(frame.row, candidate)
            if not self._prefixes_valid(branch, frame.row + 1):
                continue

            self.nodes += 1
            if self.nodes % self.partial_interval == 0:
                yield SolverEvent.partial(branch.copy(), self.count)
            stack.append(self._frame(frame.row + 1, branch))

        LOGGER.warning("Search exhausted after %d nodes without a solution", self.nodes)
        error = NoSolutionError("No solution found", self.count)
        yield SolverEvent.failure(error, self.count)

    def _frame(self, row: int, grid: Grid) -> _Frame:
        candidates = self.row_candidates[row] if row < len(self.row_candidates) else []
        return _Frame(row=row, candidates=iter(candidates), grid=grid)

    def _prefixes_valid(self, grid: Grid, depth: int) -> bool:
        return all(
            is_valid_prefix(grid.column(j, stop=depth), hints)
            for j, hints in enumerate(self.col_hints)
        )

    def _columns_match(self, grid: Grid) -> bool:
        return all(
            is_valid_line(grid.column(j), hints)
            for j, hints in enumerate(self.col_hints)
        )
