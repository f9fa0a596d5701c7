"""Solver orchestration.

Three stages run lazily inside one generator:
  1. Validation: structural hint checks, no enumeration.
  2. Propagation: line possibilities narrowed to a fixpoint.
  3. Search: depth-first row assignment over the narrowed candidates.

The consumer pulls events one at a time and the engine does no work between
pulls, so abandoning the iterator is all it takes to cancel a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from ..core.constants import PARTIAL_EVENT_INTERVAL
from ..core.exceptions import PropagationContradiction
from ..core.models import SolverEvent
from ..utils.logger import get_logger
from .lines import filter_by_fixed, is_valid_line
from .propagator import ConstraintPropagator
from .search import BacktrackingSearch
from .validator import HintValidator


LOGGER = get_logger(__name__)


@dataclass
class SolverConfig:
    partial_interval: int = PARTIAL_EVENT_INTERVAL
    allow_empty_lines: bool = False
    height: Optional[int] = None
    width: Optional[int] = None


class PicrossSolver:
    """Validator, propagator and search wired together by injection."""

    def __init__(
        self,
        config: Optional[SolverConfig] = None,
        validator: Optional[HintValidator] = None,
        propagator: Optional[ConstraintPropagator] = None,
    ) -> None:
        self.config = config or SolverConfig()
        self.validator = validator or HintValidator(allow_empty_lines=self.config.allow_empty_lines)
        self.propagator = propagator or ConstraintPropagator()

    def solve(
        self,
        row_hints: Sequence[Sequence[int]],
        col_hints: Sequence[Sequence[int]],
    ) -> Iterator[SolverEvent]:
        """Yield partial events, then exactly one solution or error event."""

        LOGGER.info("Solving %dx%d puzzle", len(row_hints), len(col_hints))
        validation = self.validator.validate(
            row_hints, col_hints, self.config.height, self.config.width
        )
        if not validation.ok:
            yield SolverEvent.failure(
                validation.issues[0],
                count=0,
                targets=tuple(validation.error_targets),
                message="Hint contradiction: " + " / ".join(validation.errors),
            )
            return

        try:
            result = self.propagator.propagate(row_hints, col_hints)
        except PropagationContradiction as exc:
            yield SolverEvent.failure(exc, count=exc.pass_count, targets=(exc.target,))
            return

        grid = result.grid
        if grid.is_complete() and all(
            is_valid_line(grid.column(j), hints) for j, hints in enumerate(col_hints)
        ):
            LOGGER.info("Solved by propagation alone in %d passes", result.pass_count)
            yield SolverEvent.solution(grid.copy(), result.pass_count)
            return

        row_candidates = [
            filter_by_fixed(poss, grid.row(i))
            for i, poss in enumerate(result.row_possibilities)
        ]
        search = BacktrackingSearch(
            col_hints,
            row_candidates,
            grid,
            base_count=result.pass_count,
            partial_interval=self.config.partial_interval,
        )
        yield from search.events()


def solve(
    row_hints: Sequence[Sequence[int]],
    col_hints: Sequence[Sequence[int]],
    config: Optional[SolverConfig] = None,
) -> Iterator[SolverEvent]:
    """Convenience wrapper around :meth:`PicrossSolver.solve`."""

    return PicrossSolver(config).solve(row_hints, col_hints)
