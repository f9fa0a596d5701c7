"""Host-side driver for the solver's event sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from ..core.constants import DEFAULT_TRIAL_LIMIT, EventKind
from ..core.exceptions import HostTrialLimitExceeded, PicrossError
from ..core.models import SolverEvent
from ..engine.grid import Grid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class SolveOutcome:
    grid: Grid
    count: int
    partial_events: int = 0


def run_solver(
    events: Iterable[SolverEvent],
    trial_limit: Optional[int] = DEFAULT_TRIAL_LIMIT,
    on_partial: Optional[Callable[[SolverEvent], None]] = None,
) -> SolveOutcome:
    """Pull events until a terminal one arrives.

    Stops pulling and raises :class:`HostTrialLimitExceeded` once a partial
    event reports more than ``trial_limit`` nodes (``None`` or ``0`` disables
    the ceiling). Error events are raised as their carried exception.
    """

    partials = 0
    for event in events:
        if event.kind is EventKind.PARTIAL:
            partials += 1
            if on_partial is not None:
                on_partial(event)
            if trial_limit and event.count > trial_limit:
                LOGGER.warning("Abandoning search at %d trials (limit %d)", event.count, trial_limit)
                raise HostTrialLimitExceeded(event.count, trial_limit)
            continue
        if event.kind is EventKind.SOLUTION:
            if event.grid is None:
                raise PicrossError("Solution event carried no grid")
            return SolveOutcome(grid=event.grid, count=event.count, partial_events=partials)
        LOGGER.error("Solver failed: %s", event.message)
        raise event.error or PicrossError(event.message or "Solver failed")
    raise PicrossError("Solver stopped without a terminal event")
