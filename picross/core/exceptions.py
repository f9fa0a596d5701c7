"""Custom exception hierarchy for the picross solver."""

from __future__ import annotations

from typing import Optional

from .models import ErrorTarget


class PicrossError(Exception):
    """Base exception for solver failures."""


class PuzzleLoadError(PicrossError):
    """Raised when a puzzle file cannot be read or decoded."""


class HintError(PicrossError):
    """Raised when the supplied hints are structurally infeasible."""

    def __init__(self, message: str, target: Optional[ErrorTarget] = None) -> None:
        super().__init__(message)
        self.target = target


class HintShapeError(HintError):
    """Raised when the number of hint lines does not match the grid size."""


class HintValueError(HintError):
    """Raised when a hint entry is not a positive integer."""


class HintOverflowError(HintError):
    """Raised when a line's blocks cannot fit in the opposite dimension."""


class HintSumMismatchError(HintError):
    """Raised when row and column hints imply different filled-cell totals."""


class PropagationContradiction(PicrossError):
    """Raised when a line runs out of possibilities during propagation."""

    def __init__(self, message: str, target: ErrorTarget, pass_count: int) -> None:
        super().__init__(message)
        self.target = target
        self.pass_count = pass_count


class NoSolutionError(PicrossError):
    """Raised when the backtracking search exhausts every candidate."""

    def __init__(self, message: str, count: int) -> None:
        super().__init__(message)
        self.count = count


class HostTrialLimitExceeded(PicrossError):
    """Raised by a host when the solver's node count passes its ceiling."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(
            f"Trial count {count} exceeded the limit of {limit}; "
            "the puzzle may have no solution"
        )
        self.count = count
        self.limit = limit
