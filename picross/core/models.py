"""Data models supporting the picross solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .constants import Axis, EventKind

if TYPE_CHECKING:
    from ..engine.grid import Grid
    from .exceptions import HintError, PicrossError


@dataclass(frozen=True)
class ErrorTarget:
    """Row or column an error is attributed to."""

    axis: Axis
    index: int

    def describe(self) -> str:
        return f"{self.axis.label} {self.index + 1}"

    def to_jsonable(self) -> Dict[str, Any]:
        return {"axis": self.axis.value, "index": self.index}


@dataclass
class ValidationResult:
    """Outcome of a hint validation pass."""

    issues: List[HintError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def errors(self) -> List[str]:
        return [str(issue) for issue in self.issues]

    @property
    def error_targets(self) -> List[ErrorTarget]:
        return [issue.target for issue in self.issues if issue.target is not None]

    def raise_first(self) -> None:
        if self.issues:
            raise self.issues[0]


@dataclass(frozen=True)
class SolverEvent:
    """One step of the solver's event sequence.

    ``partial`` and ``solution`` events carry a grid snapshot owned by the
    consumer; ``error`` events carry the message, any row/column targets and
    the exception describing the failure.
    """

    kind: EventKind
    count: int
    grid: Optional[Grid] = None
    message: Optional[str] = None
    error_targets: Tuple[ErrorTarget, ...] = ()
    error: Optional[PicrossError] = None

    @classmethod
    def partial(cls, grid: Grid, count: int) -> "SolverEvent":
        return cls(kind=EventKind.PARTIAL, count=count, grid=grid)

    @classmethod
    def solution(cls, grid: Grid, count: int) -> "SolverEvent":
        return cls(kind=EventKind.SOLUTION, count=count, grid=grid)

    @classmethod
    def failure(
        cls,
        error: PicrossError,
        count: int,
        targets: Tuple[ErrorTarget, ...] = (),
        message: Optional[str] = None,
    ) -> "SolverEvent":
        return cls(
            kind=EventKind.ERROR,
            count=count,
            message=message or str(error),
            error_targets=targets,
            error=error,
        )

    def to_jsonable(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"kind": self.kind.value, "count": self.count}
        if self.grid is not None:
            payload["grid"] = self.grid.to_jsonable()
        if self.kind is EventKind.ERROR:
            payload["message"] = self.message
            if self.error_targets:
                payload["errorTargets"] = [t.to_jsonable() for t in self.error_targets]
        return payload
