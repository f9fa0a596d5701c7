"""Cheap structural validation of hints, run before any enumeration."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ..core.constants import Axis
from ..core.exceptions import (HintError, HintOverflowError, HintShapeError,
                               HintSumMismatchError, HintValueError)
from ..core.models import ErrorTarget, ValidationResult
from ..utils.logger import get_logger
from .lines import minimum_span


LOGGER = get_logger(__name__)


def _is_block_length(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class HintValidator:
    """Checks hint shape, values and feasibility in O(height + width).

    All problems found in one pass are collected; the caller decides how many
    of them to surface.
    """

    def __init__(self, allow_empty_lines: bool = False) -> None:
        self.allow_empty_lines = allow_empty_lines

    def validate(
        self,
        row_hints: Sequence[Sequence[int]],
        col_hints: Sequence[Sequence[int]],
        height: Optional[int] = None,
        width: Optional[int] = None,
    ) -> ValidationResult:
        issues: List[HintError] = []
        self._check_shape(row_hints, Axis.ROW, height, issues)
        self._check_shape(col_hints, Axis.COL, width, issues)
        if issues:
            LOGGER.warning("Hint shape mismatch: %s", "; ".join(str(i) for i in issues))
            return ValidationResult(issues)

        self._check_lines(row_hints, Axis.ROW, len(col_hints), issues)
        self._check_lines(col_hints, Axis.COL, len(row_hints), issues)
        self._check_totals(row_hints, col_hints, issues)
        if issues:
            LOGGER.warning("Hint validation found %d problem(s)", len(issues))
        return ValidationResult(issues)

    @staticmethod
    def _check_shape(
        hints: Sequence[Sequence[int]],
        axis: Axis,
        expected: Optional[int],
        issues: List[HintError],
    ) -> None:
        if expected is not None and len(hints) != expected:
            issues.append(
                HintShapeError(
                    f"{axis.label} hints must have {expected} lines, got {len(hints)}"
                )
            )

    def _check_lines(
        self,
        hints: Sequence[Sequence[int]],
        axis: Axis,
        span: int,
        issues: List[HintError],
    ) -> None:
        for index, hint in enumerate(hints):
            target = ErrorTarget(axis, index)
            name = target.describe()
            if not isinstance(hint, (list, tuple)):
                issues.append(HintValueError(f"{name} hint has invalid values", target))
                continue
            if not hint and not self.allow_empty_lines:
                issues.append(HintValueError(f"{name} hint is empty", target))
                continue
            if not all(_is_block_length(value) for value in hint):
                issues.append(HintValueError(f"{name} hint has invalid values", target))
                continue
            if minimum_span(hint) > span:
                issues.append(HintOverflowError(f"{name} hint has too many blocks", target))

    @staticmethod
    def _check_totals(
        row_hints: Sequence[Sequence[int]],
        col_hints: Sequence[Sequence[int]],
        issues: List[HintError],
    ) -> None:
        row_total = _total(row_hints)
        col_total = _total(col_hints)
        if row_total != col_total:
            issues.append(
                HintSumMismatchError(
                    f"Total of row hints ({row_total}) does not match "
                    f"total of column hints ({col_total})"
                )
            )


def _total(hints: Sequence[Sequence[int]]) -> int:
    total = 0
    for hint in hints:
        if isinstance(hint, (list, tuple)):
            total += sum(value for value in hint if _is_block_length(value))
    return total


def validate_hints(
    row_hints: Sequence[Sequence[int]],
    col_hints: Sequence[Sequence[int]],
    height: Optional[int] = None,
    width: Optional[int] = None,
) -> ValidationResult:
    """Validate with default settings."""

    return HintValidator().validate(row_hints, col_hints, height, width)
