"""Single-line helpers: run decomposition, validity tests and enumeration.

A line is a tuple of :class:`~picross.core.constants.Cell` values. The
enumerator places each block at every start offset that still leaves room
for the remaining blocks and their mandatory gaps, so results come out in
leftmost-placement order. That order is what the search tries candidates in.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.constants import Cell
from .grid import Line


def run_lengths(line: Sequence[Cell]) -> List[int]:
    """Return the lengths of the maximal filled runs, left to right."""

    runs: List[int] = []
    count = 0
    for value in line:
        if value == Cell.FILLED:
            count += 1
        elif count:
            runs.append(count)
            count = 0
    if count:
        runs.append(count)
    return runs


def minimum_span(hints: Sequence[int]) -> int:
    return sum(hints) + max(0, len(hints) - 1)


def is_valid_line(line: Sequence[Cell], hints: Sequence[int]) -> bool:
    """Exact acceptance test for a completed line."""

    return run_lengths(line) == list(hints)


def is_valid_prefix(line: Sequence[Cell], hints: Sequence[int]) -> bool:
    """Pruning test for a partially assigned line.

    Every run seen so far must fit the hint at its position, and there may
    not be more runs than hints. The trailing run counts even if it could
    still grow; that only makes the test stricter, never unsound.
    """

    runs = run_lengths(line)
    if len(runs) > len(hints):
        return False
    return all(run <= hint for run, hint in zip(runs, hints))


def enumerate_line_possibilities(length: int, hints: Sequence[int]) -> List[Line]:
    """Enumerate every fully determined line of ``length`` matching ``hints``."""

    hints = tuple(hints)
    results: List[Line] = []

    def place(block: int, start: int, prefix: List[Cell]) -> None:
        if block == len(hints):
            if len(prefix) <= length:
                results.append(tuple(prefix + [Cell.EMPTY] * (length - len(prefix))))
            return
        remaining = hints[block:]
        last_start = length - minimum_span(remaining)
        for offset in range(start, last_start + 1):
            line = prefix + [Cell.EMPTY] * (offset - len(prefix)) + [Cell.FILLED] * hints[block]
            if len(line) < length:
                line.append(Cell.EMPTY)
            place(block + 1, len(line), line)

    place(0, 0, [])
    return results


def filter_by_fixed(possibilities: Sequence[Line], fixed: Sequence[Cell]) -> List[Line]:
    """Drop possibilities that disagree with any already determined cell."""

    known = [(i, value) for i, value in enumerate(fixed) if value != Cell.UNKNOWN]
    if not known:
        return list(possibilities)
    return [poss for poss in possibilities if all(poss[i] == value for i, value in known)]


def certainties(possibilities: Sequence[Line]) -> Optional[List[Cell]]:
    """Cells on which every possibility agrees; ``UNKNOWN`` elsewhere.

    Returns ``None`` for an empty possibility set.
    """

    if not possibilities:
        return None
    result = list(possibilities[0])
    for poss in possibilities[1:]:
        for i, value in enumerate(poss):
            if result[i] != value:
                result[i] = Cell.UNKNOWN
    return result
