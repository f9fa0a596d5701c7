"""Shared constants and enumerations for the picross solver."""

from __future__ import annotations

from enum import Enum, IntEnum


class Cell(IntEnum):
    """Tri-state grid cell.

    The integer values double as the wire encoding used at the API boundary:
    ``1`` filled, ``0`` empty and ``-1`` for a cell that is not yet known.
    """

    EMPTY = 0
    FILLED = 1
    UNKNOWN = -1


class Axis(str, Enum):
    """Orientation of a hint line."""

    ROW = "row"
    COL = "col"

    @property
    def label(self) -> str:
        return "Row" if self is Axis.ROW else "Column"


class EventKind(str, Enum):
    """Event kinds produced by the solver."""

    ERROR = "error"
    PARTIAL = "partial"
    SOLUTION = "solution"


# Accepted search expansions between two partial progress events.
PARTIAL_EVENT_INTERVAL = 10

# Node count after which the host runner gives up on a search.
DEFAULT_TRIAL_LIMIT = 10_000
