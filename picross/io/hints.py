"""Hint text parsing and puzzle file loading."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ..core.constants import Axis
from ..core.exceptions import HintShapeError, HintValueError, PuzzleLoadError
from ..core.models import ErrorTarget
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

_SEPARATOR = re.compile(r"[\s,]+")
_SECTIONS = {"rows": Axis.ROW, "row": Axis.ROW, "columns": Axis.COL, "cols": Axis.COL}


@dataclass
class Puzzle:
    row_hints: List[List[int]]
    col_hints: List[List[int]]

    @property
    def height(self) -> int:
        return len(self.row_hints)

    @property
    def width(self) -> int:
        return len(self.col_hints)


def parse_hint_line(text: str, target: Optional[ErrorTarget] = None) -> List[int]:
    """Parse ``"3, 1 2"`` into ``[3, 1, 2]``.

    Zeros are dropped, so a line holding only ``0`` is the empty hint.
    """

    hint: List[int] = []
    for token in _SEPARATOR.split(text.strip()):
        if not token:
            continue
        try:
            value = int(token)
        except ValueError:
            where = f"{target.describe()} hint" if target else "Hint"
            raise HintValueError(f"{where} has invalid value {token!r}", target) from None
        if value > 0:
            hint.append(value)
    return hint


def parse_hint_lines(
    lines: Iterable[str],
    expected: Optional[int] = None,
    axis: Axis = Axis.ROW,
) -> List[List[int]]:
    """Parse one hint per line; raise HintShapeError if the count is off."""

    hints = [
        parse_hint_line(line, ErrorTarget(axis, index))
        for index, line in enumerate(lines)
    ]
    if expected is not None and len(hints) != expected:
        raise HintShapeError(
            f"{axis.label} hints must have {expected} lines, got {len(hints)}"
        )
    return hints


def split_hint_text(text: str) -> List[str]:
    """Split a block of hint text on newlines or semicolons."""

    stripped = text.strip()
    return re.split(r"[;\n]", stripped) if stripped else []


def load_puzzle(path: Path | str) -> Puzzle:
    """Load hints from a JSON file or a sectioned text file."""

    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PuzzleLoadError(f"Cannot read puzzle file {path}: {exc}") from exc
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise PuzzleLoadError(f"Invalid JSON in {path}: {exc}") from exc
        puzzle = _puzzle_from_json(payload)
    else:
        puzzle = _puzzle_from_text(raw)
    LOGGER.info("Loaded %dx%d puzzle from %s", puzzle.height, puzzle.width, path)
    return puzzle


def _puzzle_from_json(payload: Any) -> Puzzle:
    if not isinstance(payload, dict):
        raise HintShapeError("Puzzle JSON must be an object with 'rows' and 'columns'")
    rows = payload.get("rows")
    cols = payload.get("columns", payload.get("cols"))
    if not isinstance(rows, list) or not isinstance(cols, list):
        raise HintShapeError("Puzzle JSON needs 'rows' and 'columns' lists")
    return Puzzle(
        row_hints=_json_hints(rows, Axis.ROW),
        col_hints=_json_hints(cols, Axis.COL),
    )


def _json_hints(hints: List[Any], axis: Axis) -> List[List[int]]:
    parsed: List[List[int]] = []
    for index, hint in enumerate(hints):
        if not isinstance(hint, list):
            target = ErrorTarget(axis, index)
            raise HintValueError(f"{target.describe()} hint must be a list, got {hint!r}", target)
        parsed.append(list(hint))
    return parsed


def _puzzle_from_text(raw: str) -> Puzzle:
    sections: Dict[Axis, List[str]] = {Axis.ROW: [], Axis.COL: []}
    current: Optional[Axis] = None
    for line in raw.splitlines():
        stripped = line.split("#", 1)[0].strip()
        if not stripped:
            continue
        header = re.fullmatch(r"\[(\w+)\]", stripped)
        if header:
            current = _SECTIONS.get(header.group(1).lower())
            if current is None:
                raise HintShapeError(f"Unknown section [{header.group(1)}]")
            continue
        if current is None:
            raise HintShapeError("Hint line found before a [rows] or [columns] header")
        sections[current].append(stripped)
    return Puzzle(
        row_hints=parse_hint_lines(sections[Axis.ROW], axis=Axis.ROW),
        col_hints=parse_hint_lines(sections[Axis.COL], axis=Axis.COL),
    )
