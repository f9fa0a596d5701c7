"""CLI entrypoint for the picross solver."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from picross.core.constants import DEFAULT_TRIAL_LIMIT, PARTIAL_EVENT_INTERVAL, Axis
from picross.core.exceptions import PicrossError
from picross.core.models import SolverEvent
from picross.engine.cp_solver import solve_with_cp_sat
from picross.engine.solver import PicrossSolver, SolverConfig
from picross.engine.validator import HintValidator
from picross.io.hints import Puzzle, load_puzzle, parse_hint_lines, split_hint_text
from picross.io.runner import SolveOutcome, run_solver
from picross.utils.logger import configure_logging, get_logger, level_from_name
from picross.utils.pretty import pretty_print_grid, print_solve_stats

LOGGER = get_logger("picross.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve nonogram (picross) puzzles from row and column hints",
    )
    parser.add_argument(
        "--puzzle",
        type=Path,
        metavar="FILE",
        help="Puzzle file: JSON with 'rows'/'columns' or text with [rows]/[columns] sections",
    )
    parser.add_argument("--rows", type=str, help="Row hints, one line per row ('3 1;2;...')")
    parser.add_argument("--cols", type=str, help="Column hints, one line per column")
    parser.add_argument("--height", type=int, help="Declared grid height (checked against hints)")
    parser.add_argument("--width", type=int, help="Declared grid width (checked against hints)")
    parser.add_argument(
        "--backend",
        choices=["search", "cp-sat"],
        default="search",
        help="Solving backend",
    )
    parser.add_argument(
        "--trial-limit",
        type=int,
        default=DEFAULT_TRIAL_LIMIT,
        help="Abandon the search after this many trials (0 disables)",
    )
    parser.add_argument("--timeout", type=float, default=10.0, help="CP-SAT time limit in seconds")
    parser.add_argument(
        "--allow-empty-lines",
        action="store_true",
        help="Accept empty hints (blank rows/columns)",
    )
    parser.add_argument("--progress", action="store_true", help="Print partial grids while searching")
    parser.add_argument(
        "--partial-interval",
        type=int,
        default=PARTIAL_EVENT_INTERVAL,
        help="Search steps between progress updates",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def read_puzzle(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Puzzle:
    if args.puzzle and (args.rows or args.cols):
        parser.error("--puzzle cannot be combined with --rows/--cols")
    if args.puzzle:
        return load_puzzle(args.puzzle)
    if not (args.rows and args.cols):
        parser.error("provide --puzzle or both --rows and --cols")
    return Puzzle(
        row_hints=parse_hint_lines(split_hint_text(args.rows), args.height, Axis.ROW),
        col_hints=parse_hint_lines(split_hint_text(args.cols), args.width, Axis.COL),
    )


def solve_puzzle(puzzle: Puzzle, args: argparse.Namespace) -> SolveOutcome:
    validator = HintValidator(allow_empty_lines=args.allow_empty_lines)
    if args.backend == "cp-sat":
        grid = solve_with_cp_sat(
            puzzle.row_hints, puzzle.col_hints, timeout=args.timeout, validator=validator
        )
        if grid is None:
            raise PicrossError("No solution found")
        return SolveOutcome(grid=grid, count=0)

    config = SolverConfig(
        partial_interval=args.partial_interval,
        allow_empty_lines=args.allow_empty_lines,
        height=args.height,
        width=args.width,
    )
    solver = PicrossSolver(config, validator=validator)

    def show_partial(event: SolverEvent) -> None:
        pretty_print_grid(event.grid, label=f"[{event.count} trials]", stream=sys.stderr)

    return run_solver(
        solver.solve(puzzle.row_hints, puzzle.col_hints),
        trial_limit=args.trial_limit,
        on_partial=show_partial if args.progress else None,
    )


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.partial_interval <= 0:
        parser.error("--partial-interval must be positive")
    configure_logging(level_from_name(args.log_level))

    try:
        puzzle = read_puzzle(parser, args)
        outcome = solve_puzzle(puzzle, args)
    except PicrossError as exc:
        LOGGER.error("%s", exc)
        return 1

    if args.output:
        payload: Dict[str, Any] = {
            "backend": args.backend,
            "count": outcome.count,
            "rows": puzzle.row_hints,
            "columns": puzzle.col_hints,
            "grid": outcome.grid.to_jsonable(),
        }
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    print_solve_stats(outcome, backend=args.backend, row_hints=puzzle.row_hints)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
