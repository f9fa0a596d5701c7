"""Nonogram (picross) solver.

This package exposes the public API surface via:

- ``picross.engine.solver.solve`` / ``PicrossSolver``: lazy event sequence
  of partial, solution and error events.
- ``picross.engine.validator.validate_hints``: structural hint checks.
- ``picross.engine.cp_solver.solve_with_cp_sat``: CP-SAT reference backend.
- ``picross.io.runner.run_solver``: host-side driver with a trial ceiling.
"""

from .core.constants import Axis, Cell, EventKind
from .core.models import ErrorTarget, SolverEvent, ValidationResult
from .engine.grid import Grid
from .engine.solver import PicrossSolver, SolverConfig, solve
from .engine.validator import HintValidator, validate_hints

__all__ = [
    "Axis",
    "Cell",
    "ErrorTarget",
    "EventKind",
    "Grid",
    "HintValidator",
    "PicrossSolver",
    "SolverConfig",
    "SolverEvent",
    "ValidationResult",
    "solve",
    "validate_hints",
]

__version__ = "0.1.0"
