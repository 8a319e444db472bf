"""Tableau Optimizer: step-by-step Simplex and Dual Simplex for small LPs."""

from .errors import (
    TableauError,
    EmptyInputError,
    MalformedConstraintError,
    ParseError,
    UnboundedError,
    IterationLimitError,
)
from .lp import SimplexSolver, DualSimplexSolver, simplex_solve, dual_simplex_solve, parse_problem
from .schemas import LinearProgram, SolveOptions, SolveResult, Solution, Step, PivotInfo, Variable

__all__ = [
    "TableauError",
    "EmptyInputError",
    "MalformedConstraintError",
    "ParseError",
    "UnboundedError",
    "IterationLimitError",
    "SimplexSolver",
    "DualSimplexSolver",
    "simplex_solve",
    "dual_simplex_solve",
    "parse_problem",
    "LinearProgram",
    "SolveOptions",
    "SolveResult",
    "Solution",
    "Step",
    "PivotInfo",
    "Variable",
]
