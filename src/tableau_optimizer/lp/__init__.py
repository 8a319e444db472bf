"""Tableau Simplex and Dual Simplex solvers."""

from .simplex import SimplexSolver, DualSimplexSolver, simplex_solve, dual_simplex_solve
from .parser import parse_problem

__all__ = ["SimplexSolver", "DualSimplexSolver", "simplex_solve", "dual_simplex_solve", "parse_problem"]
