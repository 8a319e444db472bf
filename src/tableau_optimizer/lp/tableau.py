import logging
from dataclasses import dataclass, field
from typing import List

import numpy as np

from ..schemas import LinearProgram

logger = logging.getLogger(__name__)


@dataclass
class Tableau:
    """
    Simplex tableau: one row per constraint plus the objective row (last),
    columns = structural | auxiliary | bookkeeping (Z or p) | RHS.
    """

    matrix: np.ndarray
    structural: List[str]
    auxiliary: List[str]
    objective_label: str
    basis: List[str] = field(default_factory=list)

    @property
    def num_rows(self) -> int:
        return self.matrix.shape[0] - 1

    @property
    def num_candidates(self) -> int:
        return len(self.structural) + len(self.auxiliary)

    @property
    def rhs_col(self) -> int:
        return self.matrix.shape[1] - 1

    @property
    def columns(self) -> List[str]:
        return [*self.structural, *self.auxiliary, self.objective_label, "RHS"]

    def column_name(self, col: int) -> str:
        return self.columns[col]


def build_primal_tableau(program: LinearProgram) -> Tableau:
    """
    Initial tableau for the standard Simplex method. The objective row holds
    -c when maximising (pivoting always minimises the negated objective) and
    the all-slack basis is taken as the starting basis.
    """

    program.check()
    variables = program.variable_names()
    n = len(variables)
    m = len(program.constraints)
    slacks = [f"s{i + 1}" for i in range(m)]

    matrix = np.zeros((m + 1, n + m + 2), dtype=float)
    for i, (row, cmp, rhs) in enumerate(zip(program.constraints, program.senses, program.rhs)):
        matrix[i, :n] = row
        if cmp == "<=":
            matrix[i, n + i] = 1.0
        elif cmp == ">=":
            matrix[i, n + i] = -1.0
        matrix[i, -1] = rhs

    sign = -1.0 if program.problem_type == "max" else 1.0
    matrix[m, :n] = [sign * coef for coef in program.objective]
    matrix[m, n + m] = 1.0

    infeasible_rows = [
        i + 1
        for i, (cmp, rhs) in enumerate(zip(program.senses, program.rhs))
        if cmp != "<=" or rhs < 0
    ]
    if infeasible_rows:
        logger.warning(
            "Initial slack basis is not primal feasible (constraints %s); "
            "the reported optimum may be wrong",
            infeasible_rows,
        )

    # equality rows have no slack column, so nothing is basic there yet
    basis = [
        slack if cmp != "=" else f"row{i + 1}"
        for i, (slack, cmp) in enumerate(zip(slacks, program.senses))
    ]

    return Tableau(
        matrix=matrix,
        structural=variables,
        auxiliary=slacks,
        objective_label="Z",
        basis=basis,
    )


def build_dual_tableau(program: LinearProgram) -> Tableau:
    """
    Tableau of the dual problem built directly from the primal data.
    For primal max c.x s.t. A x <= b the dual is min b.y s.t. A^T y >= c;
    every primal variable x_j yields the row sum_i a_ij y_i + s_j = c_j and
    the objective row carries -b_i under each y_i.
    """

    program.check()
    n = len(program.objective)
    m = len(program.constraints)
    duals = [f"y{i + 1}" for i in range(m)]
    slacks = [f"s{j + 1}" for j in range(n)]

    A = np.array(program.constraints, dtype=float).reshape(m, n)
    matrix = np.zeros((n + 1, m + n + 2), dtype=float)
    matrix[:n, :m] = A.T
    matrix[:n, m : m + n] = np.eye(n)
    matrix[:n, -1] = program.objective
    matrix[n, :m] = [-rhs for rhs in program.rhs]
    matrix[n, m + n] = 1.0

    return Tableau(
        matrix=matrix,
        structural=duals,
        auxiliary=slacks,
        objective_label="p",
        basis=list(slacks),
    )
