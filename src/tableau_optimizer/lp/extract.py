from typing import Dict, List

import numpy as np

from ..schemas import ProblemType, Solution, Variable
from .tableau import Tableau

BASIS_TOL = 1e-8


def _is_unit_column(matrix: np.ndarray, row: int, col: int, num_rows: int, tol: float) -> bool:
    if abs(matrix[row, col] - 1.0) >= tol:
        return False
    for k in range(num_rows):
        if k != row and abs(matrix[k, col]) >= tol:
            return False
    return True


def find_basic_columns(matrix: np.ndarray, num_columns: int, num_structural: int, tol: float = BASIS_TOL) -> Dict[int, int]:
    """
    Map constraint row -> column of its basic variable, considering the first
    `num_columns` columns. A column is basic in a row when it is a unit vector
    over the constraint rows. With several candidates the smallest
    |objective-row entry| wins, except that a structural column whose
    objective entry is ~0 is taken straight away.
    """

    num_rows = matrix.shape[0] - 1
    objective_row = matrix[-1]
    basic: Dict[int, int] = {}
    for i in range(num_rows):
        chosen = -1
        best_cost = np.inf
        for j in range(num_columns):
            if not _is_unit_column(matrix, i, j, num_rows, tol):
                continue
            cost = abs(objective_row[j])
            if j < num_structural and cost < tol:
                chosen = j
                break
            if cost < best_cost:
                best_cost = cost
                chosen = j
        if chosen != -1:
            basic[i] = chosen
    return basic


def _clean(value: float) -> float:
    value = float(value)
    return 0.0 if abs(value) < 1e-12 else value


def extract_primal_solution(tableau: Tableau, problem_type: ProblemType) -> Solution:
    matrix = tableau.matrix
    names = tableau.structural + tableau.auxiliary
    values: Dict[str, float] = {name: 0.0 for name in names}

    basic = find_basic_columns(matrix, tableau.num_candidates, len(tableau.structural))
    for row, col in basic.items():
        values[names[col]] = matrix[row, tableau.rhs_col]

    optimal_value = matrix[-1, tableau.rhs_col]
    if problem_type == "min":
        optimal_value = -optimal_value

    return Solution(
        optimal_value=_clean(optimal_value),
        variables=[Variable(name=name, value=_clean(values[name])) for name in names],
        feasible=True,
    )


def extract_dual_solution(tableau: Tableau) -> Solution:
    """
    Dual variables y_i come from the unit-column scan over the y columns.
    The primal values sit in the objective row under the slack columns and
    are reported as s_j (s_j carries x_j).
    """

    matrix = tableau.matrix
    duals = tableau.structural
    slacks = tableau.auxiliary
    values: Dict[str, float] = {name: 0.0 for name in duals + slacks}

    for j, name in enumerate(slacks):
        values[name] = matrix[-1, len(duals) + j]

    basic = find_basic_columns(matrix, len(duals), len(duals))
    for row, col in basic.items():
        values[duals[col]] = matrix[row, tableau.rhs_col]

    variables: List[Variable] = [Variable(name=name, value=_clean(values[name])) for name in duals + slacks]
    return Solution(
        optimal_value=_clean(matrix[-1, tableau.rhs_col]),
        variables=variables,
        feasible=True,
    )
