import logging
from typing import List, Optional

import numpy as np

from ..errors import IterationLimitError, UnboundedError
from ..schemas import PivotInfo, PivotRule, SolveOptions, Step
from .tableau import Tableau

logger = logging.getLogger(__name__)


def can_improve(matrix: np.ndarray, num_candidates: int, tol: float = 0.0) -> bool:
    return bool(np.any(matrix[-1, :num_candidates] < -tol))


def select_entering(matrix: np.ndarray, num_candidates: int, rule: PivotRule = "dantzig", tol: float = 0.0) -> int:
    """
    Dantzig: most negative objective-row entry, first one on ties.
    Bland: lowest-index column with a negative entry.
    Returns -1 when the row has no negative entry.
    """

    objective_row = matrix[-1, :num_candidates]
    negative = np.flatnonzero(objective_row < -tol)
    if negative.size == 0:
        return -1
    if rule == "bland":
        return int(negative[0])
    return int(np.argmin(objective_row))


def select_leaving(matrix: np.ndarray, col: int) -> int:
    """Minimum ratio test over rows with a strictly positive entry; ties go to the first row."""

    best_row = -1
    best_ratio = np.inf
    for i in range(matrix.shape[0] - 1):
        entry = matrix[i, col]
        if entry > 0:
            ratio = matrix[i, -1] / entry
            if ratio < best_ratio:
                best_ratio = ratio
                best_row = i
    if best_row == -1:
        raise UnboundedError(column=col)
    return best_row


def pivot(matrix: np.ndarray, row: int, col: int) -> np.ndarray:
    """Gauss-Jordan step on (row, col). Returns a new matrix."""

    result = np.array(matrix, dtype=float, copy=True)
    result[row] = result[row] / result[row, col]
    for i in range(result.shape[0]):
        if i != row:
            result[i] = result[i] - result[i, col] * result[row]
    return result


class StepRecorder:
    def __init__(self) -> None:
        self.steps: List[Step] = []

    def record(self, matrix: np.ndarray, pivot_info: Optional[PivotInfo] = None) -> None:
        self.steps.append(Step(table=matrix.tolist(), pivot_info=pivot_info))

    @property
    def pivots(self) -> int:
        return max(len(self.steps) - 1, 0)


def run_pivots(tableau: Tableau, opts: SolveOptions, recorder: StepRecorder) -> Tableau:
    """
    Pivot until the objective row has no negative candidate entry.
    Every pivot is recorded; the initial tableau is recorded first.
    """

    matrix = tableau.matrix
    basis = list(tableau.basis)
    columns = tableau.columns
    recorder.record(matrix)

    iterations = 0
    while can_improve(matrix, tableau.num_candidates, opts.tol):
        if iterations >= opts.max_iters:
            raise IterationLimitError(iterations)

        col = select_entering(matrix, tableau.num_candidates, opts.pivot_rule, opts.tol)
        row = select_leaving(matrix, col)
        info = PivotInfo(row=row, col=col, entering=columns[col], leaving=basis[row])
        logger.debug("Pivot %d: %s enters, %s leaves at (%d, %d)", iterations + 1, info.entering, info.leaving, row, col)

        matrix = pivot(matrix, row, col)
        basis[row] = info.entering
        recorder.record(matrix, info)
        iterations += 1

    return Tableau(
        matrix=matrix,
        structural=tableau.structural,
        auxiliary=tableau.auxiliary,
        objective_label=tableau.objective_label,
        basis=basis,
    )
