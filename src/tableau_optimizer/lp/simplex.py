import logging
from typing import Optional, Sequence

from ..schemas import LinearProgram, Method, ProblemType, SolveOptions, SolveResult
from .extract import extract_dual_solution, extract_primal_solution
from .parser import parse_problem
from .pivot import StepRecorder, run_pivots
from .tableau import Tableau, build_dual_tableau, build_primal_tableau

logger = logging.getLogger(__name__)


class SimplexSolver:
    """
    Tableau Simplex on the all-slack starting basis.

    The problem is parsed and the tableau built on construction, so malformed
    input fails before solve() is called. No Big-M or two-phase step is run:
    problems whose slack basis is infeasible are pivoted mechanically and
    still reported as feasible.
    """

    method: Method = "simplex"

    def __init__(
        self,
        objective: str = "",
        constraints: Sequence[str] = (),
        problem_type: ProblemType = "max",
        options: Optional[SolveOptions] = None,
        *,
        program: Optional[LinearProgram] = None,
    ) -> None:
        if program is None:
            program = parse_problem(objective, constraints, problem_type)
        self.program = program
        self.options = options or SolveOptions()
        self.tableau = self._build(program)

    @classmethod
    def from_program(cls, program: LinearProgram, options: Optional[SolveOptions] = None):
        """Skip the string parser and build from coefficient arrays."""
        return cls(options=options, program=program)

    def _build(self, program: LinearProgram) -> Tableau:
        return build_primal_tableau(program)

    def _extract(self, tableau: Tableau):
        return extract_primal_solution(tableau, self.program.problem_type)

    def solve(self) -> SolveResult:
        logger.info(
            "Solving %s problem with %d variables and %d constraints (%s)",
            self.program.problem_type,
            len(self.program.objective),
            len(self.program.constraints),
            self.method,
        )
        recorder = StepRecorder()
        final = run_pivots(self.tableau, self.options, recorder)
        solution = self._extract(final)
        logger.info("Optimal value %s after %d pivots", solution.optimal_value, recorder.pivots)
        return SolveResult(
            solution=solution,
            steps=recorder.steps,
            columns=self.tableau.columns,
            iterations=recorder.pivots,
            method=self.method,
        )


class DualSimplexSolver(SimplexSolver):
    """Builds the dual problem's tableau directly and pivots it with the shared engine."""

    method: Method = "dual"

    def _build(self, program: LinearProgram) -> Tableau:
        return build_dual_tableau(program)

    def _extract(self, tableau: Tableau):
        return extract_dual_solution(tableau)


def simplex_solve(program: LinearProgram, opts: Optional[SolveOptions] = None) -> SolveResult:
    return SimplexSolver.from_program(program, opts).solve()


def dual_simplex_solve(program: LinearProgram, opts: Optional[SolveOptions] = None) -> SolveResult:
    return DualSimplexSolver.from_program(program, opts).solve()
