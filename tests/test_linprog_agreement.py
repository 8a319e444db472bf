import numpy as np
import pytest
from scipy.optimize import linprog

from scripts.generate_instances import generate_random_lp
from tableau_optimizer.lp.simplex import simplex_solve


@pytest.mark.parametrize("seed", range(6))
def test_primal_matches_linprog_on_standard_form(seed):
    program = generate_random_lp(4, 3, seed)
    result = simplex_solve(program)

    reference = linprog(
        c=-np.array(program.objective),
        A_ub=np.array(program.constraints),
        b_ub=np.array(program.rhs),
        bounds=[(0, None)] * len(program.objective),
        method="highs",
    )
    assert reference.status == 0
    assert result.solution.optimal_value == pytest.approx(-reference.fun, rel=1e-7, abs=1e-7)

    x = np.array([result.solution.value_of(name) for name in program.variable_names()])
    assert np.all(x >= -1e-9)
    assert np.all(np.array(program.constraints) @ x <= np.array(program.rhs) + 1e-7)
