import pytest

from tableau_optimizer.errors import EmptyInputError, MalformedConstraintError
from tableau_optimizer.lp.parser import (
    coefficient_of,
    extract_variables,
    parse_problem,
    sort_variables,
    split_constraint,
)


def test_coefficient_extraction():
    expr = "-2.5x1 + x3"
    assert coefficient_of(expr, "x1") == pytest.approx(-2.5)
    assert coefficient_of(expr, "x2") == 0.0
    assert coefficient_of(expr, "x3") == pytest.approx(1.0)


def test_bare_sign_and_spacing():
    expr = "- x1 + 4 x2 -x3 + 2*x4"
    assert coefficient_of(expr, "x1") == -1.0
    assert coefficient_of(expr, "x2") == 4.0
    assert coefficient_of(expr, "x3") == -1.0
    assert coefficient_of(expr, "x4") == 2.0


def test_unrecognised_terms_are_skipped():
    expr = "3x1 + 2y + 7"
    assert coefficient_of(expr, "x1") == 3.0
    assert extract_variables(expr) == ["x1"]


def test_variables_sorted_by_suffix():
    names = extract_variables("x10 + x2 + x1 + x2")
    assert set(names) == {"x10", "x2", "x1"}
    assert sort_variables(names) == ["x1", "x2", "x10"]


def test_variables_from_constraints_only_are_included():
    program = parse_problem("x2", ["x1 + x2 <= 5"], "max")
    assert program.variables == ["x1", "x2"]
    assert program.objective == [0.0, 1.0]
    assert program.constraints == [[1.0, 1.0]]


def test_split_constraint():
    assert split_constraint("3x1 + 2x2 <= 18") == ("3x1 + 2x2", "<=", 18.0)
    assert split_constraint("x1 >= -2.5") == ("x1", ">=", -2.5)
    assert split_constraint("x1 + x2 = 3") == ("x1 + x2", "=", 3.0)


@pytest.mark.parametrize("constraint", ["x1 + x2", "x1 <= 2 <= 3", "x1 == 4", "x1 <= abc", "x1 <= inf"])
def test_malformed_constraints(constraint):
    with pytest.raises(MalformedConstraintError):
        split_constraint(constraint)


def test_parse_problem_trims_and_drops_blank_constraints():
    program = parse_problem("  3x1 + 5x2 ", ["x1 <= 4", "   ", "2x2 <= 12"], "max")
    assert program.rhs == [4.0, 12.0]
    assert program.senses == ["<=", "<="]


def test_empty_inputs():
    with pytest.raises(EmptyInputError):
        parse_problem("3x1", [], "max")
    with pytest.raises(EmptyInputError):
        parse_problem("3x1", ["", "  "], "max")
    with pytest.raises(EmptyInputError):
        parse_problem("   ", ["x1 <= 4"], "max")
