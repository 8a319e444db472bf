import logging
import math
import re
from typing import List, Sequence, Tuple

from ..errors import EmptyInputError, MalformedConstraintError
from ..schemas import LinearProgram, ProblemType

logger = logging.getLogger(__name__)

_VARIABLE = re.compile(r"(?<![A-Za-z_])x([1-9]\d*)(?!\w)")
_OPERATOR = re.compile(r"<=|>=|=")
_TERM_SPLIT = re.compile(r"(?=[-+])")
_TERM_PATTERN = re.compile(r"^([+-]?)\s*(\d+\.?\d*|\.\d+)?\s*\*?\s*(x[1-9]\d*)$")


def extract_variables(expression: str) -> List[str]:
    """Return the distinct `x<k>` identifiers mentioned in `expression`."""
    seen: List[str] = []
    for match in _VARIABLE.finditer(expression):
        name = match.group(0)
        if name not in seen:
            seen.append(name)
    return seen


def sort_variables(names: Sequence[str]) -> List[str]:
    return sorted(set(names), key=lambda name: int(name[1:]))


def parse_terms(expression: str) -> List[Tuple[str, float]]:
    """
    Split a linear expression into (variable, coefficient) pairs.
    Terms that do not look like `[sign][number]x<k>` are skipped.
    """

    terms: List[Tuple[str, float]] = []
    for raw in _TERM_SPLIT.split(expression):
        term = raw.strip()
        if not term:
            continue
        match = _TERM_PATTERN.match(term)
        if not match:
            logger.debug("Skipping unrecognised term %r in %r", term, expression)
            continue
        sign, number, name = match.groups()
        coef = float(number) if number else 1.0
        if sign == "-":
            coef = -coef
        terms.append((name, coef))
    return terms


def coefficient_of(expression: str, variable: str) -> float:
    coef = 0.0
    for name, value in parse_terms(expression):
        if name == variable:
            coef += value
    return coef


def split_constraint(constraint: str) -> Tuple[str, str, float]:
    """Split `<expr> <op> <number>` into its left side, operator and right-hand side."""

    operators = _OPERATOR.findall(constraint)
    if len(operators) != 1:
        raise MalformedConstraintError(f"Invalid constraint format: {constraint}")
    lhs, rhs_text = _OPERATOR.split(constraint)
    try:
        rhs = float(rhs_text.strip())
    except ValueError as exc:
        raise MalformedConstraintError(f"Invalid right-hand side in constraint: {constraint}") from exc
    if not math.isfinite(rhs):
        raise MalformedConstraintError(f"Invalid right-hand side in constraint: {constraint}")
    return lhs.strip(), operators[0], rhs


def parse_problem(objective: str, constraints: Sequence[str], problem_type: ProblemType) -> LinearProgram:
    """
    Turn the textual form used by the UI, e.g.
      objective "3x1 + 5x2", constraints ["x1 <= 4", "2x2 <= 12"], "max"
    into a LinearProgram. Columns are ordered by variable suffix.
    """

    objective = (objective or "").strip()
    cleaned = [c.strip() for c in constraints if c and c.strip()]

    if not cleaned:
        raise EmptyInputError("At least one constraint is required")
    if not objective:
        raise EmptyInputError("Objective function is required")

    split = [split_constraint(c) for c in cleaned]

    names = extract_variables(objective)
    for constraint in cleaned:
        names.extend(extract_variables(constraint))
    variables = sort_variables(names)
    if not variables:
        raise EmptyInputError("No decision variables found in objective or constraints")

    rows: List[List[float]] = []
    for lhs, _, _ in split:
        rows.append([coefficient_of(lhs, name) for name in variables])

    return LinearProgram(
        objective=[coefficient_of(objective, name) for name in variables],
        constraints=rows,
        senses=[op for _, op, _ in split],
        rhs=[rhs for _, _, rhs in split],
        problem_type=problem_type,
        variables=variables,
    )
