from pydantic import BaseModel, Field
from typing import Literal, List, Optional

from .errors import EmptyInputError, MalformedConstraintError

ProblemType = Literal["max", "min"]
Cmp = Literal["<=", ">=", "="]
PivotRule = Literal["dantzig", "bland"]
Method = Literal["simplex", "dual"]


class Variable(BaseModel):
    name: str
    value: float


class LinearProgram(BaseModel):
    """Coefficient form of a problem: maximize/minimize c.x subject to A x (op) b, x >= 0."""

    objective: List[float]
    constraints: List[List[float]]
    senses: List[Cmp]
    rhs: List[float]
    problem_type: ProblemType = "max"
    variables: List[str] = Field(default_factory=list)

    def variable_names(self) -> List[str]:
        if self.variables:
            return list(self.variables)
        return [f"x{j + 1}" for j in range(len(self.objective))]

    def check(self) -> None:
        if not self.objective:
            raise EmptyInputError("Objective function is required")
        if not self.constraints:
            raise EmptyInputError("At least one constraint is required")
        n = len(self.objective)
        if self.variables and len(self.variables) != n:
            raise MalformedConstraintError(
                f"Expected {n} variable names, got {len(self.variables)}"
            )
        if len(self.senses) != len(self.constraints) or len(self.rhs) != len(self.constraints):
            raise MalformedConstraintError(
                "Every constraint needs exactly one operator and one right-hand side"
            )
        for idx, row in enumerate(self.constraints):
            if len(row) != n:
                raise MalformedConstraintError(
                    f"Constraint {idx + 1} has {len(row)} coefficients, expected {n}"
                )


class SolveOptions(BaseModel):
    max_iters: int = 10_000
    tol: float = 1e-9
    pivot_rule: PivotRule = "dantzig"


class PivotInfo(BaseModel):
    row: int
    col: int
    entering: str
    leaving: str


class Step(BaseModel):
    table: List[List[float]]
    pivot_info: Optional[PivotInfo] = None


class Solution(BaseModel):
    optimal_value: float
    variables: List[Variable]
    feasible: bool = True

    def value_of(self, name: str) -> float:
        for var in self.variables:
            if var.name == name:
                return var.value
        raise KeyError(name)


class SolveResult(BaseModel):
    solution: Solution
    steps: List[Step]
    columns: List[str]
    iterations: int
    method: Method
