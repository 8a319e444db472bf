"""Errors raised while building or pivoting a tableau."""


class TableauError(ValueError):
    """Base class for every failure surfaced by the solvers."""


class EmptyInputError(TableauError):
    """No constraints were given, or the objective is empty."""


class MalformedConstraintError(TableauError):
    """A constraint does not read as `<expr> <op> <number>`."""


ParseError = MalformedConstraintError


class UnboundedError(TableauError):
    """The entering column has no positive entry, so no finite solution exists."""

    def __init__(self, message: str = "No finite solution: problem is unbounded", column: int | None = None):
        super().__init__(message)
        self.column = column


class IterationLimitError(TableauError):
    def __init__(self, iterations: int):
        super().__init__(f"Hit iteration limit after {iterations} pivots")
        self.iterations = iterations
