from __future__ import annotations

import logging
import os
from typing import List, Literal

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from .errors import TableauError
from .schemas import LinearProgram, ProblemType, SolveOptions
from .lp.parser import parse_problem
from .lp.simplex import DualSimplexSolver, SimplexSolver, dual_simplex_solve, simplex_solve

logger = logging.getLogger(__name__)

app = FastMCP("Tableau Optimizer")


def _error_payload(exc: TableauError) -> dict:
    return {
        "error": str(exc),
        "kind": type(exc).__name__,
        "solution": None,
        "steps": [],
    }


@app.tool()
def solve_simplex(
    objective: str,
    constraints: List[str],
    problem_type: ProblemType = "max",
    options: SolveOptions | None = None,
) -> dict:
    """
    Solve an LP with the tableau Simplex method and return every pivot step.

    Args:
        objective: Linear expression such as "3x1 + 5x2".
        constraints: Strings such as "3x1 + 2x2 <= 18"; operators <=, >=, =.
        problem_type: "max" or "min".
        options: Optional solver options (iteration cap, pivot rule).
    """
    try:
        result = SimplexSolver(objective, constraints, problem_type, options).solve()
    except TableauError as exc:
        logger.info("solve_simplex failed: %s", exc)
        return _error_payload(exc)
    return result.model_dump()


@app.tool()
def solve_dual_simplex(
    objective: str,
    constraints: List[str],
    problem_type: ProblemType = "max",
    options: SolveOptions | None = None,
) -> dict:
    """Build the dual tableau of the problem, solve it and return every pivot step."""
    try:
        result = DualSimplexSolver(objective, constraints, problem_type, options).solve()
    except TableauError as exc:
        logger.info("solve_dual_simplex failed: %s", exc)
        return _error_payload(exc)
    return result.model_dump()


@app.tool()
def solve_program(
    program: LinearProgram,
    method: Literal["simplex", "dual"] = "simplex",
    options: SolveOptions | None = None,
) -> dict:
    """Solve an LP given as coefficient arrays instead of strings."""
    solve = dual_simplex_solve if method == "dual" else simplex_solve
    try:
        result = solve(program, options)
    except TableauError as exc:
        logger.info("solve_program failed: %s", exc)
        return _error_payload(exc)
    return result.model_dump()


@app.tool()
def parse_lp(objective: str, constraints: List[str], problem_type: ProblemType = "max") -> dict:
    "Parse objective and constraint strings into coefficient arrays."
    try:
        return parse_problem(objective, constraints, problem_type).model_dump()
    except TableauError as exc:
        return {"error": str(exc), "kind": type(exc).__name__}


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("TABLEAU_OPTIMIZER_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "stdio":
        app.run(transport="stdio")
    else:
        port = int(os.environ.get("PORT", "8081"))
        app.settings.host = "0.0.0.0"
        app.settings.port = port
        app.settings.streamable_http_path = "/mcp"
        app.settings.transport_security = TransportSecuritySettings(
            enable_dns_rebinding_protection=False,
            allowed_hosts=["*"],
            allowed_origins=["*"],
        )
        app.run(transport="streamable-http")


if __name__ == "__main__":
    main()
