#!/usr/bin/env python3
import json
import time
from pathlib import Path

from tableau_optimizer.lp.simplex import dual_simplex_solve, simplex_solve
from tableau_optimizer.schemas import LinearProgram, SolveOptions
from scripts.generate_instances import generate_random_lp

EXAMPLES = Path(__file__).resolve().parent.parent / "examples"


def main() -> None:
    opts = SolveOptions()
    cases = [
        (f"examples/{path.name}", LinearProgram.model_validate(json.loads(path.read_text())))
        for path in sorted(EXAMPLES.glob("*.json"))
    ]
    for seed in range(3):
        cases.append((f"random-{seed}", generate_random_lp(4, 4, seed)))

    print("name,method,objective,iterations,time_ms")
    for name, program in cases:
        for method, solve in (("simplex", simplex_solve), ("dual", dual_simplex_solve)):
            start = time.perf_counter()
            result = solve(program, opts)
            elapsed_ms = (time.perf_counter() - start) * 1000
            print(
                f"{name},{method},{result.solution.optimal_value},{result.iterations},{elapsed_ms:.2f}"
            )


if __name__ == "__main__":
    main()
