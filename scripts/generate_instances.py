#!/usr/bin/env python3
import argparse
import json
import random
from pathlib import Path
from typing import List, Optional

from tableau_optimizer.schemas import LinearProgram


def generate_random_lp(num_vars: int, num_constraints: int, seed: Optional[int] = None) -> LinearProgram:
    """Random `<=` problem with positive data, so the slack basis is feasible and the max is bounded."""
    rng = random.Random(seed)
    rows: List[List[float]] = [
        [round(rng.uniform(0.5, 5.0), 3) for _ in range(num_vars)]
        for _ in range(num_constraints)
    ]
    rhs = [round(rng.uniform(num_vars * 2.0, num_vars * 6.0), 3) for _ in range(num_constraints)]
    objective = [round(rng.uniform(1.0, 4.0), 3) for _ in range(num_vars)]
    return LinearProgram(
        objective=objective,
        constraints=rows,
        senses=["<="] * num_constraints,
        rhs=rhs,
        problem_type="max",
        variables=[f"x{i + 1}" for i in range(num_vars)],
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random standard-form LP instances.")
    parser.add_argument("--vars", type=int, default=3, help="Number of variables")
    parser.add_argument("--constraints", type=int, default=3, help="Number of constraints")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of instances")
    parser.add_argument("--out", type=Path, default=None, help="Optional output file")
    args = parser.parse_args()

    instances = [
        generate_random_lp(args.vars, args.constraints, (args.seed or 0) + idx)
        for idx in range(args.count)
    ]
    payload = [instance.model_dump() for instance in instances]

    if args.out:
        Path(args.out).write_text(json.dumps(payload, indent=2))
    else:
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
