#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from cubesolve.cube import Cube
from cubesolve.moves import apply_moves, generate_scramble
from cubesolve.notation import format_moves, parse_notation
from cubesolve.solver import solve

logger = logging.getLogger("solve_cube")


def _configure_logging() -> None:
    level = os.environ.get("CUBESOLVE_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _resolve_scramble(args: argparse.Namespace) -> list[str]:
    if args.scramble is not None:
        return parse_notation(args.scramble)
    if args.random < 0:
        raise ValueError("--random must be >= 0")
    return generate_scramble(args.random, seed=args.seed)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Scramble a solved cube and solve it with the layer-by-layer method."
    )

    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument("--scramble", help="Scramble in face-turn notation (e.g. \"R U R' U'\")")
    source_group.add_argument("--random", type=int, metavar="N", help="Generate a random scramble of N moves")

    parser.add_argument("--seed", type=int, help="Seed for --random")
    parser.add_argument("--json", action="store_true", help="Print the solution as JSON")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    _configure_logging()
    args = parse_args(argv)

    try:
        scramble = _resolve_scramble(args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    cube = Cube()
    apply_moves(cube, scramble)
    logger.info("Scrambled with %d moves", len(scramble))

    solution = solve(cube)

    if args.json:
        payload = {"scramble": format_moves(scramble), **solution.to_dict()}
        print(json.dumps(payload, indent=2))
        return 0

    print(f"Scramble: {format_moves(scramble)}")
    for step in solution.steps:
        print(f"{step.name} ({step.move_count}): {format_moves(step.moves)}")
    print(f"Total moves: {solution.total_moves}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
