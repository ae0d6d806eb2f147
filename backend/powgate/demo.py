"""
Issue, solve and verify one challenge locally.

Usage:
    python -m powgate.demo
    python -m powgate.demo 5 --timelimit 10
"""

import argparse
import sys
import time
from datetime import timedelta

from powgate.config import settings
from powgate.errors import PowError
from powgate.services.pow_service import PowGate
from powgate.services.solver import solve_challenge

COLOR_RESET = "\033[0m"
COLOR_RED = "\033[31m"
COLOR_GREEN = "\033[32m"
COLOR_CYAN = "\033[36m"


def print_success(msg: str) -> None:
    print(f"{COLOR_GREEN}{msg}{COLOR_RESET}")


def print_error(msg: str) -> None:
    print(f"{COLOR_RED}{msg}{COLOR_RESET}")


def print_info(msg: str) -> None:
    print(f"{COLOR_CYAN}{msg}{COLOR_RESET}")


def elapsed_ms(start: float) -> str:
    return f"{(time.perf_counter() - start) * 1000:.2f}ms"


def run(difficulty: int, timelimit: timedelta) -> int:
    gate = PowGate(
        signature_key=settings.pow_signature_key.encode(),
        max_added_value_length=settings.pow_max_added_value_length,
    )

    start = time.perf_counter()
    try:
        challenge = gate.generate_challenge(difficulty)
    except PowError as e:
        print_error(f"Generate challenge failed: {e}")
        return 1
    print_info(f"Challenge generated, took {elapsed_ms(start)}")
    print(f"  data:     {challenge.data}")
    print(f"  criteria: {challenge.criteria}")

    start = time.perf_counter()
    solution = solve_challenge(challenge.data, challenge.criteria)
    print_info(f"Solution found, took {elapsed_ms(start)}")
    print(f"  added value: {solution.added_value}")
    print(f"  hash:        {solution.hash}")

    start = time.perf_counter()
    try:
        gate.verify_solution(solution.data, solution.added_value, solution.hash, timelimit)
    except PowError as e:
        print_error(f"Solution is invalid: {e} ({e.code})")
        return 1
    print_success("Solution is valid!")
    print_info(f"Verification took {elapsed_ms(start)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Proof-of-work round trip demo")
    parser.add_argument(
        "difficulty",
        nargs="?",
        type=int,
        default=settings.pow_default_difficulty,
        help="Number of leading zero hex characters (default: %(default)s)",
    )
    parser.add_argument(
        "--timelimit",
        type=float,
        default=settings.pow_timelimit_seconds,
        help="Seconds allowed between issue and verification (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    return run(args.difficulty, timedelta(seconds=args.timelimit))


if __name__ == "__main__":
    sys.exit(main())
