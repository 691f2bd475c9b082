#!/usr/bin/env python
"""
Compare the closed-form transform builders against their chained equivalents.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --iterations 10 --calls 1000
    python scripts/benchmark.py --precision double
    python scripts/benchmark.py --case inverse

Examples:
    python scripts/benchmark.py --no-warmup
    python scripts/benchmark.py --case transform --precision float --calls 5000
"""

import argparse
import statistics
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Tuple

# Add project paths for development
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from gltypes import Mat4, DMat4, Quat, vec3


# ANSI colors for output
RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
GREEN = "\033[32m"
YELLOW = "\033[33m"


POS = vec3(1, 2, 0.3)
SCALE = vec3(1.1, 2, 3.9)
ROT = Quat.from_x_rotation(1.3)

MATRIX_TYPES = {'float': Mat4, 'double': DMat4}


def build_cases(matrix_type) -> Dict[str, List[Tuple[str, Callable[[], object]]]]:
    """Each case lists the closed form first, then the expression it replaces."""
    return {
        'transform': [
            ("from_transform", lambda: matrix_type.from_transform(POS, SCALE, ROT)),
            ("pos * rot * scale", lambda: matrix_type.from_pos(POS) * matrix_type.from_rot(ROT) * matrix_type.from_scale(SCALE)),
        ],
        'inverse': [
            ("from_inverse_transform", lambda: matrix_type.from_inverse_transform(POS, SCALE, ROT)),
            ("from_transform().inverse()", lambda: matrix_type.from_transform(POS, SCALE, ROT).inverse()),
        ],
    }


def time_calls(func: Callable[[], object], calls: int, iterations: int, warmup: bool) -> List[float]:
    """Return the time per call in microseconds for each iteration."""
    if warmup:
        for _ in range(calls):
            func()
    per_call = []
    for _ in range(iterations):
        t_start = time.perf_counter()
        for _ in range(calls):
            func()
        per_call.append((time.perf_counter() - t_start) * 1e6 / calls)
    return per_call


def print_case(name: str, rows: List[Tuple[str, List[float]]]):
    print(f"{BOLD}{name}{RESET}")
    print(f"  {'Expression':<30} {'Median':>10} {'Min':>10} {'Max':>10}")
    print(f"  {'─' * 30} {'─' * 10} {'─' * 10} {'─' * 10}")
    baseline = statistics.median(rows[0][1])
    for label, times in rows:
        median = statistics.median(times)
        color = GREEN if median <= baseline else YELLOW
        print(f"  {color}{label:<30}{RESET} {median:>8.1f}us {min(times):>8.1f}us {max(times):>8.1f}us")
    if len(rows) > 1:
        speedup = statistics.median(rows[1][1]) / baseline
        print(f"  {DIM}closed form speedup: {speedup:.2f}x{RESET}")
    print()


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark the closed-form TRS builders",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("-i", "--iterations", type=int, default=5, help="Timed iterations (default: 5)")
    parser.add_argument("-n", "--calls", type=int, default=1000, help="Calls per iteration (default: 1000)")
    parser.add_argument("-p", "--precision", choices=sorted(MATRIX_TYPES), default="float", help="Matrix precision (default: float)")
    parser.add_argument("-c", "--case", choices=["transform", "inverse", "all"], default="all", help="Which comparison to run (default: all)")
    parser.add_argument("--no-warmup", action="store_true", help="Skip warmup iteration")

    args = parser.parse_args()

    if args.iterations < 1 or args.calls < 1:
        print("Error: --iterations and --calls must be positive")
        return 1

    cases = build_cases(MATRIX_TYPES[args.precision])
    selected = cases if args.case == "all" else {args.case: cases[args.case]}

    print(f"{DIM}{args.precision} precision, {args.iterations} x {args.calls} calls{RESET}")
    print()
    for name, expressions in selected.items():
        rows = [(label, time_calls(func, args.calls, args.iterations, not args.no_warmup)) for label, func in expressions]
        print_case(name, rows)
    return 0


if __name__ == "__main__":
    sys.exit(main())
