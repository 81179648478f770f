#!/usr/bin/env python3
"""
Command line demo of the parallel maximum and prefix-sum methods.

Asks for an array size (unless ``--size`` is given), generates a random
integer array, runs every method on it, and prints the results, timings and
a final verification summary.

Examples:

  # Interactive: prompts for the size
  python -m pyparscan

  # Scans only, 6 workers, reproducible input, every barrier step printed
  python -m pyparscan --size 13 --mode scan --workers 6 --seed 1 --trace
"""

import argparse
import sys

import numpy as np

from . import constants as cte
from . import environment as env
from .errors import InvalidSizeError
from .harness import run_max_methods, run_scan_methods
from .steps import format_step

RULE = "=" * 50


def parse_size(text) -> int:
    """
    Validate a requested array size.

    Raises:
        InvalidSizeError: If the text is not a positive integer
    """
    try:
        size = int(str(text).strip())
    except ValueError:
        raise InvalidSizeError(f"Array size must be an integer, got {text!r}") from None
    if size <= 0:
        raise InvalidSizeError(f"Array size must be greater than 0, got {size}")
    return size


def preview(values, limit: int = cte.PREVIEW) -> str:
    shown = ", ".join(str(int(v)) for v in values[:limit])
    if len(values) > limit:
        return f"[{shown}, ...]"
    return f"[{shown}]"


def random_array(rng, size: int, low: int, high: int) -> np.ndarray:
    """Uniform integers in the inclusive range [low, high]."""
    return rng.integers(low, high + 1, size=size).astype(cte.NP_DTYPE)


def print_step(step):
    print("  " + format_step(step, cte.TRACE_PREVIEW))


def print_max_report(report):
    for m in [*report.methods, report.baseline]:
        print(f"--- {m.name} ---")
        if m.levels is not None:
            print(f"Number of synchronization steps: {m.levels}")
        print(f"Maximum value: {m.value}")
        print(f"Time: {m.elapsed_ms:.3f} ms")
        print()


def print_scan_report(report):
    for m in [report.baseline, *report.methods]:
        print(f"--- {m.name} ---")
        print(f"Result P: {preview(m.value)}")
        if len(m.value) > cte.PREVIEW:
            print(f"Last element (total sum): {int(m.value[-1])}")
        print(f"Time: {m.elapsed_ms:.3f} ms")
        if m is not report.baseline:
            print(f"Verification: {'PASSED' if m.passed else 'FAILED'}")
            if m.mismatch:
                print(f"  {m.mismatch}")
        print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyparscan",
        description="Parallel maximum and prefix sum (scan) on the Taichi CPU backend",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--size", help="Array size (prompted for when omitted)")
    parser.add_argument("--workers", type=int, default=cte.WORKERS,
                        help=f"Number of parallel workers (default: {cte.WORKERS})")
    parser.add_argument("--mode", choices=["max", "scan", "all"], default="all",
                        help="Which methods to run (default: all)")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the random input")
    parser.add_argument("--trace", action="store_true",
                        help="Print the working buffer after every synchronization step")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    print(RULE)
    print("    PARALLEL MAXIMUM AND PREFIX SUM (Taichi)")
    print(RULE)
    print()

    try:
        raw = args.size if args.size is not None else input("Array size: ")
        size = parse_size(raw)
    except (InvalidSizeError, EOFError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.workers < 1:
        print(f"Error: worker count must be at least 1, got {args.workers}", file=sys.stderr)
        return 1

    if not cte.INITIALISED:
        env.initialise(workers=args.workers)
    print(f"Number of workers: {args.workers}")
    print()

    rng = np.random.default_rng(args.seed)
    observer = print_step if args.trace else None
    reports = []

    if args.mode in ("max", "all"):
        values = random_array(rng, size, cte.MAX_RAND_LOW, cte.MAX_RAND_HIGH)
        print(RULE)
        print("PARALLEL MAXIMUM")
        print(RULE)
        print(f"Input array A: {preview(values)}")
        print()
        report = run_max_methods(values, args.workers, observer)
        print_max_report(report)
        reports.append(("Maximum", report))

    if args.mode in ("scan", "all"):
        values = random_array(rng, size, cte.SCAN_RAND_LOW, cte.SCAN_RAND_HIGH)
        print(RULE)
        print("PARALLEL PREFIX SUM (SCAN)")
        print(RULE)
        print(f"Input array A: {preview(values)}")
        print()
        report = run_scan_methods(values, args.workers, observer)
        print_scan_report(report)
        reports.append(("Prefix sum", report))

    print(RULE)
    print("SUMMARY")
    print(RULE)
    print(f"Array size: {size}")
    print(f"Number of workers: {args.workers}")
    for label, report in reports:
        status = "PASSED" if report.passed else "FAILED (" + ", ".join(report.failures) + ")"
        print(f"{label}: {status}")
    passed = all(report.passed for _, report in reports)
    print(f"All methods: {'PASSED' if passed else 'FAILED'}")
    return 0 if passed else 1


if __name__ == "__main__":
    sys.exit(main())
