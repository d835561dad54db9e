#!/usr/bin/env python3
# Copyright 2026 EJS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, sample scripts, and build."""

import argparse
import pathlib
import subprocess
import sys
import time

from yachalk import chalk

_REPO_ROOT = pathlib.Path(__file__).parent.parent

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=ejs", "--cov-report=term-missing"]),
    ("Sample scripts", ["uv", "run", "ejs", "check", *sorted(str(p) for p in (_REPO_ROOT / "samples").glob("*.ejs"))]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run the CI steps and report results."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--fail-fast", action="store_true", help="Stop at the first failing step")
    args = parser.parse_args()

    results: list[tuple[str, bool, float]] = []
    for name, cmd in STEPS:
        passed, elapsed = _run_step(name, cmd)
        results.append((name, passed, elapsed))
        if not passed and args.fail_fast:
            break

    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _run_step(name: str, cmd: list[str]) -> tuple[bool, float]:
    """Run one step from the repository root; return (passed, seconds)."""
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}\n{chalk.blue(name)}\n{sep}")
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_REPO_ROOT)
    return proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}\n{chalk.blue('  Summary')}\n{sep}")
    for name, passed, elapsed in results:
        status = "PASS" if passed else "FAIL"
        color = chalk.green if passed else chalk.red
        print(color(f"  {status}  {name} ({elapsed:.1f}s)"))
    print()


if __name__ == "__main__":
    sys.exit(main())
