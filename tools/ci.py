#!/usr/bin/env python3
# Copyright 2026 UMLGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the UMLGraph CI checks locally.

Usage::

    tools/ci.py                 # every step
    tools/ci.py lint tests      # only the named steps
    tools/ci.py --fail-fast     # stop at the first failing step
"""

import argparse
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

SOURCES = ["src/", "tests/", "tools/"]

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", *SOURCES],
    "lint": ["uv", "run", "ruff", "check", *SOURCES],
    "types": ["uv", "run", "ty", "check", "src/"],
    "tests": ["uv", "run", "pytest", "--cov=umlgraph", "--cov-report=term-missing"],
    "docs": ["uv", "run", "sphinx-build", "-q", "-W", "docs/sphinx", "build/docs"],
    "build": ["uv", "build"],
}


@dataclass
class StepResult:
    name: str
    returncode: int
    elapsed: float

    @property
    def passed(self) -> bool:
        return self.returncode == 0


def main() -> int:
    """Run the selected CI steps and print a summary."""
    parser = argparse.ArgumentParser(description="Run UMLGraph CI checks locally.")
    parser.add_argument("steps", nargs="*", help=f"Steps to run (default: all of {', '.join(STEPS)})")
    parser.add_argument("--fail-fast", action="store_true", help="Stop after the first failing step")
    args = parser.parse_args()
    selected = args.steps or list(STEPS)
    unknown = [name for name in selected if name not in STEPS]
    if unknown:
        parser.error(f"unknown step(s): {', '.join(unknown)}")

    results: list[StepResult] = []
    for name in selected:
        result = _run_step(name, STEPS[name])
        results.append(result)
        if args.fail_fast and not result.passed:
            break

    _print_summary(results, len(selected))
    return 0 if all(r.passed for r in results) else 1


# ################
# Implementation
# ################

_RULE = "=" * 60


def _run_step(name: str, cmd: list[str]) -> StepResult:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue(f"{name}: {' '.join(cmd)}"))
    print(chalk.blue(_RULE))
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=Path(__file__).resolve().parent.parent)
    return StepResult(name, proc.returncode, time.monotonic() - start)


def _print_summary(results: list[StepResult], selected: int) -> None:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(_RULE))
    for result in results:
        if result.passed:
            print(chalk.green(f"  PASS  {result.name} ({result.elapsed:.1f}s)"))
        else:
            print(chalk.red(f"  FAIL  {result.name} ({result.elapsed:.1f}s, exit {result.returncode})"))
    skipped = selected - len(results)
    if skipped:
        print(chalk.yellow(f"  {skipped} step(s) not run"))
    print()


if __name__ == "__main__":
    sys.exit(main())
