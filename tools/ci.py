#!/usr/bin/env python3
# Copyright 2026 ProtoRust Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the ProtoRust checks locally: format, lint, tests with coverage, and build.

Pass step names (``format``, ``lint``, ``tests``, ``build``) to run a subset.
"""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, tuple[str, list[str]]] = {
    "format": ("Format check", ["ruff", "format", "--check", "src/", "tests/", "tools/"]),
    "lint": ("Lint", ["ruff", "check", "src/", "tests/", "tools/"]),
    "tests": ("Tests", ["pytest", "--cov=protorust", "--cov-report=term-missing"]),
    "build": ("Build", [sys.executable, "-m", "build"]),
}


def main(argv: list[str]) -> int:
    """Run the selected steps, then print a pass/fail summary."""
    unknown = [name for name in argv if name not in STEPS]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}. Choose from: {', '.join(STEPS)}"))
        return 2

    selected = argv or list(STEPS)
    results = [_run_step(*STEPS[name]) for name in selected]
    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_SEP = "=" * 60


def _run_step(title: str, cmd: list[str]) -> tuple[str, bool, float]:
    print(f"\n{chalk.blue(_SEP)}")
    print(chalk.blue(title))
    print(chalk.blue(_SEP))
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_repo_root())
    return title, proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    print(f"\n{chalk.blue(_SEP)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(_SEP))
    for title, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        print(color(f"  {'PASS' if passed else 'FAIL'}  {title} ({elapsed:.1f}s)"))
    print()


def _repo_root() -> pathlib.Path:
    return pathlib.Path(__file__).resolve().parent.parent


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
