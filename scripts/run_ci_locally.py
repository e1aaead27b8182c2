#!/usr/bin/env python3
"""
Run the CI checks locally against the ACTIVE virtual environment.

Order:
  1) uv sync --all-extras --dev [--frozen if uv.lock exists]
  2) black --check on the package, scripts and tests (line length 120)
  3) mypy on the package and scripts
  4) pytest tests/ with coverage on namecase
  5) benchmark smoke run on a small corpus

Pass --skip-sync to reuse an environment that is already installed.
"""

from __future__ import annotations

import os
import sys
import shutil
import argparse
import subprocess
from pathlib import Path

REPO = Path(__file__).resolve().parent.parent
PACKAGE = "namecase"
LINE_LENGTH = "120"
COVERAGE_FLOOR = "90"


def tool(name: str) -> list[str]:
    """Prefer `uv run --active <name>`, fall back to `python -m <name>`."""
    if shutil.which("uv"):
        return ["uv", "run", "--active", name]
    return [sys.executable, "-m", name]


def run(cmd: list[str], *, env: dict[str, str] | None = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def sync() -> None:
    if not shutil.which("uv"):
        print("uv not found, skipping dependency sync", file=sys.stderr)
        return
    args = ["uv", "sync", "--active", "--all-extras", "--dev"]
    if (REPO / "uv.lock").exists():
        args.append("--frozen")
    run(args)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run CI checks locally.")
    parser.add_argument("--skip-sync", action="store_true", help="Do not run uv sync first.")
    args = parser.parse_args()

    if not args.skip_sync:
        sync()

    run(tool("black") + [PACKAGE, "scripts", "tests", "--check", "--line-length", LINE_LENGTH])
    run(tool("mypy") + [PACKAGE, "scripts", "--ignore-missing-imports"])

    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    run(
        tool("pytest")
        + ["tests/", f"--cov={PACKAGE}", "--cov-report=term-missing", f"--cov-fail-under={COVERAGE_FLOOR}"],
        env=env,
    )

    run([sys.executable, "scripts/benchmark_names.py", "--count", "500"], env=env)

    print("\nALL CHECKS PASSED")


if __name__ == "__main__":
    try:
        main()
    except subprocess.CalledProcessError as e:
        print(f"\nCommand failed with exit code {e.returncode}", file=sys.stderr)
        sys.exit(e.returncode)
