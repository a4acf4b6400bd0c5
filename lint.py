#!/usr/bin/env python3
"""
Code quality checker for the file barrier package.

Runs the tools used in CI:
- Black (code formatting)
- isort (import sorting)
- mypy (type checking, informational)
- bandit (security linting, informational)

Usage:
    python lint.py          # Fix formatting, then check
    python lint.py --check  # Check only (no fixes)
"""

import subprocess
import sys
from typing import List, Tuple

TARGETS = ["file_barrier", "tests", "lint.py"]


def run_command(cmd: List[str], description: str) -> Tuple[int, str, str]:
    """Run a command and return results."""
    print(f"\n{'='*50}")
    print(f"Running {description}...")
    print(f"Command: {' '.join(cmd)}")
    print("=" * 50)

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=300)
    except subprocess.TimeoutExpired:
        print("ERROR: Command timed out")
        return 1, "", "Command timed out"
    except OSError as e:
        print(f"ERROR: Failed to run command: {e}")
        return 1, "", str(e)

    if result.stdout:
        print("STDOUT:", result.stdout)
    if result.stderr:
        print("STDERR:", result.stderr)
    return result.returncode, result.stdout, result.stderr


def build_steps(check_only: bool) -> List[Tuple[str, List[str], bool]]:
    """Return (description, command, blocking) for every tool."""
    black_cmd = ["black", "--check", "--diff"] if check_only else ["black"]
    isort_cmd = ["isort", "--check-only", "--diff"] if check_only else ["isort"]
    return [
        ("Black", black_cmd + TARGETS, True),
        ("isort", isort_cmd + TARGETS, True),
        ("mypy", ["mypy", "file_barrier", "--ignore-missing-imports"], False),
        ("bandit", ["bandit", "-r", "file_barrier", "-f", "json", "-o", "bandit-report.json"], False),
    ]


def main() -> int:
    """Main linting function."""
    check_only = "--check" in sys.argv
    print(f"Mode: {'Check only' if check_only else 'Fix and check'}")

    exit_code = 0
    for description, cmd, blocking in build_steps(check_only):
        code, _, _ = run_command(cmd, description)
        if code == 0:
            print(f"✅ {description}: OK")
        elif blocking:
            exit_code = 1
            print(f"❌ {description}: issues found")
        else:
            print(f"⚠️  {description}: issues found (informational only)")

    print(f"\n{'='*50}")
    if exit_code == 0:
        print("🎉 All linting checks passed!")
    else:
        print("❌ Some linting checks failed.")
        if check_only:
            print("Run 'python lint.py' (without --check) to fix formatting issues.")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
