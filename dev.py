"""Run the tagdocs development checks: formatting, linting and tests."""

import argparse
import subprocess
import sys

FIX_STEPS: list[tuple[str, list[str]]] = [
    ("Format", ["uv", "run", "ruff", "format"]),
    ("Lint (with fixes)", ["uv", "run", "ruff", "check", "--fix"]),
]

CHECK_STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check"]),
    ("Lint", ["uv", "run", "ruff", "check"]),
]

TEST_STEP = ("Tests", ["uv", "run", "pytest"])


def run_step(name: str, command: list[str]) -> None:
    """Run one step, exiting with its return code on failure."""
    print(f"\n--- {name} ---\n$ {' '.join(command)}")
    result = subprocess.run(command, check=False)
    if result.returncode != 0:
        print(f"\nFailed: {name}")
        sys.exit(result.returncode)


def main() -> None:
    """Parse arguments and run the selected steps."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--ci",
        action="store_true",
        help="Only check formatting and lint; never rewrite files",
    )
    args = parser.parse_args()

    steps = CHECK_STEPS if args.ci else FIX_STEPS
    for name, command in [*steps, TEST_STEP]:
        run_step(name, command)

    print("\nAll checks passed.")


if __name__ == "__main__":
    main()
