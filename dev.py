"""Development script to run checks (formatting, linting, tests) and a sample build."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally a sample conversion."""
    parser = argparse.ArgumentParser(
        description="Run development checks and a sample conversion."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, no formatting"
    )
    args = parser.parse_args()

    if not args.ci:
        run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_command(["uv", "run", "ruff", "check", "--fix"], "Ruff Linting & Fixes")
    else:
        run_command(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
        run_command(["uv", "run", "ruff", "check"], "Ruff Linting")

    run_command(["uv", "run", "pytest", "-q"], "Tests")

    if args.ci:
        print("\n✅ CI checks passed successfully.")
        return

    run_command(
        [
            "uv",
            "run",
            "python",
            "-m",
            "docmodel.build_docs",
            "samples/demo_tree.yml",
            "--store-dir",
            "build/store",
            "--render-dir",
            "build/md",
        ],
        "Sample Conversion",
    )

    print("\n✅ All development checks and the sample conversion passed.")


if __name__ == "__main__":
    main()
