import os
import pytest
from pathlib import Path
import subprocess
import sys

# Define paths relative to the main tests/ directory
TESTS_ROOT_DIR = Path(__file__).parent # This is tests/integration/
PROJECT_ROOT = TESTS_ROOT_DIR.parent.parent # Go up two levels to project root

@pytest.fixture
def run_cli_tool():
    """Fixture to provide a helper function for running the CLI tool."""
    def _run_cli(*args: str, input_text: str = None, verbose: bool = False):
        """Helper function to run the CLI tool as a subprocess."""
        cmd = [
            sys.executable,  # Use the current Python executable
            "-m",
            "strinflect.cli",  # Invoke the module's entry point
            *[str(arg) for arg in args],
        ]
        if verbose:
            cmd.append("-v") # Add verbose flag if requested

        # Make the package importable without an installed copy
        env = dict(os.environ)
        src_dir = str(PROJECT_ROOT / "src")
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [src_dir, env.get("PYTHONPATH")]))

        # Run from the project root directory
        result = subprocess.run(
            cmd, input=input_text, capture_output=True, text=True, cwd=PROJECT_ROOT, env=env, check=False
        )

        if result.returncode != 0:
            print("--- CLI Output ---")
            print(f"Command: {' '.join(cmd)}")
            print("STDOUT:", result.stdout)
            print("STDERR:", result.stderr)
            print("--- End CLI Output ---")

        return result
    return _run_cli
