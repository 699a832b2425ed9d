"""Argument parsing for argcount-testrunner."""

import argparse

from argcount.core.constants import (
    DEFAULT_CASES_DIR,
    DEFAULT_RUNNER_WORKERS,
    DEFAULT_SETTINGS_FILE,
    MAX_RUNNER_WORKERS,
)
from argcount.core.version import __version__


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got '{value}'") from None
    if number <= 0:
        raise argparse.ArgumentTypeError("must be greater than 0")
    return number


def _worker_count(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    if number > MAX_RUNNER_WORKERS:
        raise argparse.ArgumentTypeError(f"cannot exceed {MAX_RUNNER_WORKERS}")
    return number


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        prog="argcount-testrunner",
        description="Welcome to the testrunner! Runs an executable against case directories "
        "of argv/stdin/stdout/stderr/return_code fixtures.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run every case under ./tests
  argcount-testrunner

  # Skip two cases
  argcount-testrunner --skip echo_one_arg two_args_error

  # Run only the listed cases against a specific executable
  argcount-testrunner --run stdin_char --executable "python -m argcount"

  # Export results for CI
  argcount-testrunner --cases-dir tests/cases --report results.json
""",
    )

    selection = parser.add_mutually_exclusive_group()
    selection.add_argument(
        "-s", "--skip", nargs="+", metavar="CASE", help="Run every case except the listed ones"
    )
    selection.add_argument("-r", "--run", nargs="+", metavar="CASE", help="Run only the listed cases")

    parser.add_argument(
        "--cases-dir",
        default=None,
        help="Directory containing one sub-directory per case; overrides the settings file "
        f"(default: {DEFAULT_CASES_DIR})",
    )
    parser.add_argument(
        "--executable",
        default=None,
        help="Command under test; overrides the settings file (default: argcount)",
    )
    parser.add_argument(
        "--settings",
        default=DEFAULT_SETTINGS_FILE,
        help=f"JSON settings file with 'executable', 'timeout' and 'cases_dir' keys (default: {DEFAULT_SETTINGS_FILE})",
    )
    parser.add_argument(
        "--timeout", type=_positive_float, default=None, help="Seconds allowed per case (default: 30)"
    )
    parser.add_argument(
        "--workers",
        type=_worker_count,
        default=DEFAULT_RUNNER_WORKERS,
        help=f"Cases run concurrently (default: {DEFAULT_RUNNER_WORKERS})",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Hide the progress bar")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--report", metavar="PATH", help="Write results to a .csv or .json file ('-' for stdout)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-format", choices=["text", "json"], default="text", help="Log output format (default: text)"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(argv)
