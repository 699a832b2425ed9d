"""Entry point for argcount-testrunner."""

import logging
import sys
from typing import NoReturn

from argcount.cli.parser import parse_arguments
from argcount.core.colors import ConsoleColors
from argcount.core.config import RunnerConfig
from argcount.core.constants import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_SUCCESS
from argcount.core.exceptions import ArgCountError
from argcount.core.logging import setup_logging
from argcount.testrunner.cases import discover_cases, filter_cases, load_cases
from argcount.testrunner.executor import run_cases
from argcount.testrunner.report import print_results, write_results

logger = logging.getLogger(__name__)


def _exit_error(msg: str) -> NoReturn:
    """Print a coloured error message to stderr and exit with code 1."""
    print(ConsoleColors.error(f"ERROR: {msg}"), file=sys.stderr)
    sys.exit(EXIT_FAILURE)


def run(argv: list[str] | None = None) -> int:
    """Run the selected cases and return the exit status.

    Raises:
        ArgCountError: On settings, discovery or export problems
    """
    args = parse_arguments(argv)
    setup_logging(args.log_level, args.log_format)
    ConsoleColors.configure(no_color=args.no_color)

    config = RunnerConfig.from_args(args)
    logger.debug(f"Runner configuration: {config.to_dict()}")

    names = filter_cases(discover_cases(config.cases_dir), skip=args.skip, run=args.run)
    cases = load_cases(config.cases_dir, names)
    results = run_cases(cases, config)

    print_results(results)
    if args.report:
        write_results(results, args.report)

    return EXIT_SUCCESS if all(result.passed for result in results) else EXIT_FAILURE


def main() -> NoReturn:
    """Main entry point for argcount-testrunner"""
    try:
        status = run()
    except ArgCountError as e:
        _exit_error(str(e))
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)
    sys.exit(status)


if __name__ == "__main__":
    main()
