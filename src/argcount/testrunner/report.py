"""Console output and result export for the test runner."""

import json
import logging
import sys
from pathlib import Path
from typing import TextIO

import pandas as pd

from argcount.core.colors import ConsoleColors
from argcount.core.constants import REPORT_COLUMNS, infer_format_from_path
from argcount.core.exceptions import OutputError
from argcount.testrunner.models import CaseResult

logger = logging.getLogger(__name__)


def format_result(result: CaseResult) -> str:
    """Format the outcome line (and failure details) of one case."""
    outcome = "Success! :)" if result.passed else "Failed! :("
    line = ConsoleColors.status(result.passed, f"{result.case.name}: {result.command}: {outcome}")
    if result.passed:
        return line
    return f"{line}\n{result.error_message}"


def format_summary(results: list[CaseResult]) -> str:
    """Format the closing summary line."""
    failed = sum(1 for result in results if not result.passed)
    if failed:
        return f"Number of failed tests: {failed}/{len(results)}\n"
    return "All tests have been performed. No error!\n"


def print_results(results: list[CaseResult], stream: TextIO | None = None) -> None:
    """Print every case result followed by the summary."""
    stream = stream or sys.stdout
    for result in results:
        print(format_result(result), file=stream)
    print(format_summary(results), file=stream)


def build_results_dataframe(results: list[CaseResult]) -> pd.DataFrame:
    """Build the results table with stable columns for empty/non-empty runs."""
    if not results:
        return pd.DataFrame(columns=list(REPORT_COLUMNS))
    df = pd.DataFrame([result.to_dict() for result in results])
    return df[list(REPORT_COLUMNS)]


def write_results(results: list[CaseResult], output: str) -> str:
    """Export results as CSV or JSON.

    Args:
        results: Case results to export
        output: Destination path; ``-`` or ``stdout`` writes CSV to stdout

    Returns:
        Path written, or "stdout"

    Raises:
        OutputError: If the extension is unsupported or the file cannot be written
    """
    df = build_results_dataframe(results)

    if output in ("-", "stdout"):
        df.to_csv(sys.stdout, index=False)
        return "stdout"

    report_format = infer_format_from_path(output)
    if report_format is None:
        raise OutputError(
            "Unsupported report format",
            output_path=output,
            details=f"expected a .csv or .json file, got '{output}'",
        )

    output_path = Path(output)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if report_format == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump([result.to_dict() for result in results], f, indent=2, ensure_ascii=False)
        else:
            df.to_csv(output_path, index=False, encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to write report {output_path}: {e}")
        raise OutputError(
            "Cannot write report",
            output_path=str(output_path),
            output_format=report_format,
            details=str(e),
            original_error=e,
        ) from e

    logger.info(f"Report written to {output_path}")
    return str(output_path)
