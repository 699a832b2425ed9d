"""Tests for console output and result export"""
import io
import json

import pandas as pd
import pytest

from argcount.core.colors import ConsoleColors
from argcount.core.constants import REPORT_COLUMNS
from argcount.core.exceptions import OutputError
from argcount.testrunner.models import CaseResult, TestCase
from argcount.testrunner.report import (
    build_results_dataframe,
    format_result,
    format_summary,
    print_results,
    write_results,
)


@pytest.fixture(autouse=True)
def no_colors():
    """Disable ANSI codes so output can be compared as plain text"""
    ConsoleColors.configure(no_color=True)
    yield
    ConsoleColors.configure()


@pytest.fixture
def results(tmp_path):
    ok = TestCase(name="echo", path=tmp_path / "echo", argv="hello", expected_stdout=b"hello\n")
    bad = TestCase(name="err", path=tmp_path / "err", argv="a b", expected_return_code=1)
    return [
        CaseResult(case=ok, command="argcount hello", passed=True, return_code=0, duration=0.01),
        CaseResult(
            case=bad,
            command="argcount a b",
            passed=False,
            return_code=1,
            error_message="There was an error with stderr:\nOutput:\nerror :(\n\nExpected:\n\n",
            mismatches=["stderr"],
        ),
    ]


class TestFormatting:
    """Test per-case and summary lines"""

    def test_success_line(self, results):
        assert format_result(results[0]) == "echo: argcount hello: Success! :)"

    def test_failure_block(self, results):
        text = format_result(results[1])
        assert text.startswith("err: argcount a b: Failed! :(\n")
        assert "There was an error with stderr:" in text

    def test_summary_with_failures(self, results):
        assert format_summary(results) == "Number of failed tests: 1/2\n"

    def test_summary_all_passed(self, results):
        assert format_summary(results[:1]) == "All tests have been performed. No error!\n"

    def test_colored_success(self, results):
        ConsoleColors.configure()
        ConsoleColors._enabled = True
        assert format_result(results[0]).startswith(ConsoleColors.GREEN)

    def test_colored_failure_header_only(self, results):
        ConsoleColors._enabled = True
        header, details = format_result(results[1]).split("\n", 1)
        assert header == f"{ConsoleColors.RED_BACKGROUND}err: argcount a b: Failed! :({ConsoleColors.RESET}"
        assert ConsoleColors.RED_BACKGROUND not in details

    def test_print_results(self, results):
        stream = io.StringIO()
        print_results(results, stream=stream)
        output = stream.getvalue()
        assert "echo: argcount hello: Success! :)" in output
        assert output.rstrip().endswith("Number of failed tests: 1/2")


class TestWriteResults:
    """Test CSV/JSON export"""

    def test_dataframe_columns(self, results):
        df = build_results_dataframe(results)
        assert list(df.columns) == list(REPORT_COLUMNS)
        assert df["passed"].tolist() == [True, False]

    def test_empty_dataframe_keeps_columns(self):
        df = build_results_dataframe([])
        assert list(df.columns) == list(REPORT_COLUMNS)
        assert df.empty

    def test_csv(self, results, tmp_path):
        path = write_results(results, str(tmp_path / "out" / "results.csv"))
        df = pd.read_csv(path)
        assert df["case"].tolist() == ["echo", "err"]
        assert df["expected_return_code"].tolist() == [0, 1]

    def test_json(self, results, tmp_path):
        path = write_results(results, str(tmp_path / "results.json"))
        with open(path, encoding="utf-8") as f:
            rows = json.load(f)
        assert [row["case"] for row in rows] == ["echo", "err"]
        assert rows[1]["passed"] is False
        assert rows[1]["return_code"] == 1

    def test_stdout(self, results, capsys):
        assert write_results(results, "-") == "stdout"
        assert capsys.readouterr().out.splitlines()[0] == ",".join(REPORT_COLUMNS)

    def test_unsupported_extension(self, results, tmp_path):
        with pytest.raises(OutputError) as exc_info:
            write_results(results, str(tmp_path / "results.xlsx"))
        assert "Unsupported report format" in str(exc_info.value)

    def test_unwritable_path(self, results, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(OutputError) as exc_info:
            write_results(results, str(blocker / "results.csv"))
        assert exc_info.value.output_format == "csv"
        assert isinstance(exc_info.value.original_error, OSError)
