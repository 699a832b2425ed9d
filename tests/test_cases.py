"""Tests for case discovery, fixture loading and selection"""
import pytest

from argcount.core.exceptions import CaseDiscoveryError, CaseFormatError
from argcount.testrunner.cases import discover_cases, filter_cases, load_case, load_cases


class TestDiscoverCases:
    """Test discover_cases directory listing"""

    def test_lists_directories_sorted(self, make_case):
        make_case("b_case", stdout="x\n")
        cases_root = make_case("a_case", stdout="y\n")
        (cases_root / "notes.txt").write_text("not a case")

        assert discover_cases(cases_root) == ["a_case", "b_case"]

    def test_ignores_hidden_and_cache_directories(self, make_case):
        cases_root = make_case("real")
        (cases_root / ".git").mkdir()
        (cases_root / "__pycache__").mkdir()

        assert discover_cases(cases_root) == ["real"]

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(CaseDiscoveryError) as exc_info:
            discover_cases(tmp_path / "nope")
        assert "Cases directory not found" in str(exc_info.value)

    def test_checked_in_fixtures(self, fixture_cases_dir):
        names = discover_cases(fixture_cases_dir)
        assert "echo_one_arg" in names
        assert "two_args_error" in names
        assert "empty_stdin" in names


class TestFilterCases:
    """Test --skip / --run selection"""

    NAMES = ["alpha", "beta", "gamma"]

    def test_no_selection_keeps_all(self):
        assert filter_cases(self.NAMES) == self.NAMES

    def test_skip_removes_listed(self):
        assert filter_cases(self.NAMES, skip=["beta"]) == ["alpha", "gamma"]

    def test_run_keeps_only_listed_in_original_order(self):
        assert filter_cases(self.NAMES, run=["gamma", "alpha"]) == ["alpha", "gamma"]

    def test_run_unknown_name_selects_nothing(self):
        assert filter_cases(self.NAMES, run=["delta"]) == []


class TestLoadCase:
    """Test fixture file loading"""

    def test_defaults_when_fixtures_missing(self, make_case):
        cases_root = make_case("empty")
        case = load_case(cases_root, "empty")

        assert case.name == "empty"
        assert case.argv == ""
        assert case.arguments == []
        assert case.stdin is None
        assert case.stdin_file is None
        assert case.expected_stdout == b""
        assert case.expected_stderr == b""
        assert case.expected_return_code == 0

    def test_reads_all_fixtures(self, make_case):
        cases_root = make_case(
            "full", argv="  a 'b c'\n", stdin=b"Z", stdout="out\n", stderr="err\n", return_code="3\n"
        )
        case = load_case(cases_root, "full")

        assert case.argv == "a 'b c'"
        assert case.arguments == ["a", "b c"]
        assert case.stdin == b"Z"
        assert case.stdin_file == cases_root / "full" / "stdin"
        assert case.expected_stdout == b"out\n"
        assert case.expected_stderr == b"err\n"
        assert case.expected_return_code == 3

    def test_txt_variants(self, make_case):
        cases_root = make_case(
            "txt", **{"argv.txt": "x", "stdin.txt": "9", "stdout.txt": "9\n", "return_code.txt": "0"}
        )
        case = load_case(cases_root, "txt")

        assert case.arguments == ["x"]
        assert case.stdin == b"9"
        assert case.expected_stdout == b"9\n"

    def test_txt_variant_wins_for_expected_output(self, make_case):
        cases_root = make_case("both", stdout="plain\n", **{"stdout.txt": "txt\n"})
        assert load_case(cases_root, "both").expected_stdout == b"txt\n"

    def test_bare_stdin_wins(self, make_case):
        cases_root = make_case("both", stdin="A", **{"stdin.txt": "B"})
        assert load_case(cases_root, "both").stdin == b"A"

    def test_empty_return_code_is_zero(self, make_case):
        cases_root = make_case("blank", return_code="  \n")
        assert load_case(cases_root, "blank").expected_return_code == 0

    def test_invalid_return_code_raises(self, make_case):
        cases_root = make_case("bad", return_code="one")
        with pytest.raises(CaseFormatError) as exc_info:
            load_case(cases_root, "bad")
        assert exc_info.value.case_name == "bad"
        assert exc_info.value.fixture == "return_code"

    def test_unbalanced_quote_in_argv_raises(self, make_case):
        cases_root = make_case("quote", argv="a 'b")
        with pytest.raises(CaseFormatError) as exc_info:
            load_case(cases_root, "quote")
        assert exc_info.value.case_name == "quote"
        assert exc_info.value.fixture == "argv"
        assert "No closing quotation" in str(exc_info.value)

    def test_non_utf8_argv_raises(self, make_case):
        cases_root = make_case("binary", argv=b"\xff\xfe")
        with pytest.raises(CaseFormatError) as exc_info:
            load_case(cases_root, "binary")
        assert exc_info.value.case_name == "binary"
        assert exc_info.value.fixture == "argv"

    def test_load_cases_stops_on_malformed_argv(self, make_case):
        make_case("good", argv="hello", stdout="hello\n")
        cases_root = make_case("quote", argv="a 'b")
        with pytest.raises(CaseFormatError):
            load_cases(cases_root, ["good", "quote"])

    def test_load_cases_preserves_order(self, make_case):
        make_case("first")
        cases_root = make_case("second")
        cases = load_cases(cases_root, ["second", "first"])
        assert [case.name for case in cases] == ["second", "first"]

    def test_checked_in_two_argument_case(self, fixture_cases_dir):
        case = load_case(fixture_cases_dir, "two_args_error")
        assert case.arguments == ["a", "b"]
        assert case.expected_stderr == b"error :(\n"
        assert case.expected_return_code == 1
