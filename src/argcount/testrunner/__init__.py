"""Test runner - run an executable against directories of fixture files."""

from argcount.testrunner.cases import discover_cases, filter_cases, load_case, load_cases
from argcount.testrunner.executor import build_command, run_case, run_cases
from argcount.testrunner.models import CaseResult, TestCase
from argcount.testrunner.report import format_result, format_summary, print_results, write_results

__all__ = [
    "CaseResult",
    "TestCase",
    "build_command",
    "discover_cases",
    "filter_cases",
    "format_result",
    "format_summary",
    "load_case",
    "load_cases",
    "print_results",
    "run_case",
    "run_cases",
    "write_results",
]
