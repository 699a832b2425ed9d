"""CLI module - argcount-testrunner command-line interface."""

from argcount.cli.main import main, run
from argcount.cli.parser import parse_arguments

__all__ = ["main", "parse_arguments", "run"]
