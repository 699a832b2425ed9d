"""Pytest configuration and fixtures for argcount tests"""
import os
import shlex
import sys
from pathlib import Path

import pytest

from argcount.core.config import RunnerConfig

TESTS_DIR = Path(__file__).resolve().parent
SRC_DIR = TESTS_DIR.parent / "src"


@pytest.fixture
def fixture_cases_dir():
    """Directory holding the checked-in case fixtures"""
    return TESTS_DIR / "cases"


@pytest.fixture
def argcount_command(monkeypatch):
    """Command line that runs the dispatcher in a child interpreter.

    PYTHONPATH is extended so the child can import the package without
    an editable install.
    """
    existing = os.environ.get("PYTHONPATH")
    pythonpath = str(SRC_DIR) if not existing else f"{SRC_DIR}{os.pathsep}{existing}"
    monkeypatch.setenv("PYTHONPATH", pythonpath)
    return f"{shlex.quote(sys.executable)} -m argcount"


@pytest.fixture
def runner_config(argcount_command, fixture_cases_dir):
    """RunnerConfig pointed at the dispatcher and the fixture cases"""
    return RunnerConfig(
        executable=argcount_command,
        timeout=30.0,
        cases_dir=str(fixture_cases_dir),
        workers=2,
        quiet=True,
    )


@pytest.fixture
def make_case(tmp_path):
    """Factory that writes a case directory from fixture contents.

    Values may be str or bytes; None leaves the fixture out.
    """
    cases_root = tmp_path / "cases"
    cases_root.mkdir()

    def _make(name, **fixtures):
        case_dir = cases_root / name
        case_dir.mkdir()
        for fixture_name, content in fixtures.items():
            if content is None:
                continue
            if isinstance(content, str):
                content = content.encode("utf-8")
            (case_dir / fixture_name).write_bytes(content)
        return cases_root

    return _make
