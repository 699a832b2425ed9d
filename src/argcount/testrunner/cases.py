"""Case discovery and fixture loading.

A case is a sub-directory of the cases directory holding any of the
fixture files ``argv``, ``stdin``, ``stdout``, ``stderr`` and
``return_code`` (each optionally with a ``.txt`` suffix).
"""

import logging
import shlex
from collections.abc import Iterable
from pathlib import Path

from argcount.core.constants import (
    ARGV_FIXTURES,
    RETURN_CODE_FIXTURES,
    STDERR_FIXTURES,
    STDIN_FIXTURES,
    STDOUT_FIXTURES,
)
from argcount.core.exceptions import CaseDiscoveryError, CaseFormatError
from argcount.testrunner.models import TestCase

logger = logging.getLogger(__name__)


def discover_cases(cases_dir: str | Path) -> list[str]:
    """Return the sorted names of all case directories.

    Hidden directories and ``__pycache__``-style directories are ignored.

    Raises:
        CaseDiscoveryError: If ``cases_dir`` is missing or not a directory
    """
    root = Path(cases_dir)
    if not root.is_dir():
        raise CaseDiscoveryError("Cases directory not found", cases_dir=str(root), details=str(root))

    names = sorted(
        entry.name
        for entry in root.iterdir()
        if entry.is_dir() and not entry.name.startswith((".", "__"))
    )
    logger.info(f"Discovered {len(names)} case(s) in {root}")
    return names


def filter_cases(
    names: Iterable[str], skip: Iterable[str] | None = None, run: Iterable[str] | None = None
) -> list[str]:
    """Select which cases to execute.

    Args:
        names: All discovered case names
        skip: Names to leave out
        run: When given, only these names are kept

    Returns:
        Selected names in their original order
    """
    selected = list(names)
    if skip:
        skipped = set(skip)
        selected = [name for name in selected if name not in skipped]
    elif run:
        wanted = set(run)
        unknown = sorted(wanted - set(selected))
        if unknown:
            logger.warning(f"Requested case(s) not found: {', '.join(unknown)}")
        selected = [name for name in selected if name in wanted]
    return selected


def _read_fixture(case_dir: Path, candidates: tuple[str, ...]) -> bytes | None:
    # Last existing candidate wins
    content = None
    for candidate in candidates:
        fixture = case_dir / candidate
        if fixture.is_file():
            content = fixture.read_bytes()
    return content


def _stdin_fixture(case_dir: Path) -> Path | None:
    for candidate in STDIN_FIXTURES:
        fixture = case_dir / candidate
        if fixture.is_file():
            return fixture
    return None


def load_case(cases_dir: str | Path, name: str) -> TestCase:
    """Load the fixtures of one case directory.

    Raises:
        CaseFormatError: If the argv fixture is not valid UTF-8 or has unbalanced
            quotes, or the return code fixture is not an integer
    """
    case_dir = Path(cases_dir) / name

    argv = _read_fixture(case_dir, ARGV_FIXTURES)
    argv_text = ""
    if argv is not None:
        try:
            argv_text = argv.decode("utf-8").strip()
        except UnicodeDecodeError as e:
            raise CaseFormatError(
                "Argument fixture is not valid UTF-8", case_name=name, fixture="argv", details=str(e)
            ) from e
        try:
            shlex.split(argv_text)
        except ValueError as e:
            raise CaseFormatError(
                "Argument fixture cannot be split", case_name=name, fixture="argv", details=str(e)
            ) from e

    stdin_path = _stdin_fixture(case_dir)
    stdin = stdin_path.read_bytes() if stdin_path is not None else None

    raw_code = _read_fixture(case_dir, RETURN_CODE_FIXTURES)
    expected_return_code = 0
    if raw_code is not None and raw_code.strip():
        try:
            expected_return_code = int(raw_code.decode("utf-8").strip())
        except ValueError as e:
            raise CaseFormatError(
                "Return code fixture is not an integer",
                case_name=name,
                fixture="return_code",
                details=raw_code.decode("utf-8", "replace").strip(),
            ) from e

    return TestCase(
        name=name,
        path=case_dir,
        argv=argv_text,
        stdin=stdin,
        stdin_file=stdin_path,
        expected_stdout=_read_fixture(case_dir, STDOUT_FIXTURES) or b"",
        expected_stderr=_read_fixture(case_dir, STDERR_FIXTURES) or b"",
        expected_return_code=expected_return_code,
    )


def load_cases(cases_dir: str | Path, names: Iterable[str]) -> list[TestCase]:
    """Load several cases, preserving order."""
    return [load_case(cases_dir, name) for name in names]
