"""Data models for test runner cases and results."""

import shlex
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class TestCase:
    """One case directory loaded from disk.

    Attributes:
        name: Directory name of the case
        path: Path to the case directory
        argv: Argument text, already whitespace-trimmed
        stdin: Bytes fed to the program, or None for an empty stdin
        stdin_file: Fixture the stdin bytes came from
        expected_stdout: Expected stdout bytes (empty when no fixture)
        expected_stderr: Expected stderr bytes (empty when no fixture)
        expected_return_code: Expected exit status (0 when no fixture)
    """

    __test__ = False  # not a pytest class

    name: str
    path: Path
    argv: str = ""
    stdin: bytes | None = None
    stdin_file: Path | None = None
    expected_stdout: bytes = b""
    expected_stderr: bytes = b""
    expected_return_code: int = 0

    @property
    def arguments(self) -> list[str]:
        """Argument text split the way a POSIX shell would."""
        return shlex.split(self.argv)


@dataclass
class CaseResult:
    """Outcome of running a single case."""

    case: TestCase
    command: str
    passed: bool
    return_code: int | None = None
    stdout: bytes = b""
    stderr: bytes = b""
    error_message: str = ""
    duration: float = 0.0
    mismatches: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Flatten to a report row."""
        return {
            "case": self.case.name,
            "command": self.command,
            "passed": self.passed,
            "return_code": self.return_code,
            "expected_return_code": self.case.expected_return_code,
            "duration_seconds": round(self.duration, 4),
            "error_message": self.error_message,
        }
