"""Constants and default values for argcount.

Centralizes the dispatcher's fixed output, exit codes and the test
runner's defaults and fixture names.
"""

from pathlib import Path

# ==================== EXIT CODES ====================

EXIT_SUCCESS: int = 0
EXIT_FAILURE: int = 1
EXIT_INTERRUPTED: int = 130  # 128 + SIGINT

# ==================== DISPATCHER ====================

# Argument counts include the invocation name at index 0
ECHO_ARG_COUNT: int = 2
ERROR_ARG_COUNT: int = 3

TWO_ARGUMENT_ERROR_MESSAGE: str = "error :("

# Written in place of a character when stdin is exhausted or unavailable.
# Matches the byte C's printf("%c", EOF) produces.
EOF_PLACEHOLDER: bytes = b"\xff"

# ==================== TEST RUNNER DEFAULTS ====================

DEFAULT_EXECUTABLE: str = "argcount"
DEFAULT_CASES_DIR: str = "tests"
DEFAULT_SETTINGS_FILE: str = ".testrunner.json"
DEFAULT_TIMEOUT: float = 30.0  # seconds per case
DEFAULT_RUNNER_WORKERS: int = 4
MAX_RUNNER_WORKERS: int = 64

TQDM_BAR_FORMAT = "{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}]"

# ==================== FIXTURE FILES ====================

# Candidate names per fixture. When several exist the last one wins.
ARGV_FIXTURES: tuple[str, ...] = ("argv", "argv.txt")
STDOUT_FIXTURES: tuple[str, ...] = ("stdout", "stdout.txt")
STDERR_FIXTURES: tuple[str, ...] = ("stderr", "stderr.txt")
RETURN_CODE_FIXTURES: tuple[str, ...] = ("return_code", "return_code.txt")
# stdin is the exception: the bare name takes precedence
STDIN_FIXTURES: tuple[str, ...] = ("stdin", "stdin.txt")

# ==================== REPORT EXPORT ====================

EXTENSION_TO_FORMAT: dict[str, str] = {
    ".csv": "csv",
    ".json": "json",
}

REPORT_COLUMNS: tuple[str, ...] = (
    "case",
    "command",
    "passed",
    "return_code",
    "expected_return_code",
    "duration_seconds",
    "error_message",
)


def infer_format_from_path(output_path: str) -> str | None:
    """Return the report format for ``output_path``'s extension, or None."""
    if not output_path or output_path in ("-", "stdout"):
        return None
    return EXTENSION_TO_FORMAT.get(Path(output_path).suffix.lower())
