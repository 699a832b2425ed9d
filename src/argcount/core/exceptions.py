"""Custom exceptions for argcount.

Every error carries a short message plus optional details so the CLI
entry points can report it on a single stderr line.
"""

from argcount.core.constants import EXIT_FAILURE, TWO_ARGUMENT_ERROR_MESSAGE


class ArgCountError(Exception):
    """Base exception for all argcount errors."""

    exit_code: int = EXIT_FAILURE

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class TwoArgumentError(ArgCountError):
    """Raised by the dispatcher when invoked with exactly two arguments.

    The argument values are kept for debugging only; they never appear in
    the message written to stderr.
    """

    def __init__(self, arguments: tuple[str, ...] = ()):
        self.arguments = arguments
        super().__init__(TWO_ARGUMENT_ERROR_MESSAGE)


class ConfigurationError(ArgCountError):
    """Exception raised for test runner settings problems.

    Examples:
        - Settings file is not valid JSON
        - Settings file is not a JSON object
        - ``timeout`` is not a positive number
    """

    def __init__(
        self, message: str, config_file: str | None = None, field: str | None = None, details: str | None = None
    ):
        self.config_file = config_file
        self.field = field
        super().__init__(message, details)


class CaseDiscoveryError(ArgCountError):
    """Raised when the case directory cannot be listed."""

    def __init__(self, message: str, cases_dir: str | None = None, details: str | None = None):
        self.cases_dir = cases_dir
        super().__init__(message, details)


class CaseFormatError(ArgCountError):
    """Raised when a case directory holds a malformed fixture file."""

    def __init__(self, message: str, case_name: str | None = None, fixture: str | None = None, details: str | None = None):
        self.case_name = case_name
        self.fixture = fixture
        super().__init__(message, details)


class OutputError(ArgCountError):
    """Exception raised for result export failures.

    Examples:
        - Unsupported report extension
        - Permission denied
        - Invalid path
    """

    def __init__(
        self,
        message: str,
        output_path: str | None = None,
        output_format: str | None = None,
        details: str | None = None,
        original_error: Exception | None = None,
    ):
        self.output_path = output_path
        self.output_format = output_format
        self.original_error = original_error
        super().__init__(message, details)
