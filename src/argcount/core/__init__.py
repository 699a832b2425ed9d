"""Core module - Foundation components with no internal dependencies.

This module provides the basic building blocks used throughout the application:
- Version information
- Custom exceptions
- Runner configuration
- Constants and defaults
- Console colors
"""

from argcount.core.version import __version__

from argcount.core.exceptions import (
    ArgCountError,
    TwoArgumentError,
    ConfigurationError,
    CaseDiscoveryError,
    CaseFormatError,
    OutputError,
)

from argcount.core.config import RunnerConfig, load_settings

from argcount.core.constants import (
    EXIT_SUCCESS,
    EXIT_FAILURE,
    TWO_ARGUMENT_ERROR_MESSAGE,
    EOF_PLACEHOLDER,
    DEFAULT_EXECUTABLE,
    DEFAULT_CASES_DIR,
    DEFAULT_SETTINGS_FILE,
    DEFAULT_TIMEOUT,
    DEFAULT_RUNNER_WORKERS,
    MAX_RUNNER_WORKERS,
    infer_format_from_path,
)

from argcount.core.colors import ConsoleColors

__all__ = [
    # Version
    '__version__',
    # Exceptions
    'ArgCountError',
    'TwoArgumentError',
    'ConfigurationError',
    'CaseDiscoveryError',
    'CaseFormatError',
    'OutputError',
    # Config
    'RunnerConfig',
    'load_settings',
    # Constants
    'EXIT_SUCCESS',
    'EXIT_FAILURE',
    'TWO_ARGUMENT_ERROR_MESSAGE',
    'EOF_PLACEHOLDER',
    'DEFAULT_EXECUTABLE',
    'DEFAULT_CASES_DIR',
    'DEFAULT_SETTINGS_FILE',
    'DEFAULT_TIMEOUT',
    'DEFAULT_RUNNER_WORKERS',
    'MAX_RUNNER_WORKERS',
    'infer_format_from_path',
    # Colors
    'ConsoleColors',
]
