"""Configuration for the argcount test runner.

``RunnerConfig`` centralizes the runner options for type safety and easy
testing. It is built from command-line arguments layered over the optional
JSON settings file, or created directly in code.
"""

import argparse
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from argcount.core.constants import (
    DEFAULT_CASES_DIR,
    DEFAULT_EXECUTABLE,
    DEFAULT_RUNNER_WORKERS,
    DEFAULT_SETTINGS_FILE,
    DEFAULT_TIMEOUT,
)
from argcount.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class RunnerConfig:
    """Configuration for a test runner invocation.

    Attributes:
        executable: Command line of the program under test (default: "argcount")
        timeout: Seconds allowed per case (default: 30)
        cases_dir: Directory holding one sub-directory per case (default: "tests")
        workers: Concurrent case threads (default: 4)
        quiet: Suppress the progress bar (default: False)
    """

    executable: str = DEFAULT_EXECUTABLE
    timeout: float = DEFAULT_TIMEOUT
    cases_dir: str = DEFAULT_CASES_DIR
    workers: int = DEFAULT_RUNNER_WORKERS
    quiet: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "executable": self.executable,
            "timeout": self.timeout,
            "cases_dir": self.cases_dir,
            "workers": self.workers,
            "quiet": self.quiet,
        }

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RunnerConfig":
        """Create a RunnerConfig from parsed arguments and the settings file.

        Priority: 1) command-line option, 2) settings file, 3) default.
        """
        settings = load_settings(args.settings)

        executable = args.executable or settings.get("executable")
        if not executable:
            executable = DEFAULT_EXECUTABLE
            if not settings:
                logger.warning(
                    f"Missing {args.settings} in working directory, using default executable {executable}"
                )

        timeout = args.timeout if args.timeout is not None else settings.get("timeout", DEFAULT_TIMEOUT)
        cases_dir = args.cases_dir or settings.get("cases_dir", DEFAULT_CASES_DIR)

        return cls(
            executable=executable,
            timeout=timeout,
            cases_dir=cases_dir,
            workers=args.workers,
            quiet=args.quiet,
        )


def load_settings(settings_file: str | Path = DEFAULT_SETTINGS_FILE) -> dict[str, Any]:
    """Load runner settings from a JSON file.

    Args:
        settings_file: Path to the settings file

    Returns:
        Dictionary with the recognized keys (``executable``, ``timeout``,
        ``cases_dir``); empty if the file does not exist

    Raises:
        ConfigurationError: If the file cannot be read or holds invalid values
    """
    path = Path(settings_file)
    if not path.is_file():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError("Invalid JSON in settings file", config_file=str(path), details=str(e)) from e
    except OSError as e:
        raise ConfigurationError("Cannot read settings file", config_file=str(path), details=str(e)) from e

    if not isinstance(data, dict):
        raise ConfigurationError("Settings file must contain a JSON object", config_file=str(path))

    settings: dict[str, Any] = {}

    executable = data.get("executable")
    if executable is not None:
        if not isinstance(executable, str) or not executable.strip():
            raise ConfigurationError(
                "'executable' must be a non-empty string", config_file=str(path), field="executable"
            )
        settings["executable"] = executable

    timeout = data.get("timeout")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigurationError(
                "'timeout' must be a positive number", config_file=str(path), field="timeout"
            )
        settings["timeout"] = float(timeout)

    cases_dir = data.get("cases_dir")
    if cases_dir is not None:
        if not isinstance(cases_dir, str) or not cases_dir.strip():
            raise ConfigurationError(
                "'cases_dir' must be a non-empty string", config_file=str(path), field="cases_dir"
            )
        settings["cases_dir"] = cases_dir

    unknown = sorted(set(data) - {"executable", "timeout", "cases_dir"})
    if unknown:
        logger.warning(f"Ignoring unknown settings in {path}: {', '.join(unknown)}")

    logger.debug(f"Loaded settings from {path}: {settings}")
    return settings
