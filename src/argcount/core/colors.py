"""Console colors for argcount test runner output.

Provides ANSI color codes for terminal output with auto-detection
of TTY support and Windows compatibility.
"""

import os
import sys


class ConsoleColors:
    """ANSI color codes for terminal output.

    Auto-detects TTY support and handles Windows compatibility.
    """
    GREEN = '\033[32m'
    RED_BACKGROUND = '\033[41m'
    RESET = '\033[0m'

    # Disable colors if not a TTY or on Windows without ANSI support
    _enabled = sys.stdout.isatty() and (os.name != 'nt' or os.environ.get('TERM'))

    @classmethod
    def configure(cls, no_color: bool = False) -> None:
        """Turn colors off explicitly, or restore TTY auto-detection."""
        if no_color or os.environ.get('NO_COLOR'):
            cls._enabled = False
        else:
            cls._enabled = sys.stdout.isatty() and (os.name != 'nt' or bool(os.environ.get('TERM')))

    @classmethod
    def success(cls, text: str) -> str:
        """Format text as success (green)"""
        if cls._enabled:
            return f"{cls.GREEN}{text}{cls.RESET}"
        return text

    @classmethod
    def error(cls, text: str) -> str:
        """Format text as error (red background)"""
        if cls._enabled:
            return f"{cls.RED_BACKGROUND}{text}{cls.RESET}"
        return text

    @classmethod
    def status(cls, success: bool, text: str) -> str:
        """Format text based on success/failure status"""
        return cls.success(text) if success else cls.error(text)
