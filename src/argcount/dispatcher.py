"""Argument-count dispatcher, the ``argcount`` command.

Behavior depends only on how many arguments were supplied:

    argcount ARG          echo ARG to stdout, exit 0
    argcount ARG1 ARG2    print "error :(" to stderr, exit 1
    argcount [ARG ...]    any other count: echo one byte read from stdin, exit 0

When stdin is exhausted or unavailable the byte echoed is ``EOF_PLACEHOLDER``.
"""

import logging
import os
import sys
from typing import BinaryIO, NoReturn

from argcount.core.constants import (
    ECHO_ARG_COUNT,
    EOF_PLACEHOLDER,
    ERROR_ARG_COUNT,
    EXIT_SUCCESS,
)
from argcount.core.exceptions import TwoArgumentError

logger = logging.getLogger(__name__)


def _binary(stream):
    """Return the byte layer of a text stream, or the stream itself."""
    return getattr(stream, "buffer", stream)


def read_char(stream: BinaryIO | None) -> bytes:
    """Read exactly one byte from ``stream``.

    Args:
        stream: Binary input stream, or None when stdin is not attached

    Returns:
        The byte read, or ``EOF_PLACEHOLDER`` at end of input or when the
        stream cannot be read
    """
    if stream is None:
        logger.debug("stdin unavailable")
        return EOF_PLACEHOLDER

    try:
        char = stream.read(1)
    except (OSError, ValueError) as e:
        # ValueError: read on a closed file
        logger.debug(f"stdin unreadable: {e}")
        return EOF_PLACEHOLDER

    if isinstance(char, str):
        char = char.encode("utf-8", "surrogateescape")[:1]
    if not char:
        logger.debug("stdin exhausted")
        return EOF_PLACEHOLDER
    return char


def dispatch(argv: list[str], stdin: BinaryIO | None = None, stdout: BinaryIO | None = None) -> int:
    """Run the behavior selected by the number of arguments.

    Args:
        argv: Full argument list, invocation name included
        stdin: Binary input stream (default: the process's stdin)
        stdout: Binary output stream (default: the process's stdout)

    Returns:
        Exit status

    Raises:
        TwoArgumentError: If exactly two arguments follow the invocation name
    """
    count = len(argv)
    logger.debug(f"Dispatching on {count} argument(s)")

    if count == ERROR_ARG_COUNT:
        raise TwoArgumentError(tuple(argv[1:]))

    if stdout is None:
        stdout = _binary(sys.stdout)

    if count == ECHO_ARG_COUNT:
        stdout.write(os.fsencode(argv[1]) + b"\n")
    else:
        if stdin is None and sys.stdin is not None:
            stdin = _binary(sys.stdin)
        stdout.write(read_char(stdin) + b"\n")

    stdout.flush()
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for the argcount command"""
    if argv is None:
        argv = sys.argv

    try:
        status = dispatch(argv)
    except TwoArgumentError as e:
        print(str(e), file=sys.stderr)
        sys.exit(e.exit_code)

    sys.exit(status)


if __name__ == "__main__":
    main()
