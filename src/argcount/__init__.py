"""
argcount - a command-line utility that branches on its argument count.

Also ships ``argcount-testrunner``, which runs an executable against
directories of expected-output fixtures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from argcount.core.version import __version__

__all__ = ["__version__", "dispatch", "main"]

if TYPE_CHECKING:
    from argcount.dispatcher import dispatch, main


def __getattr__(name: str) -> Any:
    if name in ("dispatch", "main"):
        from argcount import dispatcher

        return getattr(dispatcher, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
