"""Terminal detection and width probing for the standard streams.

Width is looked up through the process's file descriptors rather than
``sys.stdout``/``sys.stderr`` so that replacing those objects (as test
harnesses do) does not change what the real terminal reports.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Protocol


class Stream(Enum):
    """A standard output stream of the process, valued by file descriptor."""

    STDOUT = 1
    STDERR = 2

    @property
    def fileno(self) -> int:
        return self.value

    def is_terminal(self) -> bool:
        """Whether the stream is attached to an interactive terminal."""
        try:
            return os.isatty(self.fileno)
        except OSError:
            return False


class WidthProbe(Protocol):
    """Protocol for querying the column count of a standard stream."""

    def width(self, stream: Stream) -> int | None:
        """Return the terminal width in columns, or None if unknown."""
        ...


class IoctlWidthProbe:
    """Width probe backed by the window-size ioctl of the stream's descriptor."""

    def width(self, stream: Stream) -> int | None:
        try:
            columns = os.get_terminal_size(stream.fileno).columns
        except (OSError, ValueError):
            return None
        return columns if columns > 0 else None


class NullWidthProbe:
    """Width probe for platforms without a window-size query."""

    def width(self, stream: Stream) -> int | None:
        return None


def default_probe() -> WidthProbe:
    """Select the width probe for the running platform."""
    if os.name == "posix":
        return IoctlWidthProbe()
    return NullWidthProbe()
