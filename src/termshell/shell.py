"""Thread-safe handle to formatted stdout/stderr output.

Build one ``Shell`` per process and pass it to whatever needs to report
progress::

    shell = Shell(ShellOptions(quiet=False, verbose=False, color_mode=ColorMode.AUTO))
    shell.status("Compiling", "foo v1.0")
    shell.error("disk full")

Writes to stdout and stderr are guarded independently. A whole status line,
including every wrapped continuation line, is written while holding its
channel's guard.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import StrEnum
from typing import BinaryIO

from termshell.color import ColorMode
from termshell.exceptions import GuardPoisonedError, OutputError
from termshell.logging import get_logger
from termshell.sink import OutputSink, PlainSink, StreamSink, print_status
from termshell.terminal import Stream

LOG = get_logger(__name__)


class Verbosity(StrEnum):
    """The requested verbosity of the program output."""

    VERBOSE = "verbose"
    NORMAL = "normal"
    QUIET = "quiet"

    @classmethod
    def from_options(cls, options: ShellOptions) -> Verbosity:
        """Determine the verbosity for the given options; quiet wins over verbose."""
        if options.quiet:
            return cls.QUIET
        if options.verbose:
            return cls.VERBOSE
        return cls.NORMAL


@dataclass(frozen=True)
class ShellOptions:
    """Resolved output settings a Shell is built from.

    Attributes:
        quiet: Suppress status, header and warning lines.
        verbose: Request verbose output.
        color_mode: Already-parsed color mode.
    """

    quiet: bool = False
    verbose: bool = False
    color_mode: ColorMode = ColorMode.AUTO


class ChannelGuard:
    """Exclusive-access guard around one output sink.

    If an exception other than ``OutputError`` escapes while the guard is
    held, the guard is poisoned and every later acquisition raises
    ``GuardPoisonedError``.
    """

    def __init__(self, channel: str, sink: OutputSink) -> None:
        self.channel = channel
        self._sink = sink
        self._lock = threading.Lock()
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def lock(self) -> Iterator[OutputSink]:
        with self._lock:
            if self._poisoned:
                raise GuardPoisonedError(self.channel)
            try:
                yield self._sink
            except OutputError:
                raise
            except BaseException:
                self._poisoned = True
                raise


class Shell:
    """Thread-safe handle to formatted stderr/stdout output."""

    def __init__(self, options: ShellOptions) -> None:
        """Create a shell on the process's standard streams.

        Color mode is resolved against each stream once, here.

        Args:
            options: Verbosity flags and the parsed color mode.
        """
        self._attach(
            Verbosity.from_options(options),
            StreamSink.open(options.color_mode, Stream.STDOUT),
            StreamSink.open(options.color_mode, Stream.STDERR),
        )

    @classmethod
    def from_write(cls, stdout: BinaryIO, stderr: BinaryIO) -> Shell:
        """Create a shell from plain writable objects, with no color and max verbosity."""
        shell = cls.__new__(cls)
        shell._attach(Verbosity.VERBOSE, PlainSink(stdout), PlainSink(stderr))
        return shell

    def _attach(self, verbosity: Verbosity, out: OutputSink, err: OutputSink) -> None:
        # Shared by every constructor
        self._verbosity = verbosity
        self._out = ChannelGuard("stdout", out)
        self._err = ChannelGuard("stderr", err)
        LOG.debug(
            "shell_created",
            verbosity=str(self._verbosity),
            color_mode=str(self.color_mode()),
            supports_color=self.supports_color(),
        )

    @property
    def verbosity(self) -> Verbosity:
        return self._verbosity

    def status(self, status: object, message: object) -> None:
        """Shortcut to right-align and color green a status message."""
        self._print(status, message, "green", justified=True)

    def status_header(self, status: object) -> None:
        """Print a cyan status with no message, leaving the line open."""
        self._print(status, None, "cyan", justified=True)

    def warn(self, message: object) -> None:
        """Print an amber 'warning' message."""
        self._print("(warning)", message, "yellow", justified=True)

    def error(self, message: object) -> None:
        """Print a red 'error' message to stderr, regardless of verbosity."""
        self._emit(self._err, "(error)", message, "red", justified=True)

    def note(self, message: object) -> None:
        """Print a cyan 'note' message, regardless of verbosity."""
        self._emit(self._out, "(note)", message, "cyan", justified=True)

    def color_mode(self) -> ColorMode:
        """Get the current color mode.

        If we are not using a color stream, this always returns NEVER, even if
        the color mode has been set to something else.
        """
        with self._out.lock() as out:
            match out:
                case StreamSink(color_mode=color_mode):
                    return color_mode
                case _:
                    return ColorMode.NEVER

    def supports_color(self) -> bool:
        """Whether the stdout stream will emit color."""
        with self._out.lock() as out:
            match out:
                case StreamSink():
                    return out.supports_color()
                case _:
                    return False

    def _print(self, status: object, message: object | None, color: str, justified: bool) -> None:
        if self._verbosity is Verbosity.QUIET:
            return
        self._emit(self._out, status, message, color, justified)

    def _emit(
        self,
        guard: ChannelGuard,
        status: object,
        message: object | None,
        color: str,
        justified: bool,
    ) -> None:
        # Write failures never propagate past the Shell
        with guard.lock() as sink:
            try:
                print_status(sink, status, message, color, justified)
            except OutputError as exc:
                LOG.debug("shell_write_failed", channel=guard.channel, error=str(exc))
