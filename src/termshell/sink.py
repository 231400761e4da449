"""Output sinks that render status lines.

A sink is either a ``StreamSink`` (a standard stream driven through a rich
Console, with color and wrapping) or a ``PlainSink`` (any writable byte
object, never colored, never wrapped). ``print_status`` renders one status
line onto either kind.

Layout of a status line::

    <status, bold + color><separator> <message>
    <indent>                         <wrapped continuation>

where the status is right-justified to ``JUSTIFY_STATUS_LEN`` columns on a
terminal, or followed by a bold ``:`` otherwise.
"""

from __future__ import annotations

import errno
import textwrap
from dataclasses import dataclass, field
from typing import BinaryIO

from rich.console import Console
from rich.segment import Segment, Segments
from rich.style import Style

from termshell.color import ColorChoice, ColorMode
from termshell.exceptions import OutputError
from termshell.terminal import Stream, WidthProbe, default_probe

# Columns a justified status is padded to
JUSTIFY_STATUS_LEN = 12

# SGR reset, written ahead of a colored status to clear attributes left
# over from earlier output
RESET = "\x1b[0m"


class StreamConsole(Console):
    """Console that reports a closed pipe as an error instead of exiting."""

    def on_broken_pipe(self) -> None:
        # rich's default points stdout at devnull and raises SystemExit
        raise BrokenPipeError(errno.EPIPE, "Broken pipe")


def make_console(choice: ColorChoice, stream: Stream) -> Console:
    """Create a Console writing to ``stream`` with the given color choice.

    ALWAYS pins the basic ANSI palette and ignores NO_COLOR. AUTO defers to
    rich's detection, which honors TERM=dumb and NO_COLOR.
    """
    stderr = stream is Stream.STDERR
    if choice is ColorChoice.ALWAYS:
        return StreamConsole(stderr=stderr, color_system="standard", no_color=False)
    if choice is ColorChoice.NEVER:
        return StreamConsole(stderr=stderr, color_system=None)
    return StreamConsole(stderr=stderr, color_system="auto")


@dataclass
class StreamSink:
    """A standard stream with color support.

    Attributes:
        color_mode: Color mode requested by the user.
        is_tty: Whether the stream was a terminal at construction time.
        stream: Which standard stream this sink writes to.
        console: Console configured with the resolved color choice.
        probe: Width probe queried on every print.
    """

    color_mode: ColorMode
    is_tty: bool
    stream: Stream
    console: Console
    probe: WidthProbe = field(default_factory=default_probe)

    @classmethod
    def open(cls, color_mode: ColorMode, stream: Stream) -> StreamSink:
        """Open ``stream``, resolving ``color_mode`` against it once."""
        return cls(
            color_mode=color_mode,
            is_tty=stream.is_terminal(),
            stream=stream,
            console=make_console(color_mode.resolve(stream), stream),
        )

    def supports_color(self) -> bool:
        return self.console.color_system is not None and not self.console.no_color


@dataclass
class PlainSink:
    """A plain byte destination, for scripting and tests."""

    file: BinaryIO


OutputSink = StreamSink | PlainSink


def sink_width(sink: OutputSink) -> int | None:
    """Get the terminal width behind ``sink``, if it is a terminal."""
    match sink:
        case StreamSink(is_tty=True, stream=stream, probe=probe):
            return probe.width(stream)
        case _:
            return None


def wrap_message(message: str, width: int) -> list[str]:
    """Word-wrap ``message`` to ``width`` columns, keeping explicit line breaks."""
    width = max(width, 1)
    lines: list[str] = []
    for paragraph in message.splitlines() or [""]:
        lines.extend(textwrap.wrap(paragraph, width) or [""])
    return lines


def _stream_segments(
    sink: StreamSink,
    status: str,
    message: str | None,
    color: str,
    justified: bool,
    width: int | None,
) -> list[Segment]:
    # Each styled segment is emitted with its own reset, so color never
    # leaks into the separator or the message body.
    segments = [Segment(RESET)] if sink.supports_color() else []
    if justified and sink.is_tty:
        segments.append(Segment(status.rjust(JUSTIFY_STATUS_LEN), Style(bold=True, color=color)))
        offset = JUSTIFY_STATUS_LEN
    else:
        segments.append(Segment(status, Style(bold=True, color=color)))
        segments.append(Segment(":", Style(bold=True)))
        offset = len(status) + 1

    if message is None:
        segments.append(Segment(" "))
    elif width is None:
        segments.append(Segment(f" {message}\n"))
    else:
        lines = wrap_message(message, width - (offset + 1))
        indent = " " * offset
        segments.append(Segment(f" {lines[0]}\n"))
        segments.extend(Segment(f"{indent} {line}\n") for line in lines[1:])
    return segments


def _plain_text(status: str, message: str | None, justified: bool) -> str:
    head = status.ljust(JUSTIFY_STATUS_LEN) if justified else status
    if message is None:
        return f"{head} "
    return f"{head} {message}\n"


def print_status(
    sink: OutputSink,
    status: object,
    message: object | None,
    color: str,
    justified: bool,
) -> None:
    """Print a status line with an optional message to ``sink``.

    The status comes first, bold and in ``color``. When ``justified`` on a
    terminal it is right-aligned within ``JUSTIFY_STATUS_LEN`` columns. The
    message follows without color, wrapped to the terminal width when known.

    Args:
        sink: Destination to print to.
        status: Status token; any object, rendered with ``str()``.
        message: Message body, or None to print only the status and a space.
        color: Color name understood by rich (e.g., "green").
        justified: Whether to justify the status token.

    Raises:
        OutputError: If writing to the underlying stream fails, including a
            closed stream or text the stream cannot encode.
    """
    status_text = str(status)
    message_text = None if message is None else str(message)
    match sink:
        case StreamSink():
            segments = _stream_segments(
                sink, status_text, message_text, color, justified, sink_width(sink)
            )
            try:
                # Render first and write once, so a failed write never leaves
                # stale output in the console buffer.
                with sink.console.capture() as capture:
                    sink.console.print(Segments(segments), end="", soft_wrap=True)
                sink.console.file.write(capture.get())
                sink.console.file.flush()
            except (OSError, ValueError) as exc:
                raise OutputError(f"Failed to write status line: {exc}") from exc
        case PlainSink(file=file):
            text = _plain_text(status_text, message_text, justified)
            try:
                file.write(text.encode("utf-8"))
                file.flush()
            except (OSError, ValueError) as exc:
                raise OutputError(f"Failed to write status line: {exc}") from exc
