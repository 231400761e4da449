"""Shared test helpers for unit tests."""

import io
from collections.abc import Callable

import pytest

from termshell.color import ColorMode
from termshell.sink import StreamConsole, StreamSink
from termshell.terminal import Stream


class FixedWidthProbe:
    """Width probe reporting a fixed width and counting queries."""

    def __init__(self, columns: int | None) -> None:
        self.columns = columns
        self.calls: list[Stream] = []

    def width(self, stream: Stream) -> int | None:
        self.calls.append(stream)
        return self.columns


StreamSinkFactory = Callable[..., tuple[StreamSink, io.StringIO]]


@pytest.fixture
def stream_sink() -> StreamSinkFactory:
    """Build a StreamSink that renders into a StringIO.

    Keyword arguments:
        color: Emit ANSI colors (basic palette) when True.
        is_tty: Whether the sink behaves as an interactive terminal.
        width: Width reported by the probe (None for unknown).
        stream: Standard stream the sink claims to wrap.
        color_mode: Requested color mode recorded on the sink.
    """

    def _factory(
        *,
        color: bool = False,
        is_tty: bool = True,
        width: int | None = 80,
        stream: Stream = Stream.STDOUT,
        color_mode: ColorMode = ColorMode.AUTO,
    ) -> tuple[StreamSink, io.StringIO]:
        buf = io.StringIO()
        console = StreamConsole(
            file=buf,
            color_system="standard" if color else None,
            no_color=False,
            width=200,
        )
        sink = StreamSink(
            color_mode=color_mode,
            is_tty=is_tty,
            stream=stream,
            console=console,
            probe=FixedWidthProbe(width),
        )
        return sink, buf

    return _factory
