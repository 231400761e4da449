"""Tests for terminal detection and width probing."""

from __future__ import annotations

import os

import pytest

from termshell.terminal import IoctlWidthProbe, NullWidthProbe, Stream, default_probe


class TestStream:
    """Tests for the Stream enum."""

    def test_filenos(self) -> None:
        assert Stream.STDOUT.fileno == 1
        assert Stream.STDERR.fileno == 2

    def test_is_terminal_uses_descriptor(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: list[int] = []

        def fake_isatty(fd: int) -> bool:
            seen.append(fd)
            return fd == 2

        monkeypatch.setattr("termshell.terminal.os.isatty", fake_isatty)
        assert Stream.STDOUT.is_terminal() is False
        assert Stream.STDERR.is_terminal() is True
        assert seen == [1, 2]

    def test_is_terminal_false_on_os_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken_isatty(fd: int) -> bool:
            raise OSError("bad file descriptor")

        monkeypatch.setattr("termshell.terminal.os.isatty", broken_isatty)
        assert Stream.STDOUT.is_terminal() is False


class TestIoctlWidthProbe:
    """Tests for IoctlWidthProbe."""

    def test_returns_columns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "termshell.terminal.os.get_terminal_size",
            lambda fd: os.terminal_size((120, 40)),
        )
        assert IoctlWidthProbe().width(Stream.STDOUT) == 120

    def test_queries_the_streams_descriptor(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: list[int] = []

        def fake_size(fd: int) -> os.terminal_size:
            seen.append(fd)
            return os.terminal_size((100, 30))

        monkeypatch.setattr("termshell.terminal.os.get_terminal_size", fake_size)
        IoctlWidthProbe().width(Stream.STDERR)
        assert seen == [2]

    def test_none_when_not_a_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def not_a_tty(fd: int) -> os.terminal_size:
            raise OSError(25, "Inappropriate ioctl for device")

        monkeypatch.setattr("termshell.terminal.os.get_terminal_size", not_a_tty)
        assert IoctlWidthProbe().width(Stream.STDOUT) is None

    def test_none_for_zero_columns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "termshell.terminal.os.get_terminal_size",
            lambda fd: os.terminal_size((0, 0)),
        )
        assert IoctlWidthProbe().width(Stream.STDOUT) is None

    def test_requeried_on_every_call(self, monkeypatch: pytest.MonkeyPatch) -> None:
        sizes = iter([80, 132])
        monkeypatch.setattr(
            "termshell.terminal.os.get_terminal_size",
            lambda fd: os.terminal_size((next(sizes), 24)),
        )
        probe = IoctlWidthProbe()
        assert probe.width(Stream.STDOUT) == 80
        assert probe.width(Stream.STDOUT) == 132


class TestNullWidthProbe:
    """Tests for NullWidthProbe."""

    @pytest.mark.parametrize("stream", [Stream.STDOUT, Stream.STDERR])
    def test_always_unknown(self, stream: Stream) -> None:
        assert NullWidthProbe().width(stream) is None


@pytest.mark.skipif(os.name != "posix", reason="ioctl probing is POSIX-only")
def test_default_probe_on_posix() -> None:
    assert isinstance(default_probe(), IoctlWidthProbe)
