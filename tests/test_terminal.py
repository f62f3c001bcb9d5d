import io
import os

from asciitint import terminal
from asciitint.terminal import FALLBACK_SIZE, RESET, foreground_rgb, get_terminal_size


class FakeTty(io.StringIO):
    def isatty(self):
        return True

    def fileno(self):
        return 99


def test_terminal_size_fallback_when_not_a_tty(capsys):
    # stdout is captured, so it is never a tty here
    assert get_terminal_size() == FALLBACK_SIZE == (80, 24)


def test_terminal_size_of_explicit_stream():
    assert get_terminal_size(io.StringIO()) == FALLBACK_SIZE


def test_terminal_size_reads_tty(monkeypatch):
    monkeypatch.setattr(terminal.os, "get_terminal_size", lambda fd: os.terminal_size((132, 43)))
    assert get_terminal_size(FakeTty()) == (132, 43)


def test_terminal_size_zero_columns_falls_back(monkeypatch):
    monkeypatch.setattr(terminal.os, "get_terminal_size", lambda fd: os.terminal_size((0, 0)))
    assert get_terminal_size(FakeTty()) == FALLBACK_SIZE


def test_terminal_size_query_error_falls_back(monkeypatch):
    def fail(fd):
        raise OSError("Inappropriate ioctl for device")

    monkeypatch.setattr(terminal.os, "get_terminal_size", fail)
    assert get_terminal_size(FakeTty()) == FALLBACK_SIZE


def test_escape_sequences():
    assert foreground_rgb(1, 22, 255) == "\033[38;2;1;22;255m"
    assert RESET == "\033[0m"
