"""Tests for specview.tui.keys."""

from __future__ import annotations

import io
import os

import pytest

from specview.exceptions import TerminalError
from specview.tui.keys import KeyReader, cbreak_terminal, split_keys


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    os.close(read_fd)
    os.close(write_fd)


class TestSplitKeys:
    """Test tokenizing raw input into key names."""

    @pytest.mark.parametrize(
        ("data", "name"),
        [
            (b"\x1b[A", "up"),
            (b"\x1b[B", "down"),
            (b"\x1bOA", "up"),
            (b"\x1bOB", "down"),
            (b"\x1b", "escape"),
            (b"\r", "enter"),
            (b"\n", "enter"),
            (b"\x7f", "backspace"),
            (b"\x08", "backspace"),
            (b"\x1b[5~", "pageup"),
            (b"q", "q"),
            ("é".encode("utf-8"), "é"),
        ],
    )
    def test_single_key(self, data: bytes, name: str) -> None:
        assert split_keys(data) == ([name], b"")

    def test_several_characters(self) -> None:
        assert split_keys(b"user") == (["u", "s", "e", "r"], b"")

    def test_repeated_arrows(self) -> None:
        assert split_keys(b"\x1b[B\x1b[B") == (["down", "down"], b"")

    def test_mixed(self) -> None:
        assert split_keys(b"/pe\x7f\r") == (["/", "p", "e", "backspace", "enter"], b"")

    def test_unknown_sequence_skipped(self) -> None:
        assert split_keys(b"\x1b[99~q") == (["q"], b"")

    def test_control_byte_skipped(self) -> None:
        assert split_keys(b"\x01a") == (["a"], b"")

    def test_incomplete_escape_sequence_kept(self) -> None:
        assert split_keys(b"a\x1b[") == (["a"], b"\x1b[")

    def test_incomplete_utf8_kept(self) -> None:
        encoded = "é".encode("utf-8")
        assert split_keys(b"x" + encoded[:1]) == (["x"], encoded[:1])

    def test_empty(self) -> None:
        assert split_keys(b"") == ([], b"")


class TestKeyReader:
    """Test bounded waits and queued keys on a file descriptor."""

    def test_reads_pending_key(self, pipe) -> None:
        read_fd, write_fd = pipe
        os.write(write_fd, b"\x1b[B")
        assert KeyReader(read_fd).read(0.5) == "down"

    def test_timeout_returns_none(self, pipe) -> None:
        read_fd, _ = pipe
        assert KeyReader(read_fd).read(0) is None

    def test_batched_characters_are_all_delivered(self, pipe) -> None:
        read_fd, write_fd = pipe
        os.write(write_fd, b"user")
        reader = KeyReader(read_fd)
        assert [reader.read(0.5) for _ in range(4)] == ["u", "s", "e", "r"]
        assert reader.read(0) is None

    def test_batched_arrows_are_all_delivered(self, pipe) -> None:
        read_fd, write_fd = pipe
        os.write(write_fd, b"\x1b[B\x1b[B")
        reader = KeyReader(read_fd)
        assert [reader.read(0.5), reader.read(0.5)] == ["down", "down"]

    def test_character_split_across_reads(self, pipe) -> None:
        read_fd, write_fd = pipe
        encoded = "é".encode("utf-8")
        reader = KeyReader(read_fd)
        os.write(write_fd, encoded[:1])
        assert reader.read(0.5) is None
        os.write(write_fd, encoded[1:])
        assert reader.read(0.5) == "é"

    def test_sequence_split_across_reads(self, pipe) -> None:
        read_fd, write_fd = pipe
        reader = KeyReader(read_fd)
        os.write(write_fd, b"\x1b[")
        assert reader.read(0.5) is None
        os.write(write_fd, b"A")
        assert reader.read(0.5) == "up"


class TestCbreakTerminal:
    def test_requires_terminal(self) -> None:
        with pytest.raises(TerminalError, match="needs a terminal"):
            with cbreak_terminal(io.StringIO()):
                pass
