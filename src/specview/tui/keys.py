"""Raw keyboard input from the controlling terminal.

:func:`cbreak_terminal` switches the terminal into cbreak mode for the
duration of the browser (keys arrive unbuffered and unechoed, while Ctrl-C
still raises :class:`KeyboardInterrupt`).  A :class:`KeyReader` waits a
bounded time for input and hands out one symbolic key name per call, in the
form :func:`~specview.tui.intents.translate_key` understands.

One ``read`` from the terminal may carry several key presses (fast typing,
a paste, a held arrow key), and may end in the middle of an escape sequence
or a multi-byte character.  :func:`split_keys` tokenizes such a buffer and
returns the incomplete tail so the reader can prepend it to the next read.

POSIX terminals only.
"""

from __future__ import annotations

import os
import select
import sys
import termios
import tty
from collections import deque
from contextlib import contextmanager
from typing import Iterator, Optional

from specview.exceptions import TerminalError

_SEQUENCES = {
    b"\x1b[A": "up",
    b"\x1b[B": "down",
    b"\x1b[C": "right",
    b"\x1b[D": "left",
    b"\x1bOA": "up",
    b"\x1bOB": "down",
    b"\x1bOC": "right",
    b"\x1bOD": "left",
    b"\x1b[5~": "pageup",
    b"\x1b[6~": "pagedown",
    b"\x1b": "escape",
    b"\r": "enter",
    b"\n": "enter",
    b"\x7f": "backspace",
    b"\x08": "backspace",
    b"\t": "tab",
}

_CSI = b"\x1b["
_SS3 = b"\x1bO"

# Bytes per read; a paste longer than this simply spans several reads.
_READ_SIZE = 64


def _utf8_length(lead: int) -> int:
    """Encoded length announced by a UTF-8 lead byte, or 0 if it is not one."""
    if lead < 0x80:
        return 1
    if 0xC0 <= lead < 0xE0:
        return 2
    if 0xE0 <= lead < 0xF0:
        return 3
    if 0xF0 <= lead < 0xF8:
        return 4
    return 0


def _sequence_length(data: bytes) -> int:
    """Length of the escape sequence at the start of *data*, 0 if incomplete."""
    if data.startswith(_SS3):
        return 3 if len(data) >= 3 else 0
    # CSI: parameter bytes up to a final byte in 0x40..0x7E.
    for index in range(len(_CSI), len(data)):
        if 0x40 <= data[index] <= 0x7E:
            return index + 1
    return 0


def _next_key(data: bytes) -> tuple[Optional[str], int]:
    """Decode the key at the start of *data*.

    Returns:
        ``(name, consumed)``.  ``name`` is ``None`` for bytes that are not a
        recognised key (they are skipped).  ``consumed`` is 0 when *data*
        holds only the beginning of a key.
    """
    if data.startswith(_CSI) or data.startswith(_SS3):
        length = _sequence_length(data)
        if length == 0:
            return None, 0
        return _SEQUENCES.get(data[:length]), length

    name = _SEQUENCES.get(data[:1])
    if name is not None:
        return name, 1

    length = _utf8_length(data[0])
    if length == 0:
        return None, 1
    if len(data) < length:
        return None, 0
    try:
        char = data[:length].decode("utf-8")
    except UnicodeDecodeError:
        return None, 1
    return (char if char.isprintable() else None), length


def split_keys(data: bytes) -> tuple[list[str], bytes]:
    """Split a buffer of raw input into symbolic key names.

    Known escape sequences become names such as ``"up"`` or ``"escape"``;
    printable characters are returned as themselves.  Unknown sequences and
    control bytes are dropped.

    Returns:
        The decoded key names in order, and the trailing bytes of a key
        that has not fully arrived yet.

    Example::

        split_keys(b"\\x1b[B\\x1b[Bq")   # (['down', 'down', 'q'], b'')
        split_keys(b"ab\\xc3")          # (['a', 'b'], b'\\xc3')
    """
    keys: list[str] = []
    position = 0
    while position < len(data):
        name, consumed = _next_key(data[position:])
        if consumed == 0:
            break
        if name is not None:
            keys.append(name)
        position += consumed
    return keys, data[position:]


@contextmanager
def cbreak_terminal(stream=None) -> Iterator[int]:
    """Put the terminal behind *stream* (default stdin) into cbreak mode.

    Yields:
        The file descriptor to read keys from.

    Raises:
        TerminalError: If *stream* is not attached to a terminal.
    """
    stream = stream if stream is not None else sys.stdin
    if not stream.isatty():
        raise TerminalError("the interactive browser needs a terminal on stdin")

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield fd
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


class KeyReader:
    """Bounded-wait key source over a file descriptor.

    Keys decoded from one read but not yet returned are queued and handed
    out before the descriptor is polled again.  A partial escape sequence
    or UTF-8 character is kept until the rest of it arrives.

    Args:
        fd: Descriptor of a terminal in cbreak mode (or any readable pipe).
    """

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._pending: deque[str] = deque()
        self._partial = b""

    def read(self, timeout: float) -> Optional[str]:
        """Return the next key name, waiting up to *timeout* seconds.

        Returns:
            The key name, or ``None`` if nothing complete arrived in time.
        """
        if self._pending:
            return self._pending.popleft()

        ready, _, _ = select.select([self.fd], [], [], timeout)
        if not ready:
            return None

        keys, self._partial = split_keys(self._partial + os.read(self.fd, _READ_SIZE))
        self._pending.extend(keys)
        return self._pending.popleft() if self._pending else None
