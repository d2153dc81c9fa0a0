"""
InputClassifier for quit detection in the viewer loop.

This module reads at most one terminal event per poll and decides
whether it is the quit key:
- Waits on stdin with select() for a bounded time (250 ms by default)
- Reads one UTF-8 character or one escape sequence from the raw tty
- Classifies the event as a key, mouse, focus or paste event
- Only a key event equal to the quit key ends the session

Reads go straight to the file descriptor with os.read() so no bytes
are held in Python's stdin buffer where select() cannot see them.
Does NOT change terminal modes; the TerminalSession must already have
put stdin in raw mode.
"""

import logging
import os
import select
import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from termview.config import DEFAULT_POLL_TIMEOUT, DEFAULT_QUIT_KEY, ViewerConfig
from termview.exceptions import InputError

logger = logging.getLogger(__name__)

ESCAPE = 0x1B
# Bytes of an escape sequence arrive together; wait briefly for the rest
SEQUENCE_TIMEOUT = 0.05


class EventKind(str, Enum):
    """Kinds of terminal input events."""

    KEY = "key"
    MOUSE = "mouse"
    FOCUS = "focus"
    PASTE = "paste"


@dataclass(frozen=True)
class InputEvent:
    """
    A single terminal input event.

    Attributes:
        kind: What sort of event this is
        data: Decoded bytes of the event (a character or escape sequence)
    """

    kind: EventKind
    data: str


def classify_sequence(data: str) -> EventKind:
    """
    Decide the kind of a decoded input sequence.

    Args:
        data: A single character or a complete escape sequence

    Returns:
        MOUSE for X10 and SGR mouse reports, FOCUS for focus in/out,
        PASTE for bracketed paste markers, KEY otherwise
    """
    if data.startswith("\x1b[M"):
        return EventKind.MOUSE
    if data.startswith("\x1b[<") and data[-1] in ("M", "m"):
        return EventKind.MOUSE
    if data in ("\x1b[I", "\x1b[O"):
        return EventKind.FOCUS
    if data in ("\x1b[200~", "\x1b[201~"):
        return EventKind.PASTE
    return EventKind.KEY


def key_char(data: str) -> str:
    """
    Return the character a key event carries, without Alt or Ctrl.

    Alt+key arrives as ESC followed by the key, and Ctrl+letter as the
    control byte 0x01-0x1A. Tab, Enter and Backspace share control bytes
    with Ctrl+I, Ctrl+M and Ctrl+H and are kept as they are.

    Args:
        data: Decoded key event

    Returns:
        The unmodified character, or data itself for other keys
    """
    if len(data) == 2 and data[0] == "\x1b" and data[1].isprintable():
        return data[1]
    if len(data) == 1 and 0x01 <= ord(data) <= 0x1A and data not in ("\b", "\t", "\n", "\r"):
        return chr(ord(data) + 0x60)
    return data


def _utf8_length(lead: int) -> int:
    """Return the encoded length of a UTF-8 character from its lead byte."""
    if lead >> 5 == 0b110:
        return 2
    if lead >> 4 == 0b1110:
        return 3
    if lead >> 3 == 0b11110:
        return 4
    return 1


def _is_ready(fd: int, timeout: float) -> bool:
    """Return True if fd has data to read within timeout seconds."""
    return bool(select.select([fd], [], [], timeout)[0])


def _read_exact(fd: int, count: int) -> bytes:
    """Read exactly count bytes, raising EOFError if input ends first."""
    data = b""
    while len(data) < count:
        chunk = os.read(fd, count - len(data))
        if not chunk:
            raise EOFError("end of input")
        data += chunk
    return data


class InputClassifier:
    """
    Bounded-wait terminal event reader that reports the quit signal.

    Example:
        classifier = InputClassifier(sys.stdin)
        if classifier.should_quit():
            ...  # user pressed q
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        timeout: float = DEFAULT_POLL_TIMEOUT,
        quit_key: str = DEFAULT_QUIT_KEY,
    ) -> None:
        """
        Initialize input classifier.

        Args:
            stdin: Input stream to read events from (defaults to sys.stdin)
            timeout: Maximum seconds to wait for an event per poll
            quit_key: Exact key that reports quit
        """
        self._stdin = stdin
        self.timeout = timeout
        self.quit_key = quit_key

    @classmethod
    def from_config(cls, config: ViewerConfig, stdin: TextIO | None = None) -> "InputClassifier":
        """Create a classifier using the poll timeout and quit key from config."""
        return cls(stdin, timeout=config.poll_timeout, quit_key=config.quit_key)

    def poll(self) -> InputEvent | None:
        """
        Wait for one terminal event.

        Returns:
            The event read, or None if nothing arrived within the timeout

        Raises:
            InputError: If waiting on or reading from stdin fails
        """
        try:
            fd = (self._stdin if self._stdin is not None else sys.stdin).fileno()
            if not _is_ready(fd, self.timeout):
                return None
        except (OSError, ValueError) as e:
            raise InputError("event poll failed", e) from e

        try:
            data = self._read_event(fd)
        except (OSError, ValueError, EOFError) as e:
            raise InputError("event read failed", e) from e

        return InputEvent(kind=classify_sequence(data), data=data)

    def should_quit(self) -> bool:
        """
        Poll once and report whether the quit key was pressed.

        Non-key events are discarded. Alt and Ctrl modifiers are ignored,
        but case matters: "Q" does not quit.

        Returns:
            True only for a key event whose character is the quit key
        """
        event = self.poll()
        if event is None:
            return False
        if event.kind is not EventKind.KEY:
            logger.debug(f"Discarding {event.kind.value} event {event.data!r}")
            return False
        return key_char(event.data) == self.quit_key

    def _read_event(self, fd: int) -> str:
        """Read one character or escape sequence from fd."""
        lead = _read_exact(fd, 1)
        if lead[0] == ESCAPE:
            return self._read_escape(fd)
        raw = lead + _read_exact(fd, _utf8_length(lead[0]) - 1)
        return raw.decode("utf-8", errors="replace")

    def _read_escape(self, fd: int) -> str:
        """
        Read the rest of an escape sequence after ESC.

        A lone ESC (nothing follows within SEQUENCE_TIMEOUT) is the Escape
        key. CSI sequences run to their final byte, SS3 sequences take one
        more byte, and anything else is an Alt+key pair.
        """
        seq = b"\x1b"
        if not _is_ready(fd, SEQUENCE_TIMEOUT):
            return seq.decode()

        introducer = _read_exact(fd, 1)
        seq += introducer
        if introducer == b"[":
            while _is_ready(fd, SEQUENCE_TIMEOUT):
                byte = _read_exact(fd, 1)
                seq += byte
                if seq == b"\x1b[M":
                    # X10 mouse report: button, column, row
                    seq += _read_exact(fd, 3)
                    break
                if 0x40 <= byte[0] <= 0x7E:
                    break
        elif introducer == b"O":
            if _is_ready(fd, SEQUENCE_TIMEOUT):
                seq += _read_exact(fd, 1)
        else:
            seq += _read_exact(fd, _utf8_length(introducer[0]) - 1)
        return seq.decode("utf-8", errors="replace")
