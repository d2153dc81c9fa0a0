"""
TerminalSession for entering and leaving full-screen viewer mode.

This module owns the process-wide terminal state:
- Raw input mode on stdin (termios/tty)
- Alternate screen buffer on the console (rich)
- Cursor visibility

Setup order:
1. Save termios attributes, switch stdin to raw mode
2. Enter alternate screen
3. Hide cursor

Restore order:
1. Restore saved termios attributes
2. Leave alternate screen
3. Show cursor

Every restore step is attempted even if an earlier one fails. Use the
session as a context manager so restore runs on every exit path:

    with TerminalSession(console):
        viewer.run()
"""

import logging
import sys
import termios
import tty
from types import TracebackType
from typing import Callable, TextIO

from rich.console import Console

from termview.exceptions import TerminalRestoreError, TerminalSetupError

logger = logging.getLogger(__name__)


class TerminalSession:
    """
    Scoped raw-mode and alternate-screen session.

    Acquired once, released once. Release failures never hide an error
    that was already propagating out of the ``with`` block.

    Example:
        session = TerminalSession(Console())
        with session:
            ...  # terminal is raw and on the alternate screen
    """

    def __init__(self, console: Console, stdin: TextIO | None = None) -> None:
        """
        Initialize terminal session.

        Args:
            console: Rich Console used as the display surface
            stdin: Input stream whose tty is switched to raw mode
                (defaults to sys.stdin at acquire time)
        """
        self.console = console
        self._stdin = stdin
        self._fd: int | None = None
        self._saved_attrs: list | None = None
        self._active = False

    @property
    def active(self) -> bool:
        """True between a successful acquire() and release()."""
        return self._active

    def acquire(self) -> None:
        """
        Enter raw mode and the alternate screen.

        Raises:
            TerminalSetupError: If stdin is not a tty or the console is
                not a terminal. Raw mode is undone before raising.
            RuntimeError: If the session is already active
        """
        if self._active:
            raise RuntimeError("terminal session already acquired")

        stdin = self._stdin if self._stdin is not None else sys.stdin
        try:
            fd = stdin.fileno()
            saved = termios.tcgetattr(fd)
            tty.setraw(fd)
        except (termios.error, OSError, ValueError) as e:
            raise TerminalSetupError("failed to enable raw mode", e) from e

        self._fd = fd
        self._saved_attrs = saved

        try:
            entered = self.console.set_alt_screen(True)
        except (OSError, ValueError) as e:
            self._abort_setup()
            raise TerminalSetupError("unable to enter alternate screen", e) from e
        if not entered:
            self._abort_setup()
            raise TerminalSetupError("unable to enter alternate screen: console is not a terminal")

        try:
            self.console.show_cursor(False)
        except (OSError, ValueError) as e:
            self._abort_setup()
            raise TerminalSetupError("unable to hide cursor", e) from e

        self._active = True
        logger.debug(f"Terminal session acquired on fd {fd}")

    def release(self) -> None:
        """
        Leave raw mode and the alternate screen, and show the cursor.

        Raises:
            TerminalRestoreError: For the first step that failed, after
                all steps were attempted
            RuntimeError: If the session is not active
        """
        if not self._active:
            raise RuntimeError("terminal session is not active")
        self._active = False

        steps: list[tuple[str, Callable[[], object]]] = [
            ("failed to disable raw mode", self._restore_mode),
            ("unable to switch to main screen", lambda: self.console.set_alt_screen(False)),
            ("unable to show cursor", lambda: self.console.show_cursor(True)),
        ]
        first_error: TerminalRestoreError | None = None
        for step, action in steps:
            try:
                action()
            except (termios.error, OSError, ValueError) as e:
                logger.warning(f"{step}: {e}")
                if first_error is None:
                    first_error = TerminalRestoreError(step, e)
                    first_error.__cause__ = e

        if first_error is not None:
            raise first_error
        logger.debug("Terminal session released")

    def _restore_mode(self) -> None:
        """Restore the termios attributes saved by acquire()."""
        if self._fd is None or self._saved_attrs is None:
            return
        termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)

    def _abort_setup(self) -> None:
        """Undo a partial acquire() before reporting the setup failure."""
        try:
            if self.console.is_alt_screen:
                self.console.set_alt_screen(False)
            self._restore_mode()
        except (termios.error, OSError, ValueError) as e:
            logger.warning(f"Could not undo partial terminal setup: {e}")
        self._fd = None
        self._saved_attrs = None

    def __enter__(self) -> "TerminalSession":
        self.acquire()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self.release()
        except TerminalRestoreError as restore_error:
            if exc is None:
                raise
            # Keep the in-loop error as the one reported
            logger.error(f"Terminal restore failed after earlier error: {restore_error}")
