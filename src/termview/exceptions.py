"""
Exception classes for the viewer lifecycle.

This module defines one exception per failure point of a viewing session:
- TerminalSetupError: Raw mode or alternate screen could not be entered
- RenderError: The display surface could not be redrawn
- InputError: The terminal event poll or read failed
- TerminalRestoreError: Raw mode, screen or cursor could not be restored

All of them are fatal. The CLI catches ViewerError, prints the message
and exits non-zero.

Per project patterns:
- Inherit from a shared base exception type
- Store context data in attributes for error handling
- Include descriptive message with relevant details
"""


class ViewerError(Exception):
    """
    Base class for all viewer failures.

    Attributes:
        step: Human-readable description of what was being attempted
        cause: The underlying exception, if any
    """

    def __init__(self, step: str, cause: BaseException | None = None) -> None:
        self.step = step
        self.cause = cause
        message = step if cause is None else f"{step}: {cause}"
        super().__init__(message)


class TerminalSetupError(ViewerError):
    """
    Raised when the terminal cannot be switched into viewer mode.

    Typically means stdin or stdout is not attached to a real terminal.
    Raised before any frame is drawn.
    """


class RenderError(ViewerError):
    """Raised when a frame cannot be written to the display surface."""


class InputError(ViewerError):
    """Raised when polling or reading a terminal event fails."""


class TerminalRestoreError(ViewerError):
    """
    Raised when the terminal cannot be fully restored on exit.

    Every restore step is attempted before this is raised; the
    exception describes the first step that failed.
    """
