"""
Viewer render loop.

Each iteration:
1. Repaint the full frame from the ContentBuffer
2. Poll the InputClassifier (bounded wait)
3. Stop if the quit key was pressed

Redraw always happens before the quit check, so the screen shows the
last completed frame when the loop ends. Errors from drawing or polling
end the loop immediately; nothing is retried.
"""

import logging
from typing import Protocol

from rich.console import Console
from rich.control import Control

from termview.content import ContentBuffer
from termview.exceptions import RenderError
from termview.layout import make_screen

logger = logging.getLogger(__name__)


class QuitSource(Protocol):
    """Anything that can report, once per call, whether to stop."""

    def should_quit(self) -> bool: ...


class Viewer:
    """
    Single-threaded redraw-then-poll loop over an immutable buffer.

    Example:
        viewer = Viewer(console, load_content(path), InputClassifier())
        with TerminalSession(console):
            viewer.run()
    """

    def __init__(self, console: Console, content: ContentBuffer, classifier: QuitSource) -> None:
        """
        Initialize viewer.

        Args:
            console: Rich Console used as the display surface
            content: Lines to display, never modified
            classifier: Reports whether the last input event was quit
        """
        self.console = console
        self.content = content
        self.classifier = classifier
        self._screen = make_screen(content)

    def draw(self) -> None:
        """
        Clear and repaint the whole visible area.

        The frame is written in one buffered write: cursor home, then a
        Screen that pads every cell of the console.

        Raises:
            RenderError: If writing the frame fails
        """
        try:
            with self.console:
                self.console.control(Control.home())
                self.console.print(self._screen, end="")
        except (OSError, ValueError) as e:
            raise RenderError("failed to draw frame", e) from e

    def run(self) -> int:
        """
        Redraw and poll until the quit key is pressed.

        Returns:
            Number of frames drawn

        Raises:
            RenderError: If a frame cannot be drawn
            InputError: If the classifier fails to poll or read
        """
        frames = 0
        while True:
            self.draw()
            frames += 1
            if self.classifier.should_quit():
                break
        logger.info(f"Quit after {frames} frames")
        return frames
