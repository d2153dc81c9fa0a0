"""
Frame layout for the viewer.

This module turns a ContentBuffer into rich renderables:
- frame_rows(): One plain Text row per content line
- build_frame(): Rows joined into a single centered, non-wrapping Text
- make_screen(): Full-screen wrapper that paints every visible cell

Layout structure:
+----------------------------------------+
|              first line                |
|        a somewhat longer line          |
|                 last                   |
|                                        |
+----------------------------------------+

Rows are centered one at a time and never wrapped. Rows wider than the
terminal are cropped; rows below the last visible line are clipped by
Screen.
"""

from rich.screen import Screen
from rich.text import Text

from termview.content import ContentBuffer

# C0 controls except tab, plus DEL and C1 controls (ESC, CSI, ...)
CONTROL_CHARS = {
    codepoint: None
    for codepoint in [*range(0x00, 0x09), *range(0x0A, 0x20), *range(0x7F, 0xA0)]
}


def frame_rows(content: ContentBuffer) -> list[Text]:
    """
    Convert each content line into an unstyled Text row.

    Text is built directly (not from markup), so square brackets and
    tags in the file are shown as-is. Control characters are removed so
    escape sequences in the file never reach the terminal.

    Args:
        content: Lines to render

    Returns:
        One Text per line, in order
    """
    return [Text(line.translate(CONTROL_CHARS)) for line in content]


def build_frame(content: ContentBuffer) -> Text:
    """
    Build the centered text block for a frame.

    Args:
        content: Lines to render

    Returns:
        Text with center justification, no wrapping and cropped overflow
    """
    separator = Text("\n", justify="center", no_wrap=True, overflow="crop")
    return separator.join(frame_rows(content))


def make_screen(content: ContentBuffer) -> Screen:
    """
    Wrap the frame so it fills the whole console.

    application_mode=True separates rows with "\\r\\n"-style line breaks,
    which raw mode needs because output post-processing is off.

    Args:
        content: Lines to render

    Returns:
        Screen renderable sized to the console on each print
    """
    return Screen(build_frame(content), application_mode=True)
