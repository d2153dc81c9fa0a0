"""
Content loading for the viewer.

The file is read once at startup into a ContentBuffer, an immutable
sequence of lines. Nothing here interprets the text: markup, escape
characters and tags are kept verbatim.

Loading never fails. A missing path, an unreadable file or a file that
is not valid UTF-8 all produce an empty buffer.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


def split_lines(text: str) -> tuple[str, ...]:
    """
    Split text into lines on ``\\n``.

    A trailing ``\\r`` on each line is dropped, and a final newline does
    not produce an extra empty line.

    Args:
        text: Raw file content

    Returns:
        Tuple of lines, empty for empty text
    """
    if not text:
        return ()
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return tuple(part[:-1] if part.endswith("\r") else part for part in parts)


@dataclass(frozen=True)
class ContentBuffer:
    """
    Immutable ordered sequence of text lines.

    Example:
        buffer = ContentBuffer.from_text("hello\\nworld")
        list(buffer)  # ["hello", "world"]
    """

    lines: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_text(cls, text: str) -> "ContentBuffer":
        """Build a buffer from raw text."""
        return cls(lines=split_lines(text))

    def __len__(self) -> int:
        """Return number of lines in buffer."""
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        """Iterate over lines in buffer."""
        return iter(self.lines)

    def __bool__(self) -> bool:
        return bool(self.lines)


def load_content(path: Path | None) -> ContentBuffer:
    """
    Load a file into a ContentBuffer.

    Args:
        path: File to read, or None when no argument was given

    Returns:
        Buffer with the file's lines, or an empty buffer if the file
        could not be read as UTF-8 text
    """
    if path is None:
        logger.debug("No file given, showing empty content")
        return ContentBuffer()

    try:
        # Decoded without newline translation; a lone \r stays inside its line
        text = Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {path}, showing empty content: {e}")
        return ContentBuffer()

    buffer = ContentBuffer.from_text(text)
    logger.debug(f"Loaded {len(buffer)} lines from {path}")
    return buffer
