"""
Minimal full-screen terminal viewer for text files.

This package provides the building blocks for the viewer:
- ContentBuffer, load_content: Immutable lines loaded from a file
- TerminalSession: Raw mode and alternate screen, restored on exit
- Viewer: Redraw-then-poll render loop
- InputClassifier, InputEvent, EventKind: Bounded-wait quit detection
- build_frame, make_screen: Centered, unstyled frame layout
- ViewerConfig: Poll timeout and quit key
- ViewerError and subclasses: Fatal failures of a viewing session
"""

from termview.config import ViewerConfig
from termview.content import ContentBuffer, load_content, split_lines
from termview.exceptions import (
    InputError,
    RenderError,
    TerminalRestoreError,
    TerminalSetupError,
    ViewerError,
)
from termview.keyboard import EventKind, InputClassifier, InputEvent, classify_sequence, key_char
from termview.layout import build_frame, frame_rows, make_screen
from termview.session import TerminalSession
from termview.viewer import Viewer

__version__ = "0.1.0"

__all__ = [
    "ContentBuffer",
    "EventKind",
    "InputClassifier",
    "InputError",
    "InputEvent",
    "RenderError",
    "TerminalRestoreError",
    "TerminalSession",
    "TerminalSetupError",
    "Viewer",
    "ViewerConfig",
    "ViewerError",
    "build_frame",
    "classify_sequence",
    "frame_rows",
    "key_char",
    "load_content",
    "make_screen",
    "split_lines",
]
