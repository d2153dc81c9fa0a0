"""
Viewer configuration.

Defaults match the interactive behavior: the screen is redrawn roughly
four times per second while idle, and the lowercase ``q`` key quits.

Example:
    ```python
    from termview.config import ViewerConfig

    config = ViewerConfig()
    config.poll_timeout  # 0.25
    ```
"""

from dataclasses import dataclass

DEFAULT_POLL_TIMEOUT = 0.25
DEFAULT_QUIT_KEY = "q"


@dataclass(frozen=True)
class ViewerConfig:
    """
    Settings for a viewing session.

    Attributes:
        poll_timeout: Seconds to wait for a terminal event before redrawing.
        quit_key: Exact key that ends the session.
    """

    poll_timeout: float = DEFAULT_POLL_TIMEOUT
    quit_key: str = DEFAULT_QUIT_KEY

    def __post_init__(self) -> None:
        if self.poll_timeout < 0:
            raise ValueError(f"poll_timeout must be >= 0, got {self.poll_timeout}")
        if not self.quit_key:
            raise ValueError("quit_key must not be empty")
