"""Vertical scrolling of the view."""

from __future__ import annotations

SCROLL_STEP = 2.0


class ViewControl:
    """Tracks a vertical translation driven by scroll events."""

    def __init__(self, offset_y: float = 0.0):
        self.offset_y = offset_y

    def on_scroll(self, xoffset: float, yoffset: float) -> None:
        self.offset_y += yoffset * SCROLL_STEP

    @property
    def matrix(self) -> tuple[tuple[float, ...], ...]:
        """Row-major 4x4 view matrix for the current translation."""
        return (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, self.offset_y),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )