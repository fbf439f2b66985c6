"""Scroll offsets for the record grid.

The viewport scrolls the least amount needed to keep the focused cell in
view, preferring the cell's top-left corner when it cannot fit entirely.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..table_model import Rect


@dataclass
class Viewport:
    left: int = 0
    top: int = 0

    def scroll_to_area(self, area: Rect, view_width: int, view_height: int) -> None:
        view_width = max(1, view_width)
        view_height = max(1, view_height)
        if area.x + area.width > self.left + view_width:
            self.left = area.x + area.width - view_width
        if area.x < self.left:
            self.left = area.x
        if area.y + area.height > self.top + view_height:
            self.top = area.y + area.height - view_height
        if area.y < self.top:
            self.top = area.y

    def clamp(self, content_width: int, content_height: int, view_width: int, view_height: int) -> None:
        """Keep offsets inside the content after a resize or data change."""
        self.left = max(0, min(self.left, content_width - view_width))
        self.top = max(0, min(self.top, content_height - view_height))
