"""A registry of user-interface elements drawn by the text renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .layout import TextBlock


class DivType(Enum):
    TRIANGLE = "triangle"
    TRIANGLE_OUTLINE = "triangle_outline"
    ROUNDED_RECTANGLE = "rounded_rectangle"
    ROUNDED_RECTANGLE_OUTLINE = "rounded_rectangle_outline"
    LABEL = "label"
    PARAGRAPH = "paragraph"
    TEXT_BOX = "text_box"


@dataclass
class Triangle:
    pass


@dataclass
class RoundedRectangle:
    pass


@dataclass
class Label:
    text: TextBlock = field(default_factory=TextBlock)


class UserInterface:
    """Assigns identifiers to added elements and prepares their resources."""

    def __init__(self, text_renderer):
        self.text_renderer = text_renderer
        self.element_ids: dict[DivType, int] = {}
        self.count = 0

    def add_element(self, element) -> None:
        """Register an element; raises TypeError for unsupported kinds."""
        if isinstance(element, Triangle):
            self.count += 1
            self.element_ids[DivType.TRIANGLE] = self.count
        elif isinstance(element, RoundedRectangle):
            pass
        elif isinstance(element, Label):
            self.text_renderer.load_font(element.text.style.font_name)
        else:
            raise TypeError(f"unsupported element: {type(element).__name__}")

    def remove_element(self) -> DivType:
        """Forget the most recently registered element and return its kind."""
        if not self.element_ids:
            raise LookupError("no elements to remove")
        kind = max(self.element_ids, key=self.element_ids.__getitem__)
        del self.element_ids[kind]
        return kind