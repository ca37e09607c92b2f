"""Glyph metrics, word wrapping and geometry for text and caret drawing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

CARET_WIDTH = 2.0
CARET_EXTRA_HEIGHT = 5.0


@dataclass
class Glyph:
    """Metrics of one rendered character; ``advance`` is in 1/64 pixels."""

    size: tuple[int, int]
    bearing: tuple[int, int]
    advance: int
    image: Any = None


@dataclass
class Font:
    """A font family at one pixel size."""

    family: str
    glyphs: dict[str, Glyph] = field(default_factory=dict)
    line_height: float = 0.0


class TextAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass
class TextStyle:
    font_name: str = ""
    font_size: int = 48
    color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    scale: float = 1.0


@dataclass
class TextBlock:
    content: str = ""
    style: TextStyle = field(default_factory=TextStyle)
    position: tuple[float, float] = (0.0, 0.0)
    max_width: float = 0.0
    align: TextAlign = TextAlign.LEFT


def tokenize(text: str) -> list[str]:
    """Split text into words, keeping each space and newline as its own token."""
    tokens: list[str] = []
    current = ""
    for ch in text:
        if ch in (" ", "\n"):
            if current:
                tokens.append(current)
                current = ""
            tokens.append(ch)
        else:
            current += ch
    if current:
        tokens.append(current)
    return tokens


def char_width(c: str, font: Font, scale: float) -> float:
    """Horizontal advance of one character; KeyError if the font lacks it."""
    return (font.glyphs[c].advance >> 6) * scale


def word_width(word: str, font: Font, scale: float) -> float:
    """Sum of the advances of every character in ``word``."""
    return sum((char_width(c, font, scale) for c in word), 0.0)


def wrap_lines(tokens, font: Font, scale: float, max_width: float) -> list[str]:
    """Greedily pack tokens into lines no wider than ``max_width``."""
    lines: list[str] = []
    current = ""
    current_width = 0.0
    for token in tokens:
        if token == "\n":
            lines.append(current)
            current = ""
            current_width = 0.0
            continue
        width = word_width(token, font, scale)
        if current and current_width + width > max_width:
            lines.append(current)
            current = ""
            current_width = 0.0
        current += token
        current_width += width
    if current:
        lines.append(current)
    return lines


def aligned_x(align: TextAlign, base_x: float, window_width: float, max_line_width: float) -> float:
    """Starting x of each line for the given alignment."""
    if align is TextAlign.CENTER:
        return window_width / 2.0 - max_line_width / 2.0
    if align is TextAlign.RIGHT:
        return window_width - (max_line_width + base_x)
    return base_x


def quad_vertices(glyph: Glyph, x: float, y: float, scale: float) -> list[tuple[float, float, float, float]]:
    """Two triangles (x, y, u, v) covering a glyph placed on the baseline at (x, y)."""
    xpos = x + glyph.bearing[0] * scale
    ypos = y + glyph.bearing[1] * scale - glyph.size[1] * scale
    w = glyph.size[0] * scale
    h = glyph.size[1] * scale
    return [
        (xpos, ypos + h, 0.0, 0.0),
        (xpos, ypos, 0.0, 1.0),
        (xpos + w, ypos, 1.0, 1.0),
        (xpos, ypos + h, 0.0, 0.0),
        (xpos + w, ypos, 1.0, 1.0),
        (xpos + w, ypos + h, 1.0, 0.0),
    ]


def caret_vertices(x: float, y: float, height: float) -> list[tuple[float, float]]:
    """Two triangles forming the caret bar hanging down from (x, y)."""
    right = x + CARET_WIDTH
    bottom = y - height - CARET_EXTRA_HEIGHT
    return [
        (x, y),
        (right, y),
        (right, bottom),
        (x, y),
        (right, bottom),
        (x, bottom),
    ]


def caret_x(line: str, column: int, base_x: float, font: Font, scale: float) -> float:
    """X position of a caret at ``column``, limited to the line's length."""
    return base_x + sum((char_width(c, font, scale) for c in line[:column]), 0.0)


@dataclass
class CaretBlink:
    """Toggles caret visibility every ``interval`` seconds."""

    interval: float = 0.530
    last_blink: float = 0.0
    visible: bool = True

    def update(self, now: float) -> bool:
        if now - self.last_blink >= self.interval:
            self.visible = not self.visible
            self.last_blink = now
        return self.visible