"""Drawing wrapped text blocks and the caret onto a pygame surface."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from .editor import Cursor
from .layout import (
    CARET_EXTRA_HEIGHT,
    CARET_WIDTH,
    CaretBlink,
    Font,
    Glyph,
    TextBlock,
    aligned_x,
    caret_x,
    tokenize,
    wrap_lines,
)

log = logging.getLogger(__name__)

LINE_GAP = 0.3
CARET_COLOR = (1.0, 1.0, 1.0)
_GLYPH_COUNT = 128


def _to_rgb(color) -> tuple[int, int, int]:
    r, g, b = (min(255, max(0, round(component * 255))) for component in color)
    return r, g, b


class TextRenderer:
    """Caches fonts per family and size, wraps text and draws it with a caret."""

    def __init__(self, font_dir):
        self.font_dir = Path(font_dir)
        self.fonts: dict[str, dict[int, Font]] = {}
        self.input_system = None
        self.cursor = Cursor()
        self.blink = CaretBlink()
        self.caret: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def attach_input_system(self, input_system) -> None:
        """Take the caret position from ``input_system`` when drawing."""
        self.input_system = input_system

    def load_font(self, font_name: str, size: int = 48) -> Font:
        """Rasterise the first 128 characters of a font file at ``size`` pixels."""
        if not pygame.font.get_init():
            pygame.font.init()
        face = pygame.font.Font(str(self.font_dir / font_name), size)
        font = Font(family=font_name, line_height=float(face.get_linesize()))
        ascent = face.get_ascent()
        for code in range(_GLYPH_COUNT):
            ch = chr(code)
            try:
                metrics = face.metrics(ch)
                if not metrics or metrics[0] is None:
                    raise ValueError("no glyph")
                advance = metrics[0][4]
                image = face.render(ch, True, (255, 255, 255))
            except (pygame.error, ValueError):
                log.debug("failed to load glyph %d of %s", code, font_name)
                continue
            font.glyphs[ch] = Glyph(
                size=image.get_size(),
                bearing=(0, ascent),
                advance=int(advance) * 64,
                image=image,
            )
        self.fonts.setdefault(font_name, {})[size] = font
        log.info("font %s was loaded at size %d", font_name, size)
        return font

    def font(self, font_name: str, size: int) -> Font:
        """Return a cached font, loading it on first use."""
        try:
            return self.fonts[font_name][size]
        except KeyError:
            return self.load_font(font_name, size)

    def to_lines(self, text: str, block: TextBlock) -> list[str]:
        """Wrap ``text`` into lines that fit the block's width."""
        style = block.style
        font = self.font(style.font_name, style.font_size)
        max_width = block.max_width - block.position[0]
        return wrap_lines(tokenize(text), font, style.scale, max_width)

    def render_text_block(self, surface, block: TextBlock, now: float) -> list[str]:
        """Draw the block and its caret; returns the wrapped lines."""
        style = block.style
        font = self.font(style.font_name, style.font_size)
        window_width, _ = surface.get_size()
        x, y = block.position
        max_line_width = block.max_width - x
        lines = self.to_lines(block.content, block)

        step = font.line_height * style.scale + LINE_GAP
        base_x = aligned_x(block.align, x, window_width, max_line_width)
        first_baseline = y + font.line_height

        baseline = first_baseline
        for line in lines:
            self.render_single_line(surface, line, block, base_x, baseline)
            baseline += step

        shown = lines or [""]
        if self.input_system is not None:
            source = self.input_system.cursor
            self.cursor = Cursor(line=source.line, column=source.column)
        else:
            self.cursor = Cursor(line=len(shown) - 1, column=len(shown[-1]))

        line_text = shown[self.cursor.line] if self.cursor.line < len(shown) else ""
        cx = caret_x(line_text, self.cursor.column, base_x, font, style.scale)
        cy = first_baseline - step + self.cursor.line * step
        self.caret = (cx, cy, step)
        self.render_cursor(surface, cx, cy, step, now)
        log.debug("col: %d line: %d", self.cursor.column, self.cursor.line)
        return lines

    def render_single_line(self, surface, line: str, block: TextBlock, x: float, y: float) -> float:
        """Draw one line with its baseline at ``y``; returns the pen x after it."""
        style = block.style
        font = self.font(style.font_name, style.font_size)
        scale = style.scale
        color = _to_rgb(style.color)
        for ch in line:
            if ch == "\n":
                continue
            glyph = font.glyphs.get(ch)
            if glyph is None:
                continue
            self._blit_glyph(surface, glyph, x, y, scale, color)
            x += (glyph.advance >> 6) * scale
        return x

    def render_cursor(self, surface, x: float, y: float, height: float, now: float) -> bool:
        """Draw the caret bar hanging down from (x, y); returns the blink state."""
        visible = self.blink.update(now)
        rect = pygame.Rect(
            round(x),
            round(y),
            round(CARET_WIDTH),
            max(1, round(height + CARET_EXTRA_HEIGHT)),
        )
        surface.fill(_to_rgb(CARET_COLOR), rect)
        return visible

    @staticmethod
    def _blit_glyph(surface, glyph: Glyph, x: float, y: float, scale: float, color) -> None:
        if glyph.image is None:
            return
        w = round(glyph.size[0] * scale)
        h = round(glyph.size[1] * scale)
        if w <= 0 or h <= 0:
            return
        image = glyph.image
        if image.get_size() != (w, h):
            image = pygame.transform.smoothscale(image, (w, h))
        else:
            image = image.copy()
        image.fill((*color, 255), special_flags=pygame.BLEND_RGBA_MULT)
        left = x + glyph.bearing[0] * scale
        top = y - glyph.bearing[1] * scale
        surface.blit(image, (round(left), round(top)))