from pathlib import Path

import pygame
import pytest

from letex.editor import Cursor, InputSystem
from letex.layout import Font, Glyph, TextBlock, TextStyle, char_width, tokenize, wrap_lines
from letex.renderer import TextRenderer

FONT = "fake.ttf"
SIZE = 10


def _glyph():
    image = pygame.Surface((4, 8), pygame.SRCALPHA)
    image.fill((255, 255, 255, 255))
    return Glyph(size=(4, 8), bearing=(0, 8), advance=5 * 64, image=image)


def _font():
    glyphs = {ch: _glyph() for ch in "ab "}
    return Font(family=FONT, glyphs=glyphs, line_height=8.0)


def _renderer(tmp_path):
    renderer = TextRenderer(tmp_path)
    renderer.fonts[FONT] = {SIZE: _font()}
    return renderer


def _block(content="", max_width=100.0, color=(1.0, 1.0, 1.0)):
    style = TextStyle(font_name=FONT, font_size=SIZE, color=color, scale=1.0)
    return TextBlock(content=content, style=style, position=(0.0, 0.0), max_width=max_width)


def test_font_returns_cached_font(tmp_path):
    renderer = _renderer(tmp_path)
    assert renderer.font(FONT, SIZE) is renderer.fonts[FONT][SIZE]


def test_font_missing_file_raises(tmp_path):
    renderer = TextRenderer(tmp_path)
    with pytest.raises(FileNotFoundError):
        renderer.font("missing.ttf", 12)


def test_load_real_font():
    font_dir = Path(pygame.__file__).parent
    name = pygame.font.get_default_font()
    renderer = TextRenderer(font_dir)
    font = renderer.load_font(name, 20)
    assert font.family == name
    assert "A" in font.glyphs
    assert font.glyphs["A"].advance % 64 == 0
    assert font.line_height > 0
    assert renderer.fonts[name][20] is font


def test_to_lines_matches_wrap(tmp_path):
    renderer = _renderer(tmp_path)
    block = _block(max_width=12.0)
    text = "ab ab a"
    lines = renderer.to_lines(text, block)
    assert lines == wrap_lines(tokenize(text), _font(), 1.0, 12.0)
    assert "".join(lines) == text


def test_to_lines_splits_on_newline(tmp_path):
    renderer = _renderer(tmp_path)
    assert renderer.to_lines("a\nb", _block()) == ["a", "b"]


def test_render_single_line_draws_colored_glyph(tmp_path):
    renderer = _renderer(tmp_path)
    surface = pygame.Surface((40, 20))
    surface.fill((0, 0, 0))
    block = _block(color=(1.0, 0.0, 0.0))
    end = renderer.render_single_line(surface, "a", block, 2.0, 10.0)
    assert end == 2.0 + char_width("a", _font(), 1.0)
    assert tuple(surface.get_at((3, 5)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((30, 5)))[:3] == (0, 0, 0)


def test_render_single_line_skips_newline(tmp_path):
    renderer = _renderer(tmp_path)
    surface = pygame.Surface((40, 20))
    assert renderer.render_single_line(surface, "\n", _block(), 3.0, 10.0) == 3.0


def test_render_cursor_draws_bar_and_blinks(tmp_path):
    renderer = _renderer(tmp_path)
    surface = pygame.Surface((20, 20))
    surface.fill((0, 0, 0))
    assert renderer.render_cursor(surface, 5.0, 2.0, 6.0, 0.0) is True
    assert tuple(surface.get_at((5, 3)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((6, 3)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((8, 3)))[:3] == (0, 0, 0)
    assert renderer.render_cursor(surface, 5.0, 2.0, 6.0, 1.0) is False


def test_render_text_block_caret_at_end_without_input(tmp_path):
    renderer = _renderer(tmp_path)
    surface = pygame.Surface((100, 100))
    lines = renderer.render_text_block(surface, _block("ab\nba"), 0.0)
    assert lines == ["ab", "ba"]
    assert renderer.cursor == Cursor(line=len(lines) - 1, column=len(lines[-1]))


def test_render_text_block_empty_text(tmp_path):
    renderer = _renderer(tmp_path)
    surface = pygame.Surface((100, 100))
    assert renderer.render_text_block(surface, _block(""), 0.0) == []
    assert renderer.cursor == Cursor(line=0, column=0)
    assert renderer.caret[0] == 0.0


def test_render_text_block_uses_input_cursor(tmp_path):
    renderer = _renderer(tmp_path)
    input_system = InputSystem(tmp_path, open_dialog=lambda: "")
    input_system.cursor = Cursor(line=0, column=1)
    renderer.attach_input_system(input_system)
    surface = pygame.Surface((100, 100))
    renderer.render_text_block(surface, _block("ab"), 0.0)
    assert renderer.cursor == Cursor(line=0, column=1)
    assert renderer.caret[0] == char_width("a", _font(), 1.0)


def test_render_text_block_caret_beyond_lines(tmp_path):
    renderer = _renderer(tmp_path)
    input_system = InputSystem(tmp_path, open_dialog=lambda: "")
    input_system.cursor = Cursor(line=5, column=3)
    renderer.attach_input_system(input_system)
    surface = pygame.Surface((100, 100))
    renderer.render_text_block(surface, _block("ab"), 0.0)
    assert renderer.caret[0] == 0.0
    assert renderer.cursor.line == 5