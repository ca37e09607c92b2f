from pathlib import Path

import pygame
import pytest

from letex.layout import TextBlock, TextStyle
from letex.renderer import TextRenderer
from letex.ui import DivType, Label, RoundedRectangle, Triangle, UserInterface


@pytest.fixture
def ui(tmp_path):
    return UserInterface(TextRenderer(tmp_path))


def test_triangle_gets_increasing_ids(ui):
    ui.add_element(Triangle())
    assert ui.element_ids[DivType.TRIANGLE] == 1
    ui.add_element(Triangle())
    assert ui.element_ids[DivType.TRIANGLE] == 2


def test_rounded_rectangle_is_not_registered(ui):
    ui.add_element(RoundedRectangle())
    assert ui.element_ids == {}
    assert ui.count == 0


def test_unsupported_element_raises(ui):
    with pytest.raises(TypeError):
        ui.add_element("not an element")


def test_remove_element_when_empty(ui):
    with pytest.raises(LookupError):
        ui.remove_element()


def test_remove_element_forgets_last(ui):
    ui.add_element(Triangle())
    assert ui.remove_element() is DivType.TRIANGLE
    assert DivType.TRIANGLE not in ui.element_ids


def test_label_loads_its_font():
    font_dir = Path(pygame.__file__).parent
    name = pygame.font.get_default_font()
    renderer = TextRenderer(font_dir)
    ui = UserInterface(renderer)
    ui.add_element(Label(TextBlock(content="hi", style=TextStyle(font_name=name))))
    assert name in renderer.fonts
    assert 48 in renderer.fonts[name]


def test_label_with_missing_font_raises(ui):
    with pytest.raises(FileNotFoundError):
        ui.add_element(Label(TextBlock(style=TextStyle(font_name="missing.ttf"))))