import pytest

from letex.app import build_text_block
from letex.layout import TextAlign


def test_block_defaults():
    block = build_text_block("abc", 800, 1.0)
    assert block.content == "abc"
    assert block.max_width == 800
    assert block.position == (0.0, 0.0)
    assert block.align is TextAlign.LEFT
    assert block.style.font_name == "InputSans-Regular.ttf"
    assert block.style.font_size == 18
    assert block.style.scale == pytest.approx(1.25)
    assert block.style.color == pytest.approx((97.0 / 255.0, 175.0 / 255.0, 239.0 / 255.0))


def test_zoom_in_enlarges_font():
    assert build_text_block("", 100, 0.5).style.font_size > build_text_block("", 100, 1.0).style.font_size


def test_zoom_out_shrinks_font():
    assert build_text_block("", 100, 2.0).style.font_size == 9


def test_font_size_never_below_one():
    assert build_text_block("", 100, 1000.0).style.font_size >= 1


@pytest.mark.parametrize("zoom", [0.3, 0.7, 1.0, 1.5, 3.0])
def test_font_size_truncates(zoom):
    size = build_text_block("x", 100, zoom).style.font_size
    assert size <= 18 / zoom < size + 1