"""The editor window and its main loop."""

from __future__ import annotations

import sys

import pygame

from .editor import Action, InputSystem, Key
from .fileio import PathKind, get_path
from .layout import TextAlign, TextBlock, TextStyle
from .renderer import TextRenderer

WINDOW_SIZE = (800, 800)
WINDOW_TITLE = "LeTexEditor"
BACKGROUND = (44, 49, 60)
FONT_NAME = "InputSans-Regular.ttf"
BASE_FONT_SIZE = 18
TEXT_SCALE = 1.25
TEXT_COLOR = (97.0 / 255.0, 175.0 / 255.0, 239.0 / 255.0)

_KEYMAP = {
    pygame.K_BACKSPACE: Key.BACKSPACE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LCTRL: Key.LEFT_CONTROL,
    pygame.K_o: Key.O,
}


def build_text_block(content: str, width: float, zoom_factor: float) -> TextBlock:
    """The block the editor draws each frame for the current text and zoom."""
    style = TextStyle(
        font_name=FONT_NAME,
        font_size=max(1, int(BASE_FONT_SIZE / zoom_factor)),
        color=TEXT_COLOR,
        scale=TEXT_SCALE,
    )
    return TextBlock(
        content=content,
        style=style,
        position=(0.0, 0.0),
        max_width=float(width),
        align=TextAlign.LEFT,
    )


def _dispatch(event, input_system: InputSystem) -> bool:
    """Feed one event to the input system; returns False when the window closes."""
    if event.type == pygame.QUIT:
        return False
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        key = _KEYMAP.get(event.key)
        if key is not None:
            action = Action.PRESS if event.type == pygame.KEYDOWN else Action.RELEASE
            input_system.on_key(key, action)
    elif event.type == pygame.TEXTINPUT:
        for ch in event.text:
            input_system.on_type(ord(ch))
    elif event.type == pygame.MOUSEWHEEL:
        input_system.on_scroll(float(event.x), float(event.y))
    return True


def main(argv=None) -> int:
    """Open the editor window and run until it is closed."""
    argv = sys.argv if argv is None else argv
    argv0 = argv[0] if argv else sys.argv[0]
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.key.set_repeat(400, 30)
        renderer = TextRenderer(get_path(argv0, PathKind.FONT))
        clock = pygame.time.Clock()
        with InputSystem.from_argv0(argv0) as input_system:
            renderer.attach_input_system(input_system)
            running = True
            while running:
                for event in pygame.event.get():
                    if not _dispatch(event, input_system):
                        running = False
                screen = pygame.display.get_surface()
                screen.fill(BACKGROUND)
                width, _ = screen.get_size()
                block = build_text_block(input_system.text, width, input_system.zoom_factor)
                block.position = (0.0, -input_system.scroll_y)
                renderer.render_text_block(screen, block, pygame.time.get_ticks() / 1000.0)
                pygame.display.flip()
                clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())