"""Keyboard, typing and scroll handling for the editor buffer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Callable

from .fileio import PathKind, get_path, open_file_dialog, read_file, write_file

log = logging.getLogger(__name__)

SESSION_FILE = "lastfile.txt"
ZOOM_SPEED = 0.1


@dataclass
class Cursor:
    line: int = 0
    column: int = 0


class Key(IntEnum):
    """Key codes understood by the editor."""

    O = 79
    ENTER = 257
    BACKSPACE = 259
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    LEFT_CONTROL = 341


class Action(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class InputSystem:
    """Holds the edited text, the caret, key state, scroll and zoom."""

    def __init__(self, settings_dir, open_dialog: Callable[[], str] = open_file_dialog):
        self.settings_path = Path(settings_dir) / SESSION_FILE
        self._open_dialog = open_dialog
        self._pressed: set[int] = set()
        self.scroll_sensitivity = 8.0
        self.zoom_factor = 1.0
        self.scroll_y = 0.0
        self.cursor = Cursor()
        self.file_paths: list[str] = [read_file(self.settings_path)]
        self.text = read_file(self.file_paths[0])

    @classmethod
    def from_argv0(cls, argv0) -> "InputSystem":
        """Create an input system using the settings folder beside the executable."""
        return cls(get_path(argv0, PathKind.PARAMS), open_file_dialog)

    @property
    def pressed_keys(self) -> frozenset[int]:
        return frozenset(self._pressed)

    def is_pressed(self, key) -> bool:
        return key in self._pressed

    def on_key(self, key, action) -> None:
        if action in (Action.PRESS, Action.REPEAT):
            if key == Key.BACKSPACE and self.text:
                self.text = self.text[:-1]
                if self.cursor.column > 0:
                    self.cursor.column -= 1
            if key == Key.ENTER:
                self.text += "\n"
                self.cursor.line += 1
                self.cursor.column = 0
            if key == Key.LEFT:
                if self.cursor.column > 0:
                    self.cursor.column -= 1
            elif key == Key.RIGHT:
                self.cursor.column += 1
            elif key == Key.UP:
                if self.cursor.line > 0:
                    self.cursor.line -= 1
            elif key == Key.DOWN:
                self.cursor.line += 1
            self._pressed.add(key)
        elif action == Action.RELEASE:
            self._pressed.discard(key)

        if self.is_pressed(Key.LEFT_CONTROL) and self.is_pressed(Key.O):
            path = self._open_dialog()
            self.file_paths.append(path)
            self.text = read_file(path)

    def on_scroll(self, xoffset: float, yoffset: float) -> None:
        if self.is_pressed(Key.LEFT_CONTROL):
            scale = min(max(1.0 - ZOOM_SPEED * yoffset, 0.01), 10.0)
            self.zoom_factor *= scale
        else:
            self.scroll_y -= yoffset * self.scroll_sensitivity

    def on_type(self, codepoint: int) -> None:
        self.text += chr(codepoint)
        self.cursor.column += 1

    def save_session(self) -> None:
        """Remember the most recently opened file for the next start."""
        if not self.file_paths:
            return
        try:
            write_file(self.settings_path, self.file_paths[-1])
        except OSError:
            log.error("failed to open file on path: %s", self.settings_path)

    def __enter__(self) -> "InputSystem":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.save_session()