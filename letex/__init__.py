"""A small pygame text editor with word-wrapped text and a blinking caret."""

__version__ = "0.1.0"