"""File helpers: type sniffing, reading, writing and asset path resolution."""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path

log = logging.getLogger(__name__)

_MAX_BINARY_SIZE = 1024 * 1024 * 1024
_CHUNK = 64 * 1024


class FileType(Enum):
    """Coarse classification of a file's contents."""

    BINARY = "binary"
    TEXT = "text"


class PathKind(Enum):
    """Well-known locations relative to the executable."""

    EXE = "exe"
    SHADER = "shader"
    FONT = "font"
    PARAMS = "params"


_ASSET_DIRS = {
    PathKind.SHADER: "Shaders",
    PathKind.FONT: "Fonts",
    PathKind.PARAMS: "Settings",
}


def get_file_type(path) -> FileType:
    """Return TEXT when every byte is 7-bit ASCII (or the file cannot be read)."""
    try:
        with open(path, "rb") as handle:
            for chunk in iter(lambda: handle.read(_CHUNK), b""):
                if any(byte > 127 for byte in chunk):
                    return FileType.BINARY
    except OSError:
        return FileType.TEXT
    return FileType.TEXT


def read_text_file(path) -> str:
    """Return the file's text, or an empty string if it cannot be opened."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        log.error("failed to read file on path: %s", path)
        return ""
    log.info("successfully read file on path: %s", path)
    return text


def read_binary_file(path) -> bytes:
    """Return the raw bytes of a file; raises OSError when it cannot be read."""
    with open(path, "rb") as handle:
        return handle.read()


def read_binary_as_string(path) -> str:
    """Return a binary file's bytes as a Latin-1 string, or '' on failure or if over 1 GiB."""
    try:
        size = os.path.getsize(path)
        if size > _MAX_BINARY_SIZE:
            log.error("file is too large to process: %s", path)
            return ""
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError:
        log.error("failed to open binary file: %s", path)
        return ""
    log.info("file read successfully, size: %d bytes", size)
    log.debug("first 100 bytes: %r", data[:100])
    return data.decode("latin-1")


def read_file(path) -> str:
    """Read a file as text or as binary depending on its contents."""
    if get_file_type(path) is FileType.BINARY:
        return read_binary_as_string(path)
    return read_text_file(path)


def write_file(path, text: str) -> None:
    """Replace the contents of a file with ``text``."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
    log.info("successfully wrote to file on path: %s", path)


def executable_dir(argv0) -> str:
    """Directory holding the executable named by ``argv0``."""
    return str(Path(os.path.abspath(argv0)).parent)


def get_path(argv0, kind: PathKind) -> str:
    """Resolve a well-known location; asset directories end with a separator."""
    exe_dir = os.path.dirname(os.path.abspath(argv0))
    if kind is PathKind.EXE:
        return os.path.normpath(exe_dir)
    try:
        folder = _ASSET_DIRS[kind]
    except KeyError:
        raise ValueError(f"unknown path kind: {kind!r}") from None
    return os.path.normpath(os.path.join(exe_dir, "..", "..", "Assets", folder)) + os.sep


def open_file_dialog() -> str:
    """Ask the user for an existing file; returns '' if cancelled or unavailable."""
    try:
        import tkinter
        from tkinter import filedialog
    except ImportError:
        return ""
    try:
        root = tkinter.Tk()
    except tkinter.TclError:
        return ""
    try:
        root.withdraw()
        chosen = filedialog.askopenfilename(
            parent=root,
            title="Select a File",
            filetypes=[("All Files", "*.*")],
        )
    finally:
        root.destroy()
    return chosen or ""