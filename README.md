# letex

letex is a small text editor built on pygame. It reopens the last file you
opened and shows its text in a resizable window. Lines wrap at the window's
width, and a caret blinks at the cursor position. Typed characters go onto the
end of the text. You can scroll or zoom the view.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the editor

```
letex
```

The editor finds its folders from the location of the `letex` command. It
looks for an `Assets` folder two levels above the directory that holds the
command, and expects these two things inside it:

- `Assets/Fonts/InputSans-Regular.ttf`, the font that draws the text.
- `Assets/Settings/lastfile.txt`, which holds the path of the last opened file.

At startup the editor reads `lastfile.txt` and loads the file it names. When
the window closes, it writes the path of the most recently opened file back to
`lastfile.txt`.

### Keys

| Input                | Effect                                                   |
|----------------------|----------------------------------------------------------|
| printable characters | added to the end of the text; cursor moves one column right |
| Enter                | adds a newline; cursor goes to column 0 of the next line  |
| Backspace            | removes the last character of the text                    |
| Arrow keys           | move the cursor                                           |
| Ctrl+O               | choose a file to open, using a tkinter dialog             |
| Mouse wheel          | scroll the view                                           |
| Ctrl + mouse wheel   | zoom in or out; the font size changes with it             |

## What the editor does not do

- It does not save the text you edit. Only the path of the last opened file
  is written out.
- All edits happen at the end of the text. The arrow keys move the caret on
  screen, but typing and Backspace do not insert or delete at the caret.
- If tkinter is not available, Ctrl+O opens no dialog and the text becomes
  empty.

## Using the pieces as a library

The layout functions in `letex.layout` need no window:

```python
from letex.layout import Font, Glyph, tokenize, wrap_lines

font = Font(
    family="mono",
    glyphs={c: Glyph(size=(8, 12), bearing=(0, 10), advance=10 << 6) for c in map(chr, range(128))},
    line_height=14,
)
tokens = tokenize("hello wide world")
print(wrap_lines(tokens, font, 1.0, 80))   # ['hello ', 'wide ', 'world']
```

`letex.layout` also has the following:

- `aligned_x` gives the x position where each line starts for an alignment.
- `quad_vertices` and `caret_vertices` give the triangle geometry for a glyph
  and for the caret.
- `caret_x` places the caret within a line.
- `CaretBlink` controls the caret's blinking.

The other modules are these:

- `letex.fileio` reads and writes files. `get_file_type` tells text from
  binary: a file is text when every byte is 7-bit ASCII. `get_path` works out
  the `Assets` folders from a program path.
- `letex.editor.InputSystem` holds the text being edited, the cursor, the set
  of pressed keys, the scroll offset and the zoom factor. Build it with a
  settings folder and, if you like, your own `open_dialog` callable. Use it as
  a context manager so that the session is saved when you leave the block.
- `letex.view.ViewControl` tracks a vertical offset that scroll events change,
  and gives the matching 4x4 view matrix.
- `letex.renderer.TextRenderer` loads fonts from a folder and caches them by
  name and size. It wraps a `TextBlock` and draws it onto a pygame surface,
  along with the caret.
- `letex.ui.UserInterface` registers `Triangle`, `RoundedRectangle` and
  `Label` elements. For a `Label`, it loads the label's font.
- `letex.app.build_text_block` builds the block that the editor draws each
  frame. `letex.app.main` runs the window.