# leafedit

leafedit holds the editing core of a small, plain text editor. Every part
is a plain Python object. A front end can drive it, and so can tests.

- `leafedit.buffer.TextBuffer` is a text buffer with a cursor, a selection
  bound and a modified flag. It handles lines and offsets. Edits can be
  grouped with the `user_action()` context manager. Handlers attached with
  `connect()` receive the signals `insert-text`, `delete-range`,
  `modified-changed`, `mark-set`, `begin-user-action` and `end-user-action`.
- `leafedit.view` has the following:
  - `KeyTracker` remembers the last key pressed. It adds `0x10000` to the
    value when Control is held.
  - The `Key` values.
  - `selection_spans_lines`, `window_title`, `save_sensitive` and
    `jump_to_line`.
- `leafedit.undo.UndoManager` records edits made inside user actions and
  gives undo and redo. It merges runs of single characters that are typed,
  backspaced or deleted into one step. Records chained with `set_sequence`
  or `reserve_sequence` are undone and redone together.
- `leafedit.linenum` works out the line-number gutter:
  - `visible_lines` gives the lines visible between two heights.
  - `number_label_width` gives the width of the widest label.
  - `LineNumberGutter.layout()` gives where each `NumberLabel` goes and
    resizes the border.
- `leafedit.search` has `find_forward` and `find_backward`, with or without
  matching case. `Searcher` also does these:
  - It highlights every match.
  - `search()` finds forward or backward and wraps around the ends.
  - `replace()` replaces every match at once, or asks a `confirm` callback
    about each match.
- `leafedit.selector` holds the codeset and line-ending choices for open and
  save dialogs: `CharsetTable`, `FileInfo`, `LineEnd`, `DialogMode`,
  `charset_supported`, `set_manual_charset` and `directory_path`.
- `leafedit.utils` has the following:
  - `History` is a list of recent entries, newest first, with no
    duplicates.
  - `read_stdin` reads piped input if it arrives within a short timeout.
- `leafedit.menu` has these parts:
  - `build_menu` gives the menu layout. Its `statistics` and `printing`
    switches leave those items in or out.
  - `find_action` looks up an action.
  - `HIDDEN_BINDINGS` lists key bindings that have no menu item.
  - `MenuState` holds the sensitivity rules.
- `leafedit.app` has the following:
  - `parse_args` reads the command line.
  - `config_path`, `load_config` and `save_config` handle the settings
    file.
  - `open_document` loads a file or standard input into a buffer.
  - `main` is the command.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Command line

```
leafedit [--codeset CODESET] [--tab-width WIDTH] [--jump LINENUM] [--version] [filename]
```

`leafedit --version` prints the version.

Otherwise the command loads the named file into a buffer. The file is
decoded with `--codeset` if that codeset is supported, and as UTF-8 if not.
A missing file gives an empty buffer. Without a filename, the command reads
text piped on standard input. `--jump` puts the cursor at the start of the
given line.

The command then prints one summary line with these details:
- the window title
- the number of lines
- the cursor's line
- the window size from the settings file
- the tab width

A bad option prints an error and exits with status 255.

## Example

```python
from leafedit.buffer import TextBuffer
from leafedit.search import SearchState, Searcher
from leafedit.undo import UndoManager
from leafedit.view import KeyTracker

buffer = TextBuffer("hello world\nhello again\n")
undo = UndoManager(buffer, KeyTracker())

state = SearchState(find="hello", replace="bye", match_case=True, replace_all=True)
searcher = Searcher(buffer, state, undo)
print(searcher.replace())          # 2
print(buffer.get_text(0, None))    # "bye world\nbye again\n"

undo.undo()                        # one replace-all is undone as a whole
print(buffer.get_text(0, None))    # "hello world\nhello again\n"
```

## Settings file

The settings live in `<config dir>/leafedit/leafeditrc`. The config
directory is `$XDG_CONFIG_HOME`, or `~/.config` when that is not set.
`config_path()` returns the file's location.

The file holds one value per line, in this order:
1. the version
2. the window width
3. the window height
4. the font name
5. word wrap
6. line numbers
7. auto indent
8. the tab width

`save_config` writes the file and creates its directory if needed.
`load_config` reads it back into a `Config`. The defaults are used when the
file is missing or was written by a version older than 0.8.

## What the package does not do

leafedit has no window, text view or dialogs. The `leafedit` command does
not open an editor. It loads the document and prints a summary of it.

The package works out the following, but a front end has to show them:
- menus and their sensitivity
- gutter layout
- codeset choices
- search highlights

It does not save documents. It does not convert line endings when writing.
It has no printing, statistics, font selection or automatic indentation.

## Running the tests

```
pip install .[test]
pytest
```