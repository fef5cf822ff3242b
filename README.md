# quillmark

The editing behaviour of a Markdown writing tool, kept apart from any user
interface. Everything works on a plain text buffer with a cursor, so it can
sit behind a terminal editor, a GUI toolkit or a test suite.

## What it does

- **Lists that continue themselves.** Pressing Return at the end of a
  numbered, bullet, task or blockquote line starts the next item. Numbers go
  up by one, a checked task starts unchecked, and Return on an empty item ends
  the list and keeps only its indentation.
- **Paired characters.** Typing `(`, `[`, `{`, `<`, `"`, `'`, `*`, `_` or a
  backtick puts in the closing partner (with a selection on one line, the
  selection is wrapped). Typing the closing character steps over it, and
  Backspace between a pair deletes both.
- **Indenting.** Tab and Shift+Tab indent or unindent the line or every
  selected line, with a tab or with spaces. An empty numbered item restarts
  at 1 when indented, and empty bullet items can cycle their marker.
- **Formatting commands.** Bold, italic, strikethrough, HTML comments,
  bullet, numbered and task lists, blockquotes and their removal, and
  switching a task between done and not done.
- **Focus modes.** `faded_ranges` works out which ranges of text to fade so
  that only the current line, the last three lines, the paragraph or the
  sentence stays in focus.
- **Outline.** Build a list of headings with their positions and find the
  section that a position falls in.
- **Document tree.** A small Markdown node tree (`MarkdownNode`, `NodeType`)
  with block and inline kinds and heading and list details.

## Installing

```
pip install quillmark
```

It needs Python 3.10 or newer and has no dependencies of its own.

## Using it

```python
from quillmark.editor import MarkdownEditor

editor = MarkdownEditor("1. first")
editor.navigate_document(len("1. first"))
editor.key_return()
editor.type_character("s")
print(editor.text)   # "1. first\n2. s"
```

`MarkdownEditor` also has `bold`, `italic`, `strikethrough`,
`insert_comment`, `create_bullet_list`, `create_numbered_list`,
`create_task_list`, `create_blockquote`, `remove_blockquote`, `indent_text`,
`unindent_text`, `toggle_task_complete`, the keys `key_backspace`,
`key_delete`, `key_tab`, `key_backtab` and `key_space`, and settings such as
`tab_width`, `insert_spaces_for_tabs`, `bullet_point_cycling_enabled`,
`hemingway_mode_enabled` (Backspace and Delete do nothing) and `focus_mode`.
Callbacks can be connected to `typing_resumed`, `typing_paused` and
`font_size_changed`; `check_typing_paused` is meant to be called once per
pause interval by whatever drives the editor.

The lower-level modules can be used on their own:

- `quillmark.textbuffer.TextBuffer`: text, cursor and selection, split into
  lines (blocks).
- `quillmark.blocks`: `classify_line`, `classify_lines`,
  `leading_whitespace`, `LineKind`, `FocusMode` and `faded_ranges`.
- `quillmark.commands`: `wrap_selection`, `insert_comment`, `insert_prefix`,
  `create_numbered_list`, `remove_blockquote`, `indent`, `unindent` and
  `toggle_task_complete`.
- `quillmark.keys`: `handle_return`, `handle_backspace` and `AutoMatcher`.
- `quillmark.outline`: `Outline`, `OutlineEntry` and `heading_label`.
- `quillmark.markdownnode`: `MarkdownNode`, `NodeType` and `node_type_name`.

## What it does not do

- It has no screen, window or drawing of its own; it only edits text and
  reports ranges and positions.
- It does not parse Markdown into a tree. Lines are classified with regular
  expressions (fenced code blocks are followed across lines), and
  `MarkdownNode` trees, such as the headings given to `Outline.reload`, must
  be built by the caller.
- It does no syntax highlighting, spell checking, preview or export, and it
  does not load or save files.
- Sentence focus finds sentence ends with a simple rule (`.`, `!` or `?`
  followed by whitespace), not full language-aware boundaries.

## Running the tests

```
pip install -e ".[test]"
pytest
```