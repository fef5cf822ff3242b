"""Markdown editing behaviour over a plain text buffer: list continuation, auto-matching, formatting commands, focus fading, a heading outline and a node tree."""

__version__ = "2.1.2"

__all__ = [
    "blocks",
    "commands",
    "editor",
    "keys",
    "markdownnode",
    "outline",
    "textbuffer",
]