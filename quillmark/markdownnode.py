"""Markdown syntax tree nodes with source positions."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, Optional


class NodeType(IntEnum):
    """Kinds of Markdown node, block types first, then inline types."""

    INVALID = 0

    # Block types.
    DOCUMENT = 1
    BLOCK_QUOTE = 2
    NUMBERED_LIST = 3
    BULLET_LIST = 4
    TASK_LIST_ITEM = 5
    LIST_ITEM = 6
    CODE_BLOCK = 7
    HTML_BLOCK = 8
    PARAGRAPH = 9
    HEADING = 10
    THEMATIC_BREAK = 11
    FOOTNOTE_DEFINITION = 12
    TABLE = 13
    TABLE_HEADING = 14
    TABLE_ROW = 15
    TABLE_CELL = 16

    # Inline types.
    TEXT = 17
    SOFTBREAK = 18
    LINEBREAK = 19
    CODE = 20
    HTML_INLINE = 21
    EMPH = 22
    STRONG = 23
    LINK = 24
    IMAGE = 25
    STRIKETHROUGH = 26
    FOOTNOTE_REFERENCE = 27


_FIRST_BLOCK_TYPE = NodeType.DOCUMENT
_LAST_BLOCK_TYPE = NodeType.TABLE_CELL
_FIRST_INLINE_TYPE = NodeType.TEXT
_LAST_INLINE_TYPE = NodeType.FOOTNOTE_REFERENCE

_TYPE_NAMES = {
    NodeType.INVALID: "Invalid",
    NodeType.DOCUMENT: "Document",
    NodeType.BLOCK_QUOTE: "BlockQuote",
    NodeType.NUMBERED_LIST: "NumberedList",
    NodeType.BULLET_LIST: "BulletList",
    NodeType.TASK_LIST_ITEM: "TaskList",
    NodeType.LIST_ITEM: "ListItem",
    NodeType.CODE_BLOCK: "CodeBlock",
    NodeType.HTML_BLOCK: "HtmlBlock",
    NodeType.PARAGRAPH: "Paragraph",
    NodeType.HEADING: "Heading",
    NodeType.THEMATIC_BREAK: "ThematicBreak",
    NodeType.FOOTNOTE_DEFINITION: "FootnoteDefinition",
    NodeType.TABLE: "Table",
    NodeType.TABLE_HEADING: "TableHeading",
    NodeType.TABLE_ROW: "TableRow",
    NodeType.TABLE_CELL: "TableCell",
    NodeType.TEXT: "Text",
    NodeType.SOFTBREAK: "Softbreak",
    NodeType.LINEBREAK: "Linebreak",
    NodeType.CODE: "Code",
    NodeType.HTML_INLINE: "HtmlInline",
    NodeType.EMPH: "Emph",
    NodeType.STRONG: "Strong",
    NodeType.LINK: "Link",
    NodeType.IMAGE: "Image",
    NodeType.STRIKETHROUGH: "Strikethrough",
    NodeType.FOOTNOTE_REFERENCE: "FootnoteReference",
}


def node_type_name(node_type: int) -> str:
    """Return the display name of a node type, or its number if unknown."""
    try:
        return _TYPE_NAMES[NodeType(node_type)]
    except ValueError:
        return str(int(node_type))


class MarkdownNode:
    """A node of a Markdown syntax tree, linked to its parent and siblings.

    ``position`` is the zero-based column where the node starts, ``length``
    the number of columns it spans, and the line numbers are one-based.
    A ``text`` of ``None`` means the node carries no text at all.
    """

    __slots__ = (
        "type",
        "start_line",
        "end_line",
        "position",
        "length",
        "text",
        "heading_level",
        "fence_char",
        "list_start_num",
        "_parent",
        "_prev",
        "_next",
        "_first_child",
        "_last_child",
    )

    def __init__(
        self,
        type: NodeType = NodeType.INVALID,
        start_line: int = 0,
        end_line: int = 0,
        position: int = 0,
        length: int = 0,
        text: Optional[str] = None,
        heading_level: int = 0,
        fence_char: str = "",
        list_start_num: int = 0,
    ) -> None:
        self.type = NodeType(type)
        self.start_line = start_line
        self.end_line = end_line
        self.position = position
        self.length = length
        self.text = text
        self.heading_level = heading_level
        self.fence_char = fence_char
        self.list_start_num = list_start_num
        self._parent: Optional[MarkdownNode] = None
        self._prev: Optional[MarkdownNode] = None
        self._next: Optional[MarkdownNode] = None
        self._first_child: Optional[MarkdownNode] = None
        self._last_child: Optional[MarkdownNode] = None

    def __repr__(self) -> str:
        return f"MarkdownNode({self})"

    @property
    def parent(self) -> Optional["MarkdownNode"]:
        return self._parent

    @property
    def previous(self) -> Optional["MarkdownNode"]:
        return self._prev

    @property
    def next(self) -> Optional["MarkdownNode"]:
        return self._next

    @property
    def first_child(self) -> Optional["MarkdownNode"]:
        return self._first_child

    @property
    def last_child(self) -> Optional["MarkdownNode"]:
        return self._last_child

    def append_child(self, node: Optional["MarkdownNode"]) -> None:
        """Append ``node`` as the last child of this node; ``None`` is ignored."""
        if node is None:
            return
        node._parent = self
        node._next = None
        if self._last_child is None:
            self._first_child = node
            node._prev = None
        else:
            self._last_child._next = node
            node._prev = self._last_child
        self._last_child = node

    def children(self) -> Iterator["MarkdownNode"]:
        """Yield the children of this node in order."""
        child = self._first_child
        while child is not None:
            yield child
            child = child._next

    def is_invalid(self) -> bool:
        return self.type == NodeType.INVALID

    def is_block_type(self) -> bool:
        return _FIRST_BLOCK_TYPE <= self.type <= _LAST_BLOCK_TYPE

    def is_inline_type(self) -> bool:
        return _FIRST_INLINE_TYPE <= self.type <= _LAST_INLINE_TYPE

    def is_setext_heading(self) -> bool:
        """True for a heading spanning more than one line."""
        return (
            self.type == NodeType.HEADING
            and (self.end_line - self.start_line + 1) > 1
        )

    def is_atx_heading(self) -> bool:
        return self.type == NodeType.HEADING and not self.is_setext_heading()

    def is_inside_blockquote(self) -> bool:
        """True if any ancestor of this node is a block quote."""
        ancestor = self._parent
        while ancestor is not None:
            if ancestor.type == NodeType.BLOCK_QUOTE:
                return True
            ancestor = ancestor._parent
        return False

    def is_fenced_code_block(self) -> bool:
        return self.fence_char != ""

    def is_numbered_list_item(self) -> bool:
        return (
            self.type == NodeType.LIST_ITEM
            and self._parent is not None
            and self._parent.type == NodeType.NUMBERED_LIST
        )

    def is_bullet_list_item(self) -> bool:
        return (
            self.type == NodeType.LIST_ITEM
            and self._parent is not None
            and self._parent.type == NodeType.BULLET_LIST
        )

    def list_item_number(self) -> int:
        """Return the list start number plus this item's one-based index."""
        count = 1
        sibling = self._prev
        while sibling is not None and sibling is not self._parent:
            count += 1
            sibling = sibling._prev
        return self.list_start_num + count

    def __str__(self) -> str:
        measured = self.text if self.text is not None else "<<Empty Node>>"
        left = min(20, len(measured))
        right = max(len(measured) - left, 0)
        actual = self.text or ""
        head = actual[:left]
        tail = actual[max(len(actual) - right, 0):] if right else ""
        return (
            f"> [lines {self.start_line} - {self.end_line}]"
            f"[col {self.position}, len {self.length}] "
            f"{node_type_name(self.type)} -> {head}...{tail}"
        )