#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/ast/nodes.py
"""Node classes for the canonical editor document tree.

This module defines the node hierarchy shared by the sanitizer's importer,
the input rule engine and the Markdown codec. Each node represents a
structural block or an inline element of an editor document.

The tree contract:
- Children lists preserve insertion order, which is document reading order
- Ownership is strictly tree-shaped: no parent back-references, no sharing,
  no cycles; traversal is top-down
- Nodes are created fresh by every transformation call and handed to the
  caller, which owns them from then on

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Root, Paragraph, Heading, Quote, Divider
    - List, ListItem, Table, TableRow, TableCell
    - CodeBlock, Callout, Video

Inline nodes:
    - Text (with a format bitmask), Link, Image, Mention, LineBreak

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any, ClassVar, Optional

from scribex.constants import (
    DEFAULT_CALLOUT_COLOR_PRESET,
    DEFAULT_CALLOUT_EMOJI,
    DEFAULT_IMPORTED_CODE_LANGUAGE,
    MAX_HEADING_LEVEL,
    ListKind,
    VideoProvider,
)

_LIST_KINDS = ("bullet", "number", "check")


class TextFormat(IntFlag):
    """Inline format bits carried by :class:`Text` nodes.

    Multiple bits may be set at once. A mask of ``0`` means unformatted.
    """

    BOLD = 1
    ITALIC = 2
    STRIKETHROUGH = 4
    UNDERLINE = 8
    CODE = 16


class Node:
    """Base class for all document nodes.

    Subclasses set ``node_type`` (the serialized type name) and ``inline``
    (whether the node flows inside a block) and override :meth:`accept`.
    A subclass that does not override :meth:`accept` is dispatched to the
    visitor's ``generic_visit``.

    """

    node_type: ClassVar[str] = "node"
    inline: ClassVar[bool] = False

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        return visitor.generic_visit(self)

    def get_text_content(self) -> str:
        """Return the plain text of this node and its descendants.

        Block children are separated by a blank line, inline children are
        concatenated.

        """
        children: list[Node] = getattr(self, "children", [])
        parts: list[str] = []
        for i, child in enumerate(children):
            parts.append(child.get_text_content())
            if not child.inline and i < len(children) - 1:
                parts.append("\n\n")
        return "".join(parts)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Root(Node):
    """Root node of a document; exactly one per document.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level block nodes in reading order

    """

    node_type: ClassVar[str] = "root"

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_root``."""
        return visitor.visit_root(self)


@dataclass
class Paragraph(Node):
    """Paragraph block holding inline children.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes forming the paragraph text

    """

    node_type: ClassVar[str] = "paragraph"

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Node):
    """Heading block (levels 1-6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : list of Node, default = empty list
        Inline nodes representing heading text

    """

    node_type: ClassVar[str] = "heading"

    level: int
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self)


@dataclass
class Quote(Node):
    """Block quote holding inline children."""

    node_type: ClassVar[str] = "quote"

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_quote``."""
        return visitor.visit_quote(self)


@dataclass
class Divider(Node):
    """Horizontal rule. Has no children and cannot hold a cursor."""

    node_type: ClassVar[str] = "horizontal-rule"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_divider``."""
        return visitor.visit_divider(self)

    def get_text_content(self) -> str:
        """Return an empty string; dividers carry no text."""
        return ""


@dataclass
class ListItem(Node):
    """Item of a :class:`List`.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline content of the item
    checked : bool or None, default = None
        Check state for items of a ``check`` list; None for other kinds

    """

    node_type: ClassVar[str] = "listitem"

    children: list[Node] = field(default_factory=list)
    checked: Optional[bool] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


@dataclass
class List(Node):
    """Bullet, numbered or check list.

    Parameters
    ----------
    kind : {"bullet", "number", "check"}, default = "bullet"
        List type
    children : list of ListItem, default = empty list
        List items in order

    """

    node_type: ClassVar[str] = "list"

    kind: ListKind = "bullet"
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate the list kind."""
        if self.kind not in _LIST_KINDS:
            raise ValueError(f"List kind must be one of {_LIST_KINDS}, got {self.kind!r}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self)

    def get_text_content(self) -> str:
        """Return item texts joined by newlines."""
        return "\n".join(item.get_text_content() for item in self.children)


@dataclass
class TableCell(Node):
    """Cell of a :class:`TableRow`.

    Parameters
    ----------
    children : list of Node, default = empty list
        Cell content (inline nodes or paragraphs)
    colspan : int, default = 1
        Number of columns spanned
    rowspan : int, default = 1
        Number of rows spanned
    background_color : str or None, default = None
        Cell background color

    """

    node_type: ClassVar[str] = "tablecell"

    children: list[Node] = field(default_factory=list)
    colspan: int = 1
    rowspan: int = 1
    background_color: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate span values."""
        if self.colspan < 1 or self.rowspan < 1:
            raise ValueError(f"Cell spans must be positive, got colspan={self.colspan} rowspan={self.rowspan}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_cell``."""
        return visitor.visit_table_cell(self)


@dataclass
class TableRow(Node):
    """Row of a :class:`Table`; children are table cells."""

    node_type: ClassVar[str] = "tablerow"

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_row``."""
        return visitor.visit_table_row(self)

    def get_text_content(self) -> str:
        """Return cell texts separated by tabs."""
        return "\t".join(cell.get_text_content() for cell in self.children)


@dataclass
class Table(Node):
    """Table block; children are rows.

    Column counts are not required to match across rows. The first row is
    treated as the header row when serializing.

    """

    node_type: ClassVar[str] = "table"

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self)

    def get_text_content(self) -> str:
        """Return row texts joined by newlines."""
        return "\n".join(row.get_text_content() for row in self.children)


@dataclass
class CodeBlock(Node):
    """Code block holding raw text rather than inline children.

    Parameters
    ----------
    code : str, default = ""
        Raw code content
    language : str, default = "text"
        Language identifier used for highlighting

    """

    node_type: ClassVar[str] = "code-block"

    code: str = ""
    language: str = DEFAULT_IMPORTED_CODE_LANGUAGE

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self)

    def get_text_content(self) -> str:
        """Return the raw code."""
        return self.code


@dataclass
class Callout(Node):
    """Callout block: an emoji-marked, color-tinted container of blocks.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block children (usually paragraphs)
    emoji : str, default = "💡"
        Leading emoji
    color_preset : str, default = "default"
        Identifier of a callout color preset

    """

    node_type: ClassVar[str] = "callout"

    children: list[Node] = field(default_factory=list)
    emoji: str = DEFAULT_CALLOUT_EMOJI
    color_preset: str = DEFAULT_CALLOUT_COLOR_PRESET

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_callout``."""
        return visitor.visit_callout(self)


@dataclass
class Video(Node):
    """Embedded video block.

    Parameters
    ----------
    src : str
        Embed or file URL
    provider : {"youtube", "vimeo", "loom", "generic"}, default = "generic"
        Video provider
    title : str, default = ""
        Human-readable title

    """

    node_type: ClassVar[str] = "video"

    src: str
    provider: VideoProvider = "generic"
    title: str = ""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_video``."""
        return visitor.visit_video(self)

    def get_text_content(self) -> str:
        """Return the video title."""
        return self.title


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Run of text with a format bitmask.

    Parameters
    ----------
    content : str, default = ""
        The text
    format_mask : int, default = 0
        Bitwise OR of :class:`TextFormat` flags

    Examples
    --------
        >>> Text("hi", TextFormat.BOLD | TextFormat.ITALIC).has_format(TextFormat.ITALIC)
        True

    """

    node_type: ClassVar[str] = "text"
    inline: ClassVar[bool] = True

    content: str = ""
    format_mask: int = 0

    def __post_init__(self) -> None:
        """Validate the format mask fits in a byte."""
        if not 0 <= int(self.format_mask) <= 0xFF:
            raise ValueError(f"format_mask must be in 0-255, got {self.format_mask}")
        self.format_mask = int(self.format_mask)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)

    def get_text_content(self) -> str:
        """Return the raw content."""
        return self.content

    def has_format(self, flag: TextFormat) -> bool:
        """Return True if every bit of ``flag`` is set."""
        return self.format_mask & flag == flag

    def with_format(self, flag: TextFormat | int) -> Text:
        """Return a copy of this node with ``flag`` added to the mask."""
        return Text(content=self.content, format_mask=self.format_mask | int(flag))


@dataclass
class Link(Node):
    """Hyperlink wrapping inline children.

    Parameters
    ----------
    url : str
        Link target
    children : list of Node, default = empty list
        Inline nodes forming the link text

    """

    node_type: ClassVar[str] = "link"
    inline: ClassVar[bool] = True

    url: str
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image reference.

    Parameters
    ----------
    src : str
        Image URL
    alt_text : str, default = ""
        Alternative text
    width : int or None, default = None
        Display width in pixels
    height : int or None, default = None
        Display height in pixels

    """

    node_type: ClassVar[str] = "image"
    inline: ClassVar[bool] = True

    src: str
    alt_text: str = ""
    width: Optional[int] = None
    height: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self)

    def get_text_content(self) -> str:
        """Return an empty string; images carry no text."""
        return ""


@dataclass
class Mention(Node):
    """Atomic inline mention (e.g. ``@alice``); never split into text.

    Parameters
    ----------
    id : str
        Identifier of the mentioned entity
    label : str
        Display label
    trigger : str, default = "@"
        Trigger character the mention was created with

    """

    node_type: ClassVar[str] = "mention"
    inline: ClassVar[bool] = True

    id: str
    label: str
    trigger: str = "@"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_mention``."""
        return visitor.visit_mention(self)

    def get_text_content(self) -> str:
        """Return the trigger followed by the label."""
        return f"{self.trigger}{self.label}"


@dataclass
class LineBreak(Node):
    """Hard line break inside a block."""

    node_type: ClassVar[str] = "linebreak"
    inline: ClassVar[bool] = True

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_line_break``."""
        return visitor.visit_line_break(self)

    def get_text_content(self) -> str:
        """Return a newline."""
        return "\n"


__all__ = [
    "TextFormat",
    "Node",
    "Root",
    "Paragraph",
    "Heading",
    "Quote",
    "Divider",
    "List",
    "ListItem",
    "Table",
    "TableRow",
    "TableCell",
    "CodeBlock",
    "Callout",
    "Video",
    "Text",
    "Link",
    "Image",
    "Mention",
    "LineBreak",
]
