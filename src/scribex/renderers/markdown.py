#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/renderers/markdown.py
"""Markdown rendering from document nodes.

This module provides the MarkdownRenderer class which converts a sequence of
block nodes to Markdown text, for example the last few blocks of a document
sent along as context to a writing assistant.

The rendering process uses the visitor pattern to traverse the tree. Each
``visit_*`` method returns the Markdown for its node. Blocks are joined with
a blank line; list items with a single newline. Rendering is total: a node
class the renderer does not know renders as its plain text, and subtrees
nested deeper than ``MAX_RENDER_DEPTH`` render as their plain text.

"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from scribex.ast.nodes import (
    Callout,
    CodeBlock,
    Divider,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Mention,
    Node,
    Paragraph,
    Quote,
    Root,
    Table,
    TableCell,
    TableRow,
    Text,
    TextFormat,
    Video,
)
from scribex.ast.utils import get_node_children, iter_nodes
from scribex.ast.visitors import NodeVisitor
from scribex.constants import BLOCK_SEPARATOR, DEFAULT_VIDEO_TITLE, MAX_RENDER_DEPTH
from scribex.options.base import validate_options_type
from scribex.options.markdown import MarkdownRendererOptions

logger = logging.getLogger(__name__)


def _longest_run(text: str, char: str) -> int:
    longest = current = 0
    for c in text:
        if c == char:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def _plain_text(node: Node) -> str:
    """Concatenate the text of every leaf under ``node`` without recursion."""
    return "".join(n.get_text_content() for n in iter_nodes(node) if not hasattr(n, "children"))


class MarkdownRenderer(NodeVisitor):
    """Render document nodes to Markdown text.

    :meth:`render_nodes` works on a private copy of the renderer, so one
    instance can be shared between threads.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
        >>> from scribex.ast import Heading, Paragraph, Text, TextFormat
        >>> renderer = MarkdownRenderer()
        >>> renderer.render_nodes([
        ...     Heading(level=2, children=[Text("Title")]),
        ...     Paragraph(children=[Text("bold", TextFormat.BOLD), Text(" text")]),
        ... ])
        '## Title\\n\\n**bold** text'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        options = options or MarkdownRendererOptions()
        validate_options_type(options, MarkdownRendererOptions, "MarkdownRenderer")
        self.options: MarkdownRendererOptions = options
        self._depth = 0

    def render_nodes(self, nodes: Sequence[Node] | Node) -> str:
        """Render a sequence of block nodes to a Markdown string.

        Parameters
        ----------
        nodes : sequence of Node, or Node
            Blocks to render; a Root is rendered as its children

        Returns
        -------
        str
            Markdown text, blocks separated by a blank line

        """
        if isinstance(nodes, Node):
            nodes = [nodes]

        renderer = type(self)(self.options)
        return BLOCK_SEPARATOR.join(renderer._render(node) for node in nodes)

    def _render(self, node: Node) -> str:
        """Render one node, or its plain text once the nesting limit is reached."""
        if self._depth >= MAX_RENDER_DEPTH:
            logger.debug(f"Nesting depth {self._depth} reached at {type(node).__name__}, rendering plain text")
            return _plain_text(node)

        self._depth += 1
        try:
            return node.accept(self)
        finally:
            self._depth -= 1

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of inline nodes to text.

        Parameters
        ----------
        content : list of Node
            Inline nodes to render

        Returns
        -------
        str
            Rendered inline content

        """
        return "".join(self._render(node) for node in content)

    def _render_flat(self, node: Node) -> str:
        """Render a container's children inline, or a leaf's own output."""
        if isinstance(node, (Text, Link, Mention, LineBreak, Image)):
            return self._render(node)
        if hasattr(node, "children"):
            return self._render_inline_content(get_node_children(node))
        return node.get_text_content()

    def visit_root(self, node: Root) -> str:
        """Render a Root as its children, separated like top-level blocks."""
        return BLOCK_SEPARATOR.join(self._render(child) for child in node.children)

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a Paragraph node."""
        return self._render_inline_content(node.children)

    def visit_heading(self, node: Heading) -> str:
        """Render a Heading node.

        Parameters
        ----------
        node : Heading
            Heading to render

        """
        prefix = "#" * node.level
        return f"{prefix} {self._render_inline_content(node.children)}"

    def visit_quote(self, node: Quote) -> str:
        """Render a Quote node as a single ``> `` line."""
        return f"> {self._render_inline_content(node.children)}"

    def visit_divider(self, node: Divider) -> str:
        """Render a Divider node."""
        return "---"

    def visit_list(self, node: List) -> str:
        """Render a List node.

        Items are newline-joined. Numbered items use their 1-based index;
        bullet and check items use the configured bullet marker, followed by
        a task checkbox for check lists when ``render_task_markers`` is set.

        Parameters
        ----------
        node : List
            List to render

        """
        lines: list[str] = []
        for i, item in enumerate(node.children):
            if node.kind == "number":
                marker = f"{i + 1}. "
            else:
                marker = f"{self.options.bullet_marker} "
                if node.kind == "check" and self.options.render_task_markers:
                    checked = isinstance(item, ListItem) and item.checked
                    marker = f"{marker}{'[x]' if checked else '[ ]'} "
            lines.append(f"{marker}{self._render_flat(item)}")
        return "\n".join(lines)

    def visit_list_item(self, node: ListItem) -> str:
        """Render a ListItem outside of a list as its inline content."""
        return self._render_inline_content(node.children)

    def visit_table(self, node: Table) -> str:
        """Render a Table node as a pipe table.

        The first row is the header; a ``---`` separator row follows it.
        Literal pipes inside cells are escaped.

        Parameters
        ----------
        node : Table
            Table to render

        """
        lines: list[str] = []
        for row_index, row in enumerate(node.children):
            if not isinstance(row, TableRow):
                continue
            cells = [
                self._render_flat(cell).replace("|", "\\|") for cell in row.children if isinstance(cell, TableCell)
            ]
            lines.append(f"| {' | '.join(cells)} |")
            if row_index == 0:
                lines.append(f"| {' | '.join('---' for _ in cells)} |")
        return "\n".join(lines)

    def visit_table_row(self, node: TableRow) -> str:
        """Render a TableRow outside of a table as one pipe row."""
        cells = [self._render_flat(cell).replace("|", "\\|") for cell in node.children]
        return f"| {' | '.join(cells)} |"

    def visit_table_cell(self, node: TableCell) -> str:
        """Render a TableCell outside of a table as its inline content."""
        return self._render_inline_content(node.children)

    def visit_code_block(self, node: CodeBlock) -> str:
        """Render a CodeBlock node as a fenced block.

        The fence is made longer than any run of the fence character inside
        the code.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        fence_char = self.options.code_fence_char
        fence_length = max(self.options.code_fence_min, _longest_run(node.code, fence_char) + 1)
        fence = fence_char * fence_length

        parts = [f"{fence}{node.language or ''}\n"]
        if node.code:
            parts.append(node.code)
            if not node.code.endswith("\n"):
                parts.append("\n")
        parts.append(fence)
        return "".join(parts)

    def visit_callout(self, node: Callout) -> str:
        """Render a Callout node.

        The first line carries the ``> [!emoji] `` prefix; each further child
        is continued on its own ``> `` line.

        Parameters
        ----------
        node : Callout
            Callout to render

        """
        content = "\n> ".join(self._render_flat(child) for child in node.children)
        return f"> [!{node.emoji}] {content}"

    def visit_video(self, node: Video) -> str:
        """Render a Video node as a link titled after the video."""
        return f"[{node.title or DEFAULT_VIDEO_TITLE}]({node.src})"

    def visit_text(self, node: Text) -> str:
        """Render a Text node.

        Markers are applied inside-out as bold, italic, strikethrough, then
        code, so code backticks end up outermost. Underline has no Markdown
        equivalent and is dropped.

        Parameters
        ----------
        node : Text
            Text to render

        """
        text = node.content
        if node.has_format(TextFormat.BOLD):
            text = f"**{text}**"
        if node.has_format(TextFormat.ITALIC):
            text = f"*{text}*"
        if node.has_format(TextFormat.STRIKETHROUGH):
            text = f"~~{text}~~"
        if node.has_format(TextFormat.CODE):
            text = f"`{text}`"
        return text

    def visit_link(self, node: Link) -> str:
        """Render a Link node."""
        return f"[{self._render_inline_content(node.children)}]({node.url})"

    def visit_image(self, node: Image) -> str:
        """Render an Image node."""
        return f"![{node.alt_text}]({node.src})"

    def visit_mention(self, node: Mention) -> str:
        """Render a Mention node as its trigger and label."""
        return node.get_text_content()

    def visit_line_break(self, node: LineBreak) -> str:
        """Render a LineBreak node."""
        return "\n"

    def generic_visit(self, node: Node) -> str:
        """Render an unknown node as its plain text content."""
        logger.debug(f"No Markdown form for {type(node).__name__}, rendering its text content")
        return _plain_text(node)


def to_markdown(nodes: Sequence[Node] | Node, options: Optional[MarkdownRendererOptions] = None) -> str:
    """Serialize block nodes to Markdown.

    Parameters
    ----------
    nodes : sequence of Node, or Node
        Blocks to serialize
    options : MarkdownRendererOptions or None, default = None
        Rendering options

    Returns
    -------
    str
        Markdown text

    """
    return MarkdownRenderer(options).render_nodes(nodes)


__all__ = ["MarkdownRenderer", "to_markdown"]
