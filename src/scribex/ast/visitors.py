#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/ast/visitors.py
"""Visitor pattern base class for document tree traversal.

Every node kind has an abstract ``visit_*`` method here, so a concrete
visitor that forgets a kind fails when it is instantiated rather than
silently producing partial output. Nodes of an unknown subclass are routed
to :meth:`NodeVisitor.generic_visit`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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
    Video,
)


class NodeVisitor(ABC):
    """Abstract base class for document node visitors.

    Subclasses implement one ``visit_*`` method per node kind. Return values
    are up to the subclass: side-effect visitors return None, transforming
    visitors return their accumulated result.

    Examples
    --------
    Collect all mention ids:

        >>> class MentionCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.ids = []
        ...     def visit_mention(self, node):
        ...         self.ids.append(node.id)
        ...     # remaining visit_* methods recurse into children

    """

    @abstractmethod
    def visit_root(self, node: Root) -> Any:
        """Visit a Root node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_quote(self, node: Quote) -> Any:
        """Visit a Quote node."""

    @abstractmethod
    def visit_divider(self, node: Divider) -> Any:
        """Visit a Divider node."""

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_callout(self, node: Callout) -> Any:
        """Visit a Callout node."""

    @abstractmethod
    def visit_video(self, node: Video) -> Any:
        """Visit a Video node."""

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_mention(self, node: Mention) -> Any:
        """Visit a Mention node."""

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for node subclasses without a dedicated method.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None


__all__ = ["NodeVisitor"]
