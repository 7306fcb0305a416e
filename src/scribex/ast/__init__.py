#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/ast/__init__.py
"""Document tree module shared by every scribex transformation.

The module consists of several components:

- nodes: node classes representing document structure
- visitors: visitor pattern base class for tree traversal
- serialization: JSON serialization and deserialization of trees
- utils: traversal, text merging and tree validation helpers

Examples
--------
    >>> from scribex.ast import Heading, Paragraph, Root, Text
    >>> from scribex.renderers.markdown import MarkdownRenderer
    >>> doc = Root(children=[
    ...     Heading(level=1, children=[Text("Title")]),
    ...     Paragraph(children=[Text("Hello world")]),
    ... ])
    >>> MarkdownRenderer().render_nodes([doc])
    '# Title\\n\\nHello world'

"""

from __future__ import annotations

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
from scribex.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from scribex.ast.utils import iter_nodes, merge_adjacent_text, validate_tree
from scribex.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Node",
    "TextFormat",
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
    # Visitors
    "NodeVisitor",
    # Serialization
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
    # Utilities
    "iter_nodes",
    "merge_adjacent_text",
    "validate_tree",
]
