#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/ast/utils.py
"""Utility functions for working with document nodes.

Functions
---------
get_node_children : Return the children list of a node (empty for leaves)
iter_nodes : Pre-order traversal without recursion
merge_adjacent_text : Merge neighbouring Text runs that share a format mask
validate_tree : Check the structural invariants of a tree

Examples
--------
    >>> from scribex.ast import Paragraph, Text
    >>> from scribex.ast.utils import merge_adjacent_text
    >>> merge_adjacent_text([Text("a"), Text("b"), Text("c", 1)])
    [Text(content='ab', format_mask=0), Text(content='c', format_mask=1)]

"""

from __future__ import annotations

from typing import Iterator

from scribex.ast.nodes import List, ListItem, Node, Table, TableCell, TableRow, Text
from scribex.exceptions import ValidationError


def get_node_children(node: Node) -> list[Node]:
    """Return the children of ``node``, or an empty list for leaf nodes."""
    return getattr(node, "children", [])


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants in document order.

    Uses an explicit work-list, so arbitrarily deep trees never exhaust the
    interpreter stack.

    Parameters
    ----------
    node : Node
        Root of the traversal

    Yields
    ------
    Node
        Nodes in pre-order

    """
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(get_node_children(current)))


def merge_adjacent_text(nodes: list[Node]) -> list[Node]:
    """Merge neighbouring Text nodes that share a format mask.

    Empty Text nodes are dropped. The input list and its nodes are left
    untouched; merged runs are new Text objects.

    Parameters
    ----------
    nodes : list of Node
        Sibling nodes

    Returns
    -------
    list of Node
        New sibling list

    """
    merged: list[Node] = []
    for node in nodes:
        if isinstance(node, Text):
            if not node.content:
                continue
            last = merged[-1] if merged else None
            if isinstance(last, Text) and last.format_mask == node.format_mask:
                merged[-1] = Text(content=last.content + node.content, format_mask=node.format_mask)
                continue
        merged.append(node)
    return merged


def validate_tree(node: Node) -> None:
    """Check the structural invariants of a tree.

    - List children are ListItem nodes
    - Table children are TableRow nodes holding at least one TableCell
    - No node object appears more than once (no sharing, no cycles)

    Parameters
    ----------
    node : Node
        Root of the tree to check

    Raises
    ------
    ValidationError
        On the first violated invariant

    """
    seen: set[int] = set()
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            raise ValidationError(
                f"{type(current).__name__} node appears more than once in the tree",
                parameter_name="node",
                parameter_value=current,
            )
        seen.add(id(current))

        children = get_node_children(current)
        if isinstance(current, List):
            for child in children:
                if not isinstance(child, ListItem):
                    raise ValidationError(
                        f"List children must be ListItem, got {type(child).__name__}",
                        parameter_name="children",
                        parameter_value=child,
                    )
        elif isinstance(current, Table):
            for row in children:
                if not isinstance(row, TableRow):
                    raise ValidationError(
                        f"Table children must be TableRow, got {type(row).__name__}",
                        parameter_name="children",
                        parameter_value=row,
                    )
        elif isinstance(current, TableRow):
            if not children:
                raise ValidationError("TableRow must hold at least one TableCell", parameter_name="children")
            for cell in children:
                if not isinstance(cell, TableCell):
                    raise ValidationError(
                        f"TableRow children must be TableCell, got {type(cell).__name__}",
                        parameter_name="children",
                        parameter_value=cell,
                    )
        stack.extend(children)


__all__ = ["get_node_children", "iter_nodes", "merge_adjacent_text", "validate_tree"]
