#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/ast/serialization.py
"""JSON serialization and deserialization for document nodes.

Nodes are written in the editor's persisted JSON shape: every node becomes a
dict with a ``type`` string, a ``version`` number and its fields, with
container nodes carrying a ``children`` list.

Examples
--------
Serialize a tree to JSON:

    >>> from scribex.ast import Heading, Root, Text
    >>> from scribex.ast.serialization import ast_to_json, json_to_ast
    >>> doc = Root(children=[Heading(level=1, children=[Text("Title")])])
    >>> json_str = ast_to_json(doc)

And back:

    >>> json_to_ast(json_str).children[0].level
    1

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

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
from scribex.constants import DEFAULT_CALLOUT_COLOR_PRESET, DEFAULT_CALLOUT_EMOJI, DEFAULT_IMPORTED_CODE_LANGUAGE
from scribex.exceptions import SerializationError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1
NODE_VERSION = 1


def _base(node: Node) -> dict[str, Any]:
    return {"type": node.node_type, "version": NODE_VERSION}


def _serialize_children_node(node: Node) -> dict[str, Any]:
    """Serialize a node whose only field is ``children``.

    Parameters
    ----------
    node : Node
        Node with a children attribute

    Returns
    -------
    dict
        Serialized node

    """
    result = _base(node)
    result["children"] = [ast_to_dict(child) for child in node.children]  # type: ignore[attr-defined]
    return result


def _serialize_heading(node: Heading) -> dict[str, Any]:
    result = _serialize_children_node(node)
    result["tag"] = f"h{node.level}"
    return result


def _serialize_list(node: List) -> dict[str, Any]:
    result = _serialize_children_node(node)
    result["listType"] = node.kind
    return result


def _serialize_list_item(node: ListItem) -> dict[str, Any]:
    result = _serialize_children_node(node)
    if node.checked is not None:
        result["checked"] = node.checked
    return result


def _serialize_table_cell(node: TableCell) -> dict[str, Any]:
    result = _serialize_children_node(node)
    result["colSpan"] = node.colspan
    result["rowSpan"] = node.rowspan
    if node.background_color is not None:
        result["backgroundColor"] = node.background_color
    return result


def _serialize_code_block(node: CodeBlock) -> dict[str, Any]:
    result = _base(node)
    result["code"] = node.code
    result["language"] = node.language
    return result


def _serialize_callout(node: Callout) -> dict[str, Any]:
    result = _serialize_children_node(node)
    result["emoji"] = node.emoji
    result["colorPreset"] = node.color_preset
    return result


def _serialize_video(node: Video) -> dict[str, Any]:
    result = _base(node)
    result.update({"src": node.src, "provider": node.provider, "title": node.title})
    return result


def _serialize_text(node: Text) -> dict[str, Any]:
    result = _base(node)
    result["text"] = node.content
    result["format"] = node.format_mask
    return result


def _serialize_link(node: Link) -> dict[str, Any]:
    result = _serialize_children_node(node)
    result["url"] = node.url
    return result


def _serialize_image(node: Image) -> dict[str, Any]:
    result = _base(node)
    result["src"] = node.src
    result["altText"] = node.alt_text
    if node.width is not None:
        result["width"] = node.width
    if node.height is not None:
        result["height"] = node.height
    return result


def _serialize_mention(node: Mention) -> dict[str, Any]:
    result = _base(node)
    result.update({"id": node.id, "label": node.label, "trigger": node.trigger})
    return result


# Dispatch table mapping node classes to their serialization functions
_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Root: _serialize_children_node,
    Paragraph: _serialize_children_node,
    Heading: _serialize_heading,
    Quote: _serialize_children_node,
    Divider: _base,
    List: _serialize_list,
    ListItem: _serialize_list_item,
    Table: _serialize_children_node,
    TableRow: _serialize_children_node,
    TableCell: _serialize_table_cell,
    CodeBlock: _serialize_code_block,
    Callout: _serialize_callout,
    Video: _serialize_video,
    Text: _serialize_text,
    Link: _serialize_link,
    Image: _serialize_image,
    Mention: _serialize_mention,
    LineBreak: _base,
}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node and its descendants to a dictionary.

    Parameters
    ----------
    node : Node
        The node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    SerializationError
        If the node class has no serializer

    Examples
    --------
    >>> ast_to_dict(Text("Hello"))
    {'type': 'text', 'version': 1, 'text': 'Hello', 'format': 0}

    """
    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer is None:
        raise SerializationError(
            f"Unknown node type for serialization: {type(node).__name__}", node_type=type(node).__name__
        )
    return serializer(node)


def _deserialize_children(data: dict[str, Any], strict_mode: bool) -> list[Node]:
    """Deserialize the ``children`` list of ``data``, dropping skipped nodes."""
    children: list[Node] = []
    for child_data in data.get("children", []):
        child = dict_to_ast(child_data, strict_mode=strict_mode)
        if child is not None:
            children.append(child)
    return children


def _heading_level(data: dict[str, Any]) -> int:
    tag = str(data.get("tag", "h1"))
    if len(tag) != 2 or tag[0] != "h" or not tag[1].isdigit():
        raise SerializationError(f"Invalid heading tag: {tag!r}", node_type="heading")
    return int(tag[1])


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any], bool], Node]] = {
    "root": lambda d, s: Root(children=_deserialize_children(d, s)),
    "paragraph": lambda d, s: Paragraph(children=_deserialize_children(d, s)),
    "heading": lambda d, s: Heading(level=_heading_level(d), children=_deserialize_children(d, s)),
    "quote": lambda d, s: Quote(children=_deserialize_children(d, s)),
    "horizontal-rule": lambda d, s: Divider(),
    "list": lambda d, s: List(kind=d.get("listType", "bullet"), children=_deserialize_children(d, s)),
    "listitem": lambda d, s: ListItem(children=_deserialize_children(d, s), checked=d.get("checked")),
    "table": lambda d, s: Table(children=_deserialize_children(d, s)),
    "tablerow": lambda d, s: TableRow(children=_deserialize_children(d, s)),
    "tablecell": lambda d, s: TableCell(
        children=_deserialize_children(d, s),
        colspan=d.get("colSpan", 1),
        rowspan=d.get("rowSpan", 1),
        background_color=d.get("backgroundColor"),
    ),
    "code-block": lambda d, s: CodeBlock(
        code=d.get("code", ""), language=d.get("language", DEFAULT_IMPORTED_CODE_LANGUAGE)
    ),
    "callout": lambda d, s: Callout(
        children=_deserialize_children(d, s),
        emoji=d.get("emoji", DEFAULT_CALLOUT_EMOJI),
        color_preset=d.get("colorPreset", DEFAULT_CALLOUT_COLOR_PRESET),
    ),
    "video": lambda d, s: Video(src=d["src"], provider=d.get("provider", "generic"), title=d.get("title", "")),
    "text": lambda d, s: Text(content=d.get("text", ""), format_mask=d.get("format", 0)),
    "link": lambda d, s: Link(url=d["url"], children=_deserialize_children(d, s)),
    "image": lambda d, s: Image(
        src=d["src"], alt_text=d.get("altText", ""), width=d.get("width"), height=d.get("height")
    ),
    "mention": lambda d, s: Mention(id=d["id"], label=d["label"], trigger=d.get("trigger", "@")),
    "linebreak": lambda d, s: LineBreak(),
}


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node | None:
    """Convert a dictionary representation back to a node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise on unknown node types. If False, log and skip them
        (the return value is None and parents drop the child).

    Returns
    -------
    Node or None
        Reconstructed node, or None for a skipped unknown node

    Raises
    ------
    SerializationError
        If the dictionary is malformed, or has an unknown type in strict mode

    """
    if not isinstance(data, dict):
        raise SerializationError(f"Expected a node dict, got {type(data).__name__}")

    node_type = data.get("type")
    deserializer = _DESERIALIZATION_DISPATCH.get(node_type) if isinstance(node_type, str) else None
    if deserializer is None:
        if strict_mode:
            raise SerializationError(f"Unknown node type: {node_type!r}", node_type=str(node_type))
        logger.warning(f"Unknown node type '{node_type}', skipping")
        return None

    try:
        return deserializer(data, strict_mode)
    except SerializationError:
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise SerializationError(f"Malformed '{node_type}' node: {e}", node_type=node_type, original_error=e) from e


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string of the form ``{"schema_version": 1, "type": ..., ...}``

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string to a node.

    JSON without a ``schema_version`` field is read as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation
    strict_mode : bool, default True
        If True, raise on unknown node types. If False, log and skip them.

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    SerializationError
        If the JSON is malformed, the schema version is unsupported, or the
        top-level node cannot be reconstructed

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}", original_error=e) from e
    if not isinstance(data, dict):
        raise SerializationError(f"Expected a JSON object, got {type(data).__name__}")

    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise SerializationError(
            f"Unsupported schema version: {schema_version}. Only schema version {SCHEMA_VERSION} is supported."
        )

    node = dict_to_ast(data, strict_mode=strict_mode)
    if node is None:
        raise SerializationError(f"Top-level node type is unknown: {data.get('type')!r}", node_type=data.get("type"))
    return node


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
