#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/parsers/html.py
"""Markup to document node importer.

This module completes the paste flow: markup (by default first reduced to the
safe vocabulary by :func:`~scribex.utils.html_sanitizer.sanitize_html`) is
converted into block nodes ready to be spliced into a document.

Inline formatting elements do not become nodes of their own. Their format
bit is ORed into the ``format_mask`` of every Text node below them, and
adjacent runs with equal masks are merged. Inline content found directly in
a container is wrapped in a Paragraph. Lists nested in a list item are lifted
into the enclosing list.

"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag
from bs4.exceptions import FeatureNotFound

from scribex.ast.nodes import (
    CodeBlock,
    Divider,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Quote,
    Table,
    TableCell,
    TableRow,
    Text,
    TextFormat,
)
from scribex.ast.utils import merge_adjacent_text
from scribex.constants import DEFAULT_SANITIZER_MAX_DEPTH, STRIPPED_TAGS
from scribex.exceptions import ValidationError
from scribex.options.base import validate_options_type
from scribex.options.html import HtmlImportOptions, SanitizerOptions
from scribex.utils.html_sanitizer import sanitize_html

logger = logging.getLogger(__name__)

# Inline elements that set a format bit on their descendant text
_FORMAT_TAGS: dict[str, TextFormat] = {
    "strong": TextFormat.BOLD,
    "b": TextFormat.BOLD,
    "em": TextFormat.ITALIC,
    "i": TextFormat.ITALIC,
    "u": TextFormat.UNDERLINE,
    "s": TextFormat.STRIKETHROUGH,
    "del": TextFormat.STRIKETHROUGH,
    "strike": TextFormat.STRIKETHROUGH,
    "code": TextFormat.CODE,
}

_TABLE_SECTION_TAGS = frozenset({"thead", "tbody", "tfoot"})
_TABLE_CELL_TAGS = frozenset({"td", "th"})
_LANGUAGE_CLASS_RE = re.compile(r"^(?:language|lang)-([a-zA-Z0-9_+\-]+)$")
_WHITESPACE_RE = re.compile(r"\s+")


class HtmlToAstConverter:
    """Convert markup to document nodes.

    Parameters
    ----------
    options : HtmlImportOptions or None, default = None
        Importer configuration

    Examples
    --------
        >>> nodes = HtmlToAstConverter().convert("<p>Hello <b>world</b></p>")
        >>> nodes[0].children
        [Text(content='Hello ', format_mask=0), Text(content='world', format_mask=1)]

    """

    BLOCK_ELEMENTS = frozenset(
        {
            "p",
            "div",
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            "blockquote",
            "ul",
            "ol",
            "li",
            "pre",
            "hr",
            "table",
            "thead",
            "tbody",
            "tfoot",
            "tr",
            "td",
            "th",
            "section",
            "article",
            "header",
            "footer",
            "nav",
            "aside",
            "main",
            "figure",
            "body",
            "html",
        }
    )

    def __init__(self, options: Optional[HtmlImportOptions] = None):
        """Initialize the importer with options."""
        options = options or HtmlImportOptions()
        validate_options_type(options, HtmlImportOptions, "HtmlToAstConverter")
        self.options: HtmlImportOptions = options

    def convert(self, markup: str) -> list[Node]:
        """Convert markup into block nodes.

        Parameters
        ----------
        markup : str
            Markup string; sanitized first unless ``options.sanitize`` is False

        Returns
        -------
        list of Node
            Block nodes in document order

        """
        if not markup:
            return []

        if self.options.sanitize:
            markup = sanitize_html(markup, SanitizerOptions(html_parser=self.options.html_parser))

        try:
            soup = BeautifulSoup(markup, self.options.html_parser)
        except FeatureNotFound as e:
            raise ValidationError(
                f"Selected HtmlImportOptions.html_parser not found: {e}",
                parameter_name="html_parser",
                parameter_value=self.options.html_parser,
                original_error=e,
            ) from e

        scope: Tag = soup.body if soup.body is not None else soup
        return self._process_block_container(scope, 0)

    def _is_block_element(self, node: PageElement) -> bool:
        return isinstance(node, Tag) and node.name in self.BLOCK_ELEMENTS

    def _process_block_container(self, node: Tag, depth: int) -> list[Node]:
        """Process a container's children into block nodes.

        Inline content between blocks is buffered and wrapped in a Paragraph.

        Parameters
        ----------
        node : Tag
            Container element
        depth : int
            Nesting depth of ``node``

        Returns
        -------
        list of Node
            Block nodes

        """
        children: list[Node] = []
        inline_buffer: list[Node] = []

        for child in node.children:
            if self._is_block_element(child):
                self._flush_inline_buffer(inline_buffer, children)
                inline_buffer = []
                children.extend(self._process_block(child, depth + 1))  # type: ignore[arg-type]
            else:
                inline_buffer.extend(self._process_inline(child, 0, depth + 1))

        self._flush_inline_buffer(inline_buffer, children)
        return children

    def _flush_inline_buffer(self, inline_buffer: list[Node], result: list[Node]) -> None:
        """Wrap buffered inline nodes in a Paragraph unless they are only whitespace."""
        content = self._trim_inline(merge_adjacent_text(inline_buffer))
        if content:
            result.append(Paragraph(children=content))

    def _process_block(self, node: Tag, depth: int) -> list[Node]:
        """Convert one block element into zero or more block nodes."""
        if depth > DEFAULT_SANITIZER_MAX_DEPTH:
            logger.debug(f"Nesting depth {depth} reached at <{node.name}>, importing subtree as text")
            text = self._clean_text(node.get_text())
            return [Paragraph(children=[Text(content=text)])] if text.strip() else []

        name = node.name
        if name == "p":
            return [Paragraph(children=self._inline_children(node.children, depth))]
        if name in ("h1", "h2", "h3", "h4", "h5", "h6"):
            return [Heading(level=int(name[1]), children=self._inline_children(node.children, depth))]
        if name == "blockquote":
            return [Quote(children=self._inline_children(node.children, depth))]
        if name in ("ul", "ol"):
            return [self._process_list(node, depth)]
        if name == "pre":
            return [self._process_code_block(node)]
        if name == "hr":
            return [Divider()]
        if name == "table":
            table = self._process_table(node, depth)
            return [table] if table is not None else []
        return self._process_block_container(node, depth)

    def _process_list(self, node: Tag, depth: int) -> List:
        """Convert ``ul``/``ol`` into a List, lifting nested lists into it.

        Parameters
        ----------
        node : Tag
            List element
        depth : int
            Nesting depth of ``node``

        Returns
        -------
        List
            Flat list of items in document order

        """
        kind = "number" if node.name == "ol" else "bullet"
        if depth > DEFAULT_SANITIZER_MAX_DEPTH:
            logger.debug(f"Nesting depth {depth} reached at <{node.name}>, importing list as one text item")
            text = self._clean_text(node.get_text())
            items_text = [Text(content=text.strip())] if text.strip() else []
            return List(kind=kind, children=[ListItem(children=items_text)])

        items: list[Node] = []
        for li in node.children:
            if not isinstance(li, Tag):
                continue
            if li.name in ("ul", "ol"):
                items.extend(self._process_list(li, depth + 1).children)
                continue

            nested: list[Node] = []
            content: list[PageElement] = []
            for child in li.children:
                if isinstance(child, Tag) and child.name in ("ul", "ol"):
                    nested.extend(self._process_list(child, depth + 2).children)
                else:
                    content.append(child)
            items.append(ListItem(children=self._inline_children(content, depth + 1)))
            items.extend(nested)

        return List(kind=kind, children=items)

    def _process_code_block(self, node: Tag) -> CodeBlock:
        code = node.get_text()
        # Markup parsers keep the newline that directly follows <pre>
        if code.startswith("\n"):
            code = code[1:]
        return CodeBlock(code=code, language=self._extract_language(node))

    def _extract_language(self, node: Tag) -> str:
        """Read the language from a ``language-*`` class on ``pre`` or its ``code`` child."""
        candidates = [node]
        code_child = node.find("code")
        if isinstance(code_child, Tag):
            candidates.append(code_child)

        for candidate in candidates:
            classes = candidate.get("class") or []
            if isinstance(classes, str):
                classes = classes.split()
            for cls in classes:
                match = _LANGUAGE_CLASS_RE.match(cls)
                if match:
                    return match.group(1)
        return self.options.default_code_language

    def _process_table(self, node: Tag, depth: int) -> Table | None:
        """Convert a table element; rows without cells are dropped."""
        row_tags: list[Tag] = []
        for child in node.children:
            if not isinstance(child, Tag):
                continue
            if child.name == "tr":
                row_tags.append(child)
            elif child.name in _TABLE_SECTION_TAGS:
                row_tags.extend(tr for tr in child.children if isinstance(tr, Tag) and tr.name == "tr")

        rows: list[Node] = []
        for tr in row_tags:
            cells: list[Node] = [
                TableCell(
                    children=self._inline_children(cell.children, depth + 2),
                    colspan=self._span_attribute(cell, "colspan"),
                    rowspan=self._span_attribute(cell, "rowspan"),
                )
                for cell in tr.children
                if isinstance(cell, Tag) and cell.name in _TABLE_CELL_TAGS
            ]
            if cells:
                rows.append(TableRow(children=cells))

        if not rows:
            logger.debug("Skipping table without cells")
            return None
        return Table(children=rows)

    @staticmethod
    def _span_attribute(cell: Tag, name: str) -> int:
        value = cell.get(name)
        try:
            span = int(str(value)) if value is not None else 1
        except ValueError:
            return 1
        return span if span >= 1 else 1

    def _inline_children(self, children: Iterable[PageElement], depth: int) -> list[Node]:
        """Collect inline content from a block's children, flattening nested blocks.

        Successive nested blocks are separated by a LineBreak.
        """
        segments: list[list[Node]] = [[]]
        for child in children:
            if self._is_block_element(child):
                segments.append(self._process_inline(child, 0, depth + 1))
                segments.append([])
            else:
                segments[-1].extend(self._process_inline(child, 0, depth + 1))

        content: list[Node] = []
        for segment in segments:
            trimmed = self._trim_inline(merge_adjacent_text(segment))
            if not trimmed:
                continue
            if content:
                content.append(LineBreak())
            content.extend(trimmed)
        return content

    def _process_inline(self, node: PageElement, format_mask: int, depth: int) -> list[Node]:
        """Convert a node in inline context.

        Parameters
        ----------
        node : PageElement
            Source node
        format_mask : int
            Format bits inherited from enclosing formatting elements
        depth : int
            Nesting depth of ``node``

        Returns
        -------
        list of Node
            Inline nodes

        """
        if isinstance(node, PreformattedString):
            return []
        if isinstance(node, NavigableString):
            text = self._clean_text(str(node))
            return [Text(content=text, format_mask=format_mask)] if text else []
        if not isinstance(node, Tag):
            return []

        name = node.name
        if name in STRIPPED_TAGS:
            return []
        if depth > DEFAULT_SANITIZER_MAX_DEPTH:
            text = self._clean_text(node.get_text())
            return [Text(content=text, format_mask=format_mask)] if text else []
        if name == "br":
            return [LineBreak()]
        if name == "img":
            src = node.get("src")
            if not src:
                return []
            return [Image(src=str(src), alt_text=str(node.get("alt") or ""))]

        format_mask |= _FORMAT_TAGS.get(name, 0)
        children: list[Node] = []
        for child in node.children:
            children.extend(self._process_inline(child, format_mask, depth + 1))

        if name == "a":
            href = node.get("href")
            if href:
                return [Link(url=str(href), children=merge_adjacent_text(children))]
        return children

    def _clean_text(self, text: str) -> str:
        if self.options.collapse_whitespace:
            return _WHITESPACE_RE.sub(" ", text)
        return text

    @staticmethod
    def _trim_inline(nodes: list[Node]) -> list[Node]:
        """Strip leading and trailing whitespace at the edges of an inline run."""
        result = list(nodes)
        while result and isinstance(result[0], Text) and not result[0].content.strip():
            result.pop(0)
        while result and isinstance(result[-1], Text) and not result[-1].content.strip():
            result.pop()
        if result and isinstance(result[0], Text):
            first = result[0]
            result[0] = Text(content=first.content.lstrip(), format_mask=first.format_mask)
        if result and isinstance(result[-1], Text):
            last = result[-1]
            result[-1] = Text(content=last.content.rstrip(), format_mask=last.format_mask)
        return result


def html_to_nodes(markup: str, sanitize: bool = True, options: Optional[HtmlImportOptions] = None) -> list[Node]:
    """Convert markup to block nodes.

    Parameters
    ----------
    markup : str
        Markup string, e.g. clipboard ``text/html``
    sanitize : bool, default True
        Sanitize the markup first; overrides ``options.sanitize``
    options : HtmlImportOptions or None, default = None
        Importer configuration

    Returns
    -------
    list of Node
        Block nodes in document order

    Examples
    --------
    >>> html_to_nodes('<ul><li>a</li><li>b</li></ul>')[0].kind
    'bullet'

    """
    options = options or HtmlImportOptions()
    validate_options_type(options, HtmlImportOptions, "html_to_nodes")
    if options.sanitize != sanitize:
        options = options.create_updated(sanitize=sanitize)
    return HtmlToAstConverter(options).convert(markup)


__all__ = ["HtmlToAstConverter", "html_to_nodes"]
