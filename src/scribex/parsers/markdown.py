#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/parsers/markdown.py
"""Markdown to document node parser.

The parser accepts the Markdown dialect written by
:class:`~scribex.renderers.markdown.MarkdownRenderer`, for example the reply
of a writing assistant that is spliced back into a document.

Parsing is total: every string has a defined parse. Each block, separated
from its neighbours by blank lines, is classified independently: heading,
then blockquote, then bullet or numbered list, then paragraph. Inline text
recognizes ``**bold**``, ``*italic*``, backtick code and ``~~strikethrough~~``
spans, one format bit per span.

Extensions for the remaining block and inline forms the renderer produces
(fenced code, dividers, pipe tables, task lists, callouts, links, images)
are off by default and enabled through :class:`MarkdownParserOptions`.

"""

from __future__ import annotations

import logging
import re
from typing import Optional

from scribex.ast.nodes import (
    Callout,
    CodeBlock,
    Divider,
    Heading,
    Image,
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
from scribex.callouts import find_preset_by_emoji
from scribex.constants import MAX_HEADING_LEVEL, ListKind
from scribex.options.base import validate_options_type
from scribex.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

# =============================================================================
# Regex Patterns
# =============================================================================

# One or more blank (or whitespace-only) lines separate blocks
BLOCK_SPLIT_PATTERN = re.compile(r"\n(?:[ \t]*\n)+")

# Heading: one line, hashes then whitespace then text; levels beyond 6 clamp
HEADING_PATTERN = re.compile(r"(#+)[ \t]+(.*)")

# Blockquote line prefix: ">" and one optional space
QUOTE_PREFIX_PATTERN = re.compile(r"^>\s?")

BULLET_LINE_PATTERN = re.compile(r"^[-*]\s")
NUMBERED_LINE_PATTERN = re.compile(r"^\d+\.\s")
LIST_MARKER_PATTERN = re.compile(r"^[-*]\s|^\d+\.\s")

# Extension: task marker at the start of a bullet item
TASK_MARKER_PATTERN = re.compile(r"^\[([ xX])\]\s?")

# Extension: fenced code block opener and info string
FENCE_OPEN_PATTERN = re.compile(r"^[ \t]{0,3}(`{3,}|~{3,})(.*)$")

# Extension: divider
DIVIDER_PATTERN = re.compile(r"-{3,}")

# Extension: callout first line, "> [!emoji] text"
CALLOUT_PATTERN = re.compile(r"^>\s?\[!([^\]]+)\][ \t]?(.*)$")

# Extension: pipe table separator row, e.g. "| --- | :---: |"
TABLE_SEPARATOR_PATTERN = re.compile(r"^\|?\s*:?-{3,}:?\s*(?:\|\s*:?-{3,}:?\s*)*\|?$")
TABLE_CELL_SPLIT_PATTERN = re.compile(r"(?<!\\)\|")

# Inline tokens in priority order; "**" must precede "*"
_INLINE_BASE = r"\*\*(?P<bold>.+?)\*\*|\*(?P<italic>.+?)\*|`(?P<code>.+?)`|~~(?P<strike>.+?)~~"
_INLINE_IMAGE = r"!\[(?P<image_alt>[^\]]*)\]\((?P<image_src>[^)\s]*)\)"
_INLINE_LINK = r"\[(?P<link_text>[^\]]*)\]\((?P<link_url>[^)\s]*)\)"

_INLINE_FORMATS = (
    ("bold", TextFormat.BOLD),
    ("italic", TextFormat.ITALIC),
    ("code", TextFormat.CODE),
    ("strike", TextFormat.STRIKETHROUGH),
)


def _match_fence_open(line: str) -> re.Match[str] | None:
    """Match a fence opener; backtick fences may not carry a backtick in the info string."""
    match = FENCE_OPEN_PATTERN.match(line)
    if match and match.group(1)[0] == "`" and "`" in match.group(2):
        return None
    return match


class MarkdownParser:
    """Parse Markdown text into document nodes.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration; with the defaults only headings, quotes,
        bullet and numbered lists and paragraphs are recognized

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> nodes = parser.parse("# Title\\n\\nSome **bold** text")
        >>> [type(n).__name__ for n in nodes]
        ['Heading', 'Paragraph']

    """

    def __init__(self, options: Optional[MarkdownParserOptions] = None):
        """Initialize the parser with options."""
        options = options or MarkdownParserOptions()
        validate_options_type(options, MarkdownParserOptions, "MarkdownParser")
        self.options: MarkdownParserOptions = options

        alternatives = []
        if self.options.parse_images:
            alternatives.append(_INLINE_IMAGE)
        if self.options.parse_links:
            alternatives.append(_INLINE_LINK)
        alternatives.append(_INLINE_BASE)
        self._inline_pattern = re.compile("|".join(alternatives))

    def parse(self, markdown: str) -> list[Node]:
        """Parse a Markdown document into a list of block nodes.

        Parameters
        ----------
        markdown : str
            Markdown text

        Returns
        -------
        list of Node
            Block nodes in document order

        """
        text = markdown.replace("\r\n", "\n").replace("\r", "\n")

        nodes: list[Node] = []
        for block in self._split_blocks(text):
            trimmed = block.strip()
            if not trimmed:
                continue
            nodes.append(self._parse_block(trimmed))

        logger.debug(f"Parsed {len(nodes)} Markdown blocks")
        return nodes

    def _split_blocks(self, text: str) -> list[str]:
        """Split text into blocks on blank lines.

        With fenced code enabled, blank lines inside a fence do not split, and
        a fence always starts a new block.
        """
        if not self.options.parse_code_fences:
            return BLOCK_SPLIT_PATTERN.split(text)

        blocks: list[str] = []
        current: list[str] = []
        fence: str | None = None

        for line in text.split("\n"):
            if fence is not None:
                current.append(line)
                stripped = line.strip()
                if stripped.startswith(fence) and not stripped.strip(fence[0]):
                    blocks.append("\n".join(current))
                    current = []
                    fence = None
                continue

            match = _match_fence_open(line)
            if match:
                if current:
                    blocks.append("\n".join(current))
                current = [line]
                fence = match.group(1)
            elif not line.strip():
                if current:
                    blocks.append("\n".join(current))
                current = []
            else:
                current.append(line)

        if current:
            blocks.append("\n".join(current))
        return blocks

    def _parse_block(self, block: str) -> Node:
        """Classify one trimmed, non-empty block and build its node."""
        if self.options.parse_code_fences:
            code_block = self._try_parse_code_block(block)
            if code_block is not None:
                return code_block

        if self.options.parse_dividers and DIVIDER_PATTERN.fullmatch(block):
            return Divider()

        heading_match = HEADING_PATTERN.fullmatch(block)
        if heading_match:
            level = min(len(heading_match.group(1)), MAX_HEADING_LEVEL)
            return Heading(level=level, children=self.parse_inline(heading_match.group(2)))

        if self.options.parse_callouts:
            callout = self._try_parse_callout(block)
            if callout is not None:
                return callout

        if block.startswith("> "):
            content = " ".join(QUOTE_PREFIX_PATTERN.sub("", line, count=1) for line in block.split("\n"))
            return Quote(children=self.parse_inline(content))

        lines = block.split("\n")

        if self.options.parse_tables:
            table = self._try_parse_table(lines)
            if table is not None:
                return table

        is_bullet = all(BULLET_LINE_PATTERN.match(line) for line in lines)
        is_numbered = all(NUMBERED_LINE_PATTERN.match(line) for line in lines)
        if is_bullet or is_numbered:
            return self._parse_list(lines, "bullet" if is_bullet else "number")

        return Paragraph(children=self.parse_inline(block))

    def _parse_list(self, lines: list[str], kind: ListKind) -> List:
        """Build a list from homogeneous marker lines.

        With task lists enabled, a bullet list whose every item starts with
        ``[ ]`` or ``[x]`` becomes a check list.
        """
        contents = [LIST_MARKER_PATTERN.sub("", line, count=1) for line in lines]

        if kind == "bullet" and self.options.parse_task_lists:
            task_matches = [TASK_MARKER_PATTERN.match(content) for content in contents]
            if all(task_matches):
                items: list[Node] = [
                    ListItem(
                        children=self.parse_inline(content[match.end() :]),
                        checked=match.group(1) in ("x", "X"),
                    )
                    for content, match in zip(contents, task_matches)
                    if match is not None
                ]
                return List(kind="check", children=items)

        return List(kind=kind, children=[ListItem(children=self.parse_inline(c)) for c in contents])

    def _try_parse_code_block(self, block: str) -> CodeBlock | None:
        lines = block.split("\n")
        match = _match_fence_open(lines[0])
        if not match:
            return None

        fence = match.group(1)
        info = match.group(2).strip()
        language = info.split()[0] if info else self.options.default_code_language

        body = lines[1:]
        if body:
            last = body[-1].strip()
            if last.startswith(fence) and not last.strip(fence[0]):
                body = body[:-1]
        return CodeBlock(code="\n".join(body), language=language)

    def _try_parse_callout(self, block: str) -> Callout | None:
        lines = block.split("\n")
        match = CALLOUT_PATTERN.match(lines[0])
        if not match:
            return None

        emoji = match.group(1).strip()
        contents = [match.group(2)] + [QUOTE_PREFIX_PATTERN.sub("", line, count=1) for line in lines[1:]]
        paragraphs: list[Node] = [Paragraph(children=self.parse_inline(c)) for c in contents if c.strip()]
        return Callout(children=paragraphs, emoji=emoji, color_preset=find_preset_by_emoji(emoji).id)

    def _try_parse_table(self, lines: list[str]) -> Table | None:
        """Parse a pipe table: header row, separator row, then data rows."""
        if len(lines) < 2 or not TABLE_SEPARATOR_PATTERN.match(lines[1].strip()):
            return None
        if not all(line.strip().startswith("|") for line in lines):
            return None

        rows: list[Node] = []
        for index, line in enumerate(lines):
            if index == 1:
                continue
            rows.append(TableRow(children=[TableCell(children=self.parse_inline(c)) for c in self._split_row(line)]))
        return Table(children=rows)

    @staticmethod
    def _split_row(line: str) -> list[str]:
        """Split a pipe table row into unescaped cell texts."""
        row = line.strip()
        if row.startswith("|"):
            row = row[1:]
        if row.endswith("|") and not row.endswith("\\|"):
            row = row[:-1]
        return [cell.strip().replace("\\|", "|") for cell in TABLE_CELL_SPLIT_PATTERN.split(row)]

    def parse_inline(self, text: str) -> list[Node]:
        """Parse inline formatting into Text (and, when enabled, Link and Image) nodes.

        The leftmost token wins. Each formatted span becomes one Text node
        with exactly one format bit; plain runs between tokens become
        unformatted Text nodes. Nested or combined markers are not
        reconstructed.

        Parameters
        ----------
        text : str
            Inline Markdown

        Returns
        -------
        list of Node
            Inline nodes; a single unformatted Text when no token is found

        Examples
        --------
            >>> MarkdownParser().parse_inline("a **b** c")
            [Text(content='a ', format_mask=0), Text(content='b', format_mask=1), Text(content=' c', format_mask=0)]

        """
        nodes: list[Node] = []
        last_index = 0

        for match in self._inline_pattern.finditer(text):
            if match.start() > last_index:
                nodes.append(Text(content=text[last_index : match.start()]))
            nodes.append(self._inline_token_to_node(match))
            last_index = match.end()

        if last_index < len(text):
            nodes.append(Text(content=text[last_index:]))

        if not nodes:
            nodes.append(Text(content=text))
        return nodes

    def _inline_token_to_node(self, match: re.Match[str]) -> Node:
        groups = match.groupdict()
        if groups.get("image_src") is not None:
            return Image(src=groups["image_src"], alt_text=groups["image_alt"] or "")
        if groups.get("link_url") is not None:
            link_text = groups["link_text"] or ""
            children = self.parse_inline(link_text) if link_text else []
            return Link(url=groups["link_url"], children=children)
        for group_name, flag in _INLINE_FORMATS:
            if groups.get(group_name) is not None:
                return Text(content=groups[group_name], format_mask=flag)
        # Unreachable: every alternative has a named group
        return Text(content=match.group(0))


def from_markdown(markdown: str, options: Optional[MarkdownParserOptions] = None) -> list[Node]:
    """Parse Markdown into a list of block nodes.

    Parameters
    ----------
    markdown : str
        Markdown text
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    list of Node
        Block nodes in document order

    Examples
    --------
    >>> from_markdown("- one\\n- two")[0].kind
    'bullet'

    """
    return MarkdownParser(options).parse(markdown)


def parse_inline(text: str, options: Optional[MarkdownParserOptions] = None) -> list[Node]:
    """Parse inline Markdown formatting into Text nodes."""
    return MarkdownParser(options).parse_inline(text)


__all__ = ["MarkdownParser", "from_markdown", "parse_inline"]
