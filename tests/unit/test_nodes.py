#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for document node classes."""

import pytest

from scribex.ast import (
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
    NodeVisitor,
    Paragraph,
    Root,
    Table,
    TableCell,
    TableRow,
    Text,
    TextFormat,
    Video,
)


@pytest.mark.unit
class TestTextFormat:
    """Tests for the format bitmask."""

    def test_bit_values(self):
        """Format bits have fixed values."""
        assert TextFormat.BOLD == 1
        assert TextFormat.ITALIC == 2
        assert TextFormat.STRIKETHROUGH == 4
        assert TextFormat.UNDERLINE == 8
        assert TextFormat.CODE == 16

    def test_has_format(self):
        """Each bit is tested independently."""
        node = Text("x", TextFormat.BOLD | TextFormat.CODE)
        assert node.has_format(TextFormat.BOLD)
        assert node.has_format(TextFormat.CODE)
        assert not node.has_format(TextFormat.ITALIC)

    def test_with_format_returns_copy(self):
        """with_format leaves the original untouched."""
        node = Text("x")
        bold = node.with_format(TextFormat.BOLD)
        assert bold.format_mask == 1
        assert node.format_mask == 0

    def test_mask_stored_as_int(self):
        """Flags are normalized to plain integers."""
        assert type(Text("x", TextFormat.ITALIC).format_mask) is int

    @pytest.mark.parametrize("mask", [-1, 256])
    def test_mask_range(self, mask):
        """Masks outside a byte are rejected."""
        with pytest.raises(ValueError):
            Text("x", mask)


@pytest.mark.unit
class TestNodeValidation:
    """Tests for constructor checks."""

    @pytest.mark.parametrize("level", [0, 7])
    def test_heading_level(self, level):
        """Heading levels are 1-6."""
        with pytest.raises(ValueError):
            Heading(level=level)

    def test_list_kind(self):
        """Unknown list kinds are rejected."""
        with pytest.raises(ValueError):
            List(kind="roman")  # type: ignore[arg-type]

    def test_cell_spans(self):
        """Cell spans must be positive."""
        with pytest.raises(ValueError):
            TableCell(colspan=0)

    def test_inline_flags(self):
        """Text-level nodes are marked inline, blocks are not."""
        assert Text().inline
        assert Link(url="u").inline
        assert Image(src="s").inline
        assert Mention(id="1", label="a").inline
        assert LineBreak().inline
        assert not Paragraph().inline
        assert not Heading(level=1).inline


@pytest.mark.unit
class TestTextContent:
    """Tests for get_text_content."""

    def test_paragraph_concatenates_inline(self):
        """Inline children are joined without separators."""
        node = Paragraph(children=[Text("a"), Link(url="u", children=[Text("b")]), LineBreak(), Text("c")])
        assert node.get_text_content() == "ab\nc"

    def test_root_separates_blocks(self):
        """Block children are separated by a blank line."""
        root = Root(children=[Paragraph(children=[Text("a")]), Divider(), Paragraph(children=[Text("b")])])
        assert root.get_text_content() == "a\n\n\n\nb"

    def test_list_and_table(self):
        """Items join by newline, cells by tab."""
        lst = List(children=[ListItem(children=[Text("1")]), ListItem(children=[Text("2")])])
        table = Table(
            children=[
                TableRow(children=[TableCell(children=[Text("a")]), TableCell(children=[Text("b")])]),
                TableRow(children=[TableCell(children=[Text("c")]), TableCell(children=[Text("d")])]),
            ]
        )
        assert lst.get_text_content() == "1\n2"
        assert table.get_text_content() == "a\tb\nc\td"

    def test_leaf_nodes(self):
        """Leaf nodes report their own text."""
        assert CodeBlock(code="x = 1").get_text_content() == "x = 1"
        assert Video(src="s", title="Demo").get_text_content() == "Demo"
        assert Mention(id="1", label="ana", trigger="#").get_text_content() == "#ana"
        assert Image(src="s", alt_text="alt").get_text_content() == ""

    def test_callout_defaults(self):
        """Callouts default to the light bulb and the default preset."""
        node = Callout()
        assert node.emoji == "\U0001f4a1"
        assert node.color_preset == "default"


class _CountingVisitor(NodeVisitor):
    def __init__(self):
        self.visited = []

    def _record(self, node):
        self.visited.append(node.node_type)
        for child in getattr(node, "children", []):
            child.accept(self)

    visit_root = visit_paragraph = visit_heading = visit_quote = visit_divider = _record
    visit_list = visit_list_item = visit_table = visit_table_row = visit_table_cell = _record
    visit_code_block = visit_callout = visit_video = visit_text = visit_link = _record
    visit_image = visit_mention = visit_line_break = _record


@pytest.mark.unit
class TestVisitorDispatch:
    """Tests for accept/visit dispatch."""

    def test_every_node_dispatches(self):
        """Each node kind reaches its own visit method."""
        root = Root(
            children=[
                Heading(level=1, children=[Text("t")]),
                Paragraph(children=[Link(url="u", children=[Text("l")]), Image(src="i"), Mention(id="m", label="m")]),
                List(children=[ListItem(children=[Text("i")])]),
                Table(children=[TableRow(children=[TableCell(children=[Text("c")])])]),
                CodeBlock(),
                Callout(),
                Video(src="v"),
                Divider(),
                Paragraph(children=[LineBreak()]),
            ]
        )
        visitor = _CountingVisitor()
        root.accept(visitor)
        assert visitor.visited == [
            "root",
            "heading",
            "text",
            "paragraph",
            "link",
            "text",
            "image",
            "mention",
            "list",
            "listitem",
            "text",
            "table",
            "tablerow",
            "tablecell",
            "text",
            "code-block",
            "callout",
            "video",
            "horizontal-rule",
            "paragraph",
            "linebreak",
        ]

    def test_generic_visit_default(self):
        """generic_visit does nothing by default."""
        assert _CountingVisitor().generic_visit(Text()) is None
