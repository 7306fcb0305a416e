#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Round-trip tests between the Markdown renderer and parser."""

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from scribex.ast import (
    Callout,
    CodeBlock,
    Divider,
    List,
    ListItem,
    Paragraph,
    Quote,
    Table,
    TableCell,
    TableRow,
    Text,
    TextFormat,
)
from scribex.options import MarkdownParserOptions, MarkdownRendererOptions
from scribex.parsers.markdown import from_markdown
from scribex.renderers.markdown import to_markdown


def _runs(paragraph):
    return [(node.content, node.format_mask) for node in paragraph.children]


@pytest.mark.unit
class TestSingleBitRoundTrip:
    """Trees of single-bit text survive serialization and parsing."""

    def test_bold_and_italic_paragraph(self):
        """Plain, bold and italic runs keep their text and bits."""
        original = Paragraph(
            children=[
                Text("start "),
                Text("bold", TextFormat.BOLD),
                Text(" middle "),
                Text("italic", TextFormat.ITALIC),
                Text(" end"),
            ]
        )
        parsed = from_markdown(to_markdown([original]))
        assert len(parsed) == 1
        assert _runs(parsed[0]) == _runs(original)

    def test_block_structure(self, sample_blocks):
        """Headings, paragraphs and lists come back with the same shape."""
        blocks = sample_blocks[:3] + [
            Quote(children=[Text("quoted")]),
            List(kind="number", children=[ListItem(children=[Text("first")])]),
        ]
        assert from_markdown(to_markdown(blocks)) == blocks

    def test_extended_blocks(self):
        """With extensions enabled, the richer blocks round-trip too."""
        blocks = [
            CodeBlock(code="def f():\n\n    return 1", language="python"),
            Divider(),
            Table(
                children=[
                    TableRow(children=[TableCell(children=[Text("a|b")]), TableCell(children=[Text("c")])]),
                    TableRow(children=[TableCell(children=[Text("1")]), TableCell(children=[Text("2")])]),
                ]
            ),
            List(
                kind="check",
                children=[
                    ListItem(children=[Text("done")], checked=True),
                    ListItem(children=[Text("todo")], checked=False),
                ],
            ),
            Callout(children=[Paragraph(children=[Text("note")])], emoji="\U0001f4a1", color_preset="default"),
        ]
        markdown = to_markdown(blocks, MarkdownRendererOptions(render_task_markers=True))
        assert from_markdown(markdown, MarkdownParserOptions.extended()) == blocks

    @given(
        st.lists(
            st.tuples(
                st.text(alphabet=string.ascii_letters + string.digits, min_size=1, max_size=8),
                st.sampled_from([0, TextFormat.BOLD, TextFormat.ITALIC, TextFormat.STRIKETHROUGH, TextFormat.CODE]),
            ),
            min_size=1,
            max_size=6,
        )
    )
    def test_formatted_words_property(self, words):
        """Space-separated single-bit words always round-trip."""
        children = []
        for index, (word, mask) in enumerate(words):
            if index:
                children.append(Text(" "))
            children.append(Text(word, mask))
        original = Paragraph(children=children)

        parsed = from_markdown(to_markdown([original]))
        parsed_text = "".join(node.content for node in parsed[0].children)
        assert parsed_text == original.get_text_content()
        formatted = [(n.content, n.format_mask) for n in parsed[0].children if n.format_mask]
        assert formatted == [(word, int(mask)) for word, mask in words if mask]


@pytest.mark.unit
class TestDocumentedLosses:
    """Known one-way losses of the Markdown form."""

    def test_underline_lost(self):
        """Underlined text comes back as plain text."""
        original = Paragraph(children=[Text("under", TextFormat.UNDERLINE)])
        assert from_markdown(to_markdown([original])) == [Paragraph(children=[Text("under")])]

    def test_combined_bits_not_reconstructed(self):
        """Bold italic text does not come back as a single two-bit run."""
        original = Paragraph(children=[Text("both", TextFormat.BOLD | TextFormat.ITALIC)])
        parsed = from_markdown(to_markdown([original]))
        assert all(node.format_mask != int(TextFormat.BOLD | TextFormat.ITALIC) for node in parsed[0].children)
