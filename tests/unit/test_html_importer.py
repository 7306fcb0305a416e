#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for importing sanitized markup into document nodes."""

import pytest

from scribex.ast import (
    CodeBlock,
    Divider,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Quote,
    Table,
    TableCell,
    TableRow,
    Text,
    TextFormat,
    validate_tree,
)
from scribex.exceptions import InvalidOptionsError
from scribex.options import HtmlImportOptions, SanitizerOptions
from scribex.parsers.html import HtmlToAstConverter, html_to_nodes


@pytest.mark.unit
class TestBlockMapping:
    """Tests for block element conversion."""

    def test_paragraph_with_bold(self):
        """Bold markup becomes a bold Text run."""
        nodes = html_to_nodes("<p>Hello <b>world</b></p>")
        assert nodes == [Paragraph(children=[Text("Hello "), Text("world", TextFormat.BOLD)])]

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_headings(self, level):
        """h1-h6 become headings of the same level."""
        nodes = html_to_nodes(f"<h{level}>Title</h{level}>")
        assert nodes == [Heading(level=level, children=[Text("Title")])]

    def test_blockquote(self):
        """blockquote becomes a Quote."""
        assert html_to_nodes("<blockquote>quoted</blockquote>") == [Quote(children=[Text("quoted")])]

    def test_blockquote_paragraphs_joined_with_line_breaks(self):
        """Paragraphs inside a quote are flattened with line breaks between them."""
        nodes = html_to_nodes("<blockquote><p>a</p>\n<p>b</p></blockquote>")
        assert nodes == [Quote(children=[Text("a"), LineBreak(), Text("b")])]

    def test_divider(self):
        """hr becomes a Divider."""
        nodes = html_to_nodes("<p>a</p><hr><p>b</p>")
        assert [type(n) for n in nodes] == [Paragraph, Divider, Paragraph]

    def test_line_break(self):
        """br becomes a LineBreak inside the paragraph."""
        nodes = html_to_nodes("<p>a<br>b</p>")
        assert nodes == [Paragraph(children=[Text("a"), LineBreak(), Text("b")])]

    def test_font_size_heading_from_paste(self):
        """A large span is sanitized into a heading and imported as one."""
        nodes = html_to_nodes('<span style="font-size: 32px">Big</span>')
        assert nodes == [Heading(level=1, children=[Text("Big")])]

    def test_empty_markup(self):
        """Empty input gives no nodes."""
        assert html_to_nodes("") == []

    def test_script_never_imported(self):
        """Dangerous content is gone whether or not sanitization runs."""
        for sanitize in (True, False):
            nodes = html_to_nodes("<p>x</p><script>bad()</script>", sanitize=sanitize)
            assert nodes == [Paragraph(children=[Text("x")])]


@pytest.mark.unit
class TestInlineContent:
    """Tests for inline formatting and loose inline content."""

    def test_nested_formatting_ors_bits(self):
        """Nested format elements combine their bits."""
        nodes = html_to_nodes("<p><b><i>both</i></b></p>")
        assert nodes[0].children == [Text("both", TextFormat.BOLD | TextFormat.ITALIC)]

    @pytest.mark.parametrize(
        "tag,flag",
        [
            ("strong", TextFormat.BOLD),
            ("em", TextFormat.ITALIC),
            ("u", TextFormat.UNDERLINE),
            ("s", TextFormat.STRIKETHROUGH),
            ("del", TextFormat.STRIKETHROUGH),
            ("code", TextFormat.CODE),
        ],
    )
    def test_format_tags(self, tag, flag):
        """Each formatting element maps to its bit."""
        nodes = html_to_nodes(f"<p><{tag}>x</{tag}></p>")
        assert nodes[0].children == [Text("x", flag)]

    def test_adjacent_runs_merged(self):
        """Runs with the same mask merge into one Text."""
        nodes = html_to_nodes("<p><b>a</b><strong>b</strong>c</p>")
        assert nodes[0].children == [Text("ab", TextFormat.BOLD), Text("c")]

    def test_link_children_keep_formatting(self):
        """Link text carries the formatting found inside the anchor."""
        nodes = html_to_nodes('<p><a href="https://x.com">go <b>now</b></a></p>')
        assert nodes[0].children == [Link(url="https://x.com", children=[Text("go "), Text("now", TextFormat.BOLD)])]

    def test_link_without_href_unwrapped(self):
        """An anchor stripped of a dangerous href keeps only its text."""
        nodes = html_to_nodes('<p><a href="javascript:x()">click</a></p>')
        assert nodes[0].children == [Text("click")]

    def test_image(self):
        """img becomes an inline Image."""
        nodes = html_to_nodes('<p><img src="cat.png" alt="A cat"></p>')
        assert nodes[0].children == [Image(src="cat.png", alt_text="A cat")]

    def test_loose_inline_wrapped_in_paragraph(self):
        """Inline content outside any block becomes a paragraph."""
        nodes = html_to_nodes("hello <b>x</b>")
        assert nodes == [Paragraph(children=[Text("hello "), Text("x", TextFormat.BOLD)])]

    def test_inline_between_blocks(self):
        """Loose runs before and after a block each get a paragraph."""
        nodes = html_to_nodes("intro<p>para</p>tail")
        assert nodes == [
            Paragraph(children=[Text("intro")]),
            Paragraph(children=[Text("para")]),
            Paragraph(children=[Text("tail")]),
        ]

    def test_whitespace_between_blocks_ignored(self):
        """Indentation between blocks does not create empty paragraphs."""
        nodes = html_to_nodes("<p>a</p>\n   \n<p>b</p>")
        assert len(nodes) == 2

    def test_whitespace_collapsed(self):
        """Runs of whitespace collapse to one space."""
        nodes = html_to_nodes("<p>a \n\n  b</p>")
        assert nodes[0].children == [Text("a b")]

    def test_whitespace_kept_when_collapse_disabled(self):
        """Collapsing can be switched off."""
        options = HtmlImportOptions(collapse_whitespace=False)
        nodes = html_to_nodes("<p>a  b</p>", options=options)
        assert nodes[0].children == [Text("a  b")]


@pytest.mark.unit
class TestLists:
    """Tests for list conversion."""

    def test_bullet_list(self):
        """ul becomes a bullet list."""
        nodes = html_to_nodes("<ul><li>a</li><li>b</li></ul>")
        assert nodes == [
            List(kind="bullet", children=[ListItem(children=[Text("a")]), ListItem(children=[Text("b")])])
        ]

    def test_numbered_list(self):
        """ol becomes a numbered list."""
        nodes = html_to_nodes("<ol><li>one</li></ol>")
        assert nodes[0].kind == "number"

    def test_nested_list_lifted(self):
        """Items of a nested list follow their parent item in the same list."""
        nodes = html_to_nodes("<ul><li>a</li><li>b<ul><li>c</li></ul></li><li>d</li></ul>")
        assert len(nodes) == 1
        texts = [item.get_text_content() for item in nodes[0].children]
        assert texts == ["a", "b", "c", "d"]
        validate_tree(nodes[0])

    def test_list_item_paragraphs(self):
        """Paragraphs inside an item are separated by line breaks."""
        nodes = html_to_nodes("<ul><li><p>a</p><p>b</p></li></ul>")
        assert nodes[0].children == [ListItem(children=[Text("a"), LineBreak(), Text("b")])]

    def test_deeply_nested_lists_unsanitized(self):
        """Adversarial list nesting is capped even without sanitizing."""
        markup = "<ul>" * 3000 + "<li>x</li>" + "</ul>" * 3000
        nodes = html_to_nodes(markup, sanitize=False)
        assert nodes == [List(kind="bullet", children=[ListItem(children=[Text("x")])])]
        validate_tree(nodes[0])


@pytest.mark.unit
class TestCodeBlocks:
    """Tests for preformatted blocks."""

    def test_pre_becomes_code_block(self):
        """pre content is kept verbatim."""
        nodes = html_to_nodes("<pre>x = 1\n  y = 2</pre>")
        assert nodes == [CodeBlock(code="x = 1\n  y = 2", language="text")]

    def test_language_class_without_sanitizing(self):
        """A language-* class on the code element sets the language."""
        nodes = html_to_nodes('<pre><code class="language-python">print(1)</code></pre>', sanitize=False)
        assert nodes == [CodeBlock(code="print(1)", language="python")]

    def test_language_lost_after_sanitizing(self):
        """Sanitization drops class attributes, so the default language applies."""
        nodes = html_to_nodes('<pre><code class="language-python">print(1)</code></pre>')
        assert nodes[0].language == "text"

    def test_custom_default_language(self):
        """The default language is configurable."""
        options = HtmlImportOptions(default_code_language="plain")
        nodes = html_to_nodes("<pre>x</pre>", options=options)
        assert nodes[0].language == "plain"


@pytest.mark.unit
class TestTables:
    """Tests for table conversion."""

    def test_simple_table(self):
        """Rows and cells map one to one."""
        nodes = html_to_nodes("<table><tr><th>A</th><td>B</td></tr><tr><td>C</td><td>D</td></tr></table>")
        assert nodes == [
            Table(
                children=[
                    TableRow(children=[TableCell(children=[Text("A")]), TableCell(children=[Text("B")])]),
                    TableRow(children=[TableCell(children=[Text("C")]), TableCell(children=[Text("D")])]),
                ]
            )
        ]

    def test_sections_flattened(self):
        """thead and tbody rows are collected in order."""
        nodes = html_to_nodes(
            "<table><thead><tr><th>H</th></tr></thead><tbody><tr><td>1</td></tr><tr><td>2</td></tr></tbody></table>"
        )
        table = nodes[0]
        assert [row.get_text_content() for row in table.children] == ["H", "1", "2"]
        validate_tree(table)

    def test_spans_read_without_sanitizing(self):
        """colspan and rowspan survive when sanitization is skipped."""
        nodes = html_to_nodes('<table><tr><td colspan="2" rowspan="x">a</td></tr></table>', sanitize=False)
        cell = nodes[0].children[0].children[0]
        assert cell.colspan == 2
        assert cell.rowspan == 1

    def test_empty_table_skipped(self):
        """A table without cells produces nothing."""
        assert html_to_nodes("<table><tr></tr></table>") == []


@pytest.mark.unit
class TestImporterConfiguration:
    """Tests for importer construction and options."""

    def test_wrong_options_type(self):
        """Passing another component's options is rejected."""
        with pytest.raises(InvalidOptionsError):
            HtmlToAstConverter(SanitizerOptions())  # type: ignore[arg-type]

    def test_sanitize_argument_overrides_options(self):
        """The sanitize flag wins over the options field."""
        options = HtmlImportOptions(sanitize=True)
        nodes = html_to_nodes('<pre class="language-go">x</pre>', sanitize=False, options=options)
        assert nodes[0].language == "go"

    def test_imported_trees_are_valid(self):
        """Imported trees satisfy the structural invariants."""
        markup = (
            "<h1>T</h1><p>a <em>b</em></p><ul><li>x<ol><li>y</li></ol></li></ul>"
            "<table><tr><td>1</td></tr></table><blockquote>q</blockquote><hr><pre>c</pre>"
        )
        for node in html_to_nodes(markup):
            validate_tree(node)
