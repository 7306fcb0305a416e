#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for tree utilities."""

import pytest

from scribex.ast import (
    Link,
    List,
    ListItem,
    Paragraph,
    Root,
    Table,
    TableCell,
    TableRow,
    Text,
    TextFormat,
    iter_nodes,
    merge_adjacent_text,
    validate_tree,
)
from scribex.ast.utils import get_node_children
from scribex.exceptions import ValidationError


@pytest.mark.unit
class TestIterNodes:
    """Tests for pre-order traversal."""

    def test_pre_order(self):
        """Parents come before children, siblings in order."""
        a, b, c = Text("a"), Text("b"), Text("c")
        link = Link(url="u", children=[b])
        para = Paragraph(children=[a, link, c])
        root = Root(children=[para])
        assert list(iter_nodes(root)) == [root, para, a, link, b, c]

    def test_deep_tree(self):
        """Traversal does not recurse."""
        node = Paragraph()
        root = node
        for _ in range(5000):
            child = Paragraph()
            node.children.append(child)
            node = child
        assert sum(1 for _ in iter_nodes(root)) == 5001

    def test_leaf_has_no_children(self):
        """Leaves report an empty child list."""
        assert get_node_children(Text("x")) == []


@pytest.mark.unit
class TestMergeAdjacentText:
    """Tests for text run merging."""

    def test_same_mask_merged(self):
        """Neighbours with equal masks become one run."""
        nodes = [Text("a"), Text("b"), Text("c", TextFormat.BOLD), Text("d", TextFormat.BOLD)]
        assert merge_adjacent_text(nodes) == [Text("ab"), Text("cd", TextFormat.BOLD)]

    def test_empty_text_dropped(self):
        """Empty runs disappear."""
        assert merge_adjacent_text([Text(""), Text("a"), Text("")]) == [Text("a")]

    def test_non_text_breaks_runs(self):
        """Other nodes separate runs."""
        link = Link(url="u")
        assert merge_adjacent_text([Text("a"), link, Text("b")]) == [Text("a"), link, Text("b")]

    def test_inputs_untouched(self):
        """The original nodes are not modified."""
        first = Text("a")
        merge_adjacent_text([first, Text("b")])
        assert first.content == "a"


@pytest.mark.unit
class TestValidateTree:
    """Tests for structural checks."""

    def test_valid_tree(self, sample_blocks):
        """A well-formed document passes."""
        validate_tree(Root(children=sample_blocks))

    def test_list_child_must_be_item(self):
        """Lists hold only items."""
        with pytest.raises(ValidationError):
            validate_tree(List(children=[Paragraph()]))

    def test_table_child_must_be_row(self):
        """Tables hold only rows."""
        with pytest.raises(ValidationError):
            validate_tree(Table(children=[TableCell()]))

    def test_row_needs_cells(self):
        """Rows hold at least one cell."""
        with pytest.raises(ValidationError):
            validate_tree(Table(children=[TableRow()]))

    def test_row_child_must_be_cell(self):
        """Rows hold only cells."""
        with pytest.raises(ValidationError):
            validate_tree(TableRow(children=[Text("x")]))

    def test_shared_node_rejected(self):
        """A node may appear only once."""
        shared = Text("x")
        with pytest.raises(ValidationError):
            validate_tree(Paragraph(children=[shared, shared]))

    def test_cycle_rejected(self):
        """A node containing itself is rejected rather than looping."""
        item = ListItem()
        item.children.append(item)
        with pytest.raises(ValidationError):
            validate_tree(List(children=[item]))
