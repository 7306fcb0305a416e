"""Pytest configuration and shared fixtures for the scribex test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from scribex.ast import Heading, List, ListItem, Paragraph, Table, TableCell, TableRow, Text, TextFormat

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=30)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def sample_blocks():
    """Provide a small document covering the common block kinds."""
    return [
        Heading(level=1, children=[Text("Title")]),
        Paragraph(children=[Text("Some "), Text("bold", TextFormat.BOLD), Text(" text")]),
        List(kind="bullet", children=[ListItem(children=[Text("one")]), ListItem(children=[Text("two")])]),
        Table(
            children=[
                TableRow(children=[TableCell(children=[Text("A")]), TableCell(children=[Text("B")])]),
                TableRow(children=[TableCell(children=[Text("C")]), TableCell(children=[Text("D")])]),
            ]
        ),
    ]
