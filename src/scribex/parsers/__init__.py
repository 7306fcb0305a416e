#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers producing document nodes from Markdown and sanitized markup."""

from scribex.parsers.html import HtmlToAstConverter, html_to_nodes
from scribex.parsers.markdown import MarkdownParser, from_markdown, parse_inline

__all__ = [
    "HtmlToAstConverter",
    "html_to_nodes",
    "MarkdownParser",
    "from_markdown",
    "parse_inline",
]
