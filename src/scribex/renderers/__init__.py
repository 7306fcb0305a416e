#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/renderers/__init__.py
"""Renderers that turn document nodes into text formats."""

from scribex.renderers.markdown import MarkdownRenderer, to_markdown

__all__ = ["MarkdownRenderer", "to_markdown"]
