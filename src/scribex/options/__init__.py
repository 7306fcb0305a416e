#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options classes for every configurable scribex component."""

from scribex.options.base import BaseOptions, CloneFrozenMixin, validate_options_type
from scribex.options.html import HtmlImportOptions, SanitizerOptions
from scribex.options.input_rules import InputRuleOptions
from scribex.options.markdown import MarkdownParserOptions, MarkdownRendererOptions

__all__ = [
    "BaseOptions",
    "CloneFrozenMixin",
    "validate_options_type",
    "SanitizerOptions",
    "HtmlImportOptions",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
    "InputRuleOptions",
]
