#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for markup sanitization and markup import.

This module defines options for the paste pipeline: reducing untrusted
clipboard markup to the safe vocabulary, and importing that markup into
document nodes.
"""
# src/scribex/options/html.py

from __future__ import annotations

from dataclasses import dataclass, field

from scribex.constants import (
    DEFAULT_HEADING_FONT_SIZE_THRESHOLDS,
    DEFAULT_HTML_PARSER,
    DEFAULT_IMPORTED_CODE_LANGUAGE,
    DEFAULT_SANITIZER_MAX_DEPTH,
    DEFAULT_STRIP_DANGEROUS_URLS,
    MAX_HEADING_LEVEL,
    MAX_SANITIZER_DEPTH,
)
from scribex.options.base import BaseOptions


@dataclass(frozen=True)
class SanitizerOptions(BaseOptions):
    """Configuration options for pasted markup sanitization.

    Parameters
    ----------
    heading_font_size_thresholds : tuple of (float, int), default ((32, 1), (24, 2), (18, 3))
        Pairs of (minimum pixel size, heading level) checked in order. A span,
        font or div whose inline ``font-size`` reaches a threshold becomes a
        heading of that level.
    strip_dangerous_urls : bool, default True
        Remove ``href``/``src`` attributes whose URL uses a dangerous scheme
        (``javascript:``, ``vbscript:``, ``data:text/html``, ``file:``).
    max_depth : int, default 256
        Element nesting depth after which remaining subtrees are flattened to
        their text. At most 512.
    html_parser : str, default "html.parser"
        BeautifulSoup tree builder used to parse the input markup.

    """

    heading_font_size_thresholds: tuple[tuple[float, int], ...] = field(
        default=DEFAULT_HEADING_FONT_SIZE_THRESHOLDS,
        metadata={
            "help": "Ordered (min_px, heading_level) pairs used to infer headings from font-size",
            "importance": "advanced",
        },
    )
    strip_dangerous_urls: bool = field(
        default=DEFAULT_STRIP_DANGEROUS_URLS,
        metadata={"help": "Drop href/src attributes that use dangerous URL schemes", "importance": "security"},
    )
    max_depth: int = field(
        default=DEFAULT_SANITIZER_MAX_DEPTH,
        metadata={"help": "Nesting depth beyond which subtrees are flattened to text", "importance": "security"},
    )
    html_parser: str = field(
        default=DEFAULT_HTML_PARSER,
        metadata={"help": "BeautifulSoup parser name", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate threshold levels and depth.

        Raises
        ------
        ValueError
            If a threshold maps to a level outside 1-6, a threshold size is not
            positive, or max_depth is outside 1-512.

        """
        super().__post_init__()
        for min_px, level in self.heading_font_size_thresholds:
            if not 1 <= level <= MAX_HEADING_LEVEL:
                raise ValueError(f"Heading threshold level must be 1-6, got {level}")
            if min_px <= 0:
                raise ValueError(f"Heading threshold size must be positive, got {min_px}")
        if not 0 < self.max_depth <= MAX_SANITIZER_DEPTH:
            raise ValueError(f"max_depth must be between 1 and {MAX_SANITIZER_DEPTH}, got {self.max_depth}")


@dataclass(frozen=True)
class HtmlImportOptions(BaseOptions):
    """Configuration options for importing sanitized markup into nodes.

    Parameters
    ----------
    default_code_language : str, default "text"
        Language for ``pre`` blocks without a ``language-*`` class.
    collapse_whitespace : bool, default True
        Collapse runs of whitespace in text to a single space.
    sanitize : bool, default True
        Run the sanitizer before importing.
    html_parser : str, default "html.parser"
        BeautifulSoup tree builder used to parse the markup.

    """

    default_code_language: str = field(
        default=DEFAULT_IMPORTED_CODE_LANGUAGE,
        metadata={"help": "Language assigned to code blocks without a language class", "importance": "core"},
    )
    collapse_whitespace: bool = field(
        default=True,
        metadata={"help": "Collapse whitespace runs in text content", "importance": "advanced"},
    )
    sanitize: bool = field(
        default=True,
        metadata={"help": "Sanitize markup before importing it", "importance": "security"},
    )
    html_parser: str = field(
        default=DEFAULT_HTML_PARSER,
        metadata={"help": "BeautifulSoup parser name", "importance": "advanced"},
    )
