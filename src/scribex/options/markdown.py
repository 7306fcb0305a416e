#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing and rendering.

The defaults reproduce the editor's Markdown codec exactly. The parser's
extension flags recover constructs the serializer emits but the base parser
leaves as plain paragraphs (dividers, fenced code, tables, task markers,
callouts, links and images).
"""
# src/scribex/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field

from scribex.constants import (
    DEFAULT_BULLET_MARKER,
    DEFAULT_CODE_FENCE_CHAR,
    DEFAULT_CODE_FENCE_MIN,
    DEFAULT_IMPORTED_CODE_LANGUAGE,
    DEFAULT_RENDER_TASK_MARKERS,
    BulletMarker,
    CodeFenceChar,
)
from scribex.options.base import BaseOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseOptions):
    """Configuration options for Markdown-to-node parsing.

    Parameters
    ----------
    parse_code_fences : bool, default False
        Recognize fenced code blocks (which may contain blank lines).
    parse_dividers : bool, default False
        Recognize ``---`` blocks as dividers.
    parse_tables : bool, default False
        Recognize pipe tables with a separator row.
    parse_task_lists : bool, default False
        Recognize ``- [ ]`` / ``- [x]`` bullet lists as check lists.
    parse_callouts : bool, default False
        Recognize ``> [!emoji] ...`` blockquotes as callouts.
    parse_links : bool, default False
        Recognize inline ``[text](url)`` links.
    parse_images : bool, default False
        Recognize inline ``![alt](src)`` images.
    default_code_language : str, default "text"
        Language for fenced code blocks without an info string.

    """

    parse_code_fences: bool = field(
        default=False,
        metadata={"help": "Parse fenced code blocks", "importance": "core"},
    )
    parse_dividers: bool = field(
        default=False,
        metadata={"help": "Parse --- blocks as dividers", "importance": "core"},
    )
    parse_tables: bool = field(
        default=False,
        metadata={"help": "Parse pipe table syntax", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=False,
        metadata={"help": "Parse task list checkboxes (- [ ] and - [x])", "importance": "core"},
    )
    parse_callouts: bool = field(
        default=False,
        metadata={"help": "Parse > [!emoji] blockquotes as callouts", "importance": "core"},
    )
    parse_links: bool = field(
        default=False,
        metadata={"help": "Parse inline [text](url) links", "importance": "core"},
    )
    parse_images: bool = field(
        default=False,
        metadata={"help": "Parse inline ![alt](src) images", "importance": "core"},
    )
    default_code_language: str = field(
        default=DEFAULT_IMPORTED_CODE_LANGUAGE,
        metadata={"help": "Language for fenced code blocks without an info string", "importance": "advanced"},
    )

    @classmethod
    def extended(cls) -> MarkdownParserOptions:
        """Return options with every extension enabled."""
        return cls(
            parse_code_fences=True,
            parse_dividers=True,
            parse_tables=True,
            parse_task_lists=True,
            parse_callouts=True,
            parse_links=True,
            parse_images=True,
        )


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseOptions):
    r"""Markdown rendering options for converting nodes to Markdown text.

    Parameters
    ----------
    bullet_marker : {"-", "\*"}, default "-"
        Marker used for bullet and check list items.
    render_task_markers : bool, default False
        Emit ``[ ]`` / ``[x]`` after the marker of check list items.
    code_fence_char : {"`", "~"}, default "`"
        Character used for code block fences.
    code_fence_min : int, default 3
        Minimum fence length; longer fences are used when the code contains
        runs of the fence character.

    """

    bullet_marker: BulletMarker = field(
        default=DEFAULT_BULLET_MARKER,
        metadata={"help": "Bullet list marker", "choices": ["-", "*"], "importance": "core"},
    )
    render_task_markers: bool = field(
        default=DEFAULT_RENDER_TASK_MARKERS,
        metadata={"help": "Render [ ] / [x] markers for check list items", "importance": "core"},
    )
    code_fence_char: CodeFenceChar = field(
        default=DEFAULT_CODE_FENCE_CHAR,
        metadata={"help": "Code fence character", "choices": ["`", "~"], "importance": "advanced"},
    )
    code_fence_min: int = field(
        default=DEFAULT_CODE_FENCE_MIN,
        metadata={"help": "Minimum code fence length", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate marker choices and fence length.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.bullet_marker not in ("-", "*"):
            raise ValueError(f"bullet_marker must be '-' or '*', got {self.bullet_marker!r}")
        if self.code_fence_char not in ("`", "~"):
            raise ValueError(f"code_fence_char must be '`' or '~', got {self.code_fence_char!r}")
        if self.code_fence_min < 3:
            raise ValueError(f"code_fence_min must be at least 3, got {self.code_fence_min}")
