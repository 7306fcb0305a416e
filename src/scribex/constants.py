#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the scribex library.

This module centralizes the hardcoded values, thresholds and tag vocabularies
used across scribex so they can be discovered and overridden through the
options classes.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Sanitizer Vocabulary - Allowed, stripped and rewritten tags
3. Sanitizer Defaults - Heading inference thresholds and limits
4. Markdown Defaults - Serializer and parser settings
5. Input Rule Defaults - Editor input rule settings
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ListKind = Literal["bullet", "number", "check"]
BulletMarker = Literal["-", "*"]
CodeFenceChar = Literal["`", "~"]
InputRuleType = Literal["heading", "quote", "list", "code", "divider", "custom"]
VideoProvider = Literal["youtube", "vimeo", "loom", "generic"]

# =============================================================================
# Sanitizer Vocabulary
# =============================================================================

# Tags that survive sanitization as themselves (attributes filtered)
ALLOWED_TAGS: frozenset[str] = frozenset(
    {
        "p",
        "br",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "blockquote",
        "strong",
        "em",
        "u",
        "s",
        "code",
        "pre",
        "ul",
        "ol",
        "li",
        "a",
        "img",
        "hr",
        "table",
        "thead",
        "tbody",
        "tr",
        "th",
        "td",
    }
)

# Element and all descendants removed, never unwrapped
STRIPPED_TAGS: frozenset[str] = frozenset({"script", "style", "iframe", "object", "noscript"})

# Legacy or non-semantic tags rewritten to their semantic equivalent
TAG_REWRITES: dict[str, str] = {
    "b": "strong",
    "i": "em",
    "del": "s",
    "strike": "s",
}

# Wrappers that are unwrapped unless their font-size implies a heading
UNWRAPPED_STYLE_TAGS: frozenset[str] = frozenset({"span", "font"})

# Per-tag attribute allowlist; every other attribute is dropped
ALLOWED_ATTRIBUTES: dict[str, frozenset[str]] = {
    "a": frozenset({"href"}),
    "img": frozenset({"src", "alt"}),
}

# Attributes holding URLs that are checked for dangerous schemes
URL_ATTRIBUTES: frozenset[str] = frozenset({"href", "src"})

DANGEROUS_SCHEMES: tuple[str, ...] = (
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "file:",
)

# =============================================================================
# Sanitizer Defaults
# =============================================================================

# (minimum pixel size, heading level), checked in order
DEFAULT_HEADING_FONT_SIZE_THRESHOLDS: tuple[tuple[float, int], ...] = ((32.0, 1), (24.0, 2), (18.0, 3))

PT_TO_PX: float = 4.0 / 3.0
EM_TO_PX: float = 16.0

DEFAULT_STRIP_DANGEROUS_URLS = True
DEFAULT_SANITIZER_MAX_DEPTH = 256
# Largest accepted max_depth; sanitizing recurses once per nesting level
MAX_SANITIZER_DEPTH = 512
DEFAULT_HTML_PARSER = "html.parser"

# =============================================================================
# Markdown Defaults
# =============================================================================

BLOCK_SEPARATOR = "\n\n"
DEFAULT_BULLET_MARKER: BulletMarker = "-"
DEFAULT_CODE_FENCE_CHAR: CodeFenceChar = "`"
DEFAULT_CODE_FENCE_MIN = 3
DEFAULT_RENDER_TASK_MARKERS = False
DEFAULT_VIDEO_TITLE = "Video"
# Nesting depth past which a subtree is written as plain text
MAX_RENDER_DEPTH = 64
MAX_HEADING_LEVEL = 6

# Language assigned to code blocks imported from markup without a language class
DEFAULT_IMPORTED_CODE_LANGUAGE = "text"

# =============================================================================
# Input Rule Defaults
# =============================================================================

DEFAULT_CODE_BLOCK_LANGUAGE = "javascript"
DEFAULT_COMMAND_MENU_TRIGGER = "/"
DEFAULT_ENABLE_COMMAND_MENU_TRIGGER = True

# =============================================================================
# Callout Defaults
# =============================================================================

DEFAULT_CALLOUT_EMOJI = "\U0001f4a1"
DEFAULT_CALLOUT_COLOR_PRESET = "default"

# AI context flow: number of trailing blocks serialized as context
DEFAULT_CONTEXT_WINDOW_SIZE = 3
