#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/utils/__init__.py
"""Utility modules for the scribex package.

This package contains the paste sanitizer, inline style helpers and video
embed URL parsing.
"""

from scribex.utils.html_sanitizer import font_size_to_heading_level, is_url_safe, sanitize_html
from scribex.utils.style import (
    get_inline_style_property,
    merge_inline_style,
    parse_inline_style,
    serialize_inline_style,
)
from scribex.utils.video_embeds import VideoEmbedInfo, parse_video_embed

__all__ = [
    "sanitize_html",
    "font_size_to_heading_level",
    "is_url_safe",
    "parse_inline_style",
    "serialize_inline_style",
    "merge_inline_style",
    "get_inline_style_property",
    "VideoEmbedInfo",
    "parse_video_embed",
]
