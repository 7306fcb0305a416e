#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/utils/html_sanitizer.py
"""Paste sanitization for arbitrary markup.

Reduces clipboard markup (word-processor exports, web pages) to a fixed safe
vocabulary of semantic tags so it can be imported into the document tree.

The sanitizer never mutates the parsed source tree. Each source node is
turned into a list of *new* nodes in a separate output soup, children first,
so a parent decides whether to drop, replace, keep or unwrap only after its
children are already clean. Deeply nested non-semantic wrappers therefore
collapse in a single pass.

Rules, in the order they are checked for an element:

- Comments, processing instructions, CDATA and doctypes are dropped
- ``script``, ``style``, ``iframe``, ``object`` and ``noscript`` are removed
  together with all of their descendants
- ``span`` and ``font`` become a heading when their ``font-size`` maps to one,
  otherwise they are unwrapped
- ``div`` becomes a heading when its ``font-size`` maps to one, otherwise a
  paragraph
- ``b``, ``i``, ``del`` and ``strike`` are rewritten to ``strong``, ``em`` and
  ``s``
- Allowed tags are kept with an attribute allowlist (``a[href]``,
  ``img[src, alt]``); everything else is unwrapped
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag
from bs4.exceptions import FeatureNotFound

from scribex.constants import (
    ALLOWED_ATTRIBUTES,
    ALLOWED_TAGS,
    DANGEROUS_SCHEMES,
    DEFAULT_HEADING_FONT_SIZE_THRESHOLDS,
    EM_TO_PX,
    PT_TO_PX,
    STRIPPED_TAGS,
    TAG_REWRITES,
    UNWRAPPED_STYLE_TAGS,
    URL_ATTRIBUTES,
)
from scribex.exceptions import ValidationError
from scribex.options.base import validate_options_type
from scribex.options.html import SanitizerOptions
from scribex.utils.style import get_inline_style_property

logger = logging.getLogger(__name__)

_FONT_SIZE_RE = re.compile(r"^([\d.]+)\s*(px|pt|em|rem)?$")

# Browsers ignore ASCII whitespace and control characters inside a scheme
_URL_IGNORED_CHARS_RE = re.compile(r"[\x00-\x20]+")


def font_size_to_heading_level(
    value: str, thresholds: tuple[tuple[float, int], ...] = DEFAULT_HEADING_FONT_SIZE_THRESHOLDS
) -> int | None:
    """Map a CSS ``font-size`` value to a heading level.

    The value is normalized to pixels (pt x 4/3, em and rem x 16, unitless is
    px) and compared against ``thresholds`` in order.

    Parameters
    ----------
    value : str
        The declared font size, e.g. ``"24px"``, ``"18pt"`` or ``"2em"``
    thresholds : tuple of (float, int), optional
        ``(minimum_px, heading_level)`` pairs, checked in order

    Returns
    -------
    int or None
        The heading level of the first threshold met, or None for body text
        and unparseable values

    Examples
    --------
        >>> font_size_to_heading_level("32px")
        1
        >>> font_size_to_heading_level("18pt")
        2
        >>> font_size_to_heading_level("14px") is None
        True

    """
    match = _FONT_SIZE_RE.match(value.strip().lower())
    if not match:
        return None

    try:
        size = float(match.group(1))
    except ValueError:
        return None

    unit = match.group(2) or "px"
    if unit == "pt":
        size *= PT_TO_PX
    elif unit in ("em", "rem"):
        size *= EM_TO_PX

    for minimum_px, level in thresholds:
        if size >= minimum_px:
            return level
    return None


def is_url_safe(url: str) -> bool:
    """Check if a URL is safe (no dangerous schemes).

    Parameters
    ----------
    url : str
        URL to validate

    Returns
    -------
    bool
        True if URL is safe, False if it uses a dangerous scheme

    Examples
    --------
    >>> is_url_safe("https://example.com")
    True

    >>> is_url_safe("javascript:alert('xss')")
    False

    >>> is_url_safe("java\\tscript:alert('xss')")
    False

    """
    if not url or not url.strip():
        return True

    normalized = _URL_IGNORED_CHARS_RE.sub("", url).lower()
    return not normalized.startswith(DANGEROUS_SCHEMES)


def _attribute_text(value: object) -> str:
    # bs4 returns multi-valued attributes as lists
    if isinstance(value, list):
        return " ".join(str(v) for v in value)
    return str(value)


class HtmlSanitizer:
    """Bottom-up markup sanitizer.

    Parameters
    ----------
    options : SanitizerOptions or None, default = None
        Sanitizer configuration; defaults are used when None

    Examples
    --------
        >>> HtmlSanitizer().sanitize('<b onclick="x()">hi</b>')
        '<strong>hi</strong>'

    """

    def __init__(self, options: Optional[SanitizerOptions] = None):
        """Initialize the sanitizer with options."""
        options = options or SanitizerOptions()
        validate_options_type(options, SanitizerOptions, "HtmlSanitizer")
        self.options: SanitizerOptions = options
        try:
            BeautifulSoup("", self.options.html_parser)
        except FeatureNotFound as e:
            raise ValidationError(
                f"Selected SanitizerOptions.html_parser not found: {e}",
                parameter_name="html_parser",
                parameter_value=self.options.html_parser,
                original_error=e,
            ) from e

    def sanitize(self, raw_markup: str) -> str:
        """Sanitize ``raw_markup`` and return the clean markup string.

        Parameters
        ----------
        raw_markup : str
            Arbitrary markup, e.g. clipboard ``text/html``

        Returns
        -------
        str
            Markup restricted to the safe vocabulary; ``""`` when nothing
            survives or the markup cannot be parsed

        """
        if not raw_markup:
            return ""

        try:
            source = BeautifulSoup(raw_markup, self.options.html_parser)
        except ParserRejectedMarkup as e:
            logger.debug(f"Markup parser rejected input, returning empty result: {e}")
            return ""

        output = BeautifulSoup("", self.options.html_parser)
        scope: Tag = source.body if source.body is not None else source

        container = output.new_tag("div")
        for child in list(scope.children):
            container.extend(self._sanitize_node(child, 0, output))
        return container.decode_contents()

    def _sanitize_node(self, node: PageElement, depth: int, output: BeautifulSoup) -> list[PageElement]:
        """Return the sanitized replacement nodes for ``node``.

        Parameters
        ----------
        node : PageElement
            Source node; never modified
        depth : int
            Element nesting depth of ``node``
        output : BeautifulSoup
            Soup that owns the new nodes

        Returns
        -------
        list of PageElement
            New nodes owned by the output soup, possibly empty

        """
        if isinstance(node, PreformattedString):
            return []
        if isinstance(node, NavigableString):
            return [NavigableString(str(node))]
        if not isinstance(node, Tag):
            return []

        name = node.name.lower()
        if name in STRIPPED_TAGS:
            logger.debug(f"Stripping <{name}> and its contents")
            return []

        if depth >= self.options.max_depth:
            logger.debug(f"Nesting depth {depth} reached at <{name}>, flattening subtree to text")
            text = self._flatten_text(node)
            return [NavigableString(text)] if text else []

        heading_level = self._heading_level_from_style(node)

        children: list[PageElement] = []
        for child in node.children:
            children.extend(self._sanitize_node(child, depth + 1, output))

        if name in UNWRAPPED_STYLE_TAGS:
            if heading_level is not None:
                return [self._new_tag(output, f"h{heading_level}", children)]
            return children

        if name == "div":
            return [self._new_tag(output, f"h{heading_level}" if heading_level is not None else "p", children)]

        name = TAG_REWRITES.get(name, name)
        if name in ALLOWED_TAGS:
            return [self._new_tag(output, name, children, self._filter_attributes(name, node))]

        logger.debug(f"Unwrapping disallowed <{name}>")
        return children

    def _heading_level_from_style(self, node: Tag) -> int | None:
        style = node.get("style")
        if not style:
            return None
        font_size = get_inline_style_property(_attribute_text(style).lower(), "font-size")
        if font_size is None:
            return None
        return font_size_to_heading_level(font_size, self.options.heading_font_size_thresholds)

    def _filter_attributes(self, name: str, node: Tag) -> dict[str, str]:
        """Keep only allowlisted attributes, dropping dangerous URLs."""
        allowed = ALLOWED_ATTRIBUTES.get(name)
        if not allowed:
            return {}

        attrs: dict[str, str] = {}
        for attr_name, attr_value in node.attrs.items():
            attr_name = attr_name.lower()
            if attr_name not in allowed:
                continue
            value = _attribute_text(attr_value)
            if attr_name in URL_ATTRIBUTES and self.options.strip_dangerous_urls and not is_url_safe(value):
                logger.debug(f"Dropping dangerous {attr_name} on <{name}>")
                continue
            attrs[attr_name] = value
        return attrs

    @staticmethod
    def _new_tag(
        output: BeautifulSoup, name: str, children: list[PageElement], attrs: Optional[dict[str, str]] = None
    ) -> Tag:
        tag = output.new_tag(name, attrs=attrs or {})
        tag.extend(children)
        return tag

    @staticmethod
    def _flatten_text(node: Tag) -> str:
        """Collect the text of a subtree without recursion.

        Text inside stripped-entirely elements and comments stays excluded.
        """
        parts: list[str] = []
        stack: list[PageElement] = [node]
        while stack:
            current = stack.pop()
            if isinstance(current, Tag):
                if current.name.lower() in STRIPPED_TAGS:
                    continue
                stack.extend(reversed(list(current.children)))
            elif isinstance(current, NavigableString) and not isinstance(current, PreformattedString):
                parts.append(str(current))
        return "".join(parts)


def sanitize_html(raw_markup: str, options: Optional[SanitizerOptions] = None) -> str:
    """Sanitize pasted markup to the safe tag vocabulary.

    This is a pure function: no network or file access, and it terminates on
    any finite input.

    Parameters
    ----------
    raw_markup : str
        Arbitrary markup string
    options : SanitizerOptions or None, default = None
        Sanitizer configuration

    Returns
    -------
    str
        Sanitized markup

    Examples
    --------
    >>> sanitize_html('<div style="font-size: 24px"><span>Title</span></div>')
    '<h2>Title</h2>'

    >>> sanitize_html("<p>Hi<script>alert(1)</script></p>")
    '<p>Hi</p>'

    """
    return HtmlSanitizer(options).sanitize(raw_markup)


__all__ = ["HtmlSanitizer", "sanitize_html", "font_size_to_heading_level", "is_url_safe"]
