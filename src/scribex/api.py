"""Top-level helpers wiring the scribex components together."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/scribex/api.py
import logging
from typing import Optional, Sequence

from scribex.ast.nodes import Node, Root
from scribex.constants import DEFAULT_CONTEXT_WINDOW_SIZE
from scribex.options.markdown import MarkdownRendererOptions
from scribex.renderers.markdown import to_markdown

logger = logging.getLogger(__name__)


def build_context_markdown(
    blocks: Sequence[Node] | Root,
    window_size: int = DEFAULT_CONTEXT_WINDOW_SIZE,
    options: Optional[MarkdownRendererOptions] = None,
) -> str:
    """Serialize the last few blocks of a document as Markdown context.

    This is what a writing assistant receives as the text surrounding the
    cursor.

    Parameters
    ----------
    blocks : sequence of Node or Root
        Blocks in document order; a Root contributes its children
    window_size : int, default 3
        Number of trailing blocks to include
    options : MarkdownRendererOptions or None, default = None
        Rendering options

    Returns
    -------
    str
        Markdown of the trailing ``window_size`` blocks, or ``""`` when the
        window is empty

    Raises
    ------
    ValueError
        If ``window_size`` is negative

    Examples
    --------
        >>> from scribex.ast import Paragraph, Text
        >>> blocks = [Paragraph(children=[Text(str(i))]) for i in range(5)]
        >>> build_context_markdown(blocks, window_size=2)
        '3\\n\\n4'

    """
    if window_size < 0:
        raise ValueError(f"window_size must be >= 0, got {window_size}")

    if isinstance(blocks, Root):
        blocks = blocks.children

    if window_size == 0 or not blocks:
        return ""

    window = list(blocks)[-window_size:]
    logger.debug(f"Building context from {len(window)} of {len(blocks)} blocks")
    return to_markdown(window, options)


__all__ = ["build_context_markdown"]
