"""scribex - Content transformations for a block-based rich-text editor.

scribex holds the pure, synchronous transformations that sit between an
editor runtime and the outside world:

- Paste sanitization reduces clipboard markup to a safe tag vocabulary
- The markup importer turns sanitized markup into document nodes
- Input rules turn typed shortcuts such as ``# `` into structural blocks
- The Markdown codec converts document nodes to and from Markdown, e.g. for
  exchanging text with a writing assistant

No component keeps process-wide state, so independent editors can call them
concurrently.

Examples
--------
Sanitize and import a paste:

    >>> from scribex import html_to_nodes, sanitize_html
    >>> sanitize_html('<b onclick="x()">Hi</b>')
    '<strong>Hi</strong>'
    >>> html_to_nodes("<h2>Title</h2><p>Body</p>")[0].level
    2

Round-trip Markdown:

    >>> from scribex import from_markdown, to_markdown
    >>> to_markdown(from_markdown("# Title\\n\\n**bold** text"))
    '# Title\\n\\n**bold** text'

See Also
--------
scribex.ast : Document node definitions and utilities
scribex.input_rules : Typed shortcut rules

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from scribex.api import build_context_markdown
from scribex.ast.nodes import (
    Callout,
    CodeBlock,
    Divider,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Mention,
    Node,
    Paragraph,
    Quote,
    Root,
    Table,
    TableCell,
    TableRow,
    Text,
    TextFormat,
    Video,
)
from scribex.exceptions import (
    InputRuleError,
    InvalidOptionsError,
    ScribexError,
    SerializationError,
    ValidationError,
)
from scribex.input_rules import (
    CommandMenuTrigger,
    InputRule,
    InputRuleEngine,
    RuleMatch,
    TreeMutation,
    get_builtin_rules,
    try_match,
)
from scribex.logging_utils import configure_logging, reset_logging
from scribex.options import (
    HtmlImportOptions,
    InputRuleOptions,
    MarkdownParserOptions,
    MarkdownRendererOptions,
    SanitizerOptions,
)
from scribex.parsers.html import html_to_nodes
from scribex.parsers.markdown import from_markdown, parse_inline
from scribex.renderers.markdown import to_markdown
from scribex.utils.html_sanitizer import sanitize_html

__all__ = [
    "__version__",
    # Transformations
    "sanitize_html",
    "html_to_nodes",
    "to_markdown",
    "from_markdown",
    "parse_inline",
    "build_context_markdown",
    # Input rules
    "try_match",
    "get_builtin_rules",
    "InputRuleEngine",
    "InputRule",
    "RuleMatch",
    "TreeMutation",
    "CommandMenuTrigger",
    # Logging
    "configure_logging",
    "reset_logging",
    # Nodes
    "Node",
    "TextFormat",
    "Root",
    "Paragraph",
    "Heading",
    "Quote",
    "Divider",
    "List",
    "ListItem",
    "Table",
    "TableRow",
    "TableCell",
    "CodeBlock",
    "Callout",
    "Video",
    "Text",
    "Link",
    "Image",
    "Mention",
    "LineBreak",
    # Options
    "SanitizerOptions",
    "HtmlImportOptions",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
    "InputRuleOptions",
    # Exceptions
    "ScribexError",
    "ValidationError",
    "InvalidOptionsError",
    "SerializationError",
    "InputRuleError",
]
