#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/input_rules/rules.py
"""Input rule types and the built-in rule set.

An input rule pairs a pattern with a callback. When the whole content of the
text node being typed into matches the pattern, the callback describes the
block that replaces the one holding the text node.

Examples
--------
Register a custom rule that turns ``!! `` into a callout:

    >>> from scribex.ast import Callout, Paragraph
    >>> rule = InputRule(
    ...     pattern=re.compile(r"!! "),
    ...     on_match=lambda match, node: TreeMutation([Callout(children=[Paragraph()])], cursor_path=(0, 0)),
    ...     name="callout",
    ... )

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from scribex.ast.nodes import CodeBlock, Divider, Heading, List, ListItem, Node, Paragraph, Quote, Text
from scribex.constants import InputRuleType, ListKind
from scribex.options.base import validate_options_type
from scribex.options.input_rules import InputRuleOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeMutation:
    """Description of the change an input rule makes.

    Parameters
    ----------
    nodes : list of Node
        Blocks that replace the block holding the matched text node
    cursor_path : tuple of int, default = (0,)
        Index into ``nodes`` and then into descendants' children, naming the
        node whose end receives the selection
    auto_focus : bool, default = False
        Ask the runtime to focus the new block's own editor

    """

    nodes: list[Node]
    cursor_path: tuple[int, ...] = (0,)
    auto_focus: bool = False


# on_match receives the pattern match and the (already cleared) text node
RuleCallback = Callable[[re.Match[str], Text], TreeMutation]


@dataclass(frozen=True)
class InputRule:
    """A pattern-triggered structural transform.

    Parameters
    ----------
    pattern : re.Pattern
        Pattern that must match the node's entire text content
    on_match : callable
        ``(match, text_node) -> TreeMutation``
    rule_type : {"heading", "quote", "list", "code", "divider", "custom"}, default "custom"
        Category of the rule
    name : str, default ""
        Identifier used in logs and errors

    """

    pattern: re.Pattern[str]
    on_match: RuleCallback
    rule_type: InputRuleType = "custom"
    name: str = ""


@dataclass(frozen=True)
class RuleMatch:
    """A fired rule together with its match and mutation."""

    rule: InputRule
    match: re.Match[str]
    mutation: TreeMutation


@dataclass(frozen=True)
class CommandMenuTrigger:
    """Signal that the command menu should open.

    Parameters
    ----------
    trigger : str, default "/"
        The trigger text that was typed

    """

    trigger: str = field(default="/")


def _heading_rule(level: int) -> InputRule:
    def on_match(match: re.Match[str], text_node: Text) -> TreeMutation:
        return TreeMutation(nodes=[Heading(level=level)])

    return InputRule(
        pattern=re.compile(rf"^{'#' * level} $"),
        on_match=on_match,
        rule_type="heading",
        name=f"heading{level}",
    )


def _list_rule(pattern: str, kind: ListKind, name: str, checked: Optional[bool] = None) -> InputRule:
    def on_match(match: re.Match[str], text_node: Text) -> TreeMutation:
        item = ListItem(checked=checked)
        return TreeMutation(nodes=[List(kind=kind, children=[item])], cursor_path=(0, 0))

    return InputRule(pattern=re.compile(pattern), on_match=on_match, rule_type="list", name=name)


def get_builtin_rules(options: Optional[InputRuleOptions] = None) -> list[InputRule]:
    """Return the built-in input rules in priority order.

    Parameters
    ----------
    options : InputRuleOptions or None, default = None
        Supplies the language of blocks created by the code rule

    Returns
    -------
    list of InputRule
        Heading 1-3, quote, bullet, numbered, unchecked and checked check
        list, divider and code block rules

    """
    options = options or InputRuleOptions()
    validate_options_type(options, InputRuleOptions, "get_builtin_rules")
    code_language = options.default_code_language

    def quote(match: re.Match[str], text_node: Text) -> TreeMutation:
        return TreeMutation(nodes=[Quote()])

    def divider(match: re.Match[str], text_node: Text) -> TreeMutation:
        # A divider cannot hold the cursor
        return TreeMutation(nodes=[Divider(), Paragraph()], cursor_path=(1,))

    def code_block(match: re.Match[str], text_node: Text) -> TreeMutation:
        return TreeMutation(
            nodes=[CodeBlock(code="", language=code_language), Paragraph()],
            cursor_path=(1,),
            auto_focus=True,
        )

    return [
        _heading_rule(1),
        _heading_rule(2),
        _heading_rule(3),
        InputRule(pattern=re.compile(r"^> $"), on_match=quote, rule_type="quote", name="quote"),
        _list_rule(r"^[-*] $", "bullet", "bullet_list"),
        _list_rule(r"^1\. $", "number", "numbered_list"),
        _list_rule(r"^\[\] $", "check", "check_list", checked=False),
        _list_rule(r"^\[x\] $", "check", "checked_list", checked=True),
        InputRule(pattern=re.compile(r"^---$"), on_match=divider, rule_type="divider", name="divider"),
        InputRule(pattern=re.compile(r"^```$"), on_match=code_block, rule_type="code", name="code_block"),
    ]


__all__ = [
    "TreeMutation",
    "InputRule",
    "RuleMatch",
    "CommandMenuTrigger",
    "RuleCallback",
    "get_builtin_rules",
]
