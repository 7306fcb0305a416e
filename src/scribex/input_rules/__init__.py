#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markdown-style shortcuts typed into a text node.

Typing ``# `` at the start of an empty paragraph turns it into a heading,
``- `` into a bullet list, ```` ``` ```` into a code block, and so on.
"""

from scribex.input_rules.engine import InputRuleEngine, find_matching_rule, try_match
from scribex.input_rules.rules import (
    CommandMenuTrigger,
    InputRule,
    RuleCallback,
    RuleMatch,
    TreeMutation,
    get_builtin_rules,
)

__all__ = [
    "InputRule",
    "RuleCallback",
    "RuleMatch",
    "TreeMutation",
    "CommandMenuTrigger",
    "get_builtin_rules",
    "find_matching_rule",
    "try_match",
    "InputRuleEngine",
]
