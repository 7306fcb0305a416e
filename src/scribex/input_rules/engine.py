#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/input_rules/engine.py
"""Input rule matching.

:func:`find_matching_rule` and :func:`try_match` are stateless.
:class:`InputRuleEngine` adds the per-editor state: the rule list and
whether an IME composition is in progress.

"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional, Sequence, Union

from scribex.ast.nodes import Text
from scribex.exceptions import InputRuleError
from scribex.input_rules.rules import CommandMenuTrigger, InputRule, RuleMatch, TreeMutation, get_builtin_rules
from scribex.options.base import validate_options_type
from scribex.options.input_rules import InputRuleOptions

logger = logging.getLogger(__name__)


def find_matching_rule(current_text: str, rules: Iterable[InputRule]) -> tuple[InputRule, re.Match[str]] | None:
    """Return the first rule whose pattern matches all of ``current_text``.

    Parameters
    ----------
    current_text : str
        Full content of the text node
    rules : iterable of InputRule
        Rules in priority order

    Returns
    -------
    tuple of (InputRule, re.Match) or None
        The winning rule and its match, or None when nothing matches

    """
    for rule in rules:
        match = rule.pattern.fullmatch(current_text)
        if match is not None:
            return rule, match
    return None


def try_match(current_text: str, rules: Sequence[InputRule], text_node: Optional[Text] = None) -> RuleMatch | None:
    """Match ``current_text`` against ``rules`` and run the winning rule.

    The text node's content is cleared before the rule's callback runs, so
    the new block never inherits the trigger characters.

    Parameters
    ----------
    current_text : str
        Full content of the text node
    rules : sequence of InputRule
        Rules in priority order
    text_node : Text or None, default = None
        The live text node; a fresh one is used when None

    Returns
    -------
    RuleMatch or None
        The fired rule, or None when no rule matches

    Raises
    ------
    InputRuleError
        If a rule's callback does not return a TreeMutation

    """
    found = find_matching_rule(current_text, rules)
    if found is None:
        return None

    rule, match = found
    if text_node is None:
        text_node = Text()
    text_node.content = ""

    mutation = rule.on_match(match, text_node)
    if not isinstance(mutation, TreeMutation):
        raise InputRuleError(
            f"Input rule {rule.name or rule.pattern.pattern!r} returned {type(mutation).__name__}, "
            "expected TreeMutation",
            rule_name=rule.name or None,
        )

    logger.debug(f"Input rule {rule.name or rule.pattern.pattern!r} fired")
    return RuleMatch(rule=rule, match=match, mutation=mutation)


class InputRuleEngine:
    """Per-editor input rule state.

    Parameters
    ----------
    rules : sequence of InputRule or None, default = None
        Caller rules, appended after the built-ins
    options : InputRuleOptions or None, default = None
        Engine configuration

    Examples
    --------
        >>> engine = InputRuleEngine()
        >>> node = Text("# ")
        >>> result = engine.on_text_change(node)
        >>> result.rule.name, node.content
        ('heading1', '')

    """

    def __init__(self, rules: Optional[Sequence[InputRule]] = None, options: Optional[InputRuleOptions] = None):
        """Initialize the engine with the built-ins followed by ``rules``."""
        options = options or InputRuleOptions()
        validate_options_type(options, InputRuleOptions, "InputRuleEngine")
        self.options: InputRuleOptions = options
        self.rules: list[InputRule] = get_builtin_rules(options)
        self.rules.extend(rules or [])
        self._composing = False

    @property
    def is_composing(self) -> bool:
        """Whether an IME composition is in progress."""
        return self._composing

    def composition_start(self) -> None:
        """Suspend matching until :meth:`composition_end`."""
        self._composing = True

    def composition_end(self) -> None:
        """Resume matching on the next text change."""
        self._composing = False

    def register_rule(self, rule: InputRule) -> None:
        """Append ``rule`` after the existing rules."""
        self.rules.append(rule)

    def on_text_change(self, text_node: Text, sibling_count: int = 1) -> Union[RuleMatch, CommandMenuTrigger, None]:
        """Evaluate the rules after the content of ``text_node`` changed.

        Parameters
        ----------
        text_node : Text
            The text node being typed into
        sibling_count : int, default 1
            Number of children of the paragraph holding ``text_node``

        Returns
        -------
        RuleMatch, CommandMenuTrigger or None
            A fired rule, a request to open the command menu, or None

        """
        if self._composing:
            return None

        text = text_node.content
        if (
            self.options.enable_command_menu_trigger
            and text == self.options.command_menu_trigger
            and sibling_count == 1
        ):
            return CommandMenuTrigger(trigger=text)

        return try_match(text, self.rules, text_node)


__all__ = ["find_matching_rule", "try_match", "InputRuleEngine"]
