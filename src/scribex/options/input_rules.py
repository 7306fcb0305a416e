#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the input rule engine."""
# src/scribex/options/input_rules.py

from __future__ import annotations

from dataclasses import dataclass, field

from scribex.constants import (
    DEFAULT_CODE_BLOCK_LANGUAGE,
    DEFAULT_COMMAND_MENU_TRIGGER,
    DEFAULT_ENABLE_COMMAND_MENU_TRIGGER,
)
from scribex.options.base import BaseOptions


@dataclass(frozen=True)
class InputRuleOptions(BaseOptions):
    """Configuration options for the input rule engine.

    Parameters
    ----------
    default_code_language : str, default "javascript"
        Language of the empty code block created by the ```` ``` ```` rule.
    enable_command_menu_trigger : bool, default True
        Treat the command menu trigger in an otherwise empty paragraph as a
        request to open the command menu.
    command_menu_trigger : str, default "/"
        The reserved trigger text.

    """

    default_code_language: str = field(
        default=DEFAULT_CODE_BLOCK_LANGUAGE,
        metadata={"help": "Language for code blocks created by the ``` rule", "importance": "core"},
    )
    enable_command_menu_trigger: bool = field(
        default=DEFAULT_ENABLE_COMMAND_MENU_TRIGGER,
        metadata={"help": "Signal the command menu on the reserved trigger", "importance": "core"},
    )
    command_menu_trigger: str = field(
        default=DEFAULT_COMMAND_MENU_TRIGGER,
        metadata={"help": "Reserved command menu trigger text", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the trigger text.

        Raises
        ------
        ValueError
            If the command menu trigger is empty.

        """
        super().__post_init__()
        if not self.command_menu_trigger:
            raise ValueError("command_menu_trigger must not be empty")
