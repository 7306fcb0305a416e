#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/callouts.py
"""Callout color presets.

Each preset pairs an identifier with a label, a default emoji and the raw
background and border swatch colors. The identifier is what a
:class:`~scribex.ast.nodes.Callout` stores in ``color_preset``.
"""

from __future__ import annotations

from dataclasses import dataclass

from scribex.constants import DEFAULT_CALLOUT_COLOR_PRESET


@dataclass(frozen=True)
class CalloutPreset:
    """A callout color preset.

    Parameters
    ----------
    id : str
        Unique identifier used in serialization
    label : str
        Human-readable label
    emoji : str
        Default emoji for the preset
    bg_swatch : str
        Background color
    border_swatch : str
        Border accent color

    """

    id: str
    label: str
    emoji: str
    bg_swatch: str
    border_swatch: str


_VARIATION_SELECTOR = "\ufe0f"

DEFAULT_CALLOUT_PRESETS: tuple[CalloutPreset, ...] = (
    CalloutPreset("default", "Default", "\U0001f4a1", "#f1f1ef", "#d4d4d4"),
    CalloutPreset("info", "Info", "\u2139\ufe0f", "#ddebf1", "#0b6e99"),
    CalloutPreset("warning", "Warning", "\u26a0\ufe0f", "#fbf3db", "#dfab01"),
    CalloutPreset("error", "Error", "\U0001f6ab", "#fbe4e4", "#e03e3e"),
    CalloutPreset("success", "Success", "\u2705", "#ddedea", "#0f7b6c"),
    CalloutPreset("purple", "Note", "\U0001f4dd", "#eae4f2", "#6940a5"),
)


def get_callout_preset(
    preset_id: str, presets: tuple[CalloutPreset, ...] = DEFAULT_CALLOUT_PRESETS
) -> CalloutPreset | None:
    """Return the preset with ``preset_id``, or None if there is none."""
    for preset in presets:
        if preset.id == preset_id:
            return preset
    return None


def find_preset_by_emoji(emoji: str, presets: tuple[CalloutPreset, ...] = DEFAULT_CALLOUT_PRESETS) -> CalloutPreset:
    """Return the first preset whose emoji is ``emoji``.

    The variation selector (U+FE0F) is ignored when comparing, so U+2139
    finds the info preset with or without it. Unknown emoji fall back to
    the default preset.

    Parameters
    ----------
    emoji : str
        Emoji to look up
    presets : tuple of CalloutPreset, optional
        Presets to search

    Returns
    -------
    CalloutPreset
        Matching preset, or the default preset

    """
    wanted = emoji.replace(_VARIATION_SELECTOR, "")
    for preset in presets:
        if preset.emoji.replace(_VARIATION_SELECTOR, "") == wanted:
            return preset
    fallback = get_callout_preset(DEFAULT_CALLOUT_COLOR_PRESET, presets)
    return fallback if fallback is not None else presets[0]


__all__ = ["CalloutPreset", "DEFAULT_CALLOUT_PRESETS", "get_callout_preset", "find_preset_by_emoji"]
