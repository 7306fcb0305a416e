#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for callout presets."""

import pytest

from scribex.callouts import DEFAULT_CALLOUT_PRESETS, CalloutPreset, find_preset_by_emoji, get_callout_preset


@pytest.mark.unit
class TestCalloutPresets:
    """Tests for preset lookup."""

    def test_preset_ids(self):
        """Six presets exist in a fixed order."""
        assert [preset.id for preset in DEFAULT_CALLOUT_PRESETS] == [
            "default",
            "info",
            "warning",
            "error",
            "success",
            "purple",
        ]

    def test_get_by_id(self):
        """Presets are found by id."""
        preset = get_callout_preset("purple")
        assert preset.label == "Note"
        assert preset.emoji == "\U0001f4dd"

    def test_get_unknown_id(self):
        """Unknown ids give None."""
        assert get_callout_preset("teal") is None

    @pytest.mark.parametrize("emoji", ["\u26a0\ufe0f", "\u26a0"])
    def test_find_ignores_variation_selector(self, emoji):
        """U+FE0F does not affect emoji matching."""
        assert find_preset_by_emoji(emoji).id == "warning"

    def test_find_unknown_falls_back(self):
        """Unknown emoji give the default preset."""
        assert find_preset_by_emoji("\U0001f40d").id == "default"

    def test_custom_presets(self):
        """Callers may search their own presets."""
        presets = (CalloutPreset("brand", "Brand", "\U0001f680", "#000", "#fff"),)
        assert find_preset_by_emoji("\U0001f680", presets).id == "brand"
        assert find_preset_by_emoji("\U0001f40d", presets).id == "brand"
