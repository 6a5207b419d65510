"""Tests for neonmaze.ui.colors – color blending and constants."""

from __future__ import annotations

import pytest

from neonmaze.ui.colors import NeonColors, blend_hex


# ===========================================================================
# NeonColors – constants exist
# ===========================================================================

class TestNeonColors:
    @pytest.mark.parametrize("name", ["BG_TOP", "BG_BOTTOM", "WALL", "PLAYER", "GOAL", "LOCKED", "COMPLETED"])
    def test_hex_constants(self, name):
        value = getattr(NeonColors, name)
        assert value.startswith("#")
        assert len(value) == 7

    def test_panel_bg_is_rgba(self):
        assert NeonColors.PANEL_BG.startswith("rgba(")


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        assert result == "#7F7F7F"

    def test_clamps_t(self):
        assert blend_hex("#000000", "#FFFFFF", 2.0) == "#FFFFFF"
        assert blend_hex("#000000", "#FFFFFF", -1.0) == "#000000"

    def test_strips_whitespace(self):
        assert blend_hex("  #00FFFF ", "#00FFFF", 0.3) == "#00FFFF"

    @pytest.mark.parametrize("a,b", [("red", "#000000"), ("#FFF", "#000000"), ("#GG0000", "#000000")])
    def test_invalid_input_returns_a(self, a, b):
        assert blend_hex(a, b, 0.5) == a.strip()
