"""Tests for neonmaze.core.controls and neonmaze.core.motion – input and easing."""

from __future__ import annotations

import pytest

from neonmaze.core.controls import (
    DOWN,
    DRAG_THRESHOLD,
    LEFT,
    RIGHT,
    UP,
    direction_for_drag,
    direction_for_key,
)
from neonmaze.core.motion import SmoothedPosition


# ===========================================================================
# direction_for_key
# ===========================================================================

class TestDirectionForKey:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("up", UP),
            ("ArrowUp", UP),
            ("w", UP),
            ("W", UP),
            ("right", RIGHT),
            ("d", RIGHT),
            ("ArrowDown", DOWN),
            ("S", DOWN),
            ("left", LEFT),
            ("a", LEFT),
        ],
    )
    def test_known_keys(self, name, expected):
        assert direction_for_key(name) == expected

    @pytest.mark.parametrize("name", ["", "q", "space", "Enter", "1"])
    def test_unknown_keys(self, name):
        assert direction_for_key(name) is None

    def test_directions_are_unit_steps(self):
        for d in (UP, RIGHT, DOWN, LEFT):
            assert abs(d[0]) + abs(d[1]) == 1


# ===========================================================================
# direction_for_drag
# ===========================================================================

class TestDirectionForDrag:
    def test_below_threshold(self):
        assert direction_for_drag(DRAG_THRESHOLD, -DRAG_THRESHOLD) is None
        assert direction_for_drag(5, 3) is None

    def test_horizontal(self):
        assert direction_for_drag(31, 4) == RIGHT
        assert direction_for_drag(-45, 20) == LEFT

    def test_vertical(self):
        assert direction_for_drag(2, 31) == DOWN
        assert direction_for_drag(-10, -60) == UP

    def test_tie_prefers_vertical(self):
        assert direction_for_drag(40, 40) == DOWN

    def test_custom_threshold(self):
        assert direction_for_drag(15, 0, threshold=10) == RIGHT
        assert direction_for_drag(15, 0, threshold=20) is None


# ===========================================================================
# SmoothedPosition
# ===========================================================================

class TestSmoothedPosition:
    def test_step_closes_fraction_of_gap(self):
        p = SmoothedPosition(0, 0)
        assert p.step(100, 50) == pytest.approx((20.0, 10.0))
        assert p.step(100, 50) == pytest.approx((36.0, 18.0))

    def test_converges(self):
        p = SmoothedPosition(0, 0)
        for _ in range(60):
            p.step(40, 80)
        assert p.is_settled(40, 80)

    def test_snap(self):
        p = SmoothedPosition(3, 4)
        p.snap(120, 40)
        assert (p.x, p.y) == (120.0, 40.0)
        assert p.is_settled(120, 40)

    def test_factor_one_jumps(self):
        p = SmoothedPosition(factor=1.0)
        assert p.step(7, 9) == (7.0, 9.0)

    @pytest.mark.parametrize("factor", [0.0, -0.1, 1.5])
    def test_rejects_bad_factor(self, factor):
        with pytest.raises(ValueError):
            SmoothedPosition(factor=factor)
