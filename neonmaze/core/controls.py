"""Translate raw key names and drag gestures into unit move directions."""

from __future__ import annotations

from typing import Optional, Tuple

Direction = Tuple[int, int]

UP: Direction = (0, -1)
RIGHT: Direction = (1, 0)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)

DRAG_THRESHOLD = 30

_KEY_DIRECTIONS = {
    "up": UP,
    "arrowup": UP,
    "w": UP,
    "right": RIGHT,
    "arrowright": RIGHT,
    "d": RIGHT,
    "down": DOWN,
    "arrowdown": DOWN,
    "s": DOWN,
    "left": LEFT,
    "arrowleft": LEFT,
    "a": LEFT,
}


def direction_for_key(name: str) -> Optional[Direction]:
    """Arrow keys and WASD, case-insensitive. Anything else returns None."""
    return _KEY_DIRECTIONS.get(name.strip().lower())


def direction_for_drag(dx: float, dy: float, threshold: float = DRAG_THRESHOLD) -> Optional[Direction]:
    """Dominant-axis direction once a drag has travelled past ``threshold`` pixels."""
    if abs(dx) <= threshold and abs(dy) <= threshold:
        return None
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP
