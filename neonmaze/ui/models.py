"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from neonmaze.core.config import Difficulty
from neonmaze.core.progress import ProgressStore


@dataclass
class LevelState:
    """UI state for a single level button: unlock status, completion, and best score."""

    difficulty: Difficulty
    level: int
    unlocked: bool
    completed: bool
    is_current: bool = False
    best_score: int = 0


def build_level_states(
    difficulty: Difficulty,
    total_levels: int,
    progress: ProgressStore,
    unlock_all: bool = False,
) -> List[LevelState]:
    """One state per level; levels below the frontier or with a score count as completed."""
    frontier = progress.unlocked(difficulty.key)
    states: List[LevelState] = []
    for level in range(1, total_levels + 1):
        best = progress.best_score(difficulty.key, level)
        states.append(
            LevelState(
                difficulty=difficulty,
                level=level,
                unlocked=unlock_all or level <= frontier,
                completed=level < frontier or best > 0,
                is_current=level == frontier,
                best_score=best,
            )
        )
    return states
