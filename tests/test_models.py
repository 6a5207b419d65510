"""Tests for neonmaze.ui.models – LevelState and level map states."""

from __future__ import annotations

from pathlib import Path

import pytest

from neonmaze.core.config import Difficulty
from neonmaze.core.progress import ProgressStore
from neonmaze.ui.models import LevelState, build_level_states


@pytest.fixture()
def easy() -> Difficulty:
    return Difficulty(key="easy", name="Easy", base_cols=8, base_rows=8, growth=1)


@pytest.fixture()
def store(tmp_path: Path) -> ProgressStore:
    return ProgressStore(["easy", "hard"], 5, file_path=tmp_path / "progress.json")


# ===========================================================================
# LevelState dataclass
# ===========================================================================

class TestLevelState:
    def test_defaults(self, easy: Difficulty):
        ls = LevelState(difficulty=easy, level=1, unlocked=True, completed=False)
        assert ls.is_current is False
        assert ls.best_score == 0

    def test_equality(self, easy: Difficulty):
        a = LevelState(difficulty=easy, level=2, unlocked=True, completed=True)
        b = LevelState(difficulty=easy, level=2, unlocked=True, completed=True)
        assert a == b

    def test_mutable(self, easy: Difficulty):
        ls = LevelState(difficulty=easy, level=1, unlocked=False, completed=False)
        ls.unlocked = True
        assert ls.unlocked is True


# ===========================================================================
# build_level_states
# ===========================================================================

class TestBuildLevelStates:
    def test_fresh_progress(self, easy: Difficulty, store: ProgressStore):
        states = build_level_states(easy, 5, store)
        assert [s.level for s in states] == [1, 2, 3, 4, 5]
        assert [s.unlocked for s in states] == [True, False, False, False, False]
        assert [s.is_current for s in states] == [True, False, False, False, False]
        assert not any(s.completed for s in states)

    def test_after_unlocks(self, easy: Difficulty, store: ProgressStore):
        store.unlock_next("easy", 1)
        store.unlock_next("easy", 2)
        states = build_level_states(easy, 5, store)
        assert [s.unlocked for s in states] == [True, True, True, False, False]
        assert [s.completed for s in states] == [True, True, False, False, False]
        assert states[2].is_current

    def test_last_level_completed_by_score(self, easy: Difficulty, store: ProgressStore):
        for level in range(1, 5):
            store.unlock_next("easy", level)
        store.record_score("easy", 5, 420)
        states = build_level_states(easy, 5, store)
        assert states[-1].completed
        assert states[-1].best_score == 420

    def test_unlock_all(self, easy: Difficulty, store: ProgressStore):
        states = build_level_states(easy, 5, store, unlock_all=True)
        assert all(s.unlocked for s in states)
        assert store.unlocked("easy") == 1
