from __future__ import annotations

import logging
import math
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from neonmaze.core.config import GameConfig
from neonmaze.core.maze import Grid, Side, generate
from neonmaze.core.progress import ProgressStore

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class SessionState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"


class MoveOutcome(Enum):
    MOVED = "moved"
    BLOCKED = "blocked"
    IGNORED = "ignored"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of one move command; ``position`` is where the player ends up."""

    outcome: MoveOutcome
    position: Position
    completed: bool = False


@dataclass(frozen=True)
class LevelResult:
    """Score summary emitted when the player reaches the goal."""

    difficulty: str
    level: int
    elapsed: int
    level_score: int
    total_score: int
    unlocked: bool


def level_score(level: int, elapsed: int) -> int:
    """Base of 100 per level plus a time bonus that drains 5 points a second."""
    return 100 * level + max(0, 300 - elapsed * 5)


class GameSession:
    """One attempt at one maze level.

    Lifecycle is NOT_STARTED -> RUNNING -> COMPLETED. Only a RUNNING
    session reacts to :meth:`move`; a completed session is never restarted,
    the caller builds a fresh one with :meth:`start_level` instead.
    """

    def __init__(
        self,
        config: GameConfig,
        progress: ProgressStore,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = config
        self._progress = progress
        self._clock = clock
        self._state = SessionState.NOT_STARTED
        self._difficulty = ""
        self._level = 0
        self._grid: Optional[Grid] = None
        self._player: Position = (0, 0)
        self._goal: Position = (0, 0)
        self._start_time = 0.0
        self._score = 0
        self._result: Optional[LevelResult] = None

    @classmethod
    def start_level(
        cls,
        config: GameConfig,
        progress: ProgressStore,
        difficulty: str,
        level: int,
        score: int = 0,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ) -> "GameSession":
        """Generate the maze for ``difficulty``/``level`` and return a running session.

        ``score`` is the cumulative score carried over from earlier levels.
        """
        session = cls(config, progress, clock=clock)
        session._begin(difficulty, level, score, seed=seed, rng=rng)
        return session

    def _begin(
        self,
        difficulty: str,
        level: int,
        score: int,
        seed: Optional[int],
        rng: Optional[random.Random],
    ) -> None:
        if not 1 <= level <= self._config.total_levels:
            raise ValueError(f"Level must be between 1 and {self._config.total_levels}, got {level}")
        cols, rows = self._config.get(difficulty).grid_size(level)
        self._grid = generate(cols, rows, seed=seed, rng=rng)
        self._difficulty = difficulty
        self._level = level
        self._player = (0, 0)
        self._goal = (cols - 1, rows - 1)
        self._score = score
        self._result = None
        self._start_time = self._clock()
        self._state = SessionState.RUNNING
        logger.info("Started %s level %d (%dx%d)", difficulty, level, cols, rows)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is SessionState.RUNNING

    @property
    def difficulty(self) -> str:
        return self._difficulty

    @property
    def level(self) -> int:
        return self._level

    @property
    def grid(self) -> Optional[Grid]:
        return self._grid

    @property
    def player(self) -> Position:
        return self._player

    @property
    def goal(self) -> Position:
        return self._goal

    @property
    def score(self) -> int:
        """Cumulative score including every level finished so far."""
        return self._score

    @property
    def start_time(self) -> float:
        return self._start_time

    @property
    def result(self) -> Optional[LevelResult]:
        return self._result

    def elapsed_seconds(self) -> int:
        """Whole seconds since the level started, frozen once it is completed."""
        if self._state is SessionState.NOT_STARTED:
            return 0
        if self._result is not None:
            return self._result.elapsed
        return int(math.floor(max(0.0, self._clock() - self._start_time)))

    def has_next_level(self) -> bool:
        return self._level < self._config.total_levels

    def move(self, dcol: int, drow: int) -> MoveResult:
        """Try to step the player one cell; walls block, a non-running session ignores."""
        if abs(dcol) + abs(drow) != 1:
            raise ValueError(f"Move must be one unit step along one axis, got ({dcol}, {drow})")
        if self._state is not SessionState.RUNNING or self._grid is None:
            return MoveResult(MoveOutcome.IGNORED, self._player)

        side = Side.from_delta(dcol, drow)
        col, row = self._player
        if self._grid.cell(col, row).has_wall(side):
            return MoveResult(MoveOutcome.BLOCKED, self._player)

        self._player = (col + dcol, row + drow)
        completed = self._check_win()
        return MoveResult(MoveOutcome.MOVED, self._player, completed=completed)

    def _check_win(self) -> bool:
        if self._player != self._goal:
            return False
        elapsed = int(math.floor(max(0.0, self._clock() - self._start_time)))
        earned = level_score(self._level, elapsed)

        unlocked = self._progress.unlock_next(self._difficulty, self._level)
        self._progress.record_score(self._difficulty, self._level, earned)

        # Score, result and state change together once the store is updated.
        self._score += earned
        self._result = LevelResult(
            difficulty=self._difficulty,
            level=self._level,
            elapsed=elapsed,
            level_score=earned,
            total_score=self._score,
            unlocked=unlocked,
        )
        self._state = SessionState.COMPLETED
        logger.info(
            "Completed %s level %d in %ds: +%d (total %d)",
            self._difficulty,
            self._level,
            elapsed,
            earned,
            self._score,
        )
        return True
