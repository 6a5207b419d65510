from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)

DEFAULT_PROGRESS_PATH = Path.home() / ".neonmaze" / "progress.json"


class ProgressStore:
    """Stores the unlock frontier and best level scores per difficulty.

    File: ~/.neonmaze/progress.json. A missing or unreadable file is treated
    as a fresh start where every difficulty has only level 1 unlocked.
    """

    def __init__(
        self,
        difficulties: Iterable[str],
        total_levels: int,
        file_path: Optional[Path] = None,
    ) -> None:
        self._difficulties = list(difficulties)
        self._total_levels = total_levels
        self._file_path = file_path or DEFAULT_PROGRESS_PATH
        self._unlocked: Dict[str, int] = {}
        self._best_scores: Dict[str, Dict[int, int]] = {}
        self.load()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def unlocked(self, difficulty: str) -> int:
        """Highest playable level (1-based) for ``difficulty``."""
        return self._unlocked.get(difficulty, 1)

    def record(self) -> Dict[str, int]:
        return dict(self._unlocked)

    def unlock_next(self, difficulty: str, level: int) -> bool:
        """Advance the frontier when ``level`` is the frontier itself.

        Replaying an earlier level, or finishing the last one, leaves the
        record untouched. Returns True when the frontier moved.
        """
        current = self.unlocked(difficulty)
        if level != current or current >= self._total_levels:
            return False
        self._unlocked[difficulty] = current + 1
        logger.info("Unlocked %s level %d", difficulty, current + 1)
        self._save()
        return True

    def best_score(self, difficulty: str, level: int) -> int:
        return self._best_scores.get(difficulty, {}).get(level, 0)

    def record_score(self, difficulty: str, level: int, score: int) -> bool:
        """Keep ``score`` if it beats the stored best for the level."""
        scores = self._best_scores.setdefault(difficulty, {})
        if score <= scores.get(level, 0):
            return False
        scores[level] = score
        self._save()
        return True

    def reset(self) -> None:
        """Clear all progress back to level 1 everywhere."""
        self._unlocked = self._default_record()
        self._best_scores = {}
        self._save()

    def save(self) -> None:
        """Persist current state to disk (e.g. on app exit)."""
        self._save()

    def load(self) -> Dict[str, int]:
        """Re-read the file and return the unlock record."""
        self._unlocked, self._best_scores = self._load()
        return self.record()

    def _default_record(self) -> Dict[str, int]:
        return {key: 1 for key in self._difficulties}

    def _load(self) -> tuple[Dict[str, int], Dict[str, Dict[int, int]]]:
        unlocked = self._default_record()
        best: Dict[str, Dict[int, int]] = {}
        if not self._file_path.exists():
            return unlocked, best
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load progress from %s: %s", self._file_path, e)
            return unlocked, best
        if not isinstance(payload, dict):
            logger.warning("Ignoring malformed progress file %s", self._file_path)
            return unlocked, best

        raw_unlocked = payload.get("unlocked", {})
        if isinstance(raw_unlocked, dict):
            for key in self._difficulties:
                value = raw_unlocked.get(key)
                if value is None:
                    continue
                level = _as_level(value)
                if level is None:
                    logger.warning("Ignoring invalid unlock value %r for %s", value, key)
                    continue
                if 1 <= level <= self._total_levels:
                    unlocked[key] = level
                else:
                    logger.warning("Ignoring out-of-range unlock value %r for %s", value, key)

        raw_best = payload.get("best_scores", {})
        if isinstance(raw_best, dict):
            for key, levels in raw_best.items():
                if key not in unlocked or not isinstance(levels, dict):
                    continue
                scores: Dict[int, int] = {}
                for level, score in levels.items():
                    try:
                        scores[int(level)] = int(score)
                    except (TypeError, ValueError):
                        continue
                best[key] = scores
        return unlocked, best

    def _save(self) -> None:
        payload = {
            "unlocked": dict(self._unlocked),
            "best_scores": {
                key: {str(level): score for level, score in levels.items()}
                for key, levels in self._best_scores.items()
            },
        }
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save progress to %s: %s", self._file_path, e)


def _as_level(value: object) -> Optional[int]:
    """Whole-number level from JSON; booleans and fractional values are rejected."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None
