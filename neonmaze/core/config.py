from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "difficulties.yaml"


@dataclass(frozen=True)
class Difficulty:
    key: str
    name: str
    base_cols: int
    base_rows: int
    growth: float

    def grid_size(self, level: int) -> Tuple[int, int]:
        """Maze dimensions for ``level``: base plus floor(level * growth) on both axes."""
        extra = int(math.floor(level * self.growth))
        return self.base_cols + extra, self.base_rows + extra


class GameConfig:
    def __init__(self, difficulties: List[Difficulty], total_levels: int) -> None:
        if not difficulties:
            raise ValueError("At least one difficulty is required")
        if total_levels < 1:
            raise ValueError(f"total_levels must be positive, got {total_levels}")
        for difficulty in difficulties:
            cols, rows = difficulty.grid_size(1)
            # Start and goal must be distinct cells.
            if cols * rows < 2:
                raise ValueError(f"Difficulty '{difficulty.key}' needs at least 2 cells on level 1, got {cols}x{rows}")
        self._difficulties: Dict[str, Difficulty] = {d.key: d for d in difficulties}
        self._total_levels = total_levels

    @property
    def total_levels(self) -> int:
        return self._total_levels

    def all(self) -> List[Difficulty]:
        return list(self._difficulties.values())

    def keys(self) -> List[str]:
        return list(self._difficulties.keys())

    def get(self, key: str) -> Difficulty:
        return self._difficulties[key]

    def __contains__(self, key: object) -> bool:
        return key in self._difficulties

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "GameConfig":
        path = path or DEFAULT_CONFIG_PATH
        if not path.exists():
            raise FileNotFoundError(f"Difficulty config not found: {path}")

        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{path.name}: expected YAML with 'total_levels' and 'difficulties'")

        total_levels = raw.get("total_levels")
        if not isinstance(total_levels, int) or isinstance(total_levels, bool) or total_levels < 1:
            raise ValueError(f"{path.name}: 'total_levels' must be a positive integer")

        table = raw.get("difficulties")
        if not table or not isinstance(table, dict):
            raise ValueError(f"{path.name}: missing or invalid 'difficulties'")

        difficulties: List[Difficulty] = []
        for key, entry in table.items():
            if not isinstance(entry, dict):
                raise ValueError(f"{path.name}: difficulty '{key}' must be a mapping")
            difficulties.append(_parse_difficulty(path.name, str(key), entry))
        return cls(difficulties, total_levels)


def _parse_difficulty(source: str, key: str, entry: dict) -> Difficulty:
    values = {}
    for name in ("base_cols", "base_rows"):
        value = entry.get(name)
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            raise ValueError(f"{source}: '{key}.{name}' must be a positive integer")
        values[name] = value

    growth = entry.get("growth", 0)
    if not isinstance(growth, (int, float)) or isinstance(growth, bool) or growth < 0:
        raise ValueError(f"{source}: '{key}.growth' must be a non-negative number")

    title = entry.get("title") or key.capitalize()
    if not isinstance(title, str):
        raise ValueError(f"{source}: '{key}.title' must be a string")

    return Difficulty(
        key=key,
        name=title.strip(),
        base_cols=values["base_cols"],
        base_rows=values["base_rows"],
        growth=growth,
    )
