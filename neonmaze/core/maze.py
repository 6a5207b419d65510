from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)


class Side(Enum):
    """A cell wall. Rows grow downward, so TOP is row - 1."""

    TOP = (0, -1)
    RIGHT = (1, 0)
    BOTTOM = (0, 1)
    LEFT = (-1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Side":
        return _OPPOSITE[self]

    @classmethod
    def from_delta(cls, dcol: int, drow: int) -> "Side":
        for side in cls:
            if side.value == (dcol, drow):
                return side
        raise ValueError(f"Not a unit direction: ({dcol}, {drow})")


_OPPOSITE = {
    Side.TOP: Side.BOTTOM,
    Side.RIGHT: Side.LEFT,
    Side.BOTTOM: Side.TOP,
    Side.LEFT: Side.RIGHT,
}


def _all_walls() -> Dict[Side, bool]:
    return {side: True for side in Side}


@dataclass
class Cell:
    col: int
    row: int
    walls: Dict[Side, bool] = field(default_factory=_all_walls)
    visited: bool = False

    def has_wall(self, side: Side) -> bool:
        return self.walls[side]


class Grid:
    """Row-major rectangle of cells produced by :func:`generate`."""

    def __init__(self, cols: int, rows: int) -> None:
        if cols < 1 or rows < 1:
            raise ValueError(f"Grid needs at least one cell, got {cols}x{rows}")
        self._cols = cols
        self._rows = rows
        self._cells: List[Cell] = [Cell(col, row) for row in range(rows) for col in range(cols)]

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self._cols and 0 <= row < self._rows

    def cell(self, col: int, row: int) -> Cell:
        if not self.in_bounds(col, row):
            raise IndexError(f"Cell ({col}, {row}) outside {self._cols}x{self._rows} grid")
        return self._cells[col + row * self._cols]

    def neighbor(self, cell: Cell, side: Side) -> Optional[Cell]:
        dcol, drow = side.delta
        col, row = cell.col + dcol, cell.row + drow
        if not self.in_bounds(col, row):
            return None
        return self._cells[col + row * self._cols]

    def open_sides(self, col: int, row: int) -> List[Side]:
        cell = self.cell(col, row)
        return [side for side in Side if not cell.walls[side]]

    def passages(self) -> Set[Tuple[Tuple[int, int], Tuple[int, int]]]:
        """Every open wall pair, each reported once as ((col, row), (col, row))."""
        result: Set[Tuple[Tuple[int, int], Tuple[int, int]]] = set()
        for cell in self._cells:
            for side in (Side.RIGHT, Side.BOTTOM):
                other = self.neighbor(cell, side)
                if other is not None and not cell.walls[side]:
                    result.add(((cell.col, cell.row), (other.col, other.row)))
        return result


def remove_wall(a: Cell, b: Cell) -> None:
    """Open the wall shared by two adjacent cells in both records."""
    try:
        side = Side.from_delta(b.col - a.col, b.row - a.row)
    except ValueError:
        raise ValueError(f"Cells ({a.col}, {a.row}) and ({b.col}, {b.row}) are not adjacent") from None
    a.walls[side] = False
    b.walls[side.opposite] = False


def _unvisited_neighbors(grid: Grid, cell: Cell) -> List[Cell]:
    found: List[Cell] = []
    for side in Side:
        other = grid.neighbor(cell, side)
        if other is not None and not other.visited:
            found.append(other)
    return found


def generate(
    cols: int,
    rows: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Grid:
    """Build a perfect maze with a randomized depth-first backtracker.

    The traversal keeps its own stack instead of recursing, so large grids
    never hit the interpreter's recursion limit. Pass ``seed`` or an
    explicit ``rng`` for a reproducible layout; ``rng`` wins when both are
    given.
    """
    if cols < 1 or rows < 1:
        raise ValueError(f"Maze dimensions must be positive, got {cols}x{rows}")
    if rng is None:
        rng = random.Random(seed)

    grid = Grid(cols, rows)
    current = grid.cell(0, 0)
    current.visited = True
    stack: List[Cell] = []

    while True:
        candidates = _unvisited_neighbors(grid, current)
        if candidates:
            nxt = candidates[rng.randrange(len(candidates))]
            remove_wall(current, nxt)
            stack.append(current)
            nxt.visited = True
            current = nxt
        elif stack:
            current = stack.pop()
        else:
            break

    logger.debug("Generated %dx%d maze", cols, rows)
    return grid
