"""Tests for neonmaze.core.maze – perfect maze generation."""

from __future__ import annotations

import random
from collections import deque

import pytest

from neonmaze.core.maze import Cell, Grid, Side, generate, remove_wall


def _open_neighbors(grid: Grid, col: int, row: int) -> list[tuple[int, int]]:
    result = []
    for side in grid.open_sides(col, row):
        dcol, drow = side.delta
        result.append((col + dcol, row + drow))
    return result


def _reachable(grid: Grid) -> set[tuple[int, int]]:
    seen = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        col, row = queue.popleft()
        for nxt in _open_neighbors(grid, col, row):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


def _has_cycle(grid: Grid) -> bool:
    seen: set[tuple[int, int]] = set()
    stack: list[tuple[tuple[int, int], tuple[int, int] | None]] = [((0, 0), None)]
    while stack:
        node, parent = stack.pop()
        if node in seen:
            return True
        seen.add(node)
        for nxt in _open_neighbors(grid, *node):
            if nxt != parent:
                stack.append((nxt, node))
    return False


SIZES = [(1, 1), (1, 7), (6, 1), (2, 2), (5, 3), (9, 9), (18, 11)]


# ---------------------------------------------------------------------------
# Side
# ---------------------------------------------------------------------------

class TestSide:
    def test_opposites(self):
        assert Side.TOP.opposite is Side.BOTTOM
        assert Side.BOTTOM.opposite is Side.TOP
        assert Side.LEFT.opposite is Side.RIGHT
        assert Side.RIGHT.opposite is Side.LEFT

    def test_from_delta(self):
        assert Side.from_delta(0, -1) is Side.TOP
        assert Side.from_delta(1, 0) is Side.RIGHT
        assert Side.from_delta(0, 1) is Side.BOTTOM
        assert Side.from_delta(-1, 0) is Side.LEFT

    @pytest.mark.parametrize("delta", [(0, 0), (1, 1), (2, 0), (-1, -1)])
    def test_from_delta_rejects_non_unit(self, delta):
        with pytest.raises(ValueError):
            Side.from_delta(*delta)


# ---------------------------------------------------------------------------
# Cell / Grid
# ---------------------------------------------------------------------------

class TestCell:
    def test_all_walls_present(self):
        c = Cell(2, 3)
        assert all(c.has_wall(side) for side in Side)
        assert c.visited is False

    def test_walls_not_shared_between_cells(self):
        a = Cell(0, 0)
        b = Cell(1, 0)
        a.walls[Side.RIGHT] = False
        assert b.walls[Side.RIGHT] is True


class TestGrid:
    def test_dimensions_and_length(self):
        g = Grid(4, 3)
        assert g.cols == 4
        assert g.rows == 3
        assert len(g) == 12

    def test_row_major_order(self):
        g = Grid(3, 2)
        coords = [(c.col, c.row) for c in g]
        assert coords == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]

    def test_cell_lookup(self):
        g = Grid(3, 2)
        c = g.cell(2, 1)
        assert (c.col, c.row) == (2, 1)

    @pytest.mark.parametrize("coords", [(-1, 0), (0, -1), (3, 0), (0, 2)])
    def test_cell_out_of_bounds(self, coords):
        with pytest.raises(IndexError):
            Grid(3, 2).cell(*coords)

    def test_neighbor_at_border_is_none(self):
        g = Grid(2, 2)
        assert g.neighbor(g.cell(0, 0), Side.TOP) is None
        assert g.neighbor(g.cell(0, 0), Side.LEFT) is None
        assert g.neighbor(g.cell(1, 1), Side.RIGHT) is None
        assert g.neighbor(g.cell(1, 1), Side.BOTTOM) is None

    def test_neighbor_inside(self):
        g = Grid(2, 2)
        assert g.neighbor(g.cell(0, 0), Side.RIGHT) is g.cell(1, 0)
        assert g.neighbor(g.cell(0, 0), Side.BOTTOM) is g.cell(0, 1)

    @pytest.mark.parametrize("dims", [(0, 3), (3, 0), (-2, 4)])
    def test_rejects_empty(self, dims):
        with pytest.raises(ValueError):
            Grid(*dims)

    def test_fresh_grid_has_no_passages(self):
        assert Grid(3, 3).passages() == set()


# ---------------------------------------------------------------------------
# remove_wall
# ---------------------------------------------------------------------------

class TestRemoveWall:
    def test_horizontal_pair(self):
        a, b = Cell(0, 0), Cell(1, 0)
        remove_wall(a, b)
        assert a.walls[Side.RIGHT] is False
        assert b.walls[Side.LEFT] is False
        assert a.walls[Side.TOP] and a.walls[Side.BOTTOM] and a.walls[Side.LEFT]

    def test_vertical_pair_reverse_order(self):
        a, b = Cell(4, 5), Cell(4, 4)
        remove_wall(a, b)
        assert a.walls[Side.TOP] is False
        assert b.walls[Side.BOTTOM] is False

    def test_rejects_non_adjacent(self):
        a, b = Cell(0, 0), Cell(1, 1)
        with pytest.raises(ValueError):
            remove_wall(a, b)
        assert all(a.walls.values())
        assert all(b.walls.values())


# ---------------------------------------------------------------------------
# generate – perfect maze properties
# ---------------------------------------------------------------------------

class TestGenerate:
    @pytest.mark.parametrize("cols,rows", SIZES)
    def test_spanning_tree_edge_count(self, cols, rows):
        g = generate(cols, rows, seed=7)
        assert len(g.passages()) == cols * rows - 1

    @pytest.mark.parametrize("cols,rows", SIZES)
    def test_every_cell_reachable(self, cols, rows):
        g = generate(cols, rows, seed=11)
        assert len(_reachable(g)) == cols * rows

    @pytest.mark.parametrize("seed", range(5))
    def test_no_cycles(self, seed):
        g = generate(12, 9, seed=seed)
        assert not _has_cycle(g)

    @pytest.mark.parametrize("seed", range(5))
    def test_wall_symmetry(self, seed):
        g = generate(10, 7, seed=seed)
        for cell in g:
            for side in Side:
                other = g.neighbor(cell, side)
                if other is None:
                    assert cell.walls[side] is True  # border stays closed
                else:
                    assert cell.walls[side] == other.walls[side.opposite]

    def test_all_cells_visited(self):
        g = generate(6, 5, seed=3)
        assert all(c.visited for c in g)

    def test_same_seed_same_maze(self):
        a = generate(15, 15, seed=42)
        b = generate(15, 15, seed=42)
        assert a.passages() == b.passages()

    def test_injected_rng_is_used(self):
        a = generate(8, 8, rng=random.Random(5))
        b = generate(8, 8, rng=random.Random(5))
        assert a.passages() == b.passages()

    def test_different_seeds_usually_differ(self):
        layouts = {frozenset(generate(10, 10, seed=s).passages()) for s in range(6)}
        assert len(layouts) > 1

    def test_large_grid_does_not_recurse(self):
        g = generate(120, 120, seed=1)
        assert len(g.passages()) == 120 * 120 - 1

    def test_single_cell(self):
        g = generate(1, 1)
        assert g.passages() == set()
        assert all(g.cell(0, 0).walls.values())

    @pytest.mark.parametrize("dims", [(0, 5), (5, 0), (-1, -1)])
    def test_invalid_dimensions(self, dims):
        with pytest.raises(ValueError):
            generate(*dims)
