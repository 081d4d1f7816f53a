"""
Tests for domain/grid.py - board bounds and food placement.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import GRID_SIZE, Position
from domain.grid import GridModel


class TestBounds:
    """Tests for GridModel.is_in_bounds."""

    def test_default_size(self):
        """The default board is GRID_SIZE x GRID_SIZE."""
        grid = GridModel()
        assert grid.size == GRID_SIZE == 15

    @pytest.mark.parametrize("cell", [(0, 0), (14, 0), (0, 14), (14, 14), (7, 3)])
    def test_cells_inside_are_in_bounds(self, cell):
        assert GridModel().is_in_bounds(Position(*cell)) is True

    @pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (15, 0), (0, 15), (15, 15), (-1, -1)])
    def test_cells_outside_are_out_of_bounds(self, cell):
        assert GridModel().is_in_bounds(Position(*cell)) is False

    def test_plain_tuples_are_accepted(self):
        assert GridModel(size=3).is_in_bounds((2, 2)) is True

    def test_invalid_size_raises(self):
        with pytest.raises(ValueError):
            GridModel(size=0)

    def test_cells_cover_the_board_once(self):
        cells = list(GridModel(size=4).cells())
        assert len(cells) == 16
        assert len(set(cells)) == 16
        assert cells[0] == (0, 0)
        assert cells[1] == (1, 0)  # row-major


class TestPlaceFood:
    """Tests for GridModel.place_food."""

    def test_food_never_on_occupied_cell(self):
        grid = GridModel(rng=random.Random(1))
        occupied = {Position(x, 3) for x in range(15)}

        for _ in range(200):
            food = grid.place_food(occupied)
            assert food not in occupied
            assert grid.is_in_bounds(food)

    def test_only_free_cell_is_chosen(self):
        """With one free cell left, placement returns exactly that cell."""
        grid = GridModel(size=3, rng=random.Random(7))
        occupied = set(grid.cells()) - {Position(2, 1)}

        assert grid.place_food(occupied) == Position(2, 1)

    def test_full_board_returns_none(self):
        grid = GridModel(size=3)
        assert grid.place_food(set(grid.cells())) is None

    def test_same_seed_same_food(self):
        occupied = {Position(3, 3), Position(2, 3), Position(1, 3)}
        first = GridModel(rng=random.Random(42)).place_food(occupied)
        second = GridModel(rng=random.Random(42)).place_food(occupied)
        assert first == second

    def test_every_free_cell_is_reachable(self):
        """Placement is spread over all free cells, not stuck on a few."""
        grid = GridModel(size=3, rng=random.Random(0))
        occupied = {Position(0, 0), Position(1, 1)}

        seen = {grid.place_food(occupied) for _ in range(500)}
        assert seen == set(grid.cells()) - occupied
