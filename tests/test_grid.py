"""Unit tests for GridState."""

import numpy as np
import pytest
from forest_fire.cell import CellState, OutOfBoundsError
from forest_fire.grid import GridState


class TestGridAccess:
    """Test cases for reading and writing cells."""

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            GridState(0)

    def test_unset_cell_cannot_be_read(self):
        """Test that a fresh grid is distinguishable from every state."""
        grid = GridState(3)
        with pytest.raises(ValueError):
            grid.get(1, 1)

    def test_set_and_get(self):
        grid = GridState(3)
        grid.set(2, 0, CellState.Fire)
        assert grid.get(2, 0) is CellState.Fire

    @pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_out_of_bounds(self, pos):
        grid = GridState(3)
        grid.fill(CellState.Tree)
        with pytest.raises(OutOfBoundsError):
            grid.get(*pos)
        with pytest.raises(OutOfBoundsError):
            grid.set(*pos, CellState.Soil)

    def test_listener_sees_every_write(self):
        """Test that the painter is notified of each change."""
        calls = []
        grid = GridState(2, listener=lambda x, y, s: calls.append((x, y, s)))
        grid.fill(CellState.Tree)
        grid.set(1, 1, CellState.Water)
        assert len(calls) == 5
        assert calls[-1] == (1, 1, CellState.Water)

    def test_count(self):
        grid = GridState(4)
        grid.fill(CellState.Tree)
        grid.set(0, 0, CellState.Fire)
        grid.set(3, 3, CellState.Fire)
        assert grid.count(CellState.Fire) == 2
        assert grid.count(CellState.Tree) == 14
        assert grid.count(CellState.Water) == 0

    def test_contains(self):
        grid = GridState(5)
        assert (4, 4) in grid
        assert (5, 0) not in grid


class TestGridGeometry:
    """Test cases for neighbourhoods and columns."""

    def test_neighbourhood_in_the_middle(self):
        grid = GridState(5)
        assert len(list(grid.neighbourhood(2, 2))) == 9

    def test_neighbourhood_clipped_at_corner(self):
        grid = GridState(5)
        assert sorted(grid.neighbourhood(0, 0)) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_neighbourhood_clipped_at_edge(self):
        grid = GridState(5)
        assert len(list(grid.neighbourhood(4, 2))) == 6

    def test_column(self):
        grid = GridState(4)
        assert list(grid.column(2)) == [(2, 0), (2, 1), (2, 2), (2, 3)]

    def test_column_out_of_bounds(self):
        grid = GridState(4)
        with pytest.raises(OutOfBoundsError):
            list(grid.column(4))


class TestFireFront:
    """Test cases for finding trees next to fires."""

    def test_orthogonal_neighbours_only(self):
        """Test that diagonals are not part of the front."""
        grid = GridState(3)
        grid.fill(CellState.Tree)
        grid.set(1, 1, CellState.Fire)
        assert grid.orthogonal_fire_front() == [(0, 1), (1, 0), (1, 2), (2, 1)]

    def test_only_trees_in_front(self):
        grid = GridState(3)
        grid.fill(CellState.Soil)
        grid.set(1, 1, CellState.Fire)
        grid.set(1, 0, CellState.Water)
        grid.set(2, 1, CellState.Tree)
        assert grid.orthogonal_fire_front() == [(2, 1)]

    def test_no_wraparound(self):
        grid = GridState(3)
        grid.fill(CellState.Tree)
        grid.set(0, 0, CellState.Fire)
        assert (2, 0) not in grid.orthogonal_fire_front()
        assert (0, 2) not in grid.orthogonal_fire_front()

    def test_shared_neighbour_listed_once(self):
        grid = GridState(3)
        grid.fill(CellState.Tree)
        grid.set(0, 1, CellState.Fire)
        grid.set(2, 1, CellState.Fire)
        front = grid.orthogonal_fire_front()
        assert front.count((1, 1)) == 1

    def test_front_does_not_modify_grid(self):
        grid = GridState(3)
        grid.fill(CellState.Tree)
        grid.set(1, 1, CellState.Fire)
        before = grid.snapshot()
        grid.orthogonal_fire_front()
        assert np.array_equal(before, grid.snapshot())


class TestRenderText:
    """Test cases for console rendering."""

    def test_rows_follow_y(self):
        grid = GridState(2)
        grid.fill(CellState.Tree)
        grid.set(1, 0, CellState.Fire)
        assert grid.render_text() == "🌲🔥\n🌲🌲"
