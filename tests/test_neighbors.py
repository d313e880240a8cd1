"""Tests for Moore-neighborhood lookup."""

from py_navgrid.core.neighbors import GridBounds, get_neighbors


class TestNeighbors:
    """Test neighbor lookup at interior, edge and corner cells."""

    def test_interior_cell_has_eight(self):
        neighbors = get_neighbors((2, 2), GridBounds(5, 5))
        assert len(neighbors) == 8
        assert (2, 2) not in neighbors
        assert set(neighbors) == {
            (1, 1), (1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2), (3, 3)
        }

    def test_corner_cell(self):
        assert set(get_neighbors((0, 0), GridBounds(5, 5))) == {(0, 1), (1, 0), (1, 1)}
        assert set(get_neighbors((4, 4), GridBounds(5, 5))) == {(3, 3), (3, 4), (4, 3)}

    def test_edge_cell(self):
        neighbors = get_neighbors((0, 2), GridBounds(5, 5))
        assert len(neighbors) == 5
        assert all(x >= 0 for x, _ in neighbors)

    def test_non_square_bounds(self):
        neighbors = get_neighbors((3, 0), GridBounds(4, 1))
        assert neighbors == [(2, 0)]

    def test_single_cell_grid(self):
        assert get_neighbors((0, 0), GridBounds(1, 1)) == []

    def test_order_is_deterministic(self):
        bounds = GridBounds(4, 4)
        first = get_neighbors((1, 1), bounds)
        assert first == get_neighbors((1, 1), bounds)
        assert first[0] == (0, 0)
        assert first[-1] == (2, 2)

    def test_bounds_contains(self):
        bounds = GridBounds(3, 2)
        assert bounds.contains((2, 1))
        assert not bounds.contains((3, 0))
        assert not bounds.contains((0, -1))
