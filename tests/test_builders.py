"""Tests for bulk terrain construction and NumPy export."""

import pytest
import numpy as np
from py_terrace.config import TerrainOptions
from py_terrace.core import (
    InvalidHeight,
    NodeNotFound,
    heights_array,
    set_heights,
    terrain_from_edges,
    terrain_from_neighbor_lists,
)


class TestTerrainFromEdges:
    """Test edge-list construction."""

    def test_builds_nodes_and_edges(self):
        terrain = terrain_from_edges([("a", "b"), ("b", "c")])

        assert len(terrain) == 3
        assert terrain.neighbors_of("b") == ["a", "c"]
        assert terrain.height_step == 1

    def test_options_override_defaults(self):
        options = TerrainOptions(height_step=4, max_propagation_steps=10)
        terrain = terrain_from_edges([(0, 1)], options)

        assert terrain.height_step == 4
        assert terrain.max_propagation_steps == 10

    def test_repeated_pairs_become_parallel_edges(self):
        terrain = terrain_from_edges([(0, 1), (0, 1)])

        assert terrain.neighbors_of(0) == [1, 1]

    def test_accepts_generator(self):
        terrain = terrain_from_edges((i, i + 1) for i in range(4))

        assert len(terrain) == 5


class TestTerrainFromNeighborLists:
    """Test construction from per-cell neighbour lists."""

    @pytest.fixture
    def square_cells(self):
        """Four cells in a 2x2 block, each touching its row and column neighbour."""
        return [[1, 2], [0, 3], [0, 3], [1, 2]]

    def test_symmetric_lists_connect_each_pair_once(self, square_cells):
        terrain = terrain_from_neighbor_lists(square_cells)

        assert len(terrain) == 4
        for cell, neighbors in enumerate(square_cells):
            assert sorted(terrain.neighbors_of(cell)) == sorted(neighbors)

    def test_repeated_entries_connect_once(self):
        terrain = terrain_from_neighbor_lists([[1, 1], [0]])

        assert terrain.neighbors_of(0) == [1]
        assert terrain.neighbors_of(1) == [0]

    def test_repeated_one_sided_entries_connect_once(self):
        terrain = terrain_from_neighbor_lists([[], [0, 0, 2], [1]])

        assert terrain.neighbors_of(0) == [1]
        assert terrain.neighbors_of(1) == [0, 2]

    def test_arena_index_matches_cell_index(self, square_cells):
        terrain = terrain_from_neighbor_lists(square_cells)

        for cell in range(4):
            assert terrain.get_index_of_node(cell) == cell

    def test_isolated_cells_are_created(self):
        terrain = terrain_from_neighbor_lists([[1], [0], []])

        assert 2 in terrain
        assert terrain.neighbors_of(2) == []

    def test_one_sided_entries_are_connected(self):
        terrain = terrain_from_neighbor_lists([[], [0]])

        assert terrain.neighbors_of(0) == [1]
        assert terrain.neighbors_of(1) == [0]

    def test_numpy_neighbor_lists(self):
        neighbors = [np.array([1]), np.array([0, 2]), np.array([1])]
        terrain = terrain_from_neighbor_lists(neighbors)

        terrain.adjust_height(0, 2)

        np.testing.assert_array_equal(heights_array(terrain), [2, 1, 0])


class TestHeights:
    """Test height export and seeding."""

    def test_heights_array_default_order(self):
        terrain = terrain_from_edges([(0, 1), (1, 2)])
        terrain.adjust_height(2, 2)

        heights = heights_array(terrain)

        assert heights.dtype == np.int64
        np.testing.assert_array_equal(heights, [0, 1, 2])

    def test_heights_array_custom_order(self):
        terrain = terrain_from_edges([(0, 1), (1, 2)])
        terrain.adjust_height(2, 2)

        np.testing.assert_array_equal(heights_array(terrain, [2, 0]), [2, 0])

    def test_heights_array_unknown_key(self):
        terrain = terrain_from_edges([(0, 1)])

        with pytest.raises(NodeNotFound):
            heights_array(terrain, [0, 5])

    def test_set_heights_does_not_cascade(self):
        terrain = terrain_from_edges([(0, 1)])

        set_heights(terrain, {0: 5})

        assert terrain.get_height_of_node(0) == 5
        assert terrain.get_height_of_node(1) == 0

    def test_set_heights_unknown_key_writes_nothing(self):
        terrain = terrain_from_edges([(0, 1)])

        with pytest.raises(NodeNotFound):
            set_heights(terrain, {0: 5, "missing": 1})

        assert terrain.get_height_of_node(0) == 0

    def test_set_heights_rejects_off_step_height(self):
        options = TerrainOptions(height_step=2)
        terrain = terrain_from_edges([("a", "b")], options)

        with pytest.raises(InvalidHeight) as exc_info:
            set_heights(terrain, {"b": 2, "a": 3})

        assert exc_info.value.key == "a"
        assert terrain.get_height_of_node("a") == 0
        assert terrain.get_height_of_node("b") == 0

    def test_invalid_height_is_value_error(self):
        terrain = terrain_from_edges([("a", "b")], TerrainOptions(height_step=3))

        with pytest.raises(ValueError):
            set_heights(terrain, {"a": -4})

    def test_seeded_heights_cascade_in_whole_steps(self):
        terrain = terrain_from_edges([("a", "b")], TerrainOptions(height_step=2))
        set_heights(terrain, {"a": 4, "b": -2})

        terrain.increase_height("a")

        assert terrain.get_height_of_node("a") == 6
        assert terrain.get_height_of_node("b") == 4
