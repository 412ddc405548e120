"""Tests for slope analysis."""

import pytest
from py_terrace.core import (
    Terrain,
    height_summary,
    is_terraced,
    set_heights,
    slope_violations,
    terrain_from_edges,
)


class TestSlopeViolations:
    """Test slope violation detection."""

    def test_flat_terrain_is_terraced(self):
        terrain = terrain_from_edges([(0, 1), (1, 2)])

        assert slope_violations(terrain) == []
        assert is_terraced(terrain)

    def test_reports_steep_edge_once(self):
        terrain = terrain_from_edges([(0, 1), (0, 1), (1, 2)])
        set_heights(terrain, {0: 3})

        assert slope_violations(terrain) == [(0, 1, 3)]
        assert not is_terraced(terrain)

    def test_respects_height_step(self):
        terrain = Terrain(height_step=5)
        terrain.add_connected_nodes("a", "b")
        set_heights(terrain, {"a": 5})

        assert is_terraced(terrain)

        set_heights(terrain, {"a": 10})
        assert slope_violations(terrain) == [("a", "b", 10)]

    def test_sculpting_keeps_field_terraced(self):
        edges = [((x, y), (x + 1, y)) for x in range(4) for y in range(5)]
        edges += [((x, y), (x, y + 1)) for x in range(5) for y in range(4)]
        terrain = terrain_from_edges(edges)

        terrain.adjust_height((2, 2), 4)
        terrain.adjust_height((0, 0), -2)
        terrain.adjust_height((4, 4), 3)

        assert is_terraced(terrain)

    def test_removed_nodes_are_skipped(self):
        terrain = terrain_from_edges([(0, 1), (1, 2)])
        set_heights(terrain, {1: 9})
        terrain.remove_node(1)

        assert is_terraced(terrain)


class TestHeightSummary:
    """Test height statistics."""

    def test_summary(self):
        terrain = terrain_from_edges([(0, 1), (1, 2), (2, 3)])
        terrain.adjust_height(0, 3)

        summary = height_summary(terrain)

        assert summary == {"nodes": 4, "min": 0, "max": 3, "mean": pytest.approx(1.5)}

    def test_empty_terrain(self):
        assert height_summary(Terrain(1)) == {"nodes": 0, "min": 0, "max": 0, "mean": 0.0}
