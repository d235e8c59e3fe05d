"""
Test suite for A* route planning.

Tests cover:
- Path structure (origin first, adjacent steps, destination last)
- Same origin and destination
- Impassable destinations (no search performed)
- Unreachable destinations
- Terrain-cost aware detours
- Deterministic tie-breaking
- Iteration safety bound
"""

import logging

import pytest
from hexwalk import CostModel, HexGrid, MovementConfig, PathPlanner, hex_distance


def _planner(grid: HexGrid) -> tuple[PathPlanner, CostModel]:
    costs = CostModel.from_config(MovementConfig(), grid)
    return PathPlanner(grid, costs), costs


def _assert_connected(path, origin, destination):
    assert path[0] == origin
    assert path[-1] == destination
    for a, b in zip(path, path[1:]):
        assert hex_distance(a, b) == 1


class TestPathBasics:
    def test_straight_line_on_uniform_grid(self):
        grid = HexGrid(5, 5)
        planner, costs = _planner(grid)
        path = planner.find_path((0, 0), (2, 0))

        assert path == [(0, 0), (1, 0), (2, 0)]
        assert len(path) == 3
        assert costs.path_cost(path) == 2

    def test_same_origin_and_destination(self):
        grid = HexGrid(5, 5)
        planner, costs = _planner(grid)
        path = planner.find_path((3, 3), (3, 3))

        assert path == [(3, 3)]
        assert costs.path_cost(path) == 0

    def test_path_is_connected(self):
        grid = HexGrid(8, 8)
        planner, _ = _planner(grid)
        for origin, destination in [((0, 0), (7, 7)), ((7, 0), (0, 7)), ((3, 5), (6, 1))]:
            path = planner.find_path(origin, destination)
            _assert_connected(path, origin, destination)

    def test_uniform_path_length_is_hex_distance(self):
        grid = HexGrid(8, 8)
        planner, _ = _planner(grid)
        path = planner.find_path((0, 7), (6, 2))
        assert len(path) - 1 == hex_distance((0, 7), (6, 2))

    def test_calls_are_counted(self):
        grid = HexGrid(5, 5)
        planner, _ = _planner(grid)
        planner.find_path((0, 0), (1, 1))
        planner.find_path((0, 0), (0, 0))
        assert planner.calls == 2


class TestPathUnreachable:
    def test_impassable_destination_skips_search(self, monkeypatch):
        grid = HexGrid(5, 5)
        grid.set_terrain((3, 3), "water")
        planner, _ = _planner(grid)

        def no_search(coord):
            raise AssertionError("search should not run")

        monkeypatch.setattr(grid, "neighbors", no_search)
        assert planner.find_path((0, 0), (3, 3)) == []

    def test_off_grid_destination(self):
        grid = HexGrid(5, 5)
        planner, _ = _planner(grid)
        assert planner.find_path((0, 0), (9, 9)) == []

    def test_water_wall_blocks_route(self):
        grid = HexGrid(5, 5)
        # every step changes q by at most one, so a full q=2 column seals it
        grid.fill([(2, r) for r in range(5)], "water")
        planner, _ = _planner(grid)
        assert planner.find_path((0, 0), (4, 4)) == []

    def test_enclosed_destination(self):
        grid = HexGrid(5, 5)
        grid.fill([(3, 4), (4, 3)], "water")
        planner, _ = _planner(grid)
        assert planner.find_path((0, 0), (4, 4)) == []

    def test_gap_in_wall_is_used(self):
        grid = HexGrid(5, 5)
        grid.fill([(2, r) for r in range(5) if r != 4], "water")
        planner, costs = _planner(grid)
        path = planner.find_path((0, 0), (4, 0))
        _assert_connected(path, (0, 0), (4, 0))
        assert (2, 4) in path
        assert all(costs.passable_at(c) for c in path)


class TestPathCosts:
    def test_detours_around_expensive_terrain(self):
        grid = HexGrid(5, 3)
        grid.fill([(1, 1), (2, 1), (3, 1)], "mountains")
        planner, costs = _planner(grid)
        path = planner.find_path((0, 1), (4, 1))

        _assert_connected(path, (0, 1), (4, 1))
        # straight through costs 3 * 3 + 1 = 10, the detour costs 5
        assert costs.path_cost(path) == 5
        assert all(grid.terrain_at(c) != "mountains" for c in path)

    def test_crosses_expensive_terrain_when_cheaper(self):
        grid = HexGrid(5, 1)
        grid.set_terrain((2, 0), "swamp")
        planner, costs = _planner(grid)
        path = planner.find_path((0, 0), (4, 0))
        assert path == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]
        assert costs.path_cost(path) == 6

    def test_never_enters_impassable(self):
        grid = HexGrid(6, 6)
        grid.fill([(2, 1), (2, 2), (2, 3), (3, 3)], "water")
        planner, costs = _planner(grid)
        path = planner.find_path((0, 2), (5, 2))
        _assert_connected(path, (0, 2), (5, 2))
        assert all(costs.passable_at(c) for c in path)


class TestPathDeterminism:
    def test_repeated_search_gives_same_route(self):
        grid = HexGrid(9, 9)
        grid.fill([(4, r) for r in range(1, 8)], "forest")
        planner, _ = _planner(grid)
        first = planner.find_path((0, 4), (8, 4))
        for _ in range(5):
            assert planner.find_path((0, 4), (8, 4)) == first


class _UndercountedGrid(HexGrid):
    @property
    def cell_count(self) -> int:
        return 1


class TestGridWiring:
    def test_unbound_cost_model_prices_planner_grid(self):
        grid = HexGrid(5, 5)
        costs = CostModel.from_config(MovementConfig())
        planner = PathPlanner(grid, costs)

        assert costs.grid is grid
        assert planner.find_path((0, 0), (2, 0)) == [(0, 0), (1, 0), (2, 0)]

    def test_cost_model_bound_to_other_grid_rejected(self):
        costs = CostModel.from_config(MovementConfig(), HexGrid(3, 3))
        with pytest.raises(ValueError):
            PathPlanner(HexGrid(5, 5), costs)


class TestSafetyBound:
    def test_search_aborts_past_bound(self, caplog):
        grid = _UndercountedGrid(5, 5)
        planner, _ = _planner(grid)
        with caplog.at_level(logging.WARNING, logger="hexwalk.pathfind"):
            assert planner.find_path((0, 0), (4, 4)) == []
        assert "aborted" in caplog.text

    def test_bound_does_not_trigger_on_normal_grid(self, caplog):
        grid = HexGrid(12, 12)
        grid.fill([(6, r) for r in range(11)], "water")
        planner, _ = _planner(grid)
        with caplog.at_level(logging.WARNING, logger="hexwalk.pathfind"):
            path = planner.find_path((0, 0), (11, 0))
        assert path
        assert "aborted" not in caplog.text
