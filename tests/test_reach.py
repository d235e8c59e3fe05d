"""Tests for ReachabilitySolver budgeted frontier expansion."""
from __future__ import annotations

from hexwalk import CostModel, HexGrid, MovementConfig, PathPlanner, ReachabilitySolver, hex_distance


def _solver(grid: HexGrid, costs: CostModel | None = None) -> ReachabilitySolver:
    costs = costs or CostModel.from_config(MovementConfig(), grid)
    return ReachabilitySolver(grid, costs)


class TestReachBasics:
    def test_zero_budget_is_empty(self) -> None:
        grid = HexGrid(5, 5)
        assert _solver(grid).reachable((2, 2), 0) == set()

    def test_negative_budget_is_empty(self) -> None:
        grid = HexGrid(5, 5)
        assert _solver(grid).reachable((2, 2), -3) == set()

    def test_origin_excluded(self) -> None:
        grid = HexGrid(5, 5)
        result = _solver(grid).reachable((2, 2), 3)
        assert (2, 2) not in result
        assert result

    def test_budget_one_is_neighbors(self) -> None:
        grid = HexGrid(5, 5)
        assert _solver(grid).reachable((2, 2), 1) == set(grid.neighbors((2, 2)))

    def test_uniform_cost_matches_hex_distance(self) -> None:
        grid = HexGrid(9, 9)
        solver = _solver(grid)
        origin = (4, 4)
        for budget in range(1, 5):
            expected = {
                c for c in grid.coords()
                if 0 < hex_distance(origin, c) <= budget
            }
            assert solver.reachable(origin, budget) == expected

    def test_uniform_cost_clipped_at_edge(self) -> None:
        grid = HexGrid(4, 4)
        expected = {c for c in grid.coords() if 0 < hex_distance((0, 0), c) <= 2}
        assert _solver(grid).reachable((0, 0), 2) == expected


class TestReachTerrain:
    def test_impassable_never_included(self) -> None:
        grid = HexGrid(5, 5)
        grid.fill([(3, 2), (1, 2)], "water")
        result = _solver(grid).reachable((2, 2), 3)
        assert (3, 2) not in result
        assert (1, 2) not in result

    def test_expensive_neighbor_outside_budget(self) -> None:
        grid = HexGrid(5, 5)
        grid.set_terrain((3, 2), "mountains")
        result = _solver(grid).reachable((2, 2), 2)
        assert (3, 2) not in result
        assert (2, 3) in result

    def test_reachable_costs(self) -> None:
        grid = HexGrid(5, 1)
        grid.set_terrain((2, 0), "forest")
        costs = _solver(grid).reachable_costs((0, 0), 10)
        assert costs == {(1, 0): 1, (2, 0): 3, (3, 0): 4, (4, 0): 5}


class TestFirstDiscoveryLock:
    """Costs are fixed on first discovery, so mixed terrain can under-report."""

    def _grid(self) -> tuple[HexGrid, CostModel]:
        grid = HexGrid.from_rows([
            ["plains", "forest", "water"],
            ["plains", "plains", "plains"],
        ])
        costs = CostModel({"plains": 1, "forest": 3}, {"water"}, grid)
        return grid, costs

    def test_hex_keeps_expensive_first_cost(self) -> None:
        grid, costs = self._grid()
        discovered = ReachabilitySolver(grid, costs).reachable_costs((0, 0), 4)
        # (1, 1) is first seen from the forest at cost 4, though 2 is possible
        assert discovered[(1, 1)] == 4

    def test_under_reports_versus_least_cost(self) -> None:
        grid, costs = self._grid()
        result = ReachabilitySolver(grid, costs).reachable((0, 0), 4)
        assert result == {(1, 0), (0, 1), (1, 1)}

        # a least-cost route to (2, 1) fits the budget, but it is not reported
        route = PathPlanner(grid, costs).find_path((0, 0), (2, 1))
        assert costs.path_cost(route) == 3
        assert (2, 1) not in result


class TestGridWiring:
    def test_unbound_cost_model_uses_solver_grid(self) -> None:
        grid = HexGrid(5, 5)
        costs = CostModel.from_config(MovementConfig())
        result = ReachabilitySolver(grid, costs).reachable((2, 2), 1)
        assert costs.grid is grid
        assert result == set(grid.neighbors((2, 2)))
