"""ReachabilitySolver - hexes reachable within a turn budget."""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from hexwalk.types import IMPASSABLE, Coord

if TYPE_CHECKING:
    from hexwalk.costs import CostModel
    from hexwalk.hexgrid import HexGrid


class ReachabilitySolver:
    """First-in-first-out frontier expansion from an origin.

    A hex's cumulative cost is fixed when it is first discovered and never
    revised. On uniform terrain this is exact; on mixed terrain a hex first
    reached by an expensive route keeps that cost, so hexes beyond it can be
    under-reported compared to a least-cost (Dijkstra) frontier.
    """

    def __init__(self, grid: HexGrid, costs: CostModel) -> None:
        self._grid = grid
        self._costs = costs.attach(grid)

    def reachable_costs(self, origin: Coord, budget: int) -> dict[Coord, int]:
        """Map each reachable hex (origin excluded) to its first-discovery cost."""
        if budget <= 0:
            return {}
        discovered: dict[Coord, int] = {origin: 0}
        queue: deque[Coord] = deque([origin])
        while queue:
            current = queue.popleft()
            spent = discovered[current]
            for neighbor in self._grid.neighbors(current):
                if neighbor in discovered:
                    continue
                step = self._costs.cost_at(neighbor)
                if step == IMPASSABLE:
                    continue
                total = spent + step
                if total > budget:
                    continue
                discovered[neighbor] = total
                queue.append(neighbor)
        del discovered[origin]
        return discovered

    def reachable(self, origin: Coord, budget: int) -> set[Coord]:
        return set(self.reachable_costs(origin, budget))
