"""A* route planning over a HexGrid priced by a CostModel."""
from __future__ import annotations

import heapq
import logging
from typing import TYPE_CHECKING

from hexwalk.types import IMPASSABLE, Coord

if TYPE_CHECKING:
    from hexwalk.costs import CostModel
    from hexwalk.hexgrid import HexGrid

log = logging.getLogger(__name__)


class PathPlanner:
    """Terrain-aware A* search.

    ``find_path`` returns the route origin-first, ``[origin]`` when already
    at the destination, and ``[]`` when no route exists. Open-set ties on
    f-score are broken by insertion order, so identical inputs always give
    identical routes.
    """

    def __init__(self, grid: HexGrid, costs: CostModel) -> None:
        self._grid = grid
        self._costs = costs.attach(grid)
        self.calls = 0

    def find_path(self, origin: Coord, destination: Coord) -> list[Coord]:
        self.calls += 1
        if self._costs.cost_at(destination) == IMPASSABLE:
            return []
        if origin == destination:
            return [origin]

        grid = self._grid
        max_iterations = grid.cell_count * 2

        open_set: list[tuple[float, int, Coord]] = [
            (grid.heuristic(origin, destination), 0, origin)
        ]
        came_from: dict[Coord, Coord] = {}
        g_score: dict[Coord, float] = {origin: 0.0}
        f_score: dict[Coord, float] = {origin: open_set[0][0]}
        counter = 1
        iterations = 0

        while open_set:
            f, _, current = heapq.heappop(open_set)
            if f > f_score.get(current, float("inf")):
                # stale entry, superseded by a better score
                continue
            iterations += 1
            if iterations > max_iterations:
                log.warning(
                    "A* aborted after %d iterations searching %s -> %s",
                    max_iterations, origin, destination,
                )
                return []

            if current == destination:
                path: list[Coord] = [current]
                while current in came_from:
                    current = came_from[current]
                    path.append(current)
                path.reverse()
                log.debug("Route %s -> %s: %d hexes", origin, destination, len(path))
                return path

            for neighbor in grid.neighbors(current):
                step = self._costs.cost_at(neighbor)
                if step == IMPASSABLE:
                    continue
                tentative = g_score[current] + step
                if tentative < g_score.get(neighbor, float("inf")):
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative
                    f_new = tentative + grid.heuristic(neighbor, destination)
                    f_score[neighbor] = f_new
                    heapq.heappush(open_set, (f_new, counter, neighbor))
                    counter += 1

        log.debug("No route %s -> %s", origin, destination)
        return []
