"""CostModel - terrain movement costs and path pricing."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Mapping, Sequence

from hexwalk.types import IMPASSABLE, Coord, StepCost

if TYPE_CHECKING:
    from hexwalk.config import MovementConfig
    from hexwalk.hexgrid import HexGrid


class CostModel:
    """Maps terrain to turn cost.

    Unknown terrain costs 1. A terrain in the impassable set is impassable
    regardless of its cost table entry.
    """

    def __init__(
        self,
        costs: Mapping[str, int] | None = None,
        impassable: Iterable[str] = (),
        grid: HexGrid | None = None,
    ) -> None:
        self._costs = dict(costs or {})
        self._impassable = frozenset(impassable)
        self._grid = grid

    @classmethod
    def from_config(cls, config: MovementConfig, grid: HexGrid | None = None) -> CostModel:
        return cls(config.terrain_costs, config.impassable_terrain, grid)

    @property
    def grid(self) -> HexGrid | None:
        return self._grid

    def bind(self, grid: HexGrid) -> None:
        self._grid = grid

    def attach(self, grid: HexGrid) -> CostModel:
        """Bind ``grid`` unless one is already bound. A different grid is an error."""
        if self._grid is None:
            self._grid = grid
        elif self._grid is not grid:
            raise ValueError("CostModel is already bound to a different grid")
        return self

    # --- Terrain ---

    def cost(self, terrain: str | None) -> int:
        if terrain is None or terrain in self._impassable:
            return IMPASSABLE
        return self._costs.get(terrain, 1)

    def is_passable(self, terrain: str | None) -> bool:
        return self.cost(terrain) != IMPASSABLE

    # --- Grid lookups ---

    def cost_at(self, coord: Coord) -> int:
        """Cost of entering ``coord``. Off-grid hexes are impassable."""
        if self._grid is None:
            return IMPASSABLE
        return self.cost(self._grid.terrain_at(coord))

    def passable_at(self, coord: Coord) -> bool:
        return self.cost_at(coord) != IMPASSABLE

    # --- Paths ---

    def path_cost(self, path: Sequence[Coord]) -> int:
        """Sum of entry costs over ``path[1:]``; IMPASSABLE if any hex is."""
        total = 0
        for coord in path[1:]:
            step = self.cost_at(coord)
            if step == IMPASSABLE:
                return IMPASSABLE
            total += step
        return total

    def breakdown(self, path: Sequence[Coord]) -> list[StepCost]:
        rows: list[StepCost] = []
        total = 0
        for i, coord in enumerate(path):
            terrain = self._grid.terrain_at(coord) if self._grid is not None else None
            step = 0 if i == 0 else self.cost_at(coord)
            if step == IMPASSABLE:
                rows.append(StepCost(coord, terrain, IMPASSABLE, IMPASSABLE))
                break
            total += step
            rows.append(StepCost(coord, terrain, step, total))
        return rows
