"""SpawnLocator - pick a valid starting hex when none is given."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from hexwalk.config import DEFAULT_IMPASSABLE, MovementConfig
from hexwalk.types import Coord, Failure, SpawnResult

if TYPE_CHECKING:
    from hexwalk.costs import CostModel
    from hexwalk.hexgrid import HexGrid

log = logging.getLogger(__name__)

TIER_SETTLEMENT = "settlement"
TIER_RING = "ring"
TIER_SCAN = "scan"


class SpawnLocator:
    """Three-tier randomized search for a spawn hex.

    1. Settlements (when ``prefer_towns``): each settlement in shuffled order,
       the settlement hex first, then its shuffled neighbors.
    2. Rings around the grid center, radius 0 up to ``spawn_ring_radius``,
       each ring shuffled.
    3. A uniform pick among every valid hex on the grid.

    Pass a seeded ``random.Random`` for reproducible results.
    """

    def __init__(
        self,
        grid: HexGrid,
        costs: CostModel | None = None,
        config: MovementConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._grid = grid
        self._costs = costs.attach(grid) if costs is not None else None
        self._config = config or MovementConfig()
        self._rng = rng or random.Random()

    def find_spawn(self) -> SpawnResult:
        if self._config.prefer_towns:
            coord = self._near_settlement()
            if coord is not None:
                return self._found(coord, TIER_SETTLEMENT)

        coord = self._ring_search()
        if coord is not None:
            return self._found(coord, TIER_RING)

        candidates = [c for c in self._grid.coords() if self.is_valid_spawn(c)]
        if not candidates:
            log.warning(
                "No valid spawn hex on %dx%d grid", self._grid.width, self._grid.height
            )
            return SpawnResult(False, reason=Failure.NOT_FOUND)
        return self._found(self._rng.choice(candidates), TIER_SCAN)

    def is_valid_spawn(self, coord: Coord) -> bool:
        cell = self._grid.get_cell(coord)
        if cell is None:
            return False
        if self._costs is not None:
            if not self._costs.passable_at(coord):
                return False
        elif cell.terrain in DEFAULT_IMPASSABLE:
            return False
        if (
            self._config.prefer_towns
            and cell.point_of_interest != self._config.settlement_kind
            and cell.terrain in self._config.harsh_terrain
        ):
            return False
        return True

    def _near_settlement(self) -> Coord | None:
        settlements = self._grid.points_of_interest(self._config.settlement_kind)
        self._rng.shuffle(settlements)
        for town in settlements:
            if self.is_valid_spawn(town):
                return town
            around = self._grid.neighbors(town)
            self._rng.shuffle(around)
            for coord in around:
                if self.is_valid_spawn(coord):
                    return coord
        return None

    def _ring_search(self) -> Coord | None:
        center = self._grid.center
        for radius in range(self._config.spawn_ring_radius + 1):
            ring = self._grid.ring(center, radius)
            self._rng.shuffle(ring)
            for coord in ring:
                if self.is_valid_spawn(coord):
                    return coord
        return None

    def _found(self, coord: Coord, tier: str) -> SpawnResult:
        log.debug("Spawn at %s (%s tier)", coord, tier)
        return SpawnResult(True, coord=coord, tier=tier)
