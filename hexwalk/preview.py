"""PreviewSession - show a route and its cost before committing to it."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hexwalk.signals import MovementSignal, PreviewCleared, PreviewShown
from hexwalk.types import Coord, Failure, PreviewResult, PreviewState

if TYPE_CHECKING:
    from hexwalk.costs import CostModel
    from hexwalk.executor import MovementExecutor
    from hexwalk.hexgrid import HexGrid
    from hexwalk.pathfind import PathPlanner
    from hexwalk.signals import SignalBus
    from hexwalk.types import Agent

log = logging.getLogger(__name__)

HIGHLIGHT_OWNER = "preview"


class PreviewSession:
    """Idle/Previewing state machine in front of a MovementExecutor.

    Requesting the destination that is already being previewed confirms it.
    Failed requests leave any existing preview in place.
    """

    def __init__(
        self,
        grid: HexGrid | None,
        agent: Agent | None,
        planner: PathPlanner | None,
        costs: CostModel | None,
        executor: MovementExecutor | None,
        bus: SignalBus | None = None,
    ) -> None:
        if costs is not None and grid is not None:
            costs.attach(grid)
        self._grid = grid
        self._agent = agent
        self._planner = planner
        self._costs = costs
        self._executor = executor
        self._bus = bus
        self._state: PreviewState | None = None

    @property
    def state(self) -> PreviewState | None:
        return self._state

    @property
    def is_previewing(self) -> bool:
        return self._state is not None

    def request(self, destination: Coord) -> PreviewResult:
        if self._state is not None and self._state.destination == destination:
            return self.confirm()

        if (
            self._grid is None
            or self._agent is None
            or self._planner is None
            or self._costs is None
            or self._costs.grid is None
            or self._executor is None
        ):
            return PreviewResult(
                False, Failure.NOT_INITIALIZED, "movement is not wired up", destination
            )
        if not self._executor.is_idle:
            return PreviewResult(
                False, Failure.ALREADY_MOVING, "already moving", destination
            )
        if not self._costs.passable_at(destination):
            terrain = self._grid.terrain_at(destination)
            return PreviewResult(
                False,
                Failure.IMPASSABLE,
                f"{destination} is impassable ({terrain or 'off the map'})",
                destination,
            )
        origin = self._agent.position
        if origin == destination:
            return PreviewResult(
                False, Failure.ALREADY_THERE, "already at destination", destination
            )

        path = self._planner.find_path(origin, destination)
        if not path:
            return PreviewResult(
                False, Failure.NO_PATH, f"no route to {destination}", destination
            )

        cost = self._costs.path_cost(path)
        breakdown = tuple(self._costs.breakdown(path))
        self._grid.highlight(path, HIGHLIGHT_OWNER)
        self._state = PreviewState(path=tuple(path), destination=destination, cost=cost)
        self._publish(PreviewShown(destination, tuple(path), cost))
        log.debug("Previewing %s: %d hexes, cost %d", destination, len(path) - 1, cost)
        return PreviewResult(
            True,
            destination=destination,
            path=tuple(path),
            cost=cost,
            breakdown=breakdown,
        )

    def cancel(self) -> None:
        had_preview = self._state is not None
        self._clear()
        if had_preview:
            self._publish(PreviewCleared(confirmed=False))

    def confirm(self) -> PreviewResult:
        state = self._state
        if state is None:
            return PreviewResult(False, Failure.NO_PREVIEW, "nothing to confirm")
        if self._executor is None:
            return PreviewResult(
                False, Failure.NOT_INITIALIZED, "no executor", state.destination
            )

        self._clear()
        self._publish(PreviewCleared(confirmed=True))
        result = self._executor.start(state.path, state.cost)
        if not result.ok:
            return PreviewResult(
                False, result.reason, result.message, state.destination, state.path, state.cost
            )
        return PreviewResult(
            True,
            destination=state.destination,
            path=state.path,
            cost=state.cost,
            started=True,
        )

    def _clear(self) -> None:
        if self._grid is not None and self._grid.highlight_owner == HIGHLIGHT_OWNER:
            self._grid.clear_highlight()
        self._state = None

    def _publish(self, signal: MovementSignal) -> None:
        if self._bus is not None:
            self._bus.publish(signal)
