"""System factories for driving movement from a tick loop."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from hexwalk.executor import MovementExecutor
    from hexwalk.signals import SignalBus


def make_movement_system(
    executor: MovementExecutor,
    bus: SignalBus | None = None,
) -> Callable[[object, object], None]:
    """Return a ``(world, ctx)`` system that ticks the executor, then flushes signals."""

    def movement_system(world: object, ctx: object) -> None:
        executor.tick()
        if bus is not None:
            bus.flush()

    return movement_system
