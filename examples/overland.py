"""Overland walk - spawn a scout, preview a route, walk it through an ambush."""
from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path

from hexwalk import (
    CostModel,
    EncounterGate,
    HexGrid,
    MovementConfig,
    MovementExecutor,
    PathPlanner,
    PreviewSession,
    ReachabilitySolver,
    SignalBus,
    SpawnLocator,
    Traveler,
    TurnClock,
    configure_logging,
    load_config,
    make_movement_system,
)
from hexwalk.signals import Arrived, Completed, Suspended

TERRAIN = ["plains", "plains", "plains", "forest", "hills", "swamp", "mountains", "water"]


def build_grid(rng: random.Random, width: int, height: int) -> HexGrid:
    grid = HexGrid(width, height)
    for coord in grid.coords():
        grid.set_terrain(coord, rng.choice(TERRAIN))
    for _ in range(3):
        town = rng.choice(grid.coords())
        grid.set_terrain(town, "road")
        grid.set_point_of_interest(town, "settlement")
    return grid


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--config", type=Path, default=Path(__file__).with_name("movement.yaml"))
    parser.add_argument("--ambush-at", type=int, default=3, help="tick the ambush starts")
    args = parser.parse_args()

    configure_logging(logging.DEBUG)
    config = load_config(args.config) if args.config.exists() else MovementConfig()
    rng = random.Random(args.seed)

    grid = build_grid(rng, 16, 12)
    costs = CostModel.from_config(config, grid)
    spawn = SpawnLocator(grid, costs, config, rng).find_spawn()
    if not spawn.ok:
        raise SystemExit("no valid spawn hex on this map")

    scout = Traveler("scout", spawn.coord)
    bus = SignalBus()
    clock = TurnClock()
    gate = EncounterGate()
    executor = MovementExecutor(scout, clock, gate, bus, config)
    session = PreviewSession(grid, scout, PathPlanner(grid, costs), costs, executor, bus)
    system = make_movement_system(executor, bus)

    bus.subscribe(Arrived, lambda signal: print(f"  arrived {signal.coord}"))
    bus.subscribe(Suspended, lambda signal: print(f"  halted at {signal.coord}"))
    bus.subscribe(Completed, lambda signal: print(f"  done: {signal.hexes} hexes, cost {signal.cost}"))

    print(f"{scout.name} spawns at {scout.position} ({spawn.tier} tier)")
    reach = ReachabilitySolver(grid, costs).reachable(scout.position, 6)
    destination = max(reach, key=lambda c: grid.distance(scout.position, c), default=None)
    if destination is None:
        raise SystemExit("scout is boxed in")

    preview = session.request(destination)
    print(f"route to {destination}: {len(preview.path) - 1} hexes, {preview.cost} turns")
    for row in preview.breakdown:
        print(f"  {row.coord} {row.terrain:<10} +{row.cost} = {row.total}")
    session.request(destination)

    tick = 0
    while not executor.is_idle and tick < 100:
        tick += 1
        if tick == args.ambush_at:
            gate.begin("ambush")
        if tick == args.ambush_at + 4:
            gate.end()
        system(None, ctx=tick)

    print(f"clock now at turn {clock.turn}")


if __name__ == "__main__":
    main()
