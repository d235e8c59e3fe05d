"""hexwalk - Terrain-aware hex movement: routing, preview, execution, spawning."""
from __future__ import annotations

from hexwalk.clock import TurnClock
from hexwalk.config import MovementConfig, load_config
from hexwalk.costs import CostModel
from hexwalk.executor import MovementExecutor, ResumeToken
from hexwalk.hexgrid import HexGrid, TerrainCell, hex_distance
from hexwalk.interrupts import EncounterGate
from hexwalk.logging_config import configure_logging
from hexwalk.pathfind import PathPlanner
from hexwalk.preview import PreviewSession
from hexwalk.reach import ReachabilitySolver
from hexwalk.signals import SignalBus
from hexwalk.spawn import SpawnLocator
from hexwalk.systems import make_movement_system
from hexwalk.types import (
    IMPASSABLE,
    Coord,
    Failure,
    MoveResult,
    MoveState,
    MovementSession,
    PreviewResult,
    PreviewState,
    SpawnResult,
    StepCost,
    Traveler,
)

__all__ = [
    "IMPASSABLE",
    "Coord",
    "CostModel",
    "EncounterGate",
    "Failure",
    "HexGrid",
    "MoveResult",
    "MoveState",
    "MovementConfig",
    "MovementExecutor",
    "MovementSession",
    "PathPlanner",
    "PreviewResult",
    "PreviewSession",
    "PreviewState",
    "ReachabilitySolver",
    "ResumeToken",
    "SignalBus",
    "SpawnLocator",
    "SpawnResult",
    "StepCost",
    "TerrainCell",
    "Traveler",
    "TurnClock",
    "configure_logging",
    "hex_distance",
    "load_config",
    "make_movement_system",
]
