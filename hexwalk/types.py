"""Shared types, results and collaborator protocols for hexwalk."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

Coord = tuple[int, int]

IMPASSABLE = -1


class Failure(str, Enum):
    """Reasons an operation can fail. None of these are fatal."""

    NO_PATH = "no_path"
    IMPASSABLE = "impassable"
    ALREADY_THERE = "already_there"
    ALREADY_MOVING = "already_moving"
    PATH_TOO_SHORT = "path_too_short"
    NOT_INITIALIZED = "not_initialized"
    NOT_FOUND = "not_found"
    NO_PREVIEW = "no_preview"


class MoveState(str, Enum):
    IDLE = "idle"
    MOVING = "moving"
    SUSPENDED = "suspended"


@dataclass(frozen=True)
class StepCost:
    """One row of a path cost breakdown."""

    coord: Coord
    terrain: str | None
    cost: int
    total: int


@dataclass(frozen=True)
class PreviewResult:
    """Outcome of a preview request or confirmation.

    Attributes:
        ok: Whether the operation succeeded.
        reason: Why it failed, None on success.
        message: Human-readable detail.
        destination: The requested destination.
        path: The previewed route, origin first.
        cost: Turn cost of the route (origin excluded).
        breakdown: Per-hex terrain and running cost.
        started: True when movement began as a result of this call.
    """

    ok: bool
    reason: Failure | None = None
    message: str = ""
    destination: Coord | None = None
    path: tuple[Coord, ...] = ()
    cost: int = 0
    breakdown: tuple[StepCost, ...] = ()
    started: bool = False


@dataclass(frozen=True)
class MoveResult:
    ok: bool
    reason: Failure | None = None
    message: str = ""
    hexes: int = 0
    cost: int = 0


@dataclass(frozen=True)
class SpawnResult:
    ok: bool
    coord: Coord | None = None
    tier: str | None = None
    reason: Failure | None = None


@dataclass(frozen=True)
class PreviewState:
    """A pending preview awaiting confirmation."""

    path: tuple[Coord, ...]
    destination: Coord
    cost: int
    pending: bool = True


@dataclass
class MovementSession:
    """Runtime state of an in-progress move. Cursor indexes into path."""

    path: list[Coord]
    cost: int
    cursor: int = 0
    active: bool = True

    @property
    def hexes_moved(self) -> int:
        return self.cursor

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.path) - 1


@dataclass
class Traveler:
    """Minimal agent: a name and a logical position on the grid."""

    name: str
    position: Coord


class Agent(Protocol):
    position: Coord


class TurnSink(Protocol):
    def advance(self, units: int) -> None: ...


class InterruptSource(Protocol):
    def is_active(self) -> bool: ...
    def defer(self, token: ResumeTokenLike) -> None: ...


class ResumeTokenLike(Protocol):
    @property
    def resolved(self) -> bool: ...
    @property
    def cancelled(self) -> bool: ...
    def resolve(self) -> bool: ...
