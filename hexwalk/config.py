"""Movement configuration dataclass and YAML loader."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from hexwalk.types import IMPASSABLE

DEFAULT_TERRAIN_COSTS: dict[str, int] = {
    "plains": 1,
    "grassland": 1,
    "road": 1,
    "desert": 2,
    "forest": 2,
    "hills": 2,
    "badlands": 2,
    "swamp": 3,
    "mountains": 3,
    "water": IMPASSABLE,
}

DEFAULT_IMPASSABLE = frozenset({"water", "deep_water", "ocean"})

DEFAULT_HARSH = frozenset({"mountains", "swamp", "badlands"})

_IMPASSABLE_WORDS = {"impassable", "none", "blocked"}


@dataclass(frozen=True)
class MovementConfig:
    """Immutable configuration for movement, routing and spawning.

    Attributes:
        terrain_costs: Terrain name -> turn cost, or IMPASSABLE.
        impassable_terrain: Terrains that can never be entered. Overrides
            any terrain_costs entry.
        prefer_towns: Bias spawning toward settlements and reject harsh
            terrain away from them.
        harsh_terrain: Terrains rejected as spawn points when prefer_towns
            is set and the hex is not itself a settlement.
        settlement_kind: point_of_interest tag marking a settlement.
        step_delay: Ticks spent on each hex step.
        resume_delay: Idle ticks after the resume token resolves; 0 resumes at once.
        spawn_ring_radius: Largest ring radius tried around the grid center.
    """

    terrain_costs: Mapping[str, int] = field(
        default_factory=lambda: dict(DEFAULT_TERRAIN_COSTS)
    )
    impassable_terrain: frozenset[str] = DEFAULT_IMPASSABLE
    prefer_towns: bool = True
    harsh_terrain: frozenset[str] = DEFAULT_HARSH
    settlement_kind: str = "settlement"
    step_delay: int = 1
    resume_delay: int = 1
    spawn_ring_radius: int = 15

    def __post_init__(self) -> None:
        for terrain, cost in self.terrain_costs.items():
            if cost != IMPASSABLE and cost < 0:
                raise ValueError(
                    f"terrain cost for '{terrain}' must be >= 0 or IMPASSABLE, got {cost}"
                )
        if self.step_delay < 1:
            raise ValueError(f"step_delay must be >= 1, got {self.step_delay}")
        if self.resume_delay < 0:
            raise ValueError(f"resume_delay must be >= 0, got {self.resume_delay}")
        if self.spawn_ring_radius < 0:
            raise ValueError(
                f"spawn_ring_radius must be >= 0, got {self.spawn_ring_radius}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MovementConfig:
        """Build a config from plain key-value data.

        Unknown keys raise KeyError. A terrain cost of ``None`` or the
        string ``"impassable"`` marks that terrain impassable.
        """
        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            raise KeyError(f"Unknown config keys: {sorted(unknown)}")

        kwargs: dict[str, Any] = {}
        if "terrain_costs" in data:
            kwargs["terrain_costs"] = {
                str(name): _parse_cost(name, value)
                for name, value in (data["terrain_costs"] or {}).items()
            }
        for key in ("impassable_terrain", "harsh_terrain"):
            if key in data:
                kwargs[key] = frozenset(str(t) for t in (data[key] or ()))
        if "prefer_towns" in data:
            kwargs["prefer_towns"] = bool(data["prefer_towns"])
        if "settlement_kind" in data:
            kwargs["settlement_kind"] = str(data["settlement_kind"])
        for key in ("step_delay", "resume_delay", "spawn_ring_radius"):
            if key in data:
                kwargs[key] = int(data[key])
        return cls(**kwargs)


def _parse_cost(name: str, value: Any) -> int:
    if value is None:
        return IMPASSABLE
    if isinstance(value, str):
        if value.strip().lower() in _IMPASSABLE_WORDS:
            return IMPASSABLE
        raise ValueError(f"terrain cost for '{name}' is not a number: {value!r}")
    return int(value)


def load_config(path: Path | str) -> MovementConfig:
    """Load a MovementConfig from a YAML mapping. An empty file yields defaults."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return MovementConfig()
    if not isinstance(data, dict):
        raise ValueError(f"YAML config {path} must be a mapping at top level.")
    return MovementConfig.from_dict(data)
