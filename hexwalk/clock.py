"""TurnClock - accumulates turn cost reported by completed moves."""
from __future__ import annotations


class TurnClock:
    def __init__(self, turn: int = 0) -> None:
        if turn < 0:
            raise ValueError(f"turn must be >= 0, got {turn}")
        self._turn = turn
        self._advances = 0

    @property
    def turn(self) -> int:
        return self._turn

    @property
    def advances(self) -> int:
        """Number of ``advance`` calls received."""
        return self._advances

    def advance(self, units: int) -> int:
        if units < 0:
            raise ValueError(f"cannot advance by negative units: {units}")
        self._turn += units
        self._advances += 1
        return self._turn

    def reset(self, turn: int = 0) -> None:
        self._turn = turn
        self._advances = 0
