"""Movement signals and the bus that delivers them between ticks.

Each signal is a frozen dataclass. Handlers subscribe to a signal class and
receive the instance, so payloads are checked where they are built instead
of where they are read.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Union

from hexwalk.types import Coord


@dataclass(frozen=True, slots=True)
class PreviewShown:
    destination: Coord
    path: tuple[Coord, ...]
    cost: int


@dataclass(frozen=True, slots=True)
class PreviewCleared:
    confirmed: bool


@dataclass(frozen=True, slots=True)
class MoveStarted:
    path: tuple[Coord, ...]
    cost: int


@dataclass(frozen=True, slots=True)
class Arrived:
    """The agent entered ``coord``, the ``index``-th hex of the path."""

    coord: Coord
    index: int
    remaining: int


@dataclass(frozen=True, slots=True)
class Suspended:
    coord: Coord


@dataclass(frozen=True, slots=True)
class Resumed:
    coord: Coord


@dataclass(frozen=True, slots=True)
class Completed:
    hexes: int
    cost: int


@dataclass(frozen=True, slots=True)
class Cancelled:
    hexes: int
    position: Coord


MovementSignal = Union[
    PreviewShown,
    PreviewCleared,
    MoveStarted,
    Arrived,
    Suspended,
    Resumed,
    Completed,
    Cancelled,
]

SIGNAL_TYPES: tuple[type, ...] = (
    PreviewShown,
    PreviewCleared,
    MoveStarted,
    Arrived,
    Suspended,
    Resumed,
    Completed,
    Cancelled,
)

_Handler = Callable[[MovementSignal], None]


def _check_type(signal_type: type) -> None:
    if signal_type not in SIGNAL_TYPES:
        raise TypeError(f"{signal_type.__qualname__} is not a movement signal")


class SignalBus:
    """Queues movement signals and hands them to subscribers on ``flush()``.

    Handlers registered with ``subscribe`` see one signal class;
    ``subscribe_all`` handlers see every signal, after the typed ones.
    Signals published while flushing are held for the next flush.
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[_Handler]] = {t: [] for t in SIGNAL_TYPES}
        self._catch_all: list[_Handler] = []
        self._pending: deque[MovementSignal] = deque()

    def subscribe(self, signal_type: type, handler: _Handler) -> None:
        """Register ``handler(signal)`` for one signal class.

        Raises ``TypeError`` for a class that is not a movement signal.
        """
        _check_type(signal_type)
        self._handlers[signal_type].append(handler)

    def subscribe_all(self, handler: _Handler) -> None:
        self._catch_all.append(handler)

    def unsubscribe(self, signal_type: type, handler: _Handler) -> bool:
        """Remove a typed handler. Returns False if it was not registered."""
        handlers = self._handlers.get(signal_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def publish(self, signal: MovementSignal) -> None:
        _check_type(type(signal))
        self._pending.append(signal)

    def pending(self) -> int:
        return len(self._pending)

    def flush(self) -> int:
        """Deliver every signal queued before this call. Returns how many."""
        count = len(self._pending)
        for _ in range(count):
            signal = self._pending.popleft()
            for handler in tuple(self._handlers[type(signal)]):
                handler(signal)
            for handler in tuple(self._catch_all):
                handler(signal)
        return count

    def clear(self) -> None:
        self._pending.clear()
