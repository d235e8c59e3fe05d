"""MovementExecutor - interruptible, tick-driven hex-by-hex movement."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from hexwalk.signals import (
    Arrived,
    Cancelled,
    Completed,
    MoveStarted,
    MovementSignal,
    Resumed,
    Suspended,
)
from hexwalk.config import MovementConfig
from hexwalk.types import Coord, Failure, MovementSession, MoveResult, MoveState

if TYPE_CHECKING:
    from hexwalk.signals import SignalBus
    from hexwalk.types import Agent, InterruptSource, TurnSink

log = logging.getLogger(__name__)


class ResumeToken:
    """One-shot resume signal handed out when movement suspends.

    The interrupt source resolves it; the executor cancels it when the
    move is cancelled, after which ``resolve`` does nothing.
    """

    def __init__(self) -> None:
        self._resolved = False
        self._cancelled = False

    @property
    def resolved(self) -> bool:
        return self._resolved

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def resolve(self) -> bool:
        if self._cancelled or self._resolved:
            return False
        self._resolved = True
        return True

    def cancel(self) -> None:
        self._cancelled = True


class MovementExecutor:
    """Walks an agent along a confirmed path, one hex per ``step_delay`` ticks.

    After every arrival the interrupt source is consulted. If it reports an
    active interruption the executor suspends and waits for its resume token.
    Once the token resolves, ``resume_delay`` ticks pass idle and the tick
    after them resumes, so a delay of 0 resumes on the first tick that sees
    the resolved token. Paths are trusted:
    intermediate hexes are not re-validated.
    """

    def __init__(
        self,
        agent: Agent | None = None,
        clock: TurnSink | None = None,
        interrupt: InterruptSource | None = None,
        bus: SignalBus | None = None,
        config: MovementConfig | None = None,
    ) -> None:
        config = config or MovementConfig()
        self._agent = agent
        self._clock = clock
        self._interrupt = interrupt
        self._bus = bus
        self._step_delay = config.step_delay
        self._resume_delay = config.resume_delay
        self._state = MoveState.IDLE
        self._session: MovementSession | None = None
        self._token: ResumeToken | None = None
        self._countdown = 0
        self.last_result: MoveResult | None = None

    # --- Queries ---

    @property
    def state(self) -> MoveState:
        return self._state

    @property
    def session(self) -> MovementSession | None:
        return self._session

    @property
    def resume_token(self) -> ResumeToken | None:
        return self._token

    @property
    def is_idle(self) -> bool:
        return self._state is MoveState.IDLE

    def bind(self, agent: Agent) -> None:
        self._agent = agent

    # --- Commands ---

    def start(self, path: Sequence[Coord], cost: int) -> MoveResult:
        if self._agent is None:
            return MoveResult(False, Failure.NOT_INITIALIZED, "no agent bound")
        if self._state is not MoveState.IDLE:
            return MoveResult(False, Failure.ALREADY_MOVING, "already moving")
        if len(path) < 2:
            return MoveResult(False, Failure.PATH_TOO_SHORT, "path needs at least two hexes")

        self._session = MovementSession(path=list(path), cost=cost)
        self._state = MoveState.MOVING
        self._countdown = self._step_delay
        self._publish(MoveStarted(tuple(path), cost))
        log.debug("Move started: %d hexes, cost %d", len(path) - 1, cost)
        return MoveResult(True, hexes=len(path) - 1, cost=cost)

    def tick(self) -> None:
        """Advance cooperative scheduling by one tick."""
        if self._state is MoveState.MOVING:
            self._countdown -= 1
            if self._countdown <= 0:
                self._advance()
        elif self._state is MoveState.SUSPENDED:
            token = self._token
            if token is None or not token.resolved:
                return
            if self._countdown > 0:
                # one full tick of waiting per unit of resume_delay
                self._countdown -= 1
                return
            self._resume()

    def resume(self) -> bool:
        """Resolve the pending resume token directly. False if none is pending."""
        if self._token is None:
            return False
        return self._token.resolve()

    def cancel(self) -> bool:
        """Stop moving. Returns False when there was nothing to cancel."""
        if self._state is MoveState.IDLE:
            return False
        session = self._session
        assert session is not None
        if self._token is not None:
            self._token.cancel()
        hexes = session.hexes_moved
        self._finish()
        self.last_result = MoveResult(False, message="cancelled", hexes=hexes)
        self._publish(Cancelled(hexes, self._agent.position))
        log.debug("Move cancelled after %d hexes", hexes)
        return True

    # --- Internals ---

    def _advance(self) -> None:
        session = self._session
        assert session is not None and self._agent is not None
        session.cursor += 1
        coord = session.path[session.cursor]
        self._agent.position = coord
        self._publish(
            Arrived(coord, session.cursor, len(session.path) - 1 - session.cursor)
        )

        if self._interrupt is not None and self._interrupt.is_active():
            self._suspend(coord)
        elif session.exhausted:
            self._complete()
        else:
            self._countdown = self._step_delay

    def _suspend(self, coord: Coord) -> None:
        self._state = MoveState.SUSPENDED
        self._token = ResumeToken()
        self._countdown = self._resume_delay
        self._publish(Suspended(coord))
        log.debug("Move suspended at %s", coord)
        assert self._interrupt is not None
        self._interrupt.defer(self._token)

    def _resume(self) -> None:
        session = self._session
        assert session is not None
        self._token = None
        self._publish(Resumed(session.path[session.cursor]))
        log.debug("Move resumed at %s", session.path[session.cursor])
        if session.exhausted:
            self._complete()
        else:
            self._state = MoveState.MOVING
            self._countdown = self._step_delay

    def _complete(self) -> None:
        session = self._session
        assert session is not None
        hexes, cost = session.hexes_moved, session.cost
        self._finish()
        self.last_result = MoveResult(True, hexes=hexes, cost=cost)
        self._publish(Completed(hexes, cost))
        if self._clock is not None and cost > 0:
            self._clock.advance(cost)
        log.debug("Move completed: %d hexes, cost %d", hexes, cost)

    def _finish(self) -> None:
        if self._session is not None:
            self._session.active = False
        self._session = None
        self._token = None
        self._countdown = 0
        self._state = MoveState.IDLE

    def _publish(self, signal: MovementSignal) -> None:
        if self._bus is not None:
            self._bus.publish(signal)
