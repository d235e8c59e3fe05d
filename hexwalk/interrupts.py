"""EncounterGate - interrupt source that suspends movement during encounters."""
from __future__ import annotations

import logging

from hexwalk.types import ResumeTokenLike

log = logging.getLogger(__name__)


class EncounterGate:
    """Tracks whether an encounter is running and who is waiting for it to end.

    Movement that arrives on a hex while an encounter is active hands its
    resume token to ``defer``; ``end`` resolves every waiting token once.
    """

    def __init__(self) -> None:
        self._active: str | None = None
        self._waiting: list[ResumeTokenLike] = []

    @property
    def active(self) -> str | None:
        """Name of the running encounter, or None."""
        return self._active

    def is_active(self) -> bool:
        return self._active is not None

    def begin(self, name: str = "encounter") -> None:
        self._active = name
        log.debug("Encounter '%s' began", name)

    def end(self) -> int:
        """End the encounter and resolve waiting tokens. Returns how many resumed."""
        name, self._active = self._active, None
        waiting, self._waiting = self._waiting, []
        resumed = sum(1 for token in waiting if token.resolve())
        log.debug("Encounter '%s' ended, %d waiter(s) resumed", name, resumed)
        return resumed

    def defer(self, token: ResumeTokenLike) -> None:
        if self._active is None:
            token.resolve()
            return
        self._waiting.append(token)

    def waiting(self) -> int:
        return len(self._waiting)
