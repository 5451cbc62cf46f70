# Area: Round
"""
cup_game._round.state_machine — Round State Machine
====================================================

Tracks the local phase of the current round and gates user input.
Transitions outside the table are reported and leave the phase
unchanged; they never raise unless the caller asks for strict mode.
"""

import logging
from typing import Callable, List

from .enums import RoundPhase, TransitionResult
from ..errors import UnknownTransitionError

logger = logging.getLogger("cup_game.round.state_machine")

PhaseListener = Callable[[RoundPhase], None]


# Valid transitions: {current_phase: {allowed next phases}}
TRANSITIONS = {
    RoundPhase.REST: {RoundPhase.PLAYING},
    RoundPhase.PLAYING: {RoundPhase.AWAITING_PICK, RoundPhase.REST},
    RoundPhase.AWAITING_PICK: {RoundPhase.RESOLVING},
    RoundPhase.RESOLVING: {RoundPhase.REST},
}


def can_transition(current: RoundPhase, next_phase: RoundPhase) -> bool:
    """Check the transition table for a single edge."""
    return next_phase in TRANSITIONS.get(current, set())


class RoundStateMachine:
    """
    State machine for the round lifecycle.

    Starts in REST and cycles once per round. Every phase change is
    broadcast to subscribers (the UI gate, the console runner).

    Attributes:
        current_phase: The current phase of the round
    """

    def __init__(self):
        """Initialize state machine in REST."""
        self.current_phase = RoundPhase.REST
        self._listeners: List[PhaseListener] = []

    def get_phase(self) -> RoundPhase:
        return self.current_phase

    def can_transition(self, next_phase: RoundPhase) -> bool:
        """
        Check if moving to next_phase is valid from the current phase.

        Args:
            next_phase: The phase to check

        Returns:
            True if the transition is in the table, False otherwise
        """
        return can_transition(self.current_phase, next_phase)

    def transition(self, next_phase: RoundPhase, strict: bool = False) -> TransitionResult:
        """
        Move to next_phase if the table allows it.

        Args:
            next_phase: The requested phase
            strict: If True, raise instead of reporting a rejection

        Returns:
            TransitionResult.OK, or TransitionResult.REJECTED with the
            phase unchanged

        Raises:
            UnknownTransitionError: If the transition is invalid and strict=True
        """
        if not self.can_transition(next_phase):
            error = UnknownTransitionError(self.current_phase, next_phase)
            if strict:
                raise error
            logger.warning("%s (ignored)", error)
            return TransitionResult.REJECTED

        logger.info(
            "Phase transition: %s -> %s", self.current_phase.value, next_phase.value
        )
        self.current_phase = next_phase
        self._notify()
        return TransitionResult.OK

    def reset(self) -> None:
        """Force the machine back to REST, bypassing the table."""
        if self.current_phase == RoundPhase.REST:
            return
        logger.warning("Forced reset: %s -> rest", self.current_phase.value)
        self.current_phase = RoundPhase.REST
        self._notify()

    # ── Gate predicates ─────────────────────────────────────────

    def can_adjust_bet(self) -> bool:
        return self.current_phase == RoundPhase.REST

    def can_start_play(self) -> bool:
        return self.current_phase == RoundPhase.REST

    def can_pick_container(self) -> bool:
        return self.current_phase == RoundPhase.AWAITING_PICK

    # ── Subscriptions ───────────────────────────────────────────

    def subscribe(self, listener: PhaseListener) -> Callable[[], None]:
        """
        Register a listener called with the new phase on every change.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self.current_phase)
            except Exception:
                logger.exception("Phase listener failed for %s", self.current_phase.value)
