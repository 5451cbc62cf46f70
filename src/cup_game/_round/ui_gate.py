# Area: Round
"""
cup_game._round.ui_gate — Input gating by phase
================================================

Enables and disables input controls strictly as a function of the
current round phase. Subscribes to the state machine, so controls
follow every transition without the orchestrator knowing about them.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol, Sequence

from .enums import RoundPhase
from .state_machine import RoundStateMachine

logger = logging.getLogger("cup_game.round.ui_gate")


class Control(Protocol):
    """Anything that can be switched on and off (button, sprite, widget)."""

    def set_enabled(self, enabled: bool) -> None: ...


@dataclass(frozen=True)
class ControlStates:
    """Which control groups accept input in a phase."""
    bet_buttons: bool
    play_button: bool
    containers: bool


PHASE_CONTROLS: Dict[RoundPhase, ControlStates] = {
    RoundPhase.REST: ControlStates(bet_buttons=True, play_button=True, containers=False),
    RoundPhase.PLAYING: ControlStates(bet_buttons=False, play_button=False, containers=False),
    RoundPhase.AWAITING_PICK: ControlStates(bet_buttons=False, play_button=False, containers=True),
    RoundPhase.RESOLVING: ControlStates(bet_buttons=False, play_button=False, containers=False),
}


class UIGate:
    """
    Applies PHASE_CONTROLS to registered controls on every phase change.

    Usage:
        gate = UIGate(orchestrator.state_machine)
        gate.register(bet_buttons=[minus, plus], play_button=play, containers=cups)
    """

    def __init__(self, state_machine: RoundStateMachine):
        self.state_machine = state_machine
        self.bet_buttons: List[Control] = []
        self.play_button: Optional[Control] = None
        self.containers: List[Control] = []
        self._unsubscribe: Optional[Callable[[], None]] = state_machine.subscribe(self.update)

    def register(
        self,
        bet_buttons: Sequence[Control] = (),
        play_button: Optional[Control] = None,
        containers: Sequence[Control] = (),
    ) -> None:
        """Register controls and apply the current phase immediately."""
        self.bet_buttons = list(bet_buttons)
        self.play_button = play_button
        self.containers = list(containers)
        self.update(self.state_machine.get_phase())

    def update(self, phase: RoundPhase) -> ControlStates:
        states = PHASE_CONTROLS[phase]
        _set_all(self.bet_buttons, states.bet_buttons)
        if self.play_button is not None:
            self.play_button.set_enabled(states.play_button)
        _set_all(self.containers, states.containers)
        logger.debug(
            "Controls for %s: bet=%s play=%s containers=%s",
            phase.value, states.bet_buttons, states.play_button, states.containers,
        )
        return states

    def reset(self) -> None:
        """Stop following the state machine and drop all controls."""
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
        self.bet_buttons = []
        self.play_button = None
        self.containers = []


def _set_all(controls: Sequence[Control], enabled: bool) -> None:
    for control in controls:
        control.set_enabled(enabled)
