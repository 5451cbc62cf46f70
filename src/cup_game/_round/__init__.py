# Area: Round
"""
Round layer - local round lifecycle on top of the RGS.

This package handles:
- Phase tracking and transition validation
- Bet session bookkeeping
- Player selection and reveal-target choice
- Round orchestration (start, pick, reveal, settle)
- Input gating by phase
"""

from .enums import RoundPhase, RoundResolution, TransitionResult
from .outcomes import FinalizeOutcome, PlayOutcome, RoundResult
from .state_machine import RoundStateMachine
from .session import BetSession
from .selection import SelectionSignal, pick_other_container

__all__ = [
    "RoundPhase",
    "RoundResolution",
    "TransitionResult",
    "FinalizeOutcome",
    "PlayOutcome",
    "RoundResult",
    "RoundStateMachine",
    "BetSession",
    "SelectionSignal",
    "pick_other_container",
]
