# Area: Round
"""
cup_game._round.enums — Round Phase Enums
==========================================

Defines the phases of a single round and the outcome kinds a round
can resolve to.
"""

from enum import Enum


class RoundPhase(Enum):
    """
    Phases of the round state machine.

    Phase transitions:
    REST -> PLAYING (bet placed, start-round call issued)
    PLAYING -> AWAITING_PICK (server answered, or active bet detected)
    PLAYING -> REST (fatal start-round failure)
    AWAITING_PICK -> RESOLVING (player picked a container)
    RESOLVING -> REST (round finished: win, loss or recovery)
    """
    REST = "rest"
    PLAYING = "playing"
    AWAITING_PICK = "awaiting_pick"
    RESOLVING = "resolving"


class TransitionResult(Enum):
    """Outcome of a transition request. Rejections are reported, not raised."""
    OK = "ok"
    REJECTED = "rejected"


class RoundResolution(Enum):
    """
    How a round was settled.

    - WIN: payout multiplier > 0, reveal under the player's pick, finalized
    - LOSS: no payout, reveal under another container, not finalized
    - RECOVERY: server reported an open bet, finalized without reveal
    """
    WIN = "win"
    LOSS = "loss"
    RECOVERY = "recovery"
