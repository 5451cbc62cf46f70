# Area: Round
"""
cup_game._round.outcomes — Round Outcome Dataclasses
=====================================================

PlayOutcome and FinalizeOutcome are produced by the session client
and consumed by the orchestrator. RoundResult is what play_round()
hands back to the caller once the round is back at rest.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional

from .enums import RoundResolution


@dataclass(frozen=True)
class PlayOutcome:
    """
    Server answer to a start-round call.

    Immutable once received. The reveal target is derived from it
    before any animation starts.

    Attributes:
        payout_multiplier: 0 or None means loss, > 0 means win
        round_id: Server bet/round identifier, if any
        state: Opaque server round-state token, if any
        balance: Balance reported with the play response, if any
        raw: The full response as received
    """

    payout_multiplier: Optional[Decimal] = None
    round_id: Optional[str] = None
    state: Any = None
    balance: Optional[Decimal] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Clients may hand back floats or strings; arithmetic needs Decimal
        for name in ("payout_multiplier", "balance"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, Decimal):
                object.__setattr__(self, name, Decimal(str(value)))

    @property
    def is_win(self) -> bool:
        return bool(self.payout_multiplier) and self.payout_multiplier > 0

    def win_amount(self, bet_amount: Decimal) -> Decimal:
        """Payout for bet_amount; zero on a loss."""
        if not self.is_win:
            return Decimal("0")
        return self.payout_multiplier * bet_amount


@dataclass(frozen=True)
class FinalizeOutcome:
    """
    Server confirmation of an end-round call.

    Attributes:
        confirmed_balance: Authoritative post-round balance
        raw: The full response as received
    """

    confirmed_balance: Decimal
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RoundResult:
    """
    Summary of one completed round.

    Attributes:
        resolution: WIN, LOSS or RECOVERY
        selection: Container index the player picked
        reveal_target: Container the win marker was shown under
            (None on recovery, where nothing is revealed)
        bet_amount: Amount deducted for this round
        win_amount: Payout reported to the win notification (0 otherwise)
        balance: Session balance after the round
        play_outcome: Start-round answer (None on recovery)
        finalize_outcome: End-round answer (None on an ordinary loss)
    """

    resolution: RoundResolution
    selection: int
    reveal_target: Optional[int]
    bet_amount: Decimal
    win_amount: Decimal
    balance: Decimal
    play_outcome: Optional[PlayOutcome] = None
    finalize_outcome: Optional[FinalizeOutcome] = None
