# Area: Round
"""
cup_game._round.session — Bet session state
============================================

One BetSession per client session. Owned and mutated by the round
orchestrator; the phase lives in the session's state machine so
every phase change goes through the transition table.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional
import logging

from .enums import RoundPhase
from .outcomes import FinalizeOutcome, PlayOutcome
from .state_machine import RoundStateMachine

logger = logging.getLogger("cup_game.round.session")


@dataclass
class BetSession:
    """
    Balance and round bookkeeping for one player session.

    balance is provisional between a bet deduction and the next
    finalize; a finalize (or authenticate) always overwrites it.
    """
    balance: Decimal = Decimal("0")
    last_win: Decimal = Decimal("0")
    last_play_result: Optional[PlayOutcome] = None
    last_finalize_result: Optional[FinalizeOutcome] = None

    # Set after a fatal start failure; cleared by authenticate/finalize
    balance_stale: bool = False

    state_machine: RoundStateMachine = field(default_factory=RoundStateMachine)

    @property
    def current_phase(self) -> RoundPhase:
        return self.state_machine.current_phase

    def deduct_bet(self, amount: Decimal) -> None:
        self.balance -= amount
        logger.info("Balance deducted: %s, new balance: %s", amount, self.balance)

    def record_play(self, outcome: PlayOutcome, bet_amount: Decimal) -> None:
        self.last_play_result = outcome
        self.last_finalize_result = None
        self.last_win = outcome.win_amount(bet_amount)
        logger.info("Last win: %s", self.last_win)

    def record_finalize(self, outcome: FinalizeOutcome) -> None:
        self.last_finalize_result = outcome
        self.balance = outcome.confirmed_balance
        self.balance_stale = False

    def set_authenticated_balance(self, balance: Decimal) -> None:
        self.balance = balance
        self.balance_stale = False
