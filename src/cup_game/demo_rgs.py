# Area: Shared
"""
cup_game.demo_rgs — In-process RGS for offline play
====================================================

A ready-to-use SessionClient that decides rounds locally. It behaves
like the real wallet API where the round logic cares:

- a started round stays open until end_round() is called
- starting a round while one is open fails with ActiveBetError
- a loss is never finalized by the orchestrator, so the next
  start_round() supersedes it instead of reporting an active bet

Usage:
    from cup_game import DemoRGS, GameRunner

    runner = GameRunner(config={"demo_mode": True}, client=DemoRGS())
    runner.run()
"""

import asyncio
import logging
import random
from decimal import Decimal
from typing import Optional

from ._rgs.session_client import SessionClient
from ._round.outcomes import FinalizeOutcome, PlayOutcome
from .errors import ActiveBetError, ServerError

logger = logging.getLogger("cup_game.demo_rgs")

DEFAULT_STARTING_BALANCE = Decimal("1000")
DEFAULT_PAYOUT_MULTIPLIER = Decimal("3")


class DemoRGS(SessionClient):
    """
    Simulated Remote Game Server.

    Win probability defaults to 1/3, a fair pick among three
    containers. The balance is settled server-side when a round
    starts (bet taken, payout credited) just like the real RGS.
    """

    def __init__(
        self,
        starting_balance: Decimal = DEFAULT_STARTING_BALANCE,
        win_probability: float = 1 / 3,
        payout_multiplier: Decimal = DEFAULT_PAYOUT_MULTIPLIER,
        latency_seconds: float = 0.0,
        rng: Optional[random.Random] = None,
    ):
        if not 0.0 <= win_probability <= 1.0:
            raise ValueError(f"win_probability must be within [0, 1], got {win_probability}")
        self.balance = Decimal(starting_balance)
        self.win_probability = win_probability
        self.payout_multiplier = Decimal(payout_multiplier)
        self.latency_seconds = latency_seconds
        self._rng = rng or random.Random()
        self._round_counter = 0
        self._open_round: Optional[PlayOutcome] = None

    @property
    def has_open_round(self) -> bool:
        return self._open_round is not None

    async def authenticate(self) -> Decimal:
        await self._latency()
        return self.balance

    async def start_round(self, bet_amount: Decimal) -> PlayOutcome:
        await self._latency()
        if self._open_round is not None and self._open_round.is_win:
            raise ActiveBetError(
                "Player has an active bet",
                endpoint="demo/play",
                status_code=400,
                code="ERR_ACTIVE_BET",
            )
        if bet_amount > self.balance:
            raise ServerError(
                "Insufficient balance",
                endpoint="demo/play",
                status_code=400,
                code="ERR_IPB",
            )

        self._round_counter += 1
        won = self._rng.random() < self.win_probability
        multiplier = self.payout_multiplier if won else Decimal("0")
        self.balance = self.balance - bet_amount + multiplier * bet_amount
        outcome = PlayOutcome(
            payout_multiplier=multiplier,
            round_id=str(self._round_counter),
            state="won" if won else "lost",
            balance=self.balance,
            raw={"round": {"betID": self._round_counter, "payoutMultiplier": str(multiplier)}},
        )
        self._open_round = outcome
        logger.debug("Demo round %d: %s", self._round_counter, outcome.state)
        return outcome

    async def end_round(self) -> FinalizeOutcome:
        await self._latency()
        self._open_round = None
        return FinalizeOutcome(
            confirmed_balance=self.balance,
            raw={"balance": {"amount": str(self.balance)}},
        )

    async def _latency(self) -> None:
        if self.latency_seconds:
            await asyncio.sleep(self.latency_seconds)
