# Area: Round
"""Orchestrator — drives one round across the RGS, state machine and presentation."""
import asyncio
import logging
import random
from decimal import Decimal
from typing import Callable, Optional, Tuple, Union

from .enums import RoundPhase, RoundResolution
from .outcomes import FinalizeOutcome, PlayOutcome, RoundResult
from .selection import SelectionSignal, pick_other_container
from .session import BetSession
from .state_machine import PhaseListener, RoundStateMachine
from .._rgs.session_client import SessionClient
from .._shared.logging_config import log_round_error
from ..callbacks import RoundCallbacks
from ..errors import InvalidStateError, RGSError
from ..presentation import PresentationDriver

logger = logging.getLogger("cup_game.round.orchestrator")

DEFAULT_BET = Decimal("1")
DEFAULT_CONTAINER_COUNT = 3
DEFAULT_WIN_HOLD_SECONDS = 0.8
DEFAULT_LOSS_HOLD_SECONDS = 0.6


class RoundOrchestrator:
    """
    Runs rounds end to end for a single BetSession.

    Sole mutator of the session. At most one round is in flight: a
    second play_round() while the phase is not REST fails with
    InvalidStateError before anything is deducted.
    """

    def __init__(
        self,
        client: SessionClient,
        presentation: PresentationDriver,
        callbacks: Optional[RoundCallbacks] = None,
        session: Optional[BetSession] = None,
        container_count: int = DEFAULT_CONTAINER_COUNT,
        win_hold_seconds: float = DEFAULT_WIN_HOLD_SECONDS,
        loss_hold_seconds: float = DEFAULT_LOSS_HOLD_SECONDS,
        force_end_round: bool = False,
        rng: Optional[random.Random] = None,
    ):
        if container_count < 2:
            raise ValueError(f"container_count must be >= 2, got {container_count}")
        self.client = client
        self.presentation = presentation
        self.callbacks = callbacks or RoundCallbacks()
        self.session = session or BetSession()
        self.container_count = container_count
        self.win_hold_seconds = win_hold_seconds
        self.loss_hold_seconds = loss_hold_seconds
        self.force_end_round = force_end_round
        self._rng = rng or random.Random()
        self._selection: Optional[SelectionSignal] = None

    # ── Gate queries (consumed by the UI gate) ──────────────────

    @property
    def state_machine(self) -> RoundStateMachine:
        return self.session.state_machine

    def get_phase(self) -> RoundPhase:
        return self.state_machine.get_phase()

    def can_adjust_bet(self) -> bool:
        return self.state_machine.can_adjust_bet()

    def can_start_play(self) -> bool:
        return self.state_machine.can_start_play()

    def can_pick_container(self) -> bool:
        return self.state_machine.can_pick_container() and self._selection is not None

    def subscribe(self, listener: PhaseListener) -> Callable[[], None]:
        return self.state_machine.subscribe(listener)

    # ── Session ─────────────────────────────────────────────────

    async def authenticate(self) -> Decimal:
        """Open the RGS session and take the server balance."""
        try:
            balance = await self.client.authenticate()
        except RGSError as e:
            logger.error("Authentication failed: %s", e)
            log_round_error(e)
            raise
        self.session.set_authenticated_balance(balance)
        return balance

    def force_reset(self) -> None:
        """Put the session back at rest after a failure the core left unresolved."""
        self._selection = None
        self.state_machine.reset()

    # ── Player input ────────────────────────────────────────────

    def pick(self, index: int) -> bool:
        """
        Accept the player's container choice.

        Only the first pick of a round counts. Input is closed in this
        same call (phase leaves AWAITING_PICK) before any await.

        Returns:
            True if the pick was accepted, False if it was ignored

        Raises:
            ValueError: If index is not a container index
        """
        if not self.can_pick_container():
            logger.debug("Pick %s ignored in phase %s", index, self.get_phase().value)
            return False
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(f"Container index must be an int, got {index!r}")
        if not 0 <= index < self.container_count:
            raise ValueError(f"Container index {index} out of range [0, {self.container_count})")
        if not self._selection.offer(index):
            return False
        self.state_machine.transition(RoundPhase.RESOLVING)
        logger.info("Container %d picked", index)
        return True

    # ── Round ───────────────────────────────────────────────────

    async def play_round(self, bet_amount: Union[Decimal, int, str] = DEFAULT_BET) -> RoundResult:
        """
        Play one round: bet, wait for a pick, reveal, settle.

        Raises:
            InvalidStateError: If a round is already in progress
            ServerError, NetworkError: Start failed (phase back at REST)
                or finalize failed (phase left as is)
        """
        bet_amount = Decimal(bet_amount)
        if bet_amount <= 0:
            raise ValueError(f"Bet amount must be positive, got {bet_amount}")
        if not self.can_start_play():
            raise InvalidStateError("start play", self.get_phase())

        # Everything up to the first await runs as one step
        self.session.deduct_bet(bet_amount)
        self.state_machine.transition(RoundPhase.PLAYING)
        self._selection = SelectionSignal()

        try:
            outcome, recovering = await self._start_round(bet_amount)
            self.state_machine.transition(RoundPhase.AWAITING_PICK)
            selection = await self._selection.wait()
        finally:
            self._selection = None

        if recovering:
            result = await self._settle_recovery(selection, bet_amount, outcome)
        else:
            result = await self._settle(selection, bet_amount, outcome)

        if self.get_phase() != RoundPhase.REST:
            self.state_machine.transition(RoundPhase.REST)
        self.callbacks.on_rest(result)
        return result

    async def finalize_round(self) -> FinalizeOutcome:
        """
        Close the open round on the server and adopt its balance.

        On failure the phase is left unchanged and the error propagates.
        """
        try:
            outcome = await self.client.end_round()
        except Exception as e:
            logger.error("Failed to finalize round: %s", e)
            if isinstance(e, RGSError):
                log_round_error(e)
            raise
        self.session.record_finalize(outcome)
        self.state_machine.transition(RoundPhase.REST)
        logger.info("Round finalized. New balance: %s", outcome.confirmed_balance)
        return outcome

    async def _start_round(self, bet_amount: Decimal) -> Tuple[Optional[PlayOutcome], bool]:
        """Returns (outcome, recovering). Fatal errors reset the phase and propagate."""
        try:
            outcome = await self.client.start_round(bet_amount)
        except Exception as e:
            if self.client.is_active_bet_error(e):
                logger.info("Active bet detected, open round will be finalized after pick")
                return None, True
            self._abort_start(e)
            raise

        try:
            self.session.record_play(outcome, bet_amount)
        except Exception as e:
            self._abort_start(e)
            raise
        if outcome.state is not None:
            logger.info("Round state: %s", outcome.state)
        if self.force_end_round:
            logger.info("Forced end-round mode, skipping reveal")
            return outcome, True
        return outcome, False

    def _abort_start(self, error: Exception) -> None:
        """Fatal start failure: keep the deduction, mark it stale, back to REST."""
        logger.error("Round start failed: %s", error)
        if isinstance(error, RGSError):
            log_round_error(error)
        self.session.balance_stale = True
        self.state_machine.transition(RoundPhase.REST)

    async def _settle_recovery(
        self, selection: int, bet_amount: Decimal, outcome: Optional[PlayOutcome]
    ) -> RoundResult:
        confirmation = await self.finalize_round()
        self.callbacks.on_balance_update(confirmation)
        return RoundResult(
            resolution=RoundResolution.RECOVERY,
            selection=selection,
            reveal_target=None,
            bet_amount=bet_amount,
            win_amount=Decimal("0"),
            balance=self.session.balance,
            play_outcome=outcome,
            finalize_outcome=confirmation,
        )

    async def _settle(self, selection: int, bet_amount: Decimal, outcome: PlayOutcome) -> RoundResult:
        # Reveal target is fixed before the first animation step
        if outcome.is_win:
            reveal_target = selection
        else:
            reveal_target = pick_other_container(selection, self.container_count, self._rng)

        try:
            if outcome.is_win:
                await self._animate_win(selection)
            else:
                await self._animate_loss(selection, reveal_target)
            await self.presentation.layout()
        except Exception:
            logger.exception("Reveal sequence failed, returning to rest")
            self.force_reset()
            raise

        if not outcome.is_win:
            # Ordinary losses are not finalized; the next round start supersedes them
            logger.info("Loss: selection=%d, marker under %d", selection, reveal_target)
            return RoundResult(
                resolution=RoundResolution.LOSS,
                selection=selection,
                reveal_target=reveal_target,
                bet_amount=bet_amount,
                win_amount=Decimal("0"),
                balance=self.session.balance,
                play_outcome=outcome,
            )

        confirmation = await self.finalize_round()
        self.callbacks.on_balance_update(confirmation)
        win_amount = outcome.win_amount(bet_amount)
        logger.info("Win: selection=%d, amount=%s", selection, win_amount)
        self.callbacks.on_win(win_amount)
        return RoundResult(
            resolution=RoundResolution.WIN,
            selection=selection,
            reveal_target=reveal_target,
            bet_amount=bet_amount,
            win_amount=win_amount,
            balance=self.session.balance,
            play_outcome=outcome,
            finalize_outcome=confirmation,
        )

    async def _animate_win(self, selection: int) -> None:
        await self.presentation.lift(selection)
        await self.presentation.reveal_at(selection)
        await asyncio.sleep(self.win_hold_seconds)
        await self.presentation.lower(selection)
        await self.presentation.hide_reveal()

    async def _animate_loss(self, selection: int, other: int) -> None:
        # Lifting the pick shows it empty
        await self.presentation.lift(selection)
        await asyncio.sleep(self.loss_hold_seconds)
        await self.presentation.lower(selection)
        await self.presentation.lift(other)
        await self.presentation.reveal_at(other)
        await asyncio.sleep(self.win_hold_seconds)
        await self.presentation.lower(other)
        await self.presentation.hide_reveal()
