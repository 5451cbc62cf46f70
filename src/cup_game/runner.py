# Area: Runner
"""
cup_game.runner — Terminal game runner
=======================================

Wires config, session client, orchestrator and a console presentation
together and plays rounds from the keyboard until the player quits.
"""

from __future__ import annotations
import asyncio
import logging
from decimal import Decimal
from typing import Any, Callable, Dict, Optional

from ._config import validate_config
from ._rgs.http_client import RGSHttpClient
from ._rgs.session_client import SessionClient
from ._round.enums import RoundPhase, RoundResolution
from ._round.orchestrator import DEFAULT_BET, RoundOrchestrator
from ._round.outcomes import FinalizeOutcome, RoundResult
from ._shared import setup_logging
from .callbacks import RoundCallbacks
from .demo_rgs import DemoRGS
from .errors import CupGameError, RGSError
from .presentation import ConsolePresentation, PresentationDriver

logger = logging.getLogger("cup_game")

QUIT_WORDS = ("q", "quit", "exit")


class ConsoleCallbacks(RoundCallbacks):
    """Prints balance and win notifications."""

    def __init__(self, output: Callable[[str], None] = print):
        self._output = output

    def on_balance_update(self, outcome: FinalizeOutcome) -> None:
        self._output(f"Balance: {outcome.confirmed_balance}")

    def on_win(self, win_amount: Decimal) -> None:
        self._output(f"*** You won {win_amount}! ***")

    def on_rest(self, result: RoundResult) -> None:
        if result.resolution == RoundResolution.LOSS:
            self._output(f"No luck. The marker was under #{result.reveal_target + 1}.")


class GameRunner:
    """
    Interactive terminal runner.

    One bet of DEFAULT_BET per round. Containers are numbered from 1
    for the player and from 0 internally.
    """

    def __init__(
        self,
        config: Dict[str, Any],
        client: Optional[SessionClient] = None,
        presentation: Optional[PresentationDriver] = None,
        callbacks: Optional[RoundCallbacks] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        configure_logging: bool = True,
    ):
        self.config = config

        validate_config(config)

        if configure_logging:
            setup_logging(log_file_path=config.get("log_file", "cup_game.log"))

        self._input = input_fn
        self._output = output_fn
        self.container_count = int(config.get("container_count", 3))
        self.client = client or build_client(config)
        self.orchestrator = RoundOrchestrator(
            client=self.client,
            presentation=presentation or ConsolePresentation(
                container_count=self.container_count, output=output_fn,
            ),
            callbacks=callbacks or ConsoleCallbacks(output_fn),
            container_count=self.container_count,
            win_hold_seconds=float(config.get("win_hold_seconds", 0.8)),
            loss_hold_seconds=float(config.get("loss_hold_seconds", 0.6)),
        )

    def run(self) -> None:
        """Play until the player quits. Blocks."""
        try:
            asyncio.run(self.run_async())
        except KeyboardInterrupt:
            logger.info("Runner interrupted.")

    async def run_async(self) -> None:
        self._log_startup()
        try:
            balance = await self.orchestrator.authenticate()
            self._output(f"Balance: {balance}")
            while True:
                answer = await self._ask(f"Press Enter to bet {DEFAULT_BET} (q to quit): ")
                if answer.strip().lower() in QUIT_WORDS:
                    break
                await self.play_one_round()
        finally:
            await self.client.close()
            logger.info("Runner stopped.")

    async def play_one_round(self) -> Optional[RoundResult]:
        """Play a round, prompting for the pick. Returns None if the round failed."""
        pick_ready = asyncio.Event()

        def on_phase(phase: RoundPhase) -> None:
            if phase == RoundPhase.AWAITING_PICK:
                pick_ready.set()

        unsubscribe = self.orchestrator.subscribe(on_phase)
        round_task = asyncio.create_task(self.orchestrator.play_round(DEFAULT_BET))
        ready_task = asyncio.create_task(pick_ready.wait())
        try:
            await asyncio.wait({round_task, ready_task}, return_when=asyncio.FIRST_COMPLETED)
            while self.orchestrator.can_pick_container():
                index = await self._read_pick()
                self.orchestrator.pick(index)
            return await round_task
        except RGSError as e:
            self._output(f"Round failed: {e.message}")
            if self.orchestrator.get_phase() != RoundPhase.REST:
                # Finalize failures leave the phase where it was
                self.orchestrator.force_reset()
            return None
        except CupGameError as e:
            self._output(f"Round failed: {e}")
            return None
        finally:
            ready_task.cancel()
            unsubscribe()

    async def _read_pick(self) -> int:
        prompt = f"Pick a container (1-{self.container_count}): "
        while True:
            raw = (await self._ask(prompt)).strip()
            if raw.isdigit() and 1 <= int(raw) <= self.container_count:
                return int(raw) - 1
            self._output(f"Please enter a number from 1 to {self.container_count}.")

    async def _ask(self, prompt: str) -> str:
        return await asyncio.to_thread(self._input, prompt)

    def _log_startup(self) -> None:
        logger.info("=" * 60)
        logger.info("  Cup Game Runner — Starting")
        logger.info(f"  RGS:        {'demo' if self.config.get('demo_mode') else self.config.get('rgs_url')}")
        logger.info(f"  Containers: {self.container_count}")
        logger.info("=" * 60)


def build_client(config: Dict[str, Any]) -> SessionClient:
    """Session client for config: DemoRGS in demo mode, RGSHttpClient otherwise."""
    if config.get("demo_mode"):
        return DemoRGS()
    return RGSHttpClient(
        rgs_url=config["rgs_url"],
        session_id=config["session_id"],
        currency=config.get("currency", "USD"),
        mode=config.get("mode", "BASE"),
        language=config.get("language", "en"),
        timeout_seconds=float(config.get("request_timeout_seconds", 10.0)),
    )
