# Area: Shared Tests
"""Tests for the in-process demo RGS."""

import asyncio
import random
from decimal import Decimal

import pytest
from cup_game.demo_rgs import DemoRGS
from cup_game._round.enums import RoundPhase, RoundResolution
from cup_game._round.orchestrator import RoundOrchestrator
from cup_game.errors import ActiveBetError, ServerError
from cup_game.presentation import ConsolePresentation


def make_orchestrator(client):
    return RoundOrchestrator(
        client=client,
        presentation=ConsolePresentation(step_seconds=0, output=lambda line: None),
        win_hold_seconds=0,
        loss_hold_seconds=0,
    )


async def play_with_pick(orchestrator, index):
    task = asyncio.create_task(orchestrator.play_round(Decimal("1")))
    for _ in range(100):
        if task.done() or orchestrator.can_pick_container():
            break
        await asyncio.sleep(0)
    if not task.done():
        orchestrator.pick(index)
    return await task


class TestDemoRGS:
    """Tests for DemoRGS server simulation."""

    def test_authenticate_returns_starting_balance(self):
        """Test that authenticate returns the starting balance."""
        rgs = DemoRGS(starting_balance=Decimal("50"))
        assert asyncio.run(rgs.authenticate()) == Decimal("50")

    def test_win_credits_payout(self):
        """Test that a win credits multiplier times bet."""
        rgs = DemoRGS(win_probability=1.0, payout_multiplier=Decimal("3"))
        outcome = asyncio.run(rgs.start_round(Decimal("2")))
        assert outcome.payout_multiplier == Decimal("3")
        assert rgs.balance == Decimal("1004")

    def test_unfinalized_win_blocks_next_start(self):
        """Test that an open win raises ActiveBetError on the next start."""
        rgs = DemoRGS(win_probability=1.0)

        async def scenario():
            await rgs.start_round(Decimal("1"))
            await rgs.start_round(Decimal("1"))

        with pytest.raises(ActiveBetError):
            asyncio.run(scenario())

    def test_end_round_closes_open_round(self):
        """Test that end_round closes the open round and confirms the balance."""
        rgs = DemoRGS(win_probability=1.0)

        async def scenario():
            await rgs.start_round(Decimal("1"))
            confirmation = await rgs.end_round()
            await rgs.start_round(Decimal("1"))
            return confirmation

        confirmation = asyncio.run(scenario())
        assert confirmation.confirmed_balance == Decimal("1002")

    def test_loss_is_superseded_by_next_start(self):
        """Test that an open loss does not block the next start."""
        rgs = DemoRGS(win_probability=0.0)

        async def scenario():
            await rgs.start_round(Decimal("1"))
            return await rgs.start_round(Decimal("1"))

        outcome = asyncio.run(scenario())
        assert outcome.is_win is False
        assert rgs.balance == Decimal("998")

    def test_insufficient_balance(self):
        """Test that a bet above the balance is refused."""
        rgs = DemoRGS(starting_balance=Decimal("0.5"))
        with pytest.raises(ServerError):
            asyncio.run(rgs.start_round(Decimal("1")))

    def test_invalid_probability(self):
        """Test that a win probability outside [0, 1] is rejected."""
        with pytest.raises(ValueError):
            DemoRGS(win_probability=1.5)

    def test_seeded_rng_is_reproducible(self):
        """Test that equal seeds give equal outcomes."""
        first = DemoRGS(rng=random.Random(9))
        second = DemoRGS(rng=random.Random(9))

        async def outcomes(rgs):
            results = []
            for _ in range(10):
                results.append((await rgs.start_round(Decimal("1"))).is_win)
                await rgs.end_round()
            return results

        assert asyncio.run(outcomes(first)) == asyncio.run(outcomes(second))


class TestDemoRGSWithOrchestrator:
    """End-to-end rounds against the demo server."""

    def test_winning_round_settles_server_balance(self):
        """Test a full winning round against the demo server."""
        rgs = DemoRGS(win_probability=1.0, payout_multiplier=Decimal("3"))
        orch = make_orchestrator(rgs)

        async def scenario():
            await orch.authenticate()
            return await play_with_pick(orch, 1)

        result = asyncio.run(scenario())

        assert result.resolution == RoundResolution.WIN
        assert result.win_amount == Decimal("3")
        assert orch.session.balance == Decimal("1002")
        assert rgs.has_open_round is False

    def test_open_round_is_recovered(self):
        """Test that a round left open is recovered on the next play."""
        rgs = DemoRGS(win_probability=1.0)
        orch = make_orchestrator(rgs)

        async def scenario():
            await orch.authenticate()
            await rgs.start_round(Decimal("1"))  # left open, as after a crash
            return await play_with_pick(orch, 0)

        result = asyncio.run(scenario())

        assert result.resolution == RoundResolution.RECOVERY
        assert rgs.has_open_round is False
        assert orch.session.balance == rgs.balance
        assert orch.get_phase() == RoundPhase.REST
