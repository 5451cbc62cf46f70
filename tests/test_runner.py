# Area: Runner Tests
"""Tests for the terminal GameRunner."""

import asyncio
from decimal import Decimal

import pytest
from cup_game.demo_rgs import DemoRGS
from cup_game.errors import ServerError
from cup_game.presentation import ConsolePresentation
from cup_game._round.enums import RoundPhase
from cup_game.runner import GameRunner, build_client
from cup_game._rgs.http_client import RGSHttpClient


DEMO_CONFIG = {
    "demo_mode": True,
    "win_hold_seconds": 0.002,
    "loss_hold_seconds": 0.001,
}


class FailingFinalizeRGS(DemoRGS):
    """Demo server whose end_round always fails."""

    async def end_round(self):
        raise ServerError("finalize down", endpoint="demo/end-round", status_code=503)


def make_runner(client, answers):
    outputs = []
    scripted = iter(answers)
    runner = GameRunner(
        config=dict(DEMO_CONFIG),
        client=client,
        presentation=ConsolePresentation(step_seconds=0, output=lambda line: None),
        input_fn=lambda prompt: next(scripted),
        output_fn=outputs.append,
        configure_logging=False,
    )
    return runner, outputs


class TestGameRunner:
    """Tests for GameRunner round flow."""

    def test_winning_round_then_quit(self):
        """Test a winning round followed by quit."""
        runner, outputs = make_runner(DemoRGS(win_probability=1.0), ["", "2", "q"])
        asyncio.run(runner.run_async())

        assert outputs[0] == "Balance: 1000"
        assert "*** You won 3! ***" in outputs
        assert "Balance: 1002" in outputs
        assert runner.orchestrator.get_phase() == RoundPhase.REST

    def test_losing_round_names_marker_container(self):
        """Test that a loss names the marker container."""
        runner, outputs = make_runner(DemoRGS(win_probability=0.0), ["1"])
        result = asyncio.run(runner.play_one_round())

        assert result.selection == 0
        assert result.reveal_target in (1, 2)
        assert f"No luck. The marker was under #{result.reveal_target + 1}." in outputs

    def test_invalid_pick_input_is_reprompted(self):
        """Test that invalid input is prompted again."""
        runner, outputs = make_runner(DemoRGS(win_probability=1.0), ["7", "x", "3"])
        result = asyncio.run(runner.play_one_round())

        assert result.selection == 2
        assert outputs.count("Please enter a number from 1 to 3.") == 2

    def test_finalize_failure_returns_to_rest(self):
        """Test that the runner resets after a finalize failure."""
        runner, outputs = make_runner(FailingFinalizeRGS(win_probability=1.0), ["1"])
        result = asyncio.run(runner.play_one_round())

        assert result is None
        assert "Round failed: finalize down" in outputs
        assert runner.orchestrator.get_phase() == RoundPhase.REST

    def test_start_failure_marks_balance_stale(self):
        """Test that a start failure marks the balance stale."""
        runner, outputs = make_runner(DemoRGS(starting_balance=Decimal("0")), [])
        result = asyncio.run(runner.play_one_round())

        assert result is None
        assert "Round failed: Insufficient balance" in outputs
        assert runner.orchestrator.session.balance_stale is True
        assert runner.orchestrator.get_phase() == RoundPhase.REST

    def test_invalid_config_raises(self):
        """Test that an invalid config is rejected."""
        with pytest.raises(ValueError):
            GameRunner(config={"demo_mode": False}, configure_logging=False)


class TestBuildClient:
    """Tests for build_client()."""

    def test_demo_mode_builds_demo_rgs(self):
        """Test that demo mode builds a DemoRGS."""
        assert isinstance(build_client({"demo_mode": True}), DemoRGS)

    def test_real_mode_builds_http_client(self):
        """Test that real mode builds an RGSHttpClient."""
        client = build_client({
            "rgs_url": "https://rgs.test/",
            "session_id": "abc",
            "currency": "EUR",
        })
        assert isinstance(client, RGSHttpClient)
        assert client.currency == "EUR"
