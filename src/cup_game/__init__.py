"""
cup_game — Cup game client for a Remote Game Server
====================================================

Quick Start (offline, demo server):
    from cup_game import DemoRGS, GameRunner
    runner = GameRunner(config={"demo_mode": True}, client=DemoRGS())
    runner.run()

Embedding in your own front end:
    from cup_game import RoundOrchestrator, RGSHttpClient, PresentationDriver
    class MyScene(PresentationDriver): ...  # Implement 4 coroutines
    orchestrator = RoundOrchestrator(client=RGSHttpClient(url, session_id),
                                     presentation=MyScene())
    await orchestrator.authenticate()
    result = await orchestrator.play_round()   # feed clicks to orchestrator.pick(i)

The RGS decides every round. The local state machine only gates
input and keeps the reveal consistent with the server's decision.
"""

from .callbacks import RoundCallbacks
from .demo_rgs import DemoRGS
from .presentation import ConsolePresentation, PresentationDriver
from .runner import GameRunner
from .errors import (
    CupGameError,
    InvalidStateError,
    UnknownTransitionError,
    RGSError,
    AuthError,
    ActiveBetError,
    ActiveBetRecoveryError,
    ServerError,
    NetworkError,
)
from ._rgs import RGSHttpClient, SessionClient, is_active_bet_error
from ._round import (
    BetSession,
    FinalizeOutcome,
    PlayOutcome,
    RoundPhase,
    RoundResolution,
    RoundResult,
    RoundStateMachine,
    TransitionResult,
)
from ._round.orchestrator import RoundOrchestrator
from ._round.ui_gate import UIGate

__all__ = [
    # Main classes
    "RoundOrchestrator",
    "RoundStateMachine",
    "BetSession",
    "UIGate",
    "GameRunner",
    # Collaborators
    "SessionClient",
    "RGSHttpClient",
    "DemoRGS",
    "PresentationDriver",
    "ConsolePresentation",
    "RoundCallbacks",
    "is_active_bet_error",
    # Data
    "RoundPhase",
    "RoundResolution",
    "TransitionResult",
    "PlayOutcome",
    "FinalizeOutcome",
    "RoundResult",
    # Errors
    "CupGameError",
    "InvalidStateError",
    "UnknownTransitionError",
    "RGSError",
    "AuthError",
    "ActiveBetError",
    "ActiveBetRecoveryError",
    "ServerError",
    "NetworkError",
]
__version__ = "1.0.0"
