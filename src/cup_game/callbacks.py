# Area: Round Callbacks
"""
cup_game.callbacks — Notifications fired by the round orchestrator
===================================================================

Subclass RoundCallbacks and override the hooks you care about. The
defaults do nothing, so a bare RoundCallbacks() is a valid listener.

Hooks fire in this order within a round:

    on_balance_update  — after every successful finalize (win, recovery)
    on_win             — after on_balance_update on the win path only
    on_rest            — once the round is back at rest (every outcome)
"""

from decimal import Decimal

from ._round.outcomes import FinalizeOutcome, RoundResult


class RoundCallbacks:
    """
    Collaborator hooks for balance display, win modal and round end.

    None of these hooks may start a new round themselves; play_round()
    is still on the stack when they run.
    """

    # ──────────────────────────────────────────────────────────────
    # HOOK 1: Confirmed balance arrived from the server
    # ──────────────────────────────────────────────────────────────
    def on_balance_update(self, outcome: FinalizeOutcome) -> None:
        """
        Called with the end-round confirmation.

        Parameters
        ----------
        outcome : FinalizeOutcome
            outcome.confirmed_balance is the authoritative balance.
        """
        return None

    # ──────────────────────────────────────────────────────────────
    # HOOK 2: Player won
    # ──────────────────────────────────────────────────────────────
    def on_win(self, win_amount: Decimal) -> None:
        """
        Called after a winning round was finalized.

        Parameters
        ----------
        win_amount : Decimal
            payout multiplier × bet amount, in player-facing units.
        """
        return None

    # ──────────────────────────────────────────────────────────────
    # HOOK 3: Round finished
    # ──────────────────────────────────────────────────────────────
    def on_rest(self, result: RoundResult) -> None:
        """Called once the session is back at rest."""
        return None
