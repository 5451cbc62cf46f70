# Area: RGS
"""
cup_game._rgs.session_client — Session client contract
=======================================================

What the round orchestrator needs from a Remote Game Server client.
Wire format and transport are left to implementations
(RGSHttpClient, DemoRGS).
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from .classification import is_active_bet_error
from .._round.outcomes import FinalizeOutcome, PlayOutcome


class SessionClient(ABC):
    """
    Abstract base class for RGS session clients.

    Amounts crossing this interface are Decimal player-facing units;
    any integer sub-unit scaling is the implementation's concern.
    """

    @abstractmethod
    async def authenticate(self) -> Decimal:
        """
        Open the session and return the current balance.

        Raises:
            AuthError: If the server rejects the session
        """
        ...

    @abstractmethod
    async def start_round(self, bet_amount: Decimal) -> PlayOutcome:
        """
        Place a bet and let the server decide the round.

        Raises:
            ActiveBetError: If a previous round is still open
            ServerError: If the server answered with an error
            NetworkError: If the server could not be reached
        """
        ...

    @abstractmethod
    async def end_round(self) -> FinalizeOutcome:
        """
        Close the open round and return the confirmed balance.

        Raises:
            ServerError: If the server answered with an error
            NetworkError: If the server could not be reached
        """
        ...

    def is_active_bet_error(self, error: object) -> bool:
        """Classify error; see classification.is_active_bet_error."""
        return is_active_bet_error(error)

    async def close(self) -> None:
        """Release transport resources. Optional."""
        return None
