# Area: RGS
"""
RGS layer - session clients for the Remote Game Server.

This package handles:
- The SessionClient contract used by the round orchestrator
- Active-bet error classification
- The HTTP wallet client and its wire schemas
"""

from .classification import is_active_bet_error
from .session_client import SessionClient
from .http_client import RGSHttpClient

__all__ = [
    "is_active_bet_error",
    "SessionClient",
    "RGSHttpClient",
]
