# Area: RGS
"""
cup_game._rgs.classification — Active-bet error detection
==========================================================

Pure predicate deciding whether an error means "the server still has
an open round for this session". Accepts whatever shape the error
arrives in: our exception types, a raw error body dict, or a string.
"""

from typing import Any, Mapping

from ..errors import ActiveBetError, RGSError

# Server error codes that signal an unfinalized round
ACTIVE_BET_CODES = frozenset({"ERR_ACTIVE_BET", "ERR_BET_ACTIVE"})

ACTIVE_BET_PHRASE = "active bet"


def is_active_bet_error(error: Any) -> bool:
    """
    Return True iff error reports an already-open round on the server.

    Args:
        error: An exception, an error body mapping ({code, message}),
            or a message string

    Returns:
        True for the active-bet condition, False for anything else
    """
    if error is None:
        return False
    if isinstance(error, ActiveBetError):
        return True
    if isinstance(error, RGSError):
        return _matches(error.code, error.message)
    if isinstance(error, Mapping):
        return _matches(error.get("code") or error.get("error"), error.get("message"))
    if isinstance(error, BaseException):
        return _matches(None, str(error))
    if isinstance(error, str):
        return _matches(None, error)
    return False


def _matches(code: Any, message: Any) -> bool:
    if isinstance(code, str) and code.upper() in ACTIVE_BET_CODES:
        return True
    if isinstance(message, str) and ACTIVE_BET_PHRASE in message.lower():
        return True
    return False
