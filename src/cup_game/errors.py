"""
cup_game.errors — Custom exception classes
===========================================

Defines the exception hierarchy for round orchestration and RGS calls.
RGS exceptions store full request context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import json


class CupGameError(Exception):
    """Base exception for all cup game package errors."""
    pass


class InvalidStateError(CupGameError):
    """Raised when an operation is requested in a phase that forbids it."""

    def __init__(self, operation: str, phase: Any):
        self.operation = operation
        self.phase = phase
        phase_name = getattr(phase, "value", phase)
        super().__init__(f"Cannot {operation} from phase: {phase_name}")


class UnknownTransitionError(CupGameError):
    """A phase transition outside the transition table.

    Only raised by ``RoundStateMachine.transition(..., strict=True)``.
    Normal callers get ``TransitionResult.REJECTED`` and a warning log.
    """

    def __init__(self, current: Any, requested: Any):
        self.current = current
        self.requested = requested
        super().__init__(
            f"Invalid transition from {getattr(current, 'value', current)} "
            f"to {getattr(requested, 'value', requested)}"
        )


class RGSError(CupGameError):
    """Base exception for Remote Game Server failures."""

    error_type = "RGS_ERROR"

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.endpoint = endpoint
        self.status_code = status_code
        self.code = code
        self.payload = payload or {}
        super().__init__(message)

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.error_type,
            endpoint=self.endpoint,
            status_code=self.status_code,
            code=self.code,
            message=self.message,
            payload=self.payload,
        )


class AuthError(RGSError):
    """Raised when the RGS rejects session authentication."""
    error_type = "AUTH_FAILURE"


class ActiveBetError(RGSError):
    """The server still holds an unfinalized round for this session.

    Expected and recoverable: the orchestrator closes the open round
    through finalize after a cosmetic pick.
    """
    error_type = "ACTIVE_BET"


# Round-level name for the handled active-bet condition.
ActiveBetRecoveryError = ActiveBetError


class ServerError(RGSError):
    """Raised when the RGS answers with an error or an unreadable body."""
    error_type = "SERVER_ERROR"


class NetworkError(RGSError):
    """Raised when the RGS cannot be reached."""
    error_type = "NETWORK_ERROR"


def _format_error_block(
    error_type: str,
    endpoint: Optional[str],
    status_code: Optional[int],
    code: Optional[str],
    message: str,
    payload: Dict[str, Any],
) -> str:
    """Format a structured error block for the round log."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " RGS ERROR — ROUND ABORTED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Endpoint:     {endpoint or 'N/A'}",
    ]

    if status_code is not None:
        lines.append(f" HTTP Status:  {status_code}")
    if code:
        lines.append(f" Server Code:  {code}")

    lines.append(f" Message:      {message}")

    if payload:
        lines.append("")
        lines.append(" ── SERVER PAYLOAD " + "─" * 45)
        lines.append(_indent_json(payload))

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
