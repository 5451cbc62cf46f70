# Area: RGS
"""
cup_game._rgs.http_client — HTTP session client
================================================

Talks to the RGS wallet endpoints over JSON/HTTP with httpx.
Translates transport and server failures into the RGSError family
and wire amounts into Decimal player units.
"""

from __future__ import annotations
from decimal import Decimal
from typing import Any, Dict, Optional, Type, TypeVar
import logging

import httpx
from pydantic import BaseModel, ValidationError

from .classification import is_active_bet_error
from .session_client import SessionClient
from .wire import (
    AuthenticateResponse,
    EndRoundResponse,
    ErrorResponse,
    PlayResponse,
    from_wire_amount,
    to_wire_amount,
)
from .._round.outcomes import FinalizeOutcome, PlayOutcome
from ..errors import (
    ActiveBetError,
    AuthError,
    NetworkError,
    RGSError,
    ServerError,
)

logger = logging.getLogger("cup_game.rgs.http")

ModelT = TypeVar("ModelT", bound=BaseModel)

AUTHENTICATE_PATH = "/wallet/authenticate"
PLAY_PATH = "/wallet/play"
END_ROUND_PATH = "/wallet/end-round"


class RGSHttpClient(SessionClient):
    """
    Session client for the RGS wallet API.

    Usage:
        async with RGSHttpClient(rgs_url, session_id) as client:
            balance = await client.authenticate()
    """

    def __init__(
        self,
        rgs_url: str,
        session_id: str,
        currency: str = "USD",
        mode: str = "BASE",
        language: str = "en",
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.rgs_url = rgs_url.rstrip("/")
        self.session_id = session_id
        self.currency = currency
        self.mode = mode
        self.language = language
        self.timeout_seconds = timeout_seconds
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "RGSHttpClient":
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.rgs_url,
                timeout=httpx.Timeout(self.timeout_seconds, connect=5.0),
                transport=self._transport,
            )
        return self._http_client

    async def close(self) -> None:
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    # ── SessionClient ───────────────────────────────────────────

    async def authenticate(self) -> Decimal:
        body = {"sessionID": self.session_id, "language": self.language}
        try:
            data = await self._post(AUTHENTICATE_PATH, body)
        except (ServerError, ActiveBetError) as e:
            raise AuthError(
                f"Authentication rejected: {e.message}",
                endpoint=e.endpoint,
                status_code=e.status_code,
                code=e.code,
                payload=e.payload,
            ) from e
        response = self._parse(AUTHENTICATE_PATH, data, AuthenticateResponse)
        balance = from_wire_amount(response.balance.amount)
        logger.info("Authenticated. Balance: %s", balance)
        return balance

    async def start_round(self, bet_amount: Decimal) -> PlayOutcome:
        body = {
            "sessionID": self.session_id,
            "amount": to_wire_amount(bet_amount),
            "currency": self.currency,
            "mode": self.mode,
        }
        data = await self._post(PLAY_PATH, body)
        response = self._parse(PLAY_PATH, data, PlayResponse)
        rnd = response.round
        return PlayOutcome(
            payout_multiplier=rnd.payout_multiplier if rnd else None,
            round_id=str(rnd.bet_id) if rnd and rnd.bet_id is not None else None,
            state=rnd.state if rnd else None,
            balance=from_wire_amount(response.balance.amount) if response.balance else None,
            raw=data,
        )

    async def end_round(self) -> FinalizeOutcome:
        data = await self._post(END_ROUND_PATH, {"sessionID": self.session_id})
        response = self._parse(END_ROUND_PATH, data, EndRoundResponse)
        return FinalizeOutcome(
            confirmed_balance=from_wire_amount(response.balance.amount),
            raw=data,
        )

    # ── Transport ───────────────────────────────────────────────

    async def _post(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        client = self._ensure_client()
        logger.debug("POST %s", path)
        try:
            response = await client.post(path, json=body)
        except httpx.RequestError as e:
            raise NetworkError(f"RGS connection error: {e}", endpoint=path) from e

        data = self._decode(path, response)
        if response.is_error:
            raise self._error_from_response(path, response.status_code, data)
        return data

    def _decode(self, path: str, response: httpx.Response) -> Dict[str, Any]:
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            if response.is_error:
                return {"message": response.text}
            raise ServerError(
                f"RGS returned non-JSON body: {e}",
                endpoint=path,
                status_code=response.status_code,
            ) from e
        if not isinstance(data, dict):
            raise ServerError(
                f"RGS returned {type(data).__name__} instead of object",
                endpoint=path,
                status_code=response.status_code,
            )
        return data

    def _error_from_response(
        self, path: str, status_code: int, data: Dict[str, Any]
    ) -> RGSError:
        try:
            error = ErrorResponse.model_validate(data)
        except ValidationError:
            error = ErrorResponse(message=str(data.get("message") or ""))
        message = error.message or f"RGS returned HTTP {status_code}"
        error_cls = ActiveBetError if is_active_bet_error(data) else ServerError
        return error_cls(
            message,
            endpoint=path,
            status_code=status_code,
            code=error.code,
            payload=data,
        )

    def _parse(self, path: str, data: Dict[str, Any], model: Type[ModelT]) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ServerError(
                f"Unexpected RGS response: {e.error_count()} validation error(s)",
                endpoint=path,
                payload=data,
            ) from e
