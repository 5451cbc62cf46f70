# Area: RGS
"""
cup_game._rgs.wire — RGS response schemas
==========================================

pydantic models for the JSON bodies returned by the wallet endpoints.
Amounts on the wire are integers scaled by API_MULTIPLIER.
"""

from __future__ import annotations
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

# Wire amounts carry six implied decimal places
API_MULTIPLIER = 1_000_000


def to_wire_amount(amount: Decimal) -> int:
    return int((amount * API_MULTIPLIER).to_integral_value())


def from_wire_amount(amount: int) -> Decimal:
    return Decimal(amount) / API_MULTIPLIER


class BalanceModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    amount: int
    currency: str = ""


class RoundModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    bet_id: Optional[Any] = Field(default=None, alias="betID")
    amount: Optional[int] = None
    payout: Optional[int] = None
    payout_multiplier: Optional[Decimal] = Field(default=None, alias="payoutMultiplier")
    active: Optional[bool] = None
    state: Any = None
    mode: Optional[str] = None


class AuthenticateResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    balance: BalanceModel


class PlayResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    balance: Optional[BalanceModel] = None
    round: Optional[RoundModel] = None


class EndRoundResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    balance: BalanceModel


class ErrorResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: Optional[str] = None
    message: Optional[str] = None
