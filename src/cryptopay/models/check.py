"""Check (voucher) models for Crypto Pay SDK."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from .base import CryptoPayModel
from .common import Asset, CheckStatus


class Check(CryptoPayModel):
    """A crypto check that a Telegram user can redeem."""

    check_id: int
    hash: str
    asset: str
    amount: Decimal
    bot_check_url: str
    status: str
    created_at: datetime
    activated_at: Optional[datetime] = None


class CreateCheckRequest(CryptoPayModel):
    """Request to create a check."""

    asset: Asset
    amount: Decimal
    pin_to_user_id: Optional[int] = None
    pin_to_username: Optional[str] = None


class DeleteCheckRequest(CryptoPayModel):
    """Request to delete checks."""

    check_ids: list[int]


class GetChecksRequest(CryptoPayModel):
    """Filters for listing checks."""

    check_ids: Optional[list[int]] = None
    status: Optional[CheckStatus] = None
    offset: Optional[int] = Field(None, ge=0)
    count: Optional[int] = Field(None, ge=1, le=1000)
    from_: Optional[datetime] = Field(None, alias="from")
    to: Optional[datetime] = None
