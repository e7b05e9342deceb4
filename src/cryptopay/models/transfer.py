"""Transfer models for Crypto Pay SDK."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from pydantic import Field

from .base import CryptoPayModel
from .common import Asset


class Transfer(CryptoPayModel):
    """A completed transfer from the app balance to a Telegram user."""

    transfer_id: int
    spend_id: Optional[str] = None
    user_id: Union[int, str]
    asset: str
    amount: Decimal
    status: str
    completed_at: datetime
    comment: Optional[str] = None


class TransferRequest(CryptoPayModel):
    """Request to send coins to a Telegram user."""

    user_id: Union[int, str]
    asset: Asset
    amount: Decimal
    spend_id: Optional[str] = Field(None, max_length=64)
    comment: Optional[str] = Field(None, max_length=1024)
    disable_send_notification: Optional[bool] = None


class GetTransfersRequest(CryptoPayModel):
    """Filters for listing transfers."""

    transfer_ids: Optional[list[int]] = None
    spend_id: Optional[str] = None
    offset: Optional[int] = Field(None, ge=0)
    count: Optional[int] = Field(None, ge=1, le=1000)
    from_: Optional[datetime] = Field(None, alias="from")
    to: Optional[datetime] = None
