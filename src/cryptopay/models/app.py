"""App, balance and market data models for Crypto Pay SDK."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from .base import CryptoPayModel


class AppInfo(CryptoPayModel):
    """Basic information about the app, returned by getMe."""

    app_id: int
    name: str
    payment_processing_bot_username: Optional[str] = None
    bot_username: Optional[str] = None


class AppStats(CryptoPayModel):
    """Aggregated statistics for a period."""

    volume: Decimal
    conversion: Decimal
    unique_users_count: int
    created_invoice_count: int
    paid_invoice_count: int
    start_at: datetime
    end_at: datetime


class GetStatsRequest(CryptoPayModel):
    """Date range for getStats. Defaults to the last 24 hours on the API side."""

    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None


class Balance(CryptoPayModel):
    """Balance of a single asset in the app wallet."""

    currency_code: str
    available: Decimal
    onhold: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        return self.available + self.onhold


class ExchangeRate(CryptoPayModel):
    """Exchange rate between a source and a target currency."""

    is_valid: bool
    is_crypto: bool
    is_fiat: bool
    source: str
    target: str
    rate: Decimal


class Currency(CryptoPayModel):
    """A currency supported by the platform."""

    is_blockchain: bool = False
    is_stablecoin: bool = False
    is_fiat: bool = False
    name: str
    code: str
    url: Optional[str] = None
    decimals: int
