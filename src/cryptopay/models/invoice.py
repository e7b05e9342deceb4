"""Invoice models for Crypto Pay SDK."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from .base import CryptoPayModel
from .common import Asset, CurrencyType, FiatCurrency, InvoiceStatus, PaidButtonName


class Invoice(CryptoPayModel):
    """An invoice as returned by the API."""

    invoice_id: int
    status: str
    hash: str
    currency_type: str = CurrencyType.CRYPTO.value
    asset: Optional[str] = None
    fiat: Optional[str] = None
    accepted_assets: Optional[list[str]] = None
    amount: Decimal
    description: Optional[str] = None
    bot_invoice_url: Optional[str] = None
    mini_app_invoice_url: Optional[str] = None
    web_app_invoice_url: Optional[str] = None
    is_flexible: Optional[bool] = None
    paid_asset: Optional[str] = None
    paid_amount: Optional[Decimal] = None
    paid_usd_rate: Optional[Decimal] = None
    paid_fiat_rate: Optional[Decimal] = None
    fee_asset: Optional[str] = None
    fee_amount: Optional[Decimal] = None
    is_swapped: Optional[bool] = None
    swap_to: Optional[str] = None
    swapped_uid: Optional[int] = None
    swapped_to: Optional[str] = None
    swapped_rate: Optional[Decimal] = None
    swapped_output: Optional[Decimal] = None
    swapped_usd_rate: Optional[Decimal] = None
    created_at: datetime
    allow_comments: bool = True
    allow_anonymous: bool = True
    expiration_date: Optional[datetime] = None
    paid_at: Optional[datetime] = None
    paid_anonymously: Optional[bool] = None
    comment: Optional[str] = None
    hidden_message: Optional[str] = None
    payload: Optional[str] = None
    paid_btn_name: Optional[str] = None
    paid_btn_url: Optional[str] = None

    @property
    def is_paid(self) -> bool:
        return self.status == InvoiceStatus.PAID.value


class CreateInvoiceRequest(CryptoPayModel):
    """Request to create an invoice."""

    currency_type: Optional[CurrencyType] = None
    asset: Optional[Asset] = None
    fiat: Optional[FiatCurrency] = None
    accepted_assets: Optional[list[Asset]] = None
    amount: Decimal
    description: Optional[str] = Field(None, max_length=1024)
    hidden_message: Optional[str] = Field(None, max_length=2048)
    paid_btn_name: Optional[PaidButtonName] = None
    paid_btn_url: Optional[str] = None
    payload: Optional[str] = Field(None, max_length=4096)
    allow_comments: Optional[bool] = None
    allow_anonymous: Optional[bool] = None
    expires_in: Optional[int] = Field(None, ge=1, le=2678400)
    is_flexible: Optional[bool] = None
    swap_to: Optional[Asset] = None


class DeleteInvoiceRequest(CryptoPayModel):
    """Request to delete invoices."""

    invoice_ids: list[int]


class GetInvoicesRequest(CryptoPayModel):
    """Filters for listing invoices."""

    invoice_ids: Optional[list[int]] = None
    status: Optional[InvoiceStatus] = None
    offset: Optional[int] = Field(None, ge=0)
    count: Optional[int] = Field(None, ge=1, le=1000)
    from_: Optional[datetime] = Field(None, alias="from")
    to: Optional[datetime] = None
