"""Webhook models for Crypto Pay SDK."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import ConfigDict

from .base import CryptoPayModel
from .invoice import Invoice


class WebhookUpdateType(str, Enum):
    """Webhook update types."""

    INVOICE_PAID = "invoice_paid"


class WebhookInvoice(Invoice):
    """Invoice carried by a webhook update.

    Read-only, and every field is optional: an authentic delivery is never
    rejected because the remote side dropped or renamed an invoice field.
    """

    model_config = ConfigDict(frozen=True)

    invoice_id: Optional[int] = None
    status: Optional[str] = None
    hash: Optional[str] = None
    amount: Optional[Decimal] = None
    created_at: Optional[datetime] = None
    accepted_assets: Optional[tuple[str, ...]] = None


class WebhookUpdate(CryptoPayModel):
    """An update delivered to the app's webhook endpoint.

    Instances are only built from bodies whose signature has been verified.
    The update and its payload are immutable, so every listener sees the
    same data.
    """

    model_config = ConfigDict(frozen=True)

    update_id: int
    update_type: str
    request_date: datetime
    payload: WebhookInvoice
