"""Crypto Pay SDK Models."""
from .base import CryptoPayModel
from .common import (
    Asset,
    CheckStatus,
    CurrencyType,
    FiatCurrency,
    InvoiceStatus,
    Network,
    PaidButtonName,
    TransferStatus,
)
from .app import AppInfo, AppStats, Balance, Currency, ExchangeRate, GetStatsRequest
from .invoice import CreateInvoiceRequest, DeleteInvoiceRequest, GetInvoicesRequest, Invoice
from .check import Check, CreateCheckRequest, DeleteCheckRequest, GetChecksRequest
from .transfer import GetTransfersRequest, Transfer, TransferRequest
from .webhook import WebhookInvoice, WebhookUpdate, WebhookUpdateType
from .errors import APIError, CryptoPayError, UnknownFrameworkError, WebhookPayloadError

__all__ = [
    "CryptoPayModel",
    "Asset",
    "CheckStatus",
    "CurrencyType",
    "FiatCurrency",
    "InvoiceStatus",
    "Network",
    "PaidButtonName",
    "TransferStatus",
    "AppInfo",
    "AppStats",
    "Balance",
    "Currency",
    "ExchangeRate",
    "GetStatsRequest",
    "Invoice",
    "CreateInvoiceRequest",
    "DeleteInvoiceRequest",
    "GetInvoicesRequest",
    "Check",
    "CreateCheckRequest",
    "DeleteCheckRequest",
    "GetChecksRequest",
    "Transfer",
    "TransferRequest",
    "GetTransfersRequest",
    "WebhookInvoice",
    "WebhookUpdate",
    "WebhookUpdateType",
    "CryptoPayError",
    "APIError",
    "WebhookPayloadError",
    "UnknownFrameworkError",
]
