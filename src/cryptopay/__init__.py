"""
Crypto Pay Python SDK

Async client for the Crypto Pay API, webhook signature verification and
adapters that plug webhook delivery into Starlette, FastAPI, aiohttp, Django
or a bare ASGI server.
"""
from ._version import __version__
from .client import AsyncCryptoPay
from .config import ENDPOINTS, CryptoPaySettings, endpoint_for, load_settings
from .models import (
    APIError,
    AppInfo,
    AppStats,
    Asset,
    Balance,
    Check,
    CheckStatus,
    CryptoPayError,
    Currency,
    CurrencyType,
    ExchangeRate,
    FiatCurrency,
    Invoice,
    InvoiceStatus,
    Network,
    PaidButtonName,
    Transfer,
    TransferStatus,
    UnknownFrameworkError,
    WebhookInvoice,
    WebhookPayloadError,
    WebhookUpdate,
    WebhookUpdateType,
)
from .signature import (
    SIGNATURE_HEADER,
    canonical_json,
    check_signature,
    compute_signature,
    derive_secret,
)
from .webhook import (
    AdapterRegistry,
    FrameworkAdapter,
    FrameworkHandler,
    default_registry,
    webhook_handler,
)

__all__ = [
    "__version__",
    # Client
    "AsyncCryptoPay",
    # Config
    "ENDPOINTS",
    "CryptoPaySettings",
    "endpoint_for",
    "load_settings",
    # Models
    "AppInfo",
    "AppStats",
    "Asset",
    "Balance",
    "Check",
    "CheckStatus",
    "Currency",
    "CurrencyType",
    "ExchangeRate",
    "FiatCurrency",
    "Invoice",
    "InvoiceStatus",
    "Network",
    "PaidButtonName",
    "Transfer",
    "TransferStatus",
    "WebhookInvoice",
    "WebhookUpdate",
    "WebhookUpdateType",
    # Errors
    "CryptoPayError",
    "APIError",
    "WebhookPayloadError",
    "UnknownFrameworkError",
    # Signatures
    "SIGNATURE_HEADER",
    "canonical_json",
    "check_signature",
    "compute_signature",
    "derive_secret",
    # Webhooks
    "AdapterRegistry",
    "FrameworkAdapter",
    "FrameworkHandler",
    "default_registry",
    "webhook_handler",
]
