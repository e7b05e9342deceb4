"""Shared test data and signing helpers."""
import hashlib
import hmac
from typing import Any

MAINNET_API = "https://pay.crypt.bot/api"
TESTNET_API = "https://testnet-pay.crypt.bot/api"

MOCK_INVOICE = {
    "invoice_id": 528890,
    "hash": "IVDoTcNBYEfk",
    "currency_type": "crypto",
    "asset": "TON",
    "amount": "1.5",
    "bot_invoice_url": "https://t.me/CryptoBot?start=IVDoTcNBYEfk",
    "mini_app_invoice_url": "https://t.me/CryptoBot/app?startapp=invoice-IVDoTcNBYEfk",
    "web_app_invoice_url": "https://app.send.tg/invoices/IVDoTcNBYEfk",
    "description": "Order #42",
    "status": "active",
    "created_at": "2024-01-01T00:00:00Z",
    "allow_comments": True,
    "allow_anonymous": True,
    "payload": "order-42",
}

MOCK_PAID_INVOICE = {
    **MOCK_INVOICE,
    "status": "paid",
    "paid_asset": "TON",
    "paid_amount": "1.5",
    "paid_usd_rate": "5.41",
    "fee_asset": "TON",
    "fee_amount": "0.045",
    "paid_at": "2024-01-01T00:01:00Z",
    "paid_anonymously": False,
}

MOCK_CHECK = {
    "check_id": 1203,
    "hash": "CQ4Rz8yWGtvN",
    "asset": "USDT",
    "amount": "10",
    "bot_check_url": "https://t.me/CryptoBot?start=CQ4Rz8yWGtvN",
    "status": "active",
    "created_at": "2024-01-01T00:00:00Z",
}

MOCK_TRANSFER = {
    "transfer_id": 77,
    "spend_id": "payout-1",
    "user_id": 123456789,
    "asset": "USDT",
    "amount": "2.5",
    "status": "completed",
    "completed_at": "2024-01-01T00:00:00Z",
    "comment": "Thanks",
}

MOCK_UPDATE = {
    "update_id": 1,
    "update_type": "invoice_paid",
    "request_date": "2024-01-01T00:00:00Z",
    "payload": MOCK_PAID_INVOICE,
}


def api_response(result: Any) -> dict[str, Any]:
    """Successful response envelope."""
    return {"ok": True, "result": result}


def sign(api_key: str, body: bytes) -> str:
    """Signature the Crypto Pay backend would attach to ``body``."""
    secret = hashlib.sha256(api_key.encode()).digest()
    return hmac.new(secret, body, hashlib.sha256).hexdigest()


