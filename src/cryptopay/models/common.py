"""Enumerations shared by Crypto Pay models.

See https://help.crypt.bot/crypto-pay-api for the authoritative lists.
"""
from __future__ import annotations

from enum import Enum


class Network(str, Enum):
    """Crypto Pay deployment to talk to."""

    MAINNET = "mainnet"
    TESTNET = "testnet"


class Asset(str, Enum):
    """Supported cryptocurrency assets."""

    USDT = "USDT"
    TON = "TON"
    BTC = "BTC"
    ETH = "ETH"
    LTC = "LTC"
    BNB = "BNB"
    TRX = "TRX"
    USDC = "USDC"
    JET = "JET"


class FiatCurrency(str, Enum):
    """Fiat currency codes accepted for invoice amounts."""

    USD = "USD"
    EUR = "EUR"
    RUB = "RUB"
    BYN = "BYN"
    UAH = "UAH"
    GBP = "GBP"
    CNY = "CNY"
    KZT = "KZT"
    UZS = "UZS"
    GEL = "GEL"
    TRY = "TRY"
    AMD = "AMD"
    THB = "THB"
    INR = "INR"
    BRL = "BRL"
    IDR = "IDR"
    AZN = "AZN"
    AED = "AED"
    PLN = "PLN"
    ILS = "ILS"


class CurrencyType(str, Enum):
    """Whether an invoice amount is given in crypto or fiat."""

    CRYPTO = "crypto"
    FIAT = "fiat"


class InvoiceStatus(str, Enum):
    ACTIVE = "active"
    PAID = "paid"
    EXPIRED = "expired"


class CheckStatus(str, Enum):
    ACTIVE = "active"
    ACTIVATED = "activated"


class TransferStatus(str, Enum):
    COMPLETED = "completed"


class PaidButtonName(str, Enum):
    """Preset button shown to the payer after a successful payment."""

    VIEW_ITEM = "viewItem"
    OPEN_CHANNEL = "openChannel"
    OPEN_BOT = "openBot"
    CALLBACK = "callback"
