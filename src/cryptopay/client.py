"""
Crypto Pay Python SDK

Async client for the Crypto Pay API (https://help.crypt.bot/crypto-pay-api)
with webhook verification and dispatch.

Example usage:
    ```python
    from cryptopay import AsyncCryptoPay

    async with AsyncCryptoPay("12345:AAzQcZWQqQAbsfgPnOLr4FHC8Doa4L7KryC") as client:
        # Create an invoice
        invoice = await client.create_invoice(asset="TON", amount=Decimal("1.5"))

        # React to payments delivered by webhook
        async def on_paid(update):
            print(update.payload.invoice_id, update.payload.paid_amount)

        client.on("invoice_paid", on_paid)
    ```
"""
from __future__ import annotations

import inspect
from datetime import datetime
from decimal import Decimal
from typing import Any, Awaitable, Callable, Optional, Sequence, TypeVar, Union

import httpx
from pydantic import ValidationError

from ._version import __version__
from .config import CryptoPaySettings, endpoint_for, load_settings
from .logging import get_logger, mask_headers, mask_value
from .models.app import AppInfo, AppStats, Balance, Currency, ExchangeRate, GetStatsRequest
from .models.base import CryptoPayModel
from .models.check import Check, CreateCheckRequest, DeleteCheckRequest, GetChecksRequest
from .models.common import (
    Asset,
    CheckStatus,
    CurrencyType,
    FiatCurrency,
    InvoiceStatus,
    Network,
    PaidButtonName,
)
from .models.errors import APIError, WebhookPayloadError
from .models.invoice import CreateInvoiceRequest, DeleteInvoiceRequest, GetInvoicesRequest, Invoice
from .models.transfer import GetTransfersRequest, Transfer, TransferRequest
from .models.webhook import WebhookUpdate, WebhookUpdateType
from .signature import Body, check_signature

logger = get_logger(__name__)

M = TypeVar("M", bound=CryptoPayModel)

Listener = Callable[[WebhookUpdate], Union[Awaitable[Any], Any]]

API_TOKEN_HEADER = "Crypto-Pay-API-Token"


class AsyncCryptoPay:
    """
    Crypto Pay API client.

    Every API method is a POST to ``{endpoint}api/{method}`` with a JSON body.
    The response envelope is unwrapped: ``ok: true`` yields ``result``,
    ``ok: false`` raises ``APIError``. Nothing is retried.

    The same API token verifies incoming webhooks: ``emit`` checks the
    signature and hands the update to every listener registered with ``on``.

    Args:
        api_key: App token from @CryptoBot (Crypto Pay -> My Apps)
        network: ``"mainnet"`` or ``"testnet"``
        timeout: Request timeout in seconds (default: httpx default)
    """

    def __init__(
        self,
        api_key: str,
        network: Union[Network, str] = Network.MAINNET,
        timeout: Optional[float] = None,
    ):
        if not api_key:
            raise ValueError("API key is required")

        self._api_key = api_key
        self._network = Network(network)
        self._endpoint = endpoint_for(self._network)
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None
        self._listeners: list[Listener] = []

    @classmethod
    def from_settings(cls, settings: Optional[CryptoPaySettings] = None) -> "AsyncCryptoPay":
        """Create a client from ``CRYPTOPAY_*`` settings."""
        settings = settings or load_settings()
        return cls(
            api_key=settings.api_key.get_secret_value(),
            network=settings.network,
            timeout=settings.timeout,
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def network(self) -> Network:
        return self._network

    def __repr__(self) -> str:
        return f"AsyncCryptoPay(api_key={mask_value(self._api_key)!r}, network={self._network.value!r})"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            kwargs: dict[str, Any] = {}
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            headers = {
                API_TOKEN_HEADER: self._api_key,
                "Content-Type": "application/json",
                "User-Agent": f"cryptopay-sdk-python/{__version__}",
            }
            logger.debug("Opening HTTP client for %s headers=%s", self._endpoint, mask_headers(headers))
            self._client = httpx.AsyncClient(headers=headers, **kwargs)
        return self._client

    async def call(self, method: str, params: Optional[dict[str, Any]] = None) -> Any:
        """Invoke an API method and return its unwrapped result.

        Args:
            method: API method name, e.g. ``"getMe"``
            params: JSON-serializable parameters

        Returns:
            The ``result`` member of the response, unchanged

        Raises:
            APIError: The API answered with ``ok: false``
            httpx.HTTPError: Transport failure (not wrapped)
        """
        client = await self._get_client()
        url = f"{self._endpoint}api/{method}"

        logger.debug("Calling %s on %s", method, self._network.value)
        response = await client.request("POST", url, json=params or {})
        data = response.json()

        if not isinstance(data, dict) or not data.get("ok"):
            envelope_error = data.get("error") if isinstance(data, dict) else None
            error = APIError.from_envelope(method, envelope_error)
            logger.warning("Crypto Pay %s", error)
            raise error

        return data["result"]

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncCryptoPay":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    # ==================== Webhooks ====================

    def on(self, event: Union[WebhookUpdateType, str], listener: Listener) -> None:
        """Register a listener for webhook updates.

        Listeners run in registration order. ``event`` is recorded for
        readability only: every listener receives every update, whatever its
        ``update_type``.

        Args:
            event: Update type the listener is meant for
            listener: Sync or async callable taking a ``WebhookUpdate``
        """
        self._listeners.append(listener)
        logger.debug("Registered %s for %s", getattr(listener, "__name__", listener), event)

    async def emit(self, update: Body, signature: Optional[str]) -> bool:
        """Verify a webhook body and fan it out to the listeners.

        Args:
            update: Raw request body (preferred), or the parsed JSON body
            signature: Value of the ``X-Crypto-Pay-Signature`` header

        Returns:
            False if the signature does not match (no listener runs),
            True once every listener has completed

        Raises:
            WebhookPayloadError: The body verified but is not a valid update
            Exception: Whatever the first failing listener raised; later
                listeners are not called
        """
        listeners = tuple(self._listeners)

        if not check_signature(self._api_key, signature, update):
            logger.warning("Rejected webhook with invalid signature")
            return False

        parsed = _parse_update(update)
        logger.debug(
            "Dispatching update %s (%s) to %d listener(s)",
            parsed.update_id,
            parsed.update_type,
            len(listeners),
        )
        for listener in listeners:
            result = listener(parsed)
            if inspect.isawaitable(result):
                await result

        return True

    # ==================== API Methods ====================

    async def get_me(self) -> AppInfo:
        """Test the app token and return basic information about the app."""
        return AppInfo.model_validate(await self.call("getMe"))

    async def create_invoice(
        self,
        amount: Union[Decimal, str, int, float],
        asset: Optional[Union[Asset, str]] = None,
        currency_type: Optional[Union[CurrencyType, str]] = None,
        fiat: Optional[Union[FiatCurrency, str]] = None,
        accepted_assets: Optional[Sequence[Union[Asset, str]]] = None,
        description: Optional[str] = None,
        hidden_message: Optional[str] = None,
        paid_btn_name: Optional[Union[PaidButtonName, str]] = None,
        paid_btn_url: Optional[str] = None,
        payload: Optional[str] = None,
        allow_comments: Optional[bool] = None,
        allow_anonymous: Optional[bool] = None,
        expires_in: Optional[int] = None,
        is_flexible: Optional[bool] = None,
        swap_to: Optional[Union[Asset, str]] = None,
    ) -> Invoice:
        """Create a new invoice.

        Args:
            amount: Invoice amount, in ``asset`` or in ``fiat``
            asset: Crypto asset (when ``currency_type`` is crypto)
            currency_type: ``"crypto"`` (default on the API side) or ``"fiat"``
            fiat: Fiat currency code (when ``currency_type`` is fiat)
            accepted_assets: Assets the payer may use for a fiat invoice
            description: Shown to the payer (up to 1024 characters)
            hidden_message: Shown after payment (up to 2048 characters)
            paid_btn_name: Button shown after payment
            paid_btn_url: URL opened by that button
            payload: Any data attached to the invoice (up to 4 KB)
            allow_comments: Let the payer add a comment
            allow_anonymous: Let the payer pay anonymously
            expires_in: Lifetime in seconds (1-2678400)
            is_flexible: Let the payer change the amount
            swap_to: Asset to swap the received payment to

        Returns:
            Created invoice
        """
        request = CreateInvoiceRequest(
            amount=amount,
            asset=asset,
            currency_type=currency_type,
            fiat=fiat,
            accepted_assets=list(accepted_assets) if accepted_assets is not None else None,
            description=description,
            hidden_message=hidden_message,
            paid_btn_name=paid_btn_name,
            paid_btn_url=paid_btn_url,
            payload=payload,
            allow_comments=allow_comments,
            allow_anonymous=allow_anonymous,
            expires_in=expires_in,
            is_flexible=is_flexible,
            swap_to=swap_to,
        )
        return Invoice.model_validate(await self.call("createInvoice", request.to_dict()))

    async def delete_invoice(self, invoice_ids: Union[int, Sequence[int]]) -> list[Invoice]:
        """Delete one or more invoices.

        Args:
            invoice_ids: Invoice ID or IDs to delete

        Returns:
            The deleted invoices, as reported by the API
        """
        request = DeleteInvoiceRequest(invoice_ids=_as_id_list(invoice_ids))
        result = await self.call("deleteInvoice", request.to_dict())
        return _validate_list(Invoice, result)

    async def create_check(
        self,
        asset: Union[Asset, str],
        amount: Union[Decimal, str, int, float],
        pin_to_user_id: Optional[int] = None,
        pin_to_username: Optional[str] = None,
    ) -> Check:
        """Create a check (voucher) funded from the app balance.

        Args:
            asset: Crypto asset stored in the check
            amount: Amount stored in the check
            pin_to_user_id: Only this Telegram user may activate the check
            pin_to_username: Only this Telegram username may activate the check

        Returns:
            Created check
        """
        request = CreateCheckRequest(
            asset=asset,
            amount=amount,
            pin_to_user_id=pin_to_user_id,
            pin_to_username=pin_to_username,
        )
        return Check.model_validate(await self.call("createCheck", request.to_dict()))

    async def delete_check(self, check_ids: Union[int, Sequence[int]]) -> list[Check]:
        """Delete one or more checks.

        Args:
            check_ids: Check ID or IDs to delete

        Returns:
            The deleted checks, as reported by the API
        """
        request = DeleteCheckRequest(check_ids=_as_id_list(check_ids))
        result = await self.call("deleteCheck", request.to_dict())
        return _validate_list(Check, result)

    async def transfer(
        self,
        user_id: Union[int, str],
        asset: Union[Asset, str],
        amount: Union[Decimal, str, int, float],
        spend_id: Optional[str] = None,
        comment: Optional[str] = None,
        disable_send_notification: Optional[bool] = None,
    ) -> Transfer:
        """Send coins from the app balance to a Telegram user.

        Args:
            user_id: Telegram user ID of the recipient
            asset: Crypto asset to send
            amount: Amount to send
            spend_id: Idempotency key for the transfer (up to 64 characters)
            comment: Shown to the recipient (up to 1024 characters)
            disable_send_notification: Do not notify the recipient

        Returns:
            Completed transfer
        """
        request = TransferRequest(
            user_id=user_id,
            asset=asset,
            amount=amount,
            spend_id=spend_id,
            comment=comment,
            disable_send_notification=disable_send_notification,
        )
        return Transfer.model_validate(await self.call("transfer", request.to_dict()))

    async def get_invoices(
        self,
        invoice_ids: Optional[Union[int, Sequence[int]]] = None,
        status: Optional[Union[InvoiceStatus, str]] = None,
        offset: Optional[int] = None,
        count: Optional[int] = None,
        from_: Optional[datetime] = None,
        to: Optional[datetime] = None,
    ) -> list[Invoice]:
        """List invoices, optionally filtered.

        Args:
            invoice_ids: Only these invoices
            status: Only invoices in this status
            offset: Number of invoices to skip
            count: Number of invoices to return (1-1000)
            from_: Created at or after this moment
            to: Created at or before this moment

        Returns:
            Matching invoices
        """
        request = GetInvoicesRequest(
            invoice_ids=_as_id_list(invoice_ids) if invoice_ids is not None else None,
            status=status,
            offset=offset,
            count=count,
            from_=from_,
            to=to,
        )
        result = await self.call("getInvoices", request.to_dict())
        return _validate_list(Invoice, result)

    async def get_checks(
        self,
        check_ids: Optional[Union[int, Sequence[int]]] = None,
        status: Optional[Union[CheckStatus, str]] = None,
        offset: Optional[int] = None,
        count: Optional[int] = None,
        from_: Optional[datetime] = None,
        to: Optional[datetime] = None,
    ) -> list[Check]:
        """List checks, optionally filtered."""
        request = GetChecksRequest(
            check_ids=_as_id_list(check_ids) if check_ids is not None else None,
            status=status,
            offset=offset,
            count=count,
            from_=from_,
            to=to,
        )
        result = await self.call("getChecks", request.to_dict())
        return _validate_list(Check, result)

    async def get_transfers(
        self,
        transfer_ids: Optional[Union[int, Sequence[int]]] = None,
        spend_id: Optional[str] = None,
        offset: Optional[int] = None,
        count: Optional[int] = None,
        from_: Optional[datetime] = None,
        to: Optional[datetime] = None,
    ) -> list[Transfer]:
        """List transfers, optionally filtered."""
        request = GetTransfersRequest(
            transfer_ids=_as_id_list(transfer_ids) if transfer_ids is not None else None,
            spend_id=spend_id,
            offset=offset,
            count=count,
            from_=from_,
            to=to,
        )
        result = await self.call("getTransfers", request.to_dict())
        return _validate_list(Transfer, result)

    async def get_balance(self) -> list[Balance]:
        """Current balances of the app wallet, one entry per asset."""
        return _validate_list(Balance, await self.call("getBalance"))

    async def get_exchange_rates(self) -> list[ExchangeRate]:
        """Current exchange rates for supported currencies."""
        return _validate_list(ExchangeRate, await self.call("getExchangeRates"))

    async def get_currencies(self) -> list[Currency]:
        """Currencies supported by the platform."""
        return _validate_list(Currency, await self.call("getCurrencies"))

    async def get_stats(
        self,
        start_at: Optional[datetime] = None,
        end_at: Optional[datetime] = None,
    ) -> AppStats:
        """Aggregated app statistics for a period.

        Args:
            start_at: Start of the period (API default: 24 hours ago)
            end_at: End of the period (API default: now)

        Returns:
            Statistics for the period
        """
        request = GetStatsRequest(start_at=start_at, end_at=end_at)
        return AppStats.model_validate(await self.call("getStats", request.to_dict()))


def _as_id_list(ids: Union[int, Sequence[int]]) -> list[int]:
    if isinstance(ids, int):
        return [ids]
    return list(ids)


def _validate_list(model: type[M], result: Any) -> list[M]:
    # List methods answer either with a bare array or with {"items": [...]}
    if isinstance(result, dict):
        result = result.get("items", [])
    return [model.model_validate(item) for item in result]


def _parse_update(update: Body) -> WebhookUpdate:
    try:
        if isinstance(update, (bytes, bytearray, str)):
            return WebhookUpdate.model_validate_json(update)
        return WebhookUpdate.model_validate(update)
    except ValidationError as e:
        raise WebhookPayloadError("Invalid webhook update", errors=e.errors()) from e
