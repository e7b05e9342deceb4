"""
Pytest configuration and fixtures for Crypto Pay SDK tests.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx
import pytest

from cryptopay import AsyncCryptoPay
from tests.helpers import MOCK_UPDATE, sign


@dataclass
class _MockEntry:
    method: str
    url: str
    response: Optional[httpx.Response] = None
    exception: Optional[Exception] = None


@dataclass
class _RecordedRequest:
    method: str
    url: str
    json: Any
    headers: httpx.Headers = field(default_factory=httpx.Headers)


class _LocalHTTPXMock:
    """Minimal httpx mock: queued responses matched on method and URL."""

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[_RecordedRequest] = []

    def add_response(
        self,
        *,
        url: str,
        method: str = "POST",
        status_code: int = 200,
        json: Any = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        response_headers = {"content-type": "application/json"}
        if headers:
            response_headers.update(headers)

        request = httpx.Request(method.upper(), url)
        response = httpx.Response(
            status_code=status_code,
            headers=response_headers,
            content=json_dumps_bytes(json),
            request=request,
        )
        self._entries.append(_MockEntry(method=method.upper(), url=url, response=response))

    def add_exception(self, exception: Exception, *, url: str, method: str = "POST") -> None:
        self._entries.append(_MockEntry(method=method.upper(), url=url, exception=exception))

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_method = method.upper()
        for idx, entry in enumerate(self._entries):
            if entry.method == normalized_method and entry.url == url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {normalized_method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )

    @property
    def last_request(self) -> _RecordedRequest:
        assert self.requests, "No request was sent"
        return self.requests[-1]


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


@pytest.fixture
def httpx_mock(monkeypatch):
    """Replace ``httpx.AsyncClient.request`` with queued responses."""
    mock = _LocalHTTPXMock()

    async def _async_request(self, method, url, **kwargs):
        mock.requests.append(
            _RecordedRequest(
                method=method.upper(),
                url=str(url),
                json=kwargs.get("json"),
                headers=httpx.Headers(self.headers),
            )
        )
        match = mock._pop_match(method, str(url))
        if match.exception is not None:
            raise match.exception
        assert match.response is not None
        return match.response

    monkeypatch.setattr(httpx.AsyncClient, "request", _async_request)
    return mock


@pytest.fixture
def api_key() -> str:
    """Test API key."""
    return "12345:AAzQcZWQqQAbsfgPnOLr4FHC8Doa4L7KryC"


@pytest.fixture
async def client(api_key: str) -> AsyncCryptoPay:
    """Create a mainnet test client."""
    client = AsyncCryptoPay(api_key=api_key)
    yield client
    await client.close()


@pytest.fixture
def update_body() -> bytes:
    """Raw webhook body as sent on the wire."""
    return json.dumps(MOCK_UPDATE, separators=(",", ":")).encode()


@pytest.fixture
def update_signature(api_key: str, update_body: bytes) -> str:
    """Valid signature for ``update_body``."""
    return sign(api_key, update_body)
