"""Environment-driven configuration for the Crypto Pay client."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.common import Network

ENDPOINTS: dict[Network, str] = {
    Network.MAINNET: "https://pay.crypt.bot/",
    Network.TESTNET: "https://testnet-pay.crypt.bot/",
}


def endpoint_for(network: Network | str) -> str:
    """Base URL of the API for a network."""
    return ENDPOINTS[Network(network)]


class CryptoPaySettings(BaseSettings):
    """Client settings, read from ``CRYPTOPAY_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CRYPTOPAY_",
        env_file=".env",
        extra="ignore",
    )

    api_key: SecretStr = SecretStr("")
    network: Network = Network.MAINNET
    # None leaves httpx's own default in place
    timeout: Optional[float] = Field(None, gt=0)

    @field_validator("network", mode="before")
    @classmethod
    def parse_network(cls, v):
        """Accept any casing, e.g. ``CRYPTOPAY_NETWORK=Testnet``."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


@lru_cache
def load_settings(env_file: str | None = None) -> CryptoPaySettings:
    """Load CryptoPaySettings once per process."""
    if env_file:
        return CryptoPaySettings(_env_file=Path(env_file))
    return CryptoPaySettings()
