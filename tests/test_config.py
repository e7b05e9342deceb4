"""Tests for environment-driven settings."""
import pytest
from pydantic import ValidationError

from cryptopay import AsyncCryptoPay, CryptoPaySettings, Network, endpoint_for, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CRYPTOPAY_API_KEY", "CRYPTOPAY_NETWORK", "CRYPTOPAY_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


class TestEndpoints:
    def test_endpoint_for(self):
        assert endpoint_for("mainnet") == "https://pay.crypt.bot/"
        assert endpoint_for(Network.TESTNET) == "https://testnet-pay.crypt.bot/"


class TestCryptoPaySettings:
    """Tests for CryptoPaySettings."""

    def test_defaults(self):
        """Should default to mainnet with no timeout override."""
        settings = CryptoPaySettings(_env_file=None)
        assert settings.network == Network.MAINNET
        assert settings.timeout is None
        assert settings.api_key.get_secret_value() == ""

    def test_reads_environment(self, monkeypatch):
        """Should read CRYPTOPAY_* variables."""
        monkeypatch.setenv("CRYPTOPAY_API_KEY", "1:token")
        monkeypatch.setenv("CRYPTOPAY_NETWORK", "Testnet")
        monkeypatch.setenv("CRYPTOPAY_TIMEOUT", "5")

        settings = CryptoPaySettings(_env_file=None)
        assert settings.api_key.get_secret_value() == "1:token"
        assert settings.network == Network.TESTNET
        assert settings.timeout == 5.0

    def test_api_key_hidden_in_repr(self, monkeypatch):
        """Should not print the API key."""
        monkeypatch.setenv("CRYPTOPAY_API_KEY", "1:token")
        assert "1:token" not in repr(CryptoPaySettings(_env_file=None))

    def test_rejects_bad_timeout(self, monkeypatch):
        """Should reject non-positive timeouts."""
        monkeypatch.setenv("CRYPTOPAY_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            CryptoPaySettings(_env_file=None)

    def test_rejects_unknown_network(self, monkeypatch):
        """Should reject networks other than mainnet and testnet."""
        monkeypatch.setenv("CRYPTOPAY_NETWORK", "devnet")
        with pytest.raises(ValidationError):
            CryptoPaySettings(_env_file=None)


class TestLoadSettings:
    """Tests for load_settings."""

    def test_env_file(self, tmp_path):
        """Should read a dotenv file."""
        env_file = tmp_path / ".env"
        env_file.write_text("CRYPTOPAY_API_KEY=2:fromfile\nCRYPTOPAY_NETWORK=testnet\n")

        settings = load_settings(str(env_file))
        assert settings.api_key.get_secret_value() == "2:fromfile"
        assert settings.network == Network.TESTNET

    def test_cached(self, monkeypatch):
        """Should build settings once per process."""
        monkeypatch.setenv("CRYPTOPAY_API_KEY", "1:token")
        assert load_settings() is load_settings()

    def test_client_from_environment(self, monkeypatch):
        """Should let the client pick up settings from the environment."""
        monkeypatch.setenv("CRYPTOPAY_API_KEY", "1:token")
        monkeypatch.setenv("CRYPTOPAY_NETWORK", "testnet")

        client = AsyncCryptoPay.from_settings()
        assert client.network == Network.TESTNET

    def test_client_requires_key(self):
        """Should fail fast when no API key is configured."""
        with pytest.raises(ValueError, match="API key is required"):
            AsyncCryptoPay.from_settings(CryptoPaySettings(_env_file=None))
