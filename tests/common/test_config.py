import pytest

from wdk_x402_facilitator.config import (
    EvmWalletConfig,
    NetworkConfig,
    is_provider_url,
    resolve_provider_uri,
)
from wdk_x402_facilitator.exceptions import (
    ConfigurationError,
    UnsupportedNetworkError,
    ValidationError,
)


def test_get_chain_id_from_eip155_identifier():
    assert NetworkConfig.get_chain_id("eip155:8453") == 8453
    assert NetworkConfig.get_chain_id("eip155:97") == 97


@pytest.mark.parametrize("network", ["eip155:base", "eip155:", "solana:mainnet"])
def test_get_chain_id_unsupported(network):
    with pytest.raises(UnsupportedNetworkError):
        NetworkConfig.get_chain_id(network)


def test_resolve_provider_uri():
    """Test URLs pass through and known networks map to their RPC"""
    assert resolve_provider_uri("https://rpc.example.org") == "https://rpc.example.org"
    assert resolve_provider_uri("eip155:84532") == "https://sepolia.base.org"
    assert resolve_provider_uri("eip155:999999") is None


@pytest.mark.parametrize("uri", ["ws://127.0.0.1:8546", "wss://rpc.example.org"])
def test_resolve_provider_uri_rejects_websocket(uri):
    with pytest.raises(ConfigurationError, match="WebSocket"):
        resolve_provider_uri(uri)


def test_is_provider_url():
    assert is_provider_url("http://localhost:8545")
    assert is_provider_url("wss://rpc.example.org")
    assert not is_provider_url("eip155:8453")


def test_wallet_config_defaults():
    config = EvmWalletConfig()

    assert config.provider is None
    assert config.request_timeout == 60
    assert config.receipt_timeout == 120


def test_wallet_config_from_env(monkeypatch):
    monkeypatch.setenv("EVM_PROVIDER", "eip155:8453")
    monkeypatch.setenv("EVM_RECEIPT_TIMEOUT", "30")
    monkeypatch.delenv("EVM_REQUEST_TIMEOUT", raising=False)

    config = EvmWalletConfig.from_env()

    assert config.provider == "eip155:8453"
    assert config.receipt_timeout == 30.0
    assert config.request_timeout == 60


def test_wallet_config_from_env_custom_prefix(monkeypatch):
    monkeypatch.setenv("FACILITATOR_PROVIDER", "http://localhost:8545")

    config = EvmWalletConfig.from_env(prefix="FACILITATOR_")

    assert config.provider == "http://localhost:8545"


def test_wallet_config_from_env_invalid_number(monkeypatch):
    monkeypatch.setenv("EVM_REQUEST_TIMEOUT", "soon")

    with pytest.raises(ValidationError, match="EVM_REQUEST_TIMEOUT"):
        EvmWalletConfig.from_env()
