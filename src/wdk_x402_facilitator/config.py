"""
Network and wallet configuration
"""

import os
from dataclasses import dataclass
from typing import Dict

from wdk_x402_facilitator.exceptions import (
    ConfigurationError,
    UnsupportedNetworkError,
    ValidationError,
)


class NetworkConfig:
    """Default RPC endpoints for EVM networks"""

    RPC_URLS: Dict[str, str] = {
        "eip155:8453": "https://mainnet.base.org",
        "eip155:84532": "https://sepolia.base.org",
        "eip155:97": "https://data-seed-prebsc-1-s1.binance.org:8545/",
        "eip155:56": "https://bsc-dataseed.binance.org/",
    }

    @classmethod
    def get_rpc_url(cls, network: str) -> str | None:
        """Get RPC URL for an EVM network.

        Args:
            network: Network identifier (e.g., "eip155:8453")

        Returns:
            RPC URL string, or None if not configured
        """
        return cls.RPC_URLS.get(network)

    @classmethod
    def get_chain_id(cls, network: str) -> int:
        """Get chain ID for an ``eip155:<chain id>`` network identifier

        Raises:
            UnsupportedNetworkError: If network is not a valid eip155 identifier
        """
        if not network.startswith("eip155:"):
            raise UnsupportedNetworkError(f"Unsupported network: {network}")
        try:
            return int(network.split(":", 1)[1])
        except ValueError:
            raise UnsupportedNetworkError(f"Invalid EVM network: {network}")


def is_provider_url(value: str) -> bool:
    return value.startswith(("http://", "https://", "ws://", "wss://"))


def resolve_provider_uri(network: str) -> str | None:
    """Resolve a network identifier to an HTTP RPC provider URI.

    Checks in order:
    1. If network is already an HTTP URL, return as-is
    2. Look up in NetworkConfig.RPC_URLS
    3. Return None (no provider available)

    Raises:
        ConfigurationError: For ws:// and wss:// URLs, which Web3Provider cannot serve
    """
    if network.startswith(("ws://", "wss://")):
        raise ConfigurationError(f"WebSocket providers are not supported: {network}")
    if is_provider_url(network):
        return network
    return NetworkConfig.get_rpc_url(network)


@dataclass
class EvmWalletConfig:
    """Configuration for WalletAccountEvm

    Attributes:
        provider: HTTP(S) RPC URL or eip155 network id; None leaves the wallet offline
        request_timeout: HTTP request timeout in seconds
        receipt_timeout: How long the provider waits for a receipt, in seconds
    """

    provider: str | None = None
    request_timeout: float = 60
    receipt_timeout: float = 120

    @classmethod
    def from_env(cls, prefix: str = "EVM_") -> "EvmWalletConfig":
        """Build config from ``{prefix}PROVIDER``, ``{prefix}REQUEST_TIMEOUT``
        and ``{prefix}RECEIPT_TIMEOUT``."""
        return cls(
            provider=os.getenv(f"{prefix}PROVIDER") or None,
            request_timeout=_float_from_env(f"{prefix}REQUEST_TIMEOUT", cls.request_timeout),
            receipt_timeout=_float_from_env(f"{prefix}RECEIPT_TIMEOUT", cls.receipt_timeout),
        )


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValidationError(f"{name} must be a number, got {raw!r}")
