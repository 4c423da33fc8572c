"""
wdk-x402-facilitator - x402 facilitator signer for EVM wallet accounts

Adapts a wallet account to the FacilitatorEvmSigner interface used by x402
facilitators to verify and settle payments.
"""

__version__ = "0.1.0"

from wdk_x402_facilitator.codec import ContractCodec, Web3ContractCodec
from wdk_x402_facilitator.config import EvmWalletConfig, NetworkConfig
from wdk_x402_facilitator.exceptions import (
    ConfigurationError,
    ProviderNotConnectedError,
    UnsupportedNetworkError,
    ValidationError,
    X402Error,
)
from wdk_x402_facilitator.signers.facilitator import (
    FacilitatorEvmSigner,
    WalletAccountEvmX402Facilitator,
)
from wdk_x402_facilitator.types import TransactionReceiptResult
from wdk_x402_facilitator.wallet import WalletAccount, WalletAccountEvm

__all__ = [
    "__version__",
    # Signers
    "FacilitatorEvmSigner",
    "WalletAccountEvmX402Facilitator",
    # Wallet
    "WalletAccount",
    "WalletAccountEvm",
    # Codec
    "ContractCodec",
    "Web3ContractCodec",
    # Config
    "EvmWalletConfig",
    "NetworkConfig",
    # Types
    "TransactionReceiptResult",
    # Exceptions
    "X402Error",
    "ValidationError",
    "ConfigurationError",
    "UnsupportedNetworkError",
    "ProviderNotConnectedError",
]
