"""
Wallet accounts
"""

from wdk_x402_facilitator.wallet.base import EvmProvider, WalletAccount
from wdk_x402_facilitator.wallet.evm_account import WalletAccountEvm, WalletSigner
from wdk_x402_facilitator.wallet.provider import Web3Provider

__all__ = ["EvmProvider", "WalletAccount", "WalletAccountEvm", "WalletSigner", "Web3Provider"]
