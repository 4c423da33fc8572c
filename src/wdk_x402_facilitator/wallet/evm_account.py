"""
WalletAccountEvm - EVM wallet account built on eth-account and web3.py
"""

import logging
from typing import Any

from wdk_x402_facilitator.config import (
    EvmWalletConfig,
    NetworkConfig,
    is_provider_url,
    resolve_provider_uri,
)
from wdk_x402_facilitator.exceptions import ProviderNotConnectedError, ValidationError
from wdk_x402_facilitator.types import SentTransaction, TransactionRequest
from wdk_x402_facilitator.wallet.provider import Web3Provider

logger = logging.getLogger(__name__)

DEFAULT_DERIVATION_PATH = "0'/0/0"


class WalletSigner:
    """Signing context: a local account bound to a provider"""

    def __init__(self, account: Any, provider: Web3Provider, chain_id: int | None = None) -> None:
        self._account = account
        self._provider = provider
        self._chain_id = chain_id

    @property
    def address(self) -> str:
        return self._account.address

    @property
    def provider(self) -> Web3Provider:
        return self._provider

    @property
    def web3(self) -> Any:
        return self._provider.web3

    async def populate_transaction(self, tx: dict[str, Any]) -> dict[str, Any]:
        """Fill sender, nonce and chain id, keeping any value already set.

        The recipient is checksummed for eth-account. When the wallet is bound
        to a known network, its chain id is used instead of querying the node.
        """
        from web3 import Web3

        w3 = self.web3
        populated = {"from": self.address, **tx}
        if populated.get("to"):
            populated["to"] = Web3.to_checksum_address(populated["to"])
        if "nonce" not in populated:
            populated["nonce"] = await w3.eth.get_transaction_count(self.address, "pending")
        if "chainId" not in populated:
            if self._chain_id is not None:
                populated["chainId"] = self._chain_id
            else:
                populated["chainId"] = await w3.eth.chain_id
        elif self._chain_id is not None and populated["chainId"] != self._chain_id:
            raise ValidationError(
                f"Transaction chainId {populated['chainId']} does not match "
                f"wallet network chain {self._chain_id}"
            )
        return populated

    async def send_transaction(self, tx: dict[str, Any]) -> str:
        """Sign and broadcast tx, returning its 0x-prefixed hash"""
        w3 = self.web3
        populated = await self.populate_transaction(tx)
        if "gas" not in populated:
            populated["gas"] = await w3.eth.estimate_gas(populated)
        if "gasPrice" not in populated and "maxFeePerGas" not in populated:
            populated["gasPrice"] = await w3.eth.gas_price

        signed_tx = self._account.sign_transaction(populated)
        tx_hash = await w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        logger.debug(
            "Transaction broadcast",
            extra={"from": self.address, "to": populated.get("to"), "hash": tx_hash.to_0x_hex()},
        )
        return tx_hash.to_0x_hex()


class WalletAccountEvm:
    """EVM wallet account implementing the WalletAccount capability"""

    def __init__(self, account: Any, config: EvmWalletConfig | None = None) -> None:
        self._account = account
        self._config = config or EvmWalletConfig()
        self._provider: Web3Provider | None = None
        logger.debug(
            "WalletAccountEvm initialized",
            extra={"address": account.address, "provider": self._config.provider},
        )

    @classmethod
    def from_private_key(
        cls, private_key: str, config: EvmWalletConfig | None = None
    ) -> "WalletAccountEvm":
        """Create account from a hex private key (0x prefix optional)"""
        from eth_account import Account

        if not private_key.startswith("0x"):
            private_key = "0x" + private_key
        return cls(Account.from_key(private_key), config)

    @classmethod
    def from_mnemonic(
        cls,
        seed: str,
        path: str = DEFAULT_DERIVATION_PATH,
        config: EvmWalletConfig | None = None,
    ) -> "WalletAccountEvm":
        """Create account from a BIP-39 seed phrase and a BIP-44 path relative to m/44'/60'"""
        from eth_account import Account

        Account.enable_unaudited_hdwallet_features()
        account = Account.from_mnemonic(seed, account_path=f"m/44'/60'/{path}")
        return cls(account, config)

    @property
    def address(self) -> str:
        return self._account.address

    @property
    def config(self) -> EvmWalletConfig:
        return self._config

    @property
    def provider(self) -> Web3Provider | None:
        """Lazily connect to the configured provider; None when offline"""
        if self._provider is None and self._config.provider:
            uri = resolve_provider_uri(self._config.provider)
            if uri is None:
                return None
            self._provider = Web3Provider(
                uri,
                request_timeout=self._config.request_timeout,
                receipt_timeout=self._config.receipt_timeout,
            )
        return self._provider

    @property
    def chain_id(self) -> int | None:
        """Chain id implied by an eip155 network id; None for offline or URL providers"""
        network = self._config.provider
        if not network or is_provider_url(network):
            return None
        return NetworkConfig.get_chain_id(network)

    @property
    def signer(self) -> WalletSigner:
        provider = self.provider
        if provider is None:
            raise ProviderNotConnectedError("sign transactions")
        return WalletSigner(self._account, provider, chain_id=self.chain_id)

    async def send_transaction(self, tx: TransactionRequest) -> SentTransaction:
        tx_hash = await self.signer.send_transaction(dict(tx))
        return {"hash": tx_hash}
