"""
Wallet account capability interfaces
"""

from typing import Any, Mapping, Protocol

from wdk_x402_facilitator.types import SentTransaction, TransactionRequest


class EvmProvider(Protocol):
    """
    Network access a wallet account exposes for reads and receipts.

    The default Web3ContractCodec additionally reads the provider's ``web3``
    attribute; providers without one need a custom ContractCodec.
    """

    async def get_code(self, address: str) -> str:
        """Return the hex bytecode at address ("0x" when there is none)"""
        ...

    async def wait_for_transaction(self, tx_hash: str) -> Mapping[str, Any]:
        """Block until tx_hash is mined and return its receipt"""
        ...


class WalletAccount(Protocol):
    """
    Capability set required from a wrapped wallet account.

    Any object exposing these members can be adapted; key management,
    nonces and fees stay inside the implementation.
    """

    @property
    def address(self) -> str: ...

    @property
    def provider(self) -> EvmProvider | None: ...

    @property
    def signer(self) -> Any:
        """Signing context passed to the contract codec for writes"""
        ...

    async def send_transaction(self, tx: TransactionRequest) -> SentTransaction: ...
