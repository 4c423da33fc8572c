"""
WalletAccountEvmX402Facilitator - x402 facilitator signer over a wallet account
"""

import logging
from typing import Any, Sequence

from wdk_x402_facilitator.abi import strip_eip712_domain
from wdk_x402_facilitator.codec import ContractCodec, Web3ContractCodec
from wdk_x402_facilitator.exceptions import ProviderNotConnectedError
from wdk_x402_facilitator.signers.facilitator.base import FacilitatorEvmSigner
from wdk_x402_facilitator.types import TransactionReceiptResult
from wdk_x402_facilitator.wallet.base import EvmProvider, WalletAccount

logger = logging.getLogger(__name__)


class WalletAccountEvmX402Facilitator(FacilitatorEvmSigner):
    """
    Object adapter exposing a WalletAccount as a FacilitatorEvmSigner.

    Signing, nonces, fees and transport stay with the wrapped account; ABI
    dispatch and EIP-712 recovery go through the codec. Failures from either
    collaborator propagate unchanged.

    Example:
        wallet = WalletAccountEvm.from_private_key(key, EvmWalletConfig(provider="eip155:84532"))
        signer = WalletAccountEvmX402Facilitator(wallet)
        tx_hash = await signer.write_contract(token, ERC20_ABI, "transfer", [to, amount])
        receipt = await signer.wait_for_transaction_receipt(tx_hash)
    """

    def __init__(self, wallet_account: WalletAccount, codec: ContractCodec | None = None) -> None:
        self._adaptee = wallet_account
        self._codec = codec or Web3ContractCodec()

    @property
    def adaptee(self) -> WalletAccount:
        return self._adaptee

    def _require_provider(self, action: str) -> EvmProvider:
        provider = self._adaptee.provider
        if provider is None:
            raise ProviderNotConnectedError(action)
        return provider

    def get_addresses(self) -> list[str]:
        return [self._adaptee.address]

    async def get_code(self, address: str) -> str | None:
        provider = self._require_provider("get contract code")
        code = await provider.get_code(address)
        return None if code == "0x" else code

    async def read_contract(
        self,
        address: str,
        abi: Any,
        function_name: str,
        args: Sequence[Any] = (),
    ) -> Any:
        provider = self._require_provider("read contracts")
        contract = self._codec.contract(address, abi, provider)
        logger.debug("Reading contract", extra={"contract": address, "method": function_name})
        return await getattr(contract, function_name)(*args)

    async def verify_typed_data(
        self,
        address: str,
        domain: dict[str, Any],
        types: dict[str, Any],
        message: dict[str, Any],
        signature: str,
        primary_type: str | None = None,
    ) -> bool:
        recovered = await self.recover_typed_data_address(
            domain, types, message, signature, primary_type
        )
        return recovered.lower() == address.lower()

    async def recover_typed_data_address(
        self,
        domain: dict[str, Any],
        types: dict[str, Any],
        message: dict[str, Any],
        signature: str,
        primary_type: str | None = None,
    ) -> str:
        # primary_type is implied by the type graph once EIP712Domain is gone
        recovered = self._codec.recover_typed_data(
            domain, strip_eip712_domain(types), message, signature
        )
        logger.debug(
            "Recovered typed data signer",
            extra={"primary_type": primary_type, "recovered": recovered},
        )
        return recovered

    async def write_contract(
        self,
        address: str,
        abi: Any,
        function_name: str,
        args: Sequence[Any],
    ) -> str:
        self._require_provider("write contracts")
        contract = self._codec.contract(address, abi, self._adaptee.signer)
        tx = await getattr(contract, function_name)(*args)
        logger.debug(
            "Contract write submitted",
            extra={"contract": address, "method": function_name, "hash": tx["hash"]},
        )
        return tx["hash"]

    async def send_transaction(self, to: str, data: str) -> str:
        tx = await self._adaptee.send_transaction({"to": to, "value": 0, "data": data})
        return tx["hash"]

    async def wait_for_transaction_receipt(self, tx_hash: str) -> TransactionReceiptResult:
        provider = self._require_provider("wait for transaction receipts")
        receipt = await provider.wait_for_transaction(tx_hash)
        result = TransactionReceiptResult.from_receipt(receipt)
        logger.debug("Transaction mined", extra={"hash": tx_hash, "status": result.status})
        return result
