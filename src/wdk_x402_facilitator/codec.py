"""
Contract dispatch and EIP-712 recovery
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

from wdk_x402_facilitator.exceptions import ConfigurationError
from wdk_x402_facilitator.types import SentTransaction


class ContractCodec(ABC):
    """
    ABI dispatch and typed-data recovery used by the facilitator signer.
    """

    @abstractmethod
    def contract(self, address: str, abi: Any, runner: Any) -> Any:
        """
        Build a dispatch handle whose attributes are the ABI's function names.

        Args:
            address: Contract address
            abi: Contract ABI (list or JSON string)
            runner: Provider for read-only calls, signer for transactions

        Returns:
            Handle; ``handle.<name>(*args)`` is awaitable
        """
        pass

    @abstractmethod
    def recover_typed_data(
        self,
        domain: dict[str, Any],
        types: dict[str, Any],
        message: dict[str, Any],
        signature: str | bytes,
    ) -> str:
        """
        Recover the address that signed an EIP-712 message.

        ``types`` must not contain the EIP712Domain entry.
        """
        pass


class ContractHandle:
    """Callable view of a web3 contract bound to a runner"""

    def __init__(self, contract: Any, runner: Any) -> None:
        self._contract = contract
        self._runner = runner

    @property
    def address(self) -> str:
        return self._contract.address

    @property
    def is_signing(self) -> bool:
        return callable(getattr(self._runner, "send_transaction", None))

    def __getattr__(self, name: str) -> Callable[..., Awaitable[Any]]:
        if name.startswith("_"):
            raise AttributeError(name)
        # Raises web3's ABIFunctionNotFound (an AttributeError) for unknown names
        func = getattr(self._contract.functions, name)

        async def dispatch(*args: Any) -> Any:
            if not self.is_signing:
                return await func(*args).call()

            tx = await func(*args).build_transaction(await self._runner.populate_transaction({}))
            tx_hash = await self._runner.send_transaction(tx)
            result: SentTransaction = {"hash": tx_hash}
            return result

        return dispatch


class Web3ContractCodec(ContractCodec):
    """
    ContractCodec implementation using web3.py contracts and eth-account recovery.

    Runners must expose the AsyncWeb3 instance they talk to as ``web3``
    (Web3Provider and WalletSigner do). Wallets backed by another client need
    their own ContractCodec.
    """

    def contract(self, address: str, abi: Any, runner: Any) -> ContractHandle:
        from web3 import Web3

        if getattr(runner, "web3", None) is None:
            raise ConfigurationError(
                f"Web3ContractCodec needs a web3-backed runner, got {type(runner).__name__}"
            )
        abi_list = json.loads(abi) if isinstance(abi, str) else list(abi)
        contract = runner.web3.eth.contract(address=Web3.to_checksum_address(address), abi=abi_list)
        return ContractHandle(contract, runner)

    def recover_typed_data(
        self,
        domain: dict[str, Any],
        types: dict[str, Any],
        message: dict[str, Any],
        signature: str | bytes,
    ) -> str:
        from eth_account import Account
        from eth_account.messages import encode_typed_data

        signable = encode_typed_data(
            domain_data=domain, message_types=types, message_data=message
        )
        if isinstance(signature, str):
            signature = bytes.fromhex(signature[2:] if signature.startswith("0x") else signature)
        return Account.recover_message(signable, signature=signature)
