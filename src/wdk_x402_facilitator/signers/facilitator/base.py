"""
Facilitator signer base interface
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from wdk_x402_facilitator.types import TransactionReceiptResult


class FacilitatorEvmSigner(ABC):
    """
    Abstract base class for x402 EVM facilitator signers.

    Responsible for verifying signatures and executing on-chain transactions.
    """

    @abstractmethod
    def get_addresses(self) -> list[str]:
        """Get all addresses this facilitator can use for signing"""
        pass

    @abstractmethod
    async def get_code(self, address: str) -> str | None:
        """
        Get the bytecode at an address.

        Returns:
            Hex bytecode, or None when the address holds no code
        """
        pass

    @abstractmethod
    async def read_contract(
        self,
        address: str,
        abi: Any,
        function_name: str,
        args: Sequence[Any] = (),
    ) -> Any:
        """
        Call a read-only contract function.

        Args:
            address: Contract address
            abi: Contract ABI (list or JSON string)
            function_name: Function to call
            args: Ordered function arguments

        Returns:
            The decoded return value
        """
        pass

    @abstractmethod
    async def verify_typed_data(
        self,
        address: str,
        domain: dict[str, Any],
        types: dict[str, Any],
        message: dict[str, Any],
        signature: str,
        primary_type: str | None = None,
    ) -> bool:
        """
        Verify EIP-712 typed data signature.

        Args:
            address: Expected signer address
            domain: EIP-712 domain
            types: Type definitions
            message: Signed message
            signature: Signature to verify
            primary_type: Primary type being signed

        Returns:
            True if signature is valid
        """
        pass

    @abstractmethod
    async def recover_typed_data_address(
        self,
        domain: dict[str, Any],
        types: dict[str, Any],
        message: dict[str, Any],
        signature: str,
        primary_type: str | None = None,
    ) -> str:
        """Recover the EIP-712 signer address exactly as the codec reports it"""
        pass

    @abstractmethod
    async def write_contract(
        self,
        address: str,
        abi: Any,
        function_name: str,
        args: Sequence[Any],
    ) -> str:
        """
        Execute a contract write transaction.

        Returns:
            Transaction hash
        """
        pass

    @abstractmethod
    async def send_transaction(self, to: str, data: str) -> str:
        """
        Send a raw transaction carrying calldata and no value.

        Returns:
            Transaction hash
        """
        pass

    @abstractmethod
    async def wait_for_transaction_receipt(self, tx_hash: str) -> TransactionReceiptResult:
        """Wait for a transaction to be mined and report success or revert"""
        pass
