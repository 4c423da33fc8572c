"""
Type definitions shared by the facilitator signer and wallet accounts
"""

from typing import Any, Literal, Mapping, TypedDict

from pydantic import BaseModel

# Receipt status codes reported by EVM providers
TX_STATUS_SUCCESS = 1

TransactionStatus = Literal["success", "reverted"]


class TransactionReceiptResult(BaseModel):
    """Outcome of a mined transaction"""

    status: TransactionStatus

    @classmethod
    def from_receipt(cls, receipt: Mapping[str, Any]) -> "TransactionReceiptResult":
        """Map a provider receipt onto success/reverted.

        Only status 1 counts as success; 0 and any other value are reverted.
        """
        return cls(status="success" if receipt["status"] == TX_STATUS_SUCCESS else "reverted")


class TransactionRequest(TypedDict):
    """Plain value transfer / calldata transaction handed to a wallet account"""

    to: str
    value: int
    data: str


class SentTransaction(TypedDict):
    """Result of broadcasting a transaction"""

    hash: str
