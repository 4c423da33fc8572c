import pytest
from pydantic import ValidationError

from wdk_x402_facilitator.abi import strip_eip712_domain
from wdk_x402_facilitator.types import TransactionReceiptResult

DOMAIN_FIELDS = [
    {"name": "name", "type": "string"},
    {"name": "chainId", "type": "uint256"},
    {"name": "verifyingContract", "type": "address"},
]


@pytest.mark.parametrize(
    "status,expected",
    [(1, "success"), (0, "reverted"), (2, "reverted"), (None, "reverted")],
)
def test_receipt_result_from_receipt(status, expected):
    assert TransactionReceiptResult.from_receipt({"status": status}).status == expected


def test_receipt_result_rejects_other_status():
    with pytest.raises(ValidationError):
        TransactionReceiptResult(status="pending")


def test_strip_eip712_domain_only_removes_domain():
    types = {
        "EIP712Domain": DOMAIN_FIELDS,
        "Test": [{"name": "content", "type": "string"}],
    }

    stripped = strip_eip712_domain(types)

    assert stripped == {"Test": [{"name": "content", "type": "string"}]}
    assert "EIP712Domain" in types


def test_strip_eip712_domain_without_domain_entry():
    types = {"Test": [{"name": "content", "type": "string"}]}

    assert strip_eip712_domain(types) == types
