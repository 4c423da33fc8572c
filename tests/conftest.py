"""
Pytest configuration and fixtures
"""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_evm_private_key():
    """Mock EVM private key for tests"""
    return "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"


@pytest.fixture
def mock_evm_address():
    """Address derived from mock_evm_private_key"""
    return "0xFCAd0B19bB29D4674531d6f115237E16AfCE377c"


@pytest.fixture
def mock_provider():
    """Mock EvmProvider"""
    provider = MagicMock()
    provider.get_code = AsyncMock(return_value="0x6080604052")
    provider.wait_for_transaction = AsyncMock(return_value={"status": 1})
    return provider


@pytest.fixture
def mock_wallet(mock_provider, mock_evm_address):
    """Mock WalletAccount connected to mock_provider"""
    wallet = MagicMock()
    wallet.address = mock_evm_address
    wallet.provider = mock_provider
    wallet.signer = MagicMock(name="signer")
    wallet.send_transaction = AsyncMock(return_value={"hash": "0xsent"})
    return wallet


@pytest.fixture
def mock_codec():
    """Mock ContractCodec whose dispatch handle is exposed as codec.handle"""
    codec = MagicMock()
    codec.handle = MagicMock()
    codec.contract.return_value = codec.handle
    return codec
