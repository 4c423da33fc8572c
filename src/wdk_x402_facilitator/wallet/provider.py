"""
Web3Provider - EvmProvider implementation backed by web3.py
"""

import logging
from typing import Any, Mapping

logger = logging.getLogger(__name__)


class Web3Provider:
    """EvmProvider over an AsyncWeb3 HTTP connection"""

    def __init__(self, uri: str, request_timeout: float = 60, receipt_timeout: float = 120) -> None:
        from web3 import AsyncHTTPProvider, AsyncWeb3
        from web3.middleware import ExtraDataToPOAMiddleware

        w3 = AsyncWeb3(AsyncHTTPProvider(uri, request_kwargs={"timeout": request_timeout}))
        w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
        self._web3 = w3
        self._receipt_timeout = receipt_timeout
        logger.debug("Web3Provider initialized", extra={"uri": uri})

    @property
    def web3(self) -> Any:
        return self._web3

    async def get_code(self, address: str) -> str:
        code = await self._web3.eth.get_code(address)
        return code.to_0x_hex()

    async def wait_for_transaction(self, tx_hash: str) -> Mapping[str, Any]:
        return await self._web3.eth.wait_for_transaction_receipt(
            tx_hash, timeout=self._receipt_timeout
        )
