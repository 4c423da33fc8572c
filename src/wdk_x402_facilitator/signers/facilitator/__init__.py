"""
Facilitator Signers
"""

from wdk_x402_facilitator.signers.facilitator.base import FacilitatorEvmSigner
from wdk_x402_facilitator.signers.facilitator.evm_signer import WalletAccountEvmX402Facilitator

__all__ = ["FacilitatorEvmSigner", "WalletAccountEvmX402Facilitator"]
