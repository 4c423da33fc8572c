"""
Signers
"""

from wdk_x402_facilitator.signers.facilitator import (
    FacilitatorEvmSigner,
    WalletAccountEvmX402Facilitator,
)

__all__ = ["FacilitatorEvmSigner", "WalletAccountEvmX402Facilitator"]
