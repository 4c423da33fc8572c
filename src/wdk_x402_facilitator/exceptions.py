"""
wdk-x402-facilitator exception hierarchy
"""


class X402Error(Exception):
    """x402 base exception"""

    pass


class ValidationError(X402Error):
    """Validation-related error"""

    pass


class ConfigurationError(X402Error):
    """Configuration-related error"""

    pass


class UnsupportedNetworkError(ConfigurationError):
    """Unsupported network"""

    pass


class ProviderNotConnectedError(ConfigurationError):
    """Raised when an operation needs a network provider the wallet does not have"""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"The wallet must be connected to a provider to {action}.")
