"""
PSP Adapter Base Class and Interface.
Describes what the order service needs from a payment gateway.
"""
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional


class PSPAdapter(ABC):
    """
    Base adapter for Payment Service Providers.
    Gateway implementations must inherit from this class.
    """

    provider = "unknown"

    def __init__(self, api_key: str, api_secret: Optional[str] = None, **kwargs):
        """
        Initialize PSP adapter with credentials.

        Args:
            api_key: Publishable key id
            api_secret: Private key secret
            **kwargs: Provider-specific configuration
        """
        self.api_key = api_key
        self.api_secret = api_secret
        self.config = kwargs

    @abstractmethod
    def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Create an order at the gateway.

        Args:
            amount: Amount in smallest currency unit (e.g., paise)
            currency: ISO 4217 currency code (e.g., "INR")
            receipt: Merchant reference for the order
            notes: Free-form key/value pairs stored with the order

        Returns:
            The gateway's order object, unmodified

        Raises:
            GatewayError: If the gateway rejects the request or is unreachable
        """
        pass

    def __repr__(self):
        # Never include credentials here, adapters end up in log lines
        return f"<{self.__class__.__name__}(provider={self.provider})>"
