# checkout_api/schemas/__init__.py

from .orders import (
    CreateOrderRequest,
    CreateOrderResponse,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
    PublicKeyResponse,
    ConfigStatusResponse,
    ErrorResponse,
)

__all__ = [
    "CreateOrderRequest",
    "CreateOrderResponse",
    "VerifyPaymentRequest",
    "VerifyPaymentResponse",
    "PublicKeyResponse",
    "ConfigStatusResponse",
    "ErrorResponse",
]
