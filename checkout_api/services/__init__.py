from .key_service import configuration_status, get_public_key
from .order_service import OrderService
from .verification_service import VerificationResult, VerificationService, compute_signature

__all__ = [
    "OrderService",
    "VerificationService",
    "VerificationResult",
    "compute_signature",
    "get_public_key",
    "configuration_status",
]
