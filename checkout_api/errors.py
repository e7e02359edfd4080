"""
Error taxonomy shared by the payment services and the HTTP layer.

Every failure the services raise is a ``PaymentError`` tagged with a
``PaymentErrorKind``. The kind decides the HTTP status; ``detail`` carries the
raw upstream payload for gateway failures. A signature mismatch is not an
error and never shows up here.
"""
from enum import Enum
from typing import Any, Dict, Optional


class PaymentErrorKind(str, Enum):
    """Failure categories."""
    INVALID_ARGUMENT = "invalid_argument"
    CONFIGURATION = "configuration"
    GATEWAY = "gateway"
    INTERNAL = "internal"


_STATUS_CODES = {
    PaymentErrorKind.INVALID_ARGUMENT: 400,
    PaymentErrorKind.CONFIGURATION: 500,
    PaymentErrorKind.GATEWAY: 500,
    PaymentErrorKind.INTERNAL: 500,
}


class PaymentError(Exception):
    kind: PaymentErrorKind = PaymentErrorKind.INTERNAL

    def __init__(self, message: str, detail: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self.kind]

    def to_payload(self) -> Dict[str, Any]:
        """Response body in the API's error envelope."""
        body: Dict[str, Any] = {"success": False, "message": self.message}
        if self.detail is not None:
            body["error"] = self.detail
        return body

    def __repr__(self):
        return f"<{self.__class__.__name__}(kind={self.kind.value}, message={self.message!r})>"


class InvalidArgument(PaymentError):
    """Bad client input. Fixable by the caller."""
    kind = PaymentErrorKind.INVALID_ARGUMENT


class ConfigurationError(PaymentError):
    """Server is missing credentials. Fixable by the operator only."""
    kind = PaymentErrorKind.CONFIGURATION


class GatewayError(PaymentError):
    """The payment gateway rejected the request or could not be reached."""
    kind = PaymentErrorKind.GATEWAY


class InternalError(PaymentError):
    kind = PaymentErrorKind.INTERNAL
