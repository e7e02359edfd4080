"""
Payment signature verification.

Razorpay signs checkout callbacks as
``HMAC-SHA256(key_secret, "{order_id}|{payment_id}")`` rendered as lowercase
hex. The pipe is not escaped; identifiers containing ``|`` could collide, but
changing the message format would break compatibility with the gateway.
"""
from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import Optional

from ..config import Settings
from ..errors import ConfigurationError, InvalidArgument
from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class VerificationResult:
    authentic: bool
    order_id: str
    payment_id: str


def compute_signature(secret: str, order_id: str, payment_id: str) -> str:
    """Expected checkout signature for an order/payment pair."""
    message = f"{order_id}|{payment_id}"
    return hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


class VerificationService:
    def __init__(self, settings: Settings):
        self.settings = settings

    def verify_payment(
        self,
        order_id: Optional[str],
        payment_id: Optional[str],
        signature: Optional[str],
    ) -> VerificationResult:
        """
        Check a checkout callback signature.

        A mismatch is a normal outcome (``authentic=False``), not an error.

        Raises:
            ConfigurationError: key secret is not configured (checked first)
            InvalidArgument: any of the three inputs is missing or empty
        """
        secret = self.settings.RAZORPAY_KEY_SECRET
        if not secret:
            raise ConfigurationError("Missing Razorpay key secret on server")

        if not order_id or not payment_id or not signature:
            raise InvalidArgument("Missing payment verification data")

        expected = compute_signature(secret, order_id, payment_id)
        # compare_digest on bytes so non-ASCII input compares unequal instead of raising
        authentic = hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))

        if authentic:
            logger.info("payment_verified", order_id=order_id, payment_id=payment_id)
        else:
            logger.warning(
                "payment_verification_failed",
                order_id=order_id,
                payment_id=payment_id,
                signature_length=len(signature),
            )
        return VerificationResult(authentic=authentic, order_id=order_id, payment_id=payment_id)
