"""
Order creation against the payment gateway.

Amounts arrive in major currency units (rupees) and are sent to the gateway in
minor units (paise). The conversion works on the float product
``amount * 100`` and rounds halves up (``floor(x + 0.5)``), the same as
JavaScript's ``Math.round`` used by Razorpay Checkout integrations.
``499.99`` becomes ``49999``, ``0.125`` becomes ``13`` (Python's ``round``
would give ``12``), and ``1.005`` becomes ``100`` because ``1.005 * 100`` is
``100.49999999999999`` in binary floating point.
"""
from __future__ import annotations

import math
import re
import time
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from ..config import Settings
from ..errors import ConfigurationError, InternalError, InvalidArgument, PaymentError
from ..logging_config import get_logger
from ..psp import PSPAdapter

logger = get_logger(__name__)

_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")


def parse_amount(amount: Any) -> float:
    """Parse a positive, finite amount from a number or numeric string."""
    if amount is None or isinstance(amount, bool):
        raise InvalidArgument("Valid amount is required")
    try:
        if isinstance(amount, str):
            value = float(Decimal(amount.strip()))
        elif isinstance(amount, (int, float, Decimal)):
            value = float(amount)
        else:
            raise InvalidArgument("Valid amount is required")
    except (InvalidOperation, OverflowError, ValueError):
        raise InvalidArgument("Valid amount is required")

    if not math.isfinite(value) or value <= 0:
        raise InvalidArgument("Valid amount is required")
    return value


def to_minor_units(amount: float) -> int:
    """Convert major units to integer minor units, rounding halves up."""
    scaled = amount * 100
    if not math.isfinite(scaled):
        raise InvalidArgument("Valid amount is required")
    return math.floor(scaled + 0.5)


def generate_receipt() -> str:
    # Same-millisecond requests share a receipt; the gateway does not require uniqueness.
    return f"receipt_{time.time_ns() // 1_000_000}"


class OrderService:
    """Creates gateway orders. Holds no per-request state."""

    def __init__(self, gateway: Optional[PSPAdapter], settings: Settings):
        self.gateway = gateway
        self.settings = settings

    def create_order(
        self,
        amount: Any,
        currency: Optional[str] = None,
        receipt: Optional[str] = None,
        notes: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Create a payment order.

        Args:
            amount: Amount in major units, number or numeric string
            currency: ISO 4217 code, defaults to the configured currency
            receipt: Merchant reference, generated when omitted
            notes: Optional key/value metadata forwarded to the gateway

        Returns:
            The gateway's order object

        Raises:
            InvalidArgument: amount or currency is invalid (no gateway call made)
            ConfigurationError: gateway credentials are not configured
            GatewayError: the gateway rejected the order
            InternalError: anything else went wrong
        """
        minor_amount = to_minor_units(parse_amount(amount))
        currency = (currency or self.settings.DEFAULT_CURRENCY).strip().upper()
        if not _CURRENCY_RE.match(currency):
            raise InvalidArgument("Currency must be a three-letter ISO 4217 code")

        if self.gateway is None:
            raise ConfigurationError(
                "Missing Razorpay credentials. Set RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET"
            )

        receipt = receipt or generate_receipt()

        try:
            order = self.gateway.create_order(
                amount=minor_amount,
                currency=currency,
                receipt=receipt,
                notes=notes,
            )
        except PaymentError as e:
            logger.error(
                "gateway_order_failed",
                kind=e.kind.value,
                error=e.message,
                detail=e.detail,
                receipt=receipt,
            )
            raise
        except Exception as e:
            logger.error("order_creation_crashed", exc_info=e, receipt=receipt)
            raise InternalError(str(e) or "Server error") from e

        logger.info(
            "order_created",
            order_id=order.get("id") if isinstance(order, dict) else None,
            amount=minor_amount,
            currency=currency,
            receipt=receipt,
        )
        return order
