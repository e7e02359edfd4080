"""Razorpay PSP Adapter Implementation."""
from typing import Dict, Any, Optional

import razorpay
import requests
from razorpay import errors as razorpay_errors

from ..errors import GatewayError
from ..logging_config import get_logger
from .adapter import PSPAdapter

logger = get_logger(__name__)

# Razorpay error classes and the error codes the API reports for them
_ERROR_CODES = (
    (razorpay_errors.BadRequestError, "BAD_REQUEST_ERROR"),
    (razorpay_errors.GatewayError, "GATEWAY_ERROR"),
    (razorpay_errors.ServerError, "SERVER_ERROR"),
)


class RazorpayAdapter(PSPAdapter):
    """Razorpay payment gateway adapter backed by the official SDK."""

    provider = "razorpay"

    def __init__(
        self,
        api_key: str,
        api_secret: Optional[str] = None,
        timeout: Optional[float] = None,
        app_name: Optional[str] = None,
        app_version: Optional[str] = None,
        **kwargs
    ):
        """Initialize Razorpay adapter. The SDK client is built once and reused."""
        super().__init__(api_key, api_secret, **kwargs)
        self.timeout = timeout
        self.client = razorpay.Client(auth=(api_key, api_secret))
        if app_name:
            self.client.set_app_details({"title": app_name, "version": app_version or ""})

    def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Create Razorpay order."""
        payload: Dict[str, Any] = {
            "amount": amount,
            "currency": currency,
            "receipt": receipt,
        }
        if notes:
            payload["notes"] = notes

        options = {}
        if self.timeout:
            options["timeout"] = self.timeout

        try:
            return self.client.order.create(data=payload, **options)
        except (razorpay_errors.BadRequestError, razorpay_errors.GatewayError, razorpay_errors.ServerError) as e:
            raise self._gateway_error(e) from e
        except requests.RequestException as e:
            logger.warning("razorpay_unreachable", error=str(e), receipt=receipt)
            raise GatewayError(
                "Unable to reach payment gateway",
                detail={"code": "NETWORK_ERROR", "description": str(e)},
            ) from e

    @staticmethod
    def _gateway_error(exc: Exception) -> GatewayError:
        code = next(
            (name for cls, name in _ERROR_CODES if isinstance(exc, cls)),
            "SERVER_ERROR",
        )
        description = str(exc) or "Payment gateway error"
        return GatewayError(description, detail={"code": code, "description": description})
