"""PSP adapter construction from settings."""
from typing import Optional

from ..config import Settings
from ..logging_config import get_logger
from .adapter import PSPAdapter
from .razorpay_adapter import RazorpayAdapter

logger = get_logger(__name__)


def build_gateway(settings: Settings) -> Optional[PSPAdapter]:
    """
    Build the gateway client for this process.

    Returns None when Razorpay credentials are missing; order creation then
    fails with a configuration error instead of the app refusing to start,
    so the public key and status endpoints keep working.
    """
    if not settings.razorpay_configured:
        logger.warning(
            "razorpay_not_configured",
            key_id_present=bool(settings.RAZORPAY_KEY_ID),
            key_secret_present=bool(settings.RAZORPAY_KEY_SECRET),
        )
        return None

    return RazorpayAdapter(
        api_key=settings.RAZORPAY_KEY_ID,
        api_secret=settings.RAZORPAY_KEY_SECRET,
        timeout=settings.GATEWAY_TIMEOUT_SECONDS,
        app_name=settings.APP_NAME,
        app_version=settings.APP_VERSION,
    )
