"""Publishable key disclosure for the checkout frontend."""
from typing import Dict

from ..config import Settings
from ..errors import ConfigurationError


def get_public_key(settings: Settings) -> str:
    """Return the Razorpay key id. The key secret is never returned."""
    if not settings.RAZORPAY_KEY_ID:
        raise ConfigurationError("Missing Razorpay key id on server")
    return settings.RAZORPAY_KEY_ID


def configuration_status(settings: Settings) -> Dict[str, bool]:
    """Non-sensitive status of Razorpay configuration.
    Reports which credentials are present without revealing values.
    """
    key_id_present = bool(settings.RAZORPAY_KEY_ID)
    key_secret_present = bool(settings.RAZORPAY_KEY_SECRET)
    return {
        "configured": key_id_present and key_secret_present,
        "key_id_present": key_id_present,
        "key_secret_present": key_secret_present,
    }
