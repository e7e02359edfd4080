from .adapter import PSPAdapter
from .dispatcher import build_gateway
from .razorpay_adapter import RazorpayAdapter

__all__ = ["PSPAdapter", "RazorpayAdapter", "build_gateway"]
