"""Razorpay checkout add-on: order creation, payment verification, key disclosure."""

__version__ = "1.0.0"
