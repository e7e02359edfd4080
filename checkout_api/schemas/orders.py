from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class CreateOrderRequest(BaseModel):
    amount: Any = None        # in rupees / major units; number or numeric string
    currency: Optional[str] = None
    receipt: Optional[str] = Field(None, max_length=40)
    notes: Optional[Dict[str, str]] = None


class CreateOrderResponse(BaseModel):
    success: bool = True
    order: Dict[str, Any]


class VerifyPaymentRequest(BaseModel):
    # Field names match what Razorpay Checkout hands back to the frontend
    razorpay_order_id: Optional[str] = None
    razorpay_payment_id: Optional[str] = None
    razorpay_signature: Optional[str] = None


class VerifyPaymentResponse(BaseModel):
    success: bool
    message: str
    paymentId: Optional[str] = None
    orderId: Optional[str] = None


class PublicKeyResponse(BaseModel):
    success: bool = True
    key: str


class ConfigStatusResponse(BaseModel):
    configured: bool
    key_id_present: bool
    key_secret_present: bool


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[Any] = None
