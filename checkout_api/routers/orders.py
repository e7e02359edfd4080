"""
Razorpay checkout endpoints: order creation, payment verification and the
publishable key for the frontend.

Service errors propagate as PaymentError and are rendered by the handlers
registered in checkout_api.main.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..config import Settings
from ..deps import (
    get_current_user,
    get_order_service,
    get_settings,
    get_verification_service,
)
from ..logging_config import get_logger
from ..schemas import (
    ConfigStatusResponse,
    CreateOrderRequest,
    CreateOrderResponse,
    ErrorResponse,
    PublicKeyResponse,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
)
from ..services import OrderService, VerificationService, configuration_status, get_public_key

logger = get_logger(__name__)

router = APIRouter(tags=["Razorpay Checkout"])

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.get("/get-key", response_model=PublicKeyResponse, responses={500: {"model": ErrorResponse}})
def get_razorpay_key(settings: Settings = Depends(get_settings)):
    """Publishable key id for Razorpay Checkout."""
    return PublicKeyResponse(key=get_public_key(settings))


@router.get("/status", response_model=ConfigStatusResponse)
def razorpay_status(settings: Settings = Depends(get_settings)):
    """Which credentials are present (true/false) without revealing values."""
    return configuration_status(settings)


@router.post("/create", response_model=CreateOrderResponse, responses=_ERRORS)
@router.post("/create-order", response_model=CreateOrderResponse, include_in_schema=False)
def create_order(
    body: CreateOrderRequest,
    service: OrderService = Depends(get_order_service),
    current_user: Dict[str, Any] = Depends(get_current_user),
):
    # Sync handler: the Razorpay SDK blocks, FastAPI runs this in its threadpool
    order = service.create_order(
        amount=body.amount,
        currency=body.currency,
        receipt=body.receipt,
        notes=body.notes,
    )
    return CreateOrderResponse(order=order)


@router.post("/verify", response_model=VerifyPaymentResponse, responses=_ERRORS)
@router.post("/verify-payment", response_model=VerifyPaymentResponse, include_in_schema=False)
def verify_payment(
    body: VerifyPaymentRequest,
    service: VerificationService = Depends(get_verification_service),
    current_user: Dict[str, Any] = Depends(get_current_user),
):
    result = service.verify_payment(
        body.razorpay_order_id,
        body.razorpay_payment_id,
        body.razorpay_signature,
    )
    if not result.authentic:
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Payment verification failed"},
        )
    return VerifyPaymentResponse(
        success=True,
        message="Payment verified successfully",
        paymentId=result.payment_id,
        orderId=result.order_id,
    )
