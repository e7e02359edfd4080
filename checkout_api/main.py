# checkout_api/main.py

from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# ---------------------------------------------
# LOAD ENVIRONMENT VARIABLES
# ---------------------------------------------
load_dotenv()

from checkout_api.config import Settings, get_settings
from checkout_api.errors import PaymentError
from checkout_api.logging_config import configure_logging, get_logger
from checkout_api.middleware import request_id_middleware
from checkout_api.psp import build_gateway
from checkout_api.routers import orders

logger = get_logger(__name__)

_UNSET = object()


# ---------------------------------------------
# ERROR HANDLERS
# ---------------------------------------------
async def payment_error_handler(request: Request, exc: PaymentError):
    logger.error(
        "payment_error",
        kind=exc.kind.value,
        error=exc.message,
        detail=exc.detail,
        status_code=exc.status_code,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if isinstance(part, str) and part != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": f"{field}: {message}" if field else message},
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("unhandled_error", exc_info=exc)
    return JSONResponse(status_code=500, content={"success": False, "message": "Server error"})


# ---------------------------------------------
# APP FACTORY
# ---------------------------------------------
def create_app(settings: Optional[Settings] = None, gateway=_UNSET) -> FastAPI:
    """
    Build the application. Settings and the gateway client are created once
    here and shared read-only by every request through app.state.
    """
    settings = settings or get_settings()
    configure_logging(settings.APP_NAME, settings.ENVIRONMENT, settings.LOG_LEVEL)

    app = FastAPI(
        title="Checkout API",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
    )

    app.state.settings = settings
    app.state.gateway = build_gateway(settings) if gateway is _UNSET else gateway

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_id_middleware)

    app.add_exception_handler(PaymentError, payment_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Razorpay checkout
    app.include_router(orders.router, prefix="/order")

    @app.get("/health", tags=["Health"])
    def health():
        return {"ok": True}

    logger.info(
        "app_created",
        environment=settings.ENVIRONMENT,
        razorpay_configured=settings.razorpay_configured,
    )
    return app


app = create_app()
