from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from .config import Settings
from .errors import ConfigurationError
from .psp import PSPAdapter
from .security import decode_jwt
from .services import OrderService, VerificationService

security = HTTPBearer()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gateway(request: Request) -> Optional[PSPAdapter]:
    return request.app.state.gateway


def get_order_service(
    settings: Settings = Depends(get_settings),
    gateway: Optional[PSPAdapter] = Depends(get_gateway),
) -> OrderService:
    return OrderService(gateway, settings)


def get_verification_service(settings: Settings = Depends(get_settings)) -> VerificationService:
    return VerificationService(settings)


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Dependency to get the current authenticated user from JWT token.
    Tokens are minted elsewhere; only the signature and expiry are checked here.
    """
    if not settings.JWT_SECRET:
        raise ConfigurationError("Missing JWT secret on server")

    payload = decode_jwt(credentials.credentials, settings.JWT_SECRET, settings.JWT_ALGORITHM)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = payload.get("user_id") or payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    user = {"user_id": str(user_id), "email": payload.get("email"), "role": payload.get("role")}
    request.state.user = user
    return user
