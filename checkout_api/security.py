"""
JWT verification for tokens issued by the auth service.
"""
from typing import Dict, Any, Optional

from jose import jwt, JWTError


def decode_jwt(token: str, secret: str, algorithm: str = "HS256") -> Optional[Dict[str, Any]]:
    """
    Decode and verify a JWT token.
    Returns None if the token is invalid or expired.
    """
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError:
        return None
