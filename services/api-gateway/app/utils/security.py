"""
Token verification

Bearer JWTs are issued by auth-service and verified locally against the
shared secret; no network call is made.
"""

from typing import Any, Dict, Optional

import jwt
import structlog

from app.utils.errors import UnauthorizedError

logger = structlog.get_logger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Return the token from an Authorization header value

    Raises:
        UnauthorizedError: header absent or not using the Bearer scheme
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError("No token provided")

    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise UnauthorizedError("No token provided")
    return token


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """
    Verify signature and expiry of a JWT and return its claims

    Raises:
        UnauthorizedError: token is malformed, expired or wrongly signed
    """
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError:
        logger.warning("Token has expired")
        raise UnauthorizedError("Invalid token")
    except jwt.InvalidTokenError as e:
        logger.warning("Invalid token", error=str(e))
        raise UnauthorizedError("Invalid token")


def resolve_user_id(claims: Dict[str, Any]) -> Optional[str]:
    """User identifier from claims: user_id, then id, then sub"""
    for key in ("user_id", "id", "sub"):
        value = claims.get(key)
        if value is not None and value != "":
            return str(value)
    return None
