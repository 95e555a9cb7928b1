"""Bearer tokens for the admin endpoints (HS256 JWTs)."""

from datetime import UTC, datetime, timedelta

import jwt
import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront.exceptions import AuthFailure

logger = structlog.get_logger(__name__)

JWT_ALGO = "HS256"
TOKEN_LIFETIME = timedelta(days=7)

bearer = HTTPBearer(auto_error=False)


def create_token(username: str, secret: str) -> str:
    payload = {"sub": username, "role": "admin", "exp": datetime.now(UTC) + TOKEN_LIFETIME}
    return jwt.encode(payload, secret, algorithm=JWT_ALGO)


def decode_token(token: str, secret: str) -> dict:
    try:
        return jwt.decode(token, secret, algorithms=[JWT_ALGO])
    except jwt.ExpiredSignatureError:
        raise AuthFailure("Token expired") from None
    except jwt.InvalidTokenError:
        raise AuthFailure("Invalid token") from None


async def require_admin(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> str:
    """Dependency for admin-only routes; returns the admin's username."""
    if credentials is None:
        raise AuthFailure("Admin login required")

    payload = decode_token(credentials.credentials, request.app.state.settings.jwt_secret)
    if payload.get("role") != "admin" or not payload.get("sub"):
        logger.warning("Rejected token without admin claims", path=request.url.path)
        raise AuthFailure("Invalid token")
    return payload["sub"]
