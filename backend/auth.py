"""
Authentication module for Supabase access tokens.
Provides FastAPI dependencies for securing endpoints.

Clients send the Supabase session's access token as
``Authorization: Bearer <token>``. Tokens are HS256 JWTs signed with the
project's JWT secret and carry ``aud: "authenticated"``.
"""
from dataclasses import dataclass
from typing import Optional
import logging

import jwt
from fastapi import Header

from application.exceptions import ForbiddenError, UnauthorizedError
from backend.settings import get_settings

logger = logging.getLogger(__name__)

SUPABASE_JWT_ALGORITHM = "HS256"

NOT_AUTHENTICATED_MESSAGE = "User not authenticated"
TOKEN_EXPIRED_MESSAGE = "Token expired"
OWNERSHIP_MESSAGE = "Forbidden - Cannot access another user's resource"


@dataclass
class AuthenticatedUser:
    """Identity resolved from a verified access token."""
    id: str
    access_token: str
    email: Optional[str] = None


def validate_jwt(authorization: Optional[str]) -> AuthenticatedUser:
    """
    Validate a bearer token and return the authenticated user.

    Raises:
        UnauthorizedError: Header missing or malformed, token invalid or expired
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise UnauthorizedError(NOT_AUTHENTICATED_MESSAGE, "Missing or invalid Authorization header")

    token = authorization.split(" ", 1)[1].strip()
    settings = get_settings()
    if not settings.supabase_jwt_secret:
        logger.error("SUPABASE_JWT_SECRET not configured")
        raise UnauthorizedError(NOT_AUTHENTICATED_MESSAGE, "JWT validation not configured")

    try:
        payload = jwt.decode(
            token,
            settings.supabase_jwt_secret,
            algorithms=[SUPABASE_JWT_ALGORITHM],
            audience=settings.supabase_jwt_audience,
        )
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError(TOKEN_EXPIRED_MESSAGE)
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid access token: {e}")
        raise UnauthorizedError(NOT_AUTHENTICATED_MESSAGE, f"Invalid token: {str(e)}")

    user_id = payload.get("sub")
    if not user_id:
        raise UnauthorizedError(NOT_AUTHENTICATED_MESSAGE, "Token missing user ID")

    logger.debug(f"Access token validated for user: {user_id}")
    return AuthenticatedUser(id=user_id, access_token=token, email=payload.get("email"))


async def get_current_user(
    authorization: Optional[str] = Header(None),
) -> AuthenticatedUser:
    """
    Authenticate via Supabase access token.

    Usage:
        @app.get("/protected")
        def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return validate_jwt(authorization)


def validate_ownership(user_id: str, resource_client_id: str) -> None:
    """
    Validate that the user owns the resource (client_id matches).

    Raises:
        ForbiddenError: The resource belongs to someone else
    """
    if user_id != resource_client_id:
        raise ForbiddenError(OWNERSHIP_MESSAGE)
