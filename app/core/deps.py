"""
FastAPI dependencies for authentication and authorization.

The identity comes straight from the verified token payload; no database
lookup is made per request.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.core.security import decode_token
from app.schemas.user import TokenPayload

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>); missing tokens
# are handled below so they produce 401 rather than FastAPI's 403
security = HTTPBearer(auto_error=False)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[TokenPayload]:
    """
    Return the token's identity, or None when no valid token was sent.

    A missing or invalid token is not an error here; endpoints that need a
    user depend on get_current_user instead.
    """
    if not credentials:
        return None

    try:
        payload = decode_token(credentials.credentials)
    except JWTError as e:
        logger.warning(f"Rejected token: {e}")
        return None

    username = payload.get("sub")
    if username is None:
        return None
    return TokenPayload(username=username, is_admin=payload.get("is_admin", False))


async def get_current_user(
    user: Optional[TokenPayload] = Depends(get_optional_user),
) -> TokenPayload:
    """
    Require a logged-in user.

    Raises:
        UnauthorizedError: If no valid token was provided
    """
    if user is None:
        raise UnauthorizedError("Could not validate credentials")
    return user


async def get_admin_user(
    user: TokenPayload = Depends(get_current_user),
) -> TokenPayload:
    """
    Require an admin.

    Raises:
        UnauthorizedError: If not logged in
        ForbiddenError: If logged in without admin rights
    """
    if not user.is_admin:
        raise ForbiddenError("Admin access required")
    return user


async def get_correct_user_or_admin(
    username: str,
    user: TokenPayload = Depends(get_current_user),
) -> TokenPayload:
    """
    Require the user named in the path, or an admin.

    Used on /users/{username} routes; ``username`` is the path parameter.
    """
    if user.username != username and not user.is_admin:
        raise ForbiddenError("Not allowed to access another user's account")
    return user
