"""Supabase Auth session lookup and the admin gate."""
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, HTTPException

from storefront.errors import ERROR_ADMIN_CHECK_UNAVAILABLE, ERROR_ADMIN_REQUIRED, ERROR_UNAUTHORIZED, FetchFailure
from storefront.logging import get_logger
from storefront.services.database import Database, get_database
from storefront.services.models import Profile

logger = get_logger(__name__)

ADMIN_ROLE = "admin"
DEFAULT_ROLE = "customer"


@dataclass
class AuthUser:
    """Authenticated Supabase user plus the token that identified them."""
    id: str
    email: Optional[str]
    access_token: str


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) == 2 and parts[0].lower() == "bearer" and parts[1]:
        return parts[1]
    return None


async def get_current_user(
    authorization: str = Header(None, alias="Authorization"),
    db: Database = Depends(get_database),
) -> Optional[AuthUser]:
    """
    Resolve the signed-in user from `Authorization: Bearer <access token>`.

    Returns None for anonymous visitors and for tokens Supabase rejects.
    """
    token = _bearer_token(authorization)
    if not token:
        return None

    try:
        response = await db.client.auth.get_user(token)
    except Exception as e:
        logger.warning(f"Rejected access token: {type(e).__name__}")
        return None

    user = getattr(response, "user", None)
    if user is None:
        return None
    return AuthUser(id=str(user.id), email=getattr(user, "email", None), access_token=token)


async def get_current_role(user: Optional[AuthUser], db: Database) -> str:
    """Role from the profiles table; anonymous and profile-less users are customers."""
    if user is None:
        return DEFAULT_ROLE
    profile = await db.get_profile(user.id)
    return profile.role if profile else DEFAULT_ROLE


async def verify_user(user: Optional[AuthUser] = Depends(get_current_user)) -> AuthUser:
    """Require a signed-in user."""
    if user is None:
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)
    return user


async def verify_admin(
    user: AuthUser = Depends(verify_user),
    db: Database = Depends(get_database),
) -> Profile:
    """
    Require a signed-in user whose profile role is admin.
    Returns the admin's profile.
    """
    try:
        profile = await db.get_profile(user.id)
    except FetchFailure:
        raise HTTPException(status_code=503, detail=ERROR_ADMIN_CHECK_UNAVAILABLE)

    if not profile or profile.role != ADMIN_ROLE:
        raise HTTPException(status_code=403, detail=ERROR_ADMIN_REQUIRED)

    return profile


async def sign_out(user: AuthUser, db: Database) -> None:
    """Revoke the user's session server-side."""
    await db.client.auth.admin.sign_out(user.access_token)
    logger.info("User signed out")
