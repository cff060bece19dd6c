"""Session info and sign-out for the sign-in/sign-out affordance."""
from typing import Optional

from fastapi import APIRouter, Depends

from storefront.auth import AuthUser, get_current_role, get_current_user, sign_out, verify_user
from storefront.services.database import Database, get_database

router = APIRouter(tags=["auth"])


@router.get("/auth/me")
async def get_me(
    user: Optional[AuthUser] = Depends(get_current_user),
    db: Database = Depends(get_database),
):
    """Current user (null when anonymous) and role."""
    role = await get_current_role(user, db)
    return {
        "user": {"id": user.id, "email": user.email} if user else None,
        "role": role,
        "is_admin": role == "admin",
    }


@router.post("/auth/sign-out")
async def post_sign_out(user: AuthUser = Depends(verify_user), db: Database = Depends(get_database)):
    await sign_out(user, db)
    return {"success": True}
