"""Authentication package."""
from .identity import AuthUser, get_current_user, get_current_role, verify_user, verify_admin, sign_out

__all__ = [
    "AuthUser",
    "get_current_user",
    "get_current_role",
    "verify_user",
    "verify_admin",
    "sign_out",
]
