"""Profile Repository - user profiles carrying the role column."""
from storefront.services.models import Profile

from .base import BaseRepository


class ProfileRepository(BaseRepository[Profile]):
    """Profile lookups for the admin gate."""

    table = "profiles"
    model = Profile
    order_by = None
