"""Environment-driven settings."""

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_STORAGE_BUCKET = "page-images"
DEFAULT_CURRENCY = "USD"


def _split_origins(raw: str) -> list[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


@dataclass(frozen=True)
class Settings:
    """Runtime configuration read from environment variables."""

    supabase_url: str = ""
    supabase_key: str = ""
    storage_bucket: str = DEFAULT_STORAGE_BUCKET
    currency: str = DEFAULT_CURRENCY
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            supabase_url=os.environ.get("SUPABASE_URL", ""),
            supabase_key=os.environ.get("SUPABASE_SERVICE_ROLE_KEY", ""),
            storage_bucket=os.environ.get("STORAGE_BUCKET", DEFAULT_STORAGE_BUCKET),
            currency=os.environ.get("CURRENCY", DEFAULT_CURRENCY).upper(),
            cors_origins=_split_origins(os.environ.get("CORS_ORIGINS", "")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get settings (cached after first read)."""
    return Settings.from_env()
