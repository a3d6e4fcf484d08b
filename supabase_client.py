# 📦 supabase_client.py

from pydantic_settings import BaseSettings
from supabase import Client, create_client
import structlog

log = structlog.get_logger()


class SupabaseSettings(BaseSettings):
    supabase_url: str = ""
    supabase_key: str = ""


def get_client(settings: SupabaseSettings | None = None) -> Client | None:
    """Create a Supabase client, or None when no credentials are configured."""
    settings = settings or SupabaseSettings()
    if not settings.supabase_url or not settings.supabase_key:
        log.warning("Supabase credentials missing, running without database")
        return None
    return create_client(settings.supabase_url, settings.supabase_key)


supabase = get_client()
