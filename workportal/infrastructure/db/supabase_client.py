"""
Supabase client factory.
The API talks to PostgREST with the service key and enforces authorization itself;
row-level security stays on in the database as a backstop.
"""

import logging
from functools import lru_cache

from supabase import create_client, Client, ClientOptions

from workportal.config import get_settings


logger = logging.getLogger(__name__)


@lru_cache()
def get_supabase_client() -> Client:
    """Process-wide client for table access."""
    settings = get_settings()
    key = settings.supabase_service_key or settings.supabase_anon_key
    if not settings.supabase_service_key:
        logger.warning("SUPABASE_SERVICE_KEY not set; table access uses the anon key and is subject to RLS")
    return create_client(settings.supabase_url, key)


def create_auth_client() -> Client:
    """
    Client for credential operations.
    Sessions are not persisted on it, so a sign-in never changes the
    identity that table access runs under.
    """
    settings = get_settings()
    return create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
        options=ClientOptions(persist_session=False, auto_refresh_token=False),
    )
