"""
Supabase Remote Source

Runs the two pipeline queries against a Supabase project (store_settings
and products tables). Any client exception or error payload becomes
RemoteQueryFailed.
"""

import logging
from typing import Any, Dict, List, Optional

from supabase import Client, SupabaseException, create_client

from ..common.env_settings import EnvSettings
from ..common.errors import RemoteQueryFailed

logger = logging.getLogger(__name__)

PLACEHOLDER_HOST = "your-project.supabase.co"


def create_supabase_client(settings: EnvSettings) -> Client:
    """Build a Supabase client from environment settings."""
    url = str(settings.supabase_url)

    if PLACEHOLDER_HOST in url:
        raise RuntimeError(
            "SUPABASE_URL is still the placeholder (your-project). "
            "Fill in your real project URL and key."
        )
    try:
        return create_client(url, settings.supabase_key.get_secret_value())
    except SupabaseException as e:
        raise RuntimeError(f"Cannot create Supabase client: {e}") from e


class SupabaseSource:
    """
    RemoteSource backed by a Supabase client.

    Usage:
        source = SupabaseSource(create_supabase_client(get_env_settings()))
        settings = source.get_active_settings()
        products = source.list_products()
    """

    SETTINGS_TABLE = "store_settings"
    PRODUCTS_TABLE = "products"

    def __init__(self, client: Client):
        self.client = client

    def _execute(self, what: str, query) -> List[Dict[str, Any]]:
        try:
            resp = query.execute()
        except Exception as exc:
            raise RemoteQueryFailed(f"{what} query failed: {exc}") from exc

        error = getattr(resp, "error", None)
        if error:
            raise RemoteQueryFailed(f"{what} query failed: {error}")

        data = getattr(resp, "data", None)
        if data is None:
            return []
        if not isinstance(data, list):
            raise RemoteQueryFailed(f"{what} query returned {type(data).__name__}, expected a list")
        return data

    def get_active_settings(self) -> Optional[Dict[str, Any]]:
        query = (
            self.client
            .table(self.SETTINGS_TABLE)
            .select("*")
            .eq("is_active", True)
            .order("created_at", desc=True)
            .limit(1)
        )
        rows = self._execute("Store settings", query)
        logger.debug("Store settings query returned %d row(s)", len(rows))
        return dict(rows[0]) if rows else None

    def list_products(self) -> List[Dict[str, Any]]:
        query = (
            self.client
            .table(self.PRODUCTS_TABLE)
            .select("*")
            .order("created_at", desc=True)
        )
        rows = self._execute("Products", query)
        logger.debug("Products query returned %d row(s)", len(rows))
        return [dict(row) for row in rows]
