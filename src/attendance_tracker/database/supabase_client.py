from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from postgrest.exceptions import APIError
from supabase import Client, create_client

from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SupabaseConfig:
    url: str
    key: str


def get_supabase_client(config: SupabaseConfig) -> Client:
    if not config.url or not config.key:
        raise StoreError("SUPABASE_URL and SUPABASE_KEY must be set")
    return create_client(config.url, config.key)


def execute(query) -> List[Dict[str, Any]]:
    """Run a PostgREST query builder and return its rows."""
    try:
        response = query.execute()
    except APIError as e:
        logger.error("Supabase error: %s", e.message)
        raise StoreError(e.message or "Supabase request failed") from e
    return list(response.data or [])
