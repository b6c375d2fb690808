from __future__ import annotations

from typing import Optional

from ..database.supabase_client import execute
from .model import Admin
from .repository import AdminRepository


class SupabaseAdminRepository(AdminRepository):
    def __init__(self, client):
        self._client = client

    def get_by_admin_id(self, admin_id: str) -> Optional[Admin]:
        rows = execute(self._client.table("admins").select("*").eq("admin_id", admin_id))
        if not rows:
            return None
        r = rows[0]
        return Admin(
            id=str(r["id"]),
            admin_id=r["admin_id"],
            name=r.get("name"),
            password_hash=r["password_hash"],
            created_at=r.get("created_at"),
        )
