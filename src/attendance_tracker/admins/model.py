from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Admin:
    id: str
    admin_id: str
    password_hash: str
    name: Optional[str] = None
    created_at: Optional[datetime] = None
