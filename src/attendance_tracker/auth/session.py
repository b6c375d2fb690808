from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping, Optional

from ..core.enums import Role

_KEYS = ("subject_id", "name", "role")


@dataclass(frozen=True)
class SessionContext:
    """Identity passed explicitly to whatever needs it.

    For employees `subject_id` is the employee code; for admins it is the admin id.
    """

    subject_id: str
    name: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def store(self, session: MutableMapping[str, Any]) -> None:
        session["subject_id"] = self.subject_id
        session["name"] = self.name
        session["role"] = self.role.value

    @classmethod
    def load(cls, session: MutableMapping[str, Any]) -> Optional["SessionContext"]:
        if not all(session.get(k) for k in _KEYS):
            return None
        try:
            role = Role(session["role"])
        except ValueError:
            return None
        return cls(subject_id=str(session["subject_id"]), name=str(session["name"]), role=role)

    @staticmethod
    def clear(session: MutableMapping[str, Any]) -> None:
        for key in _KEYS:
            session.pop(key, None)
