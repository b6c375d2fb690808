from __future__ import annotations

import re
from datetime import date

from ..core.constants import EMPLOYEE_ID_PATTERN
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

_EMPLOYEE_ID_RE = re.compile(EMPLOYEE_ID_PATTERN)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def is_employee_id(value: str) -> bool:
    return bool(_EMPLOYEE_ID_RE.match(value or ""))


def require_employee_id(value: str) -> str:
    value = (value or "").strip()
    if not is_employee_id(value):
        raise ValidationError("Employee ID must be in format K followed by 5 digits (e.g., K14050).")
    return value


def optional_text(value) -> str | None:
    """Blank form values are stored as NULL."""
    text = (value or "").strip()
    return text or None


def optional_date(value, field_name: str) -> date | None:
    text = (value or "").strip()
    if not text:
        return None
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")
