# -*- coding: utf-8 -*-
"""Profile: DB storage helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..app_db import db_conn
from ..config import settings

_PROFILE_COLUMNS = (
    "age",
    "weight",
    "height",
    "gender",
    "body_fat",
    "target_goal",
    "target_weight",
    "activity_level",
    "dietary_restrictions",
    "eating_type",
)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def get_profile_row(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return dict(row) if row else None


def upsert_profile_row(user_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
    """Insert or update the stored profile columns that are present in `fields`."""
    values = {k: v for k, v in fields.items() if k in _PROFILE_COLUMNS}
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        existing = conn.execute("SELECT id FROM users WHERE id = ?", (user_id,)).fetchone()
        if existing is None:
            cols = ["id", *values.keys(), "created_at", "updated_at"]
            params = [user_id, *values.values(), now, now]
            placeholders = ", ".join("?" for _ in cols)
            conn.execute(f"INSERT INTO users ({', '.join(cols)}) VALUES ({placeholders})", params)
        elif values:
            assignments = ", ".join(f"{k} = ?" for k in values)
            conn.execute(
                f"UPDATE users SET {assignments}, updated_at = ? WHERE id = ?",
                [*values.values(), now, user_id],
            )
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
    return dict(row)
