# -*- coding: utf-8 -*-
"""Meals: DB storage helpers for per-user meal-time settings."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

from ..app_db import db_conn
from ..config import settings
from .models import MealTimeItem


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def list_meal_time_rows(user_id: str) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM user_meal_time WHERE user_id = ? ORDER BY sort_order ASC, id ASC",
            (user_id,),
        ).fetchall()
        return [dict(r) for r in rows]


def replace_meal_times(user_id: str, meals: List[MealTimeItem]) -> List[Dict[str, Any]]:
    """Rewrite all meal-time rows of a user in one transaction."""
    now = _utc_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute("DELETE FROM user_meal_time WHERE user_id = ?", (user_id,))
        conn.executemany(
            """
            INSERT INTO user_meal_time (user_id, meal_name, meal_time, sort_order, is_active, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    user_id,
                    m.meal_name,
                    m.meal_time,
                    m.sort_order if m.sort_order is not None else i + 1,
                    1 if m.is_active else 0,
                    now,
                    now,
                )
                for i, m in enumerate(meals)
            ],
        )
    return list_meal_time_rows(user_id)
