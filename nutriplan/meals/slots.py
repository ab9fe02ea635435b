# -*- coding: utf-8 -*-
"""Meal slot resolution: stored meal-time rows -> ordered MealDefinition list."""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Set, Tuple

from .models import MealDefinition
from .storage import list_meal_time_rows

logger = logging.getLogger(__name__)

# Display name -> (key, default time)
CANONICAL_MEALS: Mapping[str, Tuple[str, str]] = MappingProxyType(
    {
        "มื้อเช้า": ("breakfast", "07:00"),
        "มื้อกลางวัน": ("lunch", "12:00"),
        "มื้อเย็น": ("dinner", "18:00"),
    }
)
CANONICAL_KEYS = tuple(key for key, _ in CANONICAL_MEALS.values())
DEFAULT_MEAL_TIMES: Mapping[str, str] = MappingProxyType({key: t for key, t in CANONICAL_MEALS.values()})

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_meal_time(value: Any) -> str:
    parts = str(value if value is not None else "").strip().split(":")
    if len(parts) < 2:
        return "00:00"
    hh, mm = parts[0].strip(), parts[1].strip()
    if not (hh.isdigit() and mm.isdigit()) or len(hh) > 2 or len(mm) > 2:
        return "00:00"
    return f"{hh.zfill(2)}:{mm.zfill(2)}"


def slugify_meal_name(name: str) -> str:
    slug = _WHITESPACE_RE.sub("_", (name or "").strip().lower())
    return slug or "meal"


def _unique_key(key: str, used: Set[str]) -> str:
    candidate = key
    n = 2
    while candidate in used:
        candidate = f"{key}_{n}"
        n += 1
    used.add(candidate)
    return candidate


def _is_active(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    s = str(value).strip().lower()
    if s in {"true", "yes"}:
        return True
    if s in {"false", "no", ""}:
        return False
    try:
        return float(s) != 0
    except ValueError:
        return True


def _sort_value(value: Any, fallback: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


def default_meal_slots() -> List[MealDefinition]:
    return [
        MealDefinition(key=key, name=name, time=t, is_default=True, sort=i + 1)
        for i, (name, (key, t)) in enumerate(CANONICAL_MEALS.items())
    ]


def build_meal_slots(rows: Iterable[Dict[str, Any]]) -> List[MealDefinition]:
    """Active rows in sort order. Key collisions get a `_2`, `_3`, ... suffix."""
    ordered = sorted(
        ((_sort_value(row.get("sort_order"), idx + 1), idx, row) for idx, row in enumerate(rows)),
        key=lambda t: (t[0], t[1]),
    )

    # Canonical keys belong to the canonical Thai rows; custom slugs that hit one are suffixed.
    used: Set[str] = set(CANONICAL_KEYS)
    claimed: Set[str] = set()
    meals: List[MealDefinition] = []
    for sort, _, row in ordered:
        if not _is_active(row.get("is_active")):
            continue
        name = str(row.get("meal_name") or "").strip()
        canonical = CANONICAL_MEALS.get(name)
        is_default = canonical is not None and canonical[0] not in claimed
        if is_default:
            key = canonical[0]
            claimed.add(key)
        else:
            key = _unique_key(canonical[0] if canonical else slugify_meal_name(name), used)
        meals.append(
            MealDefinition(
                key=key,
                name=name or key,
                time=normalize_meal_time(row.get("meal_time")),
                is_default=is_default,
                sort=sort,
            )
        )
    return meals


def resolve_meal_slots(user_id: str) -> List[MealDefinition]:
    try:
        rows = list_meal_time_rows(user_id)
    except Exception as exc:
        logger.warning("meal slot lookup failed for %s, using defaults: %s", user_id, exc, exc_info=True)
        return default_meal_slots()
    return build_meal_slots(rows) or default_meal_slots()


def canonical_meal_times(meals: Iterable[MealDefinition]) -> Dict[str, str]:
    times = dict(DEFAULT_MEAL_TIMES)
    for meal in meals:
        if meal.is_default and meal.key in times:
            times[meal.key] = meal.time
    return times
