# -*- coding: utf-8 -*-
"""Profile snapshot resolver.

Turns a raw `users` row into a strongly-typed `ProfileSnapshot`. The stored
`age` column holds the year of birth; everything else is coerced from the
loosely-typed values the mobile client writes (strings, "very high",
"don't know", comma-separated restrictions).
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from ..errors import ConfigurationError
from .models import ActivityLevel, BodyFat, Gender, ProfileSnapshot, TargetGoal, UserProfileData
from .storage import get_profile_row

# Birthdays are not stored; before June we assume this year's birthday hasn't happened yet.
MID_YEAR_MONTH = 6

_BODY_FAT_ALIASES = {"don't know": BodyFat.unknown, "dont know": BodyFat.unknown}


def year_of_birth_to_age(year_of_birth: int, today: Optional[date] = None) -> int:
    today = today or date.today()
    age = today.year - int(year_of_birth)
    if today.month < MID_YEAR_MONTH:
        age -= 1
    return max(0, age)


def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def _to_enum(enum_cls, value: Any, default):
    if value is None:
        return default
    raw = str(value).strip().lower()
    try:
        return enum_cls(raw.replace(" ", "_"))
    except ValueError:
        return default


def split_restrictions(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        parts = [str(v) for v in value]
    else:
        parts = str(value).split(",")
    return [p.strip() for p in parts if p and p.strip()]


def build_profile_snapshot(row: Dict[str, Any], today: Optional[date] = None) -> ProfileSnapshot:
    weight = _to_float(row.get("weight"))
    height = _to_float(row.get("height"))
    if weight is None or weight <= 0:
        raise ConfigurationError("Profile weight is missing or not a positive number")
    if height is None or height <= 0:
        raise ConfigurationError("Profile height is missing or not a positive number")

    birth_year = _to_float(row.get("age"))
    age = year_of_birth_to_age(int(birth_year), today) if birth_year else 0

    goal = _to_enum(TargetGoal, row.get("target_goal"), TargetGoal.healthy)
    target_weight = _to_float(row.get("target_weight"))
    if goal == TargetGoal.healthy or target_weight is None or target_weight <= 0:
        target_weight = weight

    body_fat_raw = str(row.get("body_fat") or "").strip().lower()
    body_fat = _BODY_FAT_ALIASES.get(body_fat_raw) or _to_enum(BodyFat, body_fat_raw or None, BodyFat.unknown)

    profile = UserProfileData(
        age=age,
        weight=weight,
        height=height,
        gender=_to_enum(Gender, row.get("gender"), Gender.other),
        body_fat=body_fat,
        target_goal=goal,
        target_weight=target_weight,
        activity_level=_to_enum(ActivityLevel, row.get("activity_level"), ActivityLevel.moderate),
    )
    eating_type = str(row.get("eating_type") or "").strip()
    return ProfileSnapshot(
        profile=profile,
        dietary_restrictions=split_restrictions(row.get("dietary_restrictions")),
        eating_type=eating_type or None,
    )


def resolve_profile_snapshot(user_id: str, today: Optional[date] = None) -> ProfileSnapshot:
    row = get_profile_row(user_id)
    if row is None:
        raise ConfigurationError(f"No profile stored for user {user_id}")
    return build_profile_snapshot(row, today)
