# -*- coding: utf-8 -*-
"""Validate and repair raw model output.

`parse_plan_response` checks only the top-level shape and fails fast with a
typed error; `repair_plan` then coerces the item-level fields the model is
trusted with into a `GeneratedPlan`.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, Dict, List, Optional, Union

from ..errors import EmptyPlan, InvalidShape, MalformedResponse, MissingRequiredFields
from .models import DayPlan, FoodItem, FoodSuggestion, GeneratedPlan, MealEntry

_FENCE_START_RE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_END_RE = re.compile(r"\s*```$")
_NUM_RE = re.compile(r"-?\d+(?:\.\d+)?")


def strip_code_fences(raw: str) -> str:
    text = (raw or "").strip()
    text = _FENCE_START_RE.sub("", text)
    text = _FENCE_END_RE.sub("", text)
    return text.strip()


def _load_json(raw: str) -> Any:
    text = strip_code_fences(raw)
    try:
        return json.loads(text)
    except ValueError as exc:
        raise MalformedResponse(f"Model response is not valid JSON: {exc}", raw=raw) from exc


def parse_plan_response(raw: str) -> Dict[str, Any]:
    """Parse a plan response, raising the first structural problem found."""
    data = _load_json(raw)
    if not isinstance(data, dict):
        raise InvalidShape(f"Plan must be a JSON object, got {type(data).__name__}", raw=raw)
    if not data:
        raise EmptyPlan("Plan contains no days", raw=raw)

    first_key = next(iter(data))
    first_day = data[first_key]
    if not isinstance(first_day, dict) or ("meals" not in first_day and "totalCal" not in first_day):
        raise MissingRequiredFields(f'Day "{first_key}" has neither "meals" nor "totalCal"', raw=raw)
    return data


def _coerce_number(value: Any) -> Optional[Union[int, float]]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        num: Union[int, float] = value
    elif isinstance(value, str):
        m = _NUM_RE.search(value.replace(",", ""))
        if not m:
            return None
        num = float(m.group(0))
    else:
        return None
    if isinstance(num, float) and not math.isfinite(num):
        return None
    num = max(0, num)
    if isinstance(num, float) and num.is_integer():
        return int(num)
    return num


def _number(obj: Dict[str, Any], *keys: str) -> Union[int, float]:
    for key in keys:
        if key in obj:
            val = _coerce_number(obj.get(key))
            if val is not None:
                return val
    return 0


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _repair_item(raw: Any) -> Optional[FoodItem]:
    if not isinstance(raw, dict):
        return None
    source = "user" if _text(raw.get("source")).lower() == "user" else "ai"
    return FoodItem(
        name=_text(raw.get("name")),
        cal=_number(raw, "cal", "calories", "kcal"),
        carb=_number(raw, "carb", "carbs", "carbohydrate"),
        fat=_number(raw, "fat"),
        protein=_number(raw, "protein"),
        img=_text(raw.get("img")),
        serving=_text(raw.get("serving")),
        source=source,
        is_user_food=bool(raw.get("isUserFood", False)),
    )


def _repair_meal(key: str, raw: Any) -> MealEntry:
    if not isinstance(raw, dict):
        return MealEntry(name=key, time="")
    raw_items = raw.get("items")
    if isinstance(raw_items, dict):
        raw_items = [raw_items]
    items: List[FoodItem] = []
    for entry in raw_items if isinstance(raw_items, list) else []:
        item = _repair_item(entry)
        if item is not None:
            items.append(item)

    total = _coerce_number(raw.get("totalCal"))
    if total is None:
        total = sum(i.cal for i in items)
    return MealEntry(
        name=_text(raw.get("name")) or key,
        time=_text(raw.get("time")),
        total_cal=total,
        items=items,
    )


def _repair_day(raw: Any) -> DayPlan:
    if not isinstance(raw, dict):
        return DayPlan()
    raw_meals = raw.get("meals")
    meals = {
        str(key): _repair_meal(str(key), value)
        for key, value in (raw_meals.items() if isinstance(raw_meals, dict) else [])
    }
    total = _coerce_number(raw.get("totalCal"))
    if total is None:
        total = sum(m.total_cal for m in meals.values())
    return DayPlan(total_cal=total, meals=meals)


def repair_plan(data: Dict[str, Any]) -> GeneratedPlan:
    """Best-effort normalization of a plan that passed `parse_plan_response`."""
    return GeneratedPlan({str(day): _repair_day(value) for day, value in data.items()})


def parse_food_suggestion(raw: str) -> FoodSuggestion:
    data = _load_json(raw)
    if isinstance(data, list):
        raise InvalidShape("Food suggestion must be a single object, not an array", raw=raw)
    if not isinstance(data, dict):
        raise InvalidShape(f"Food suggestion must be a JSON object, got {type(data).__name__}", raw=raw)
    if not data:
        raise EmptyPlan("Food suggestion is empty", raw=raw)

    name = _text(data.get("name"))
    if not name:
        raise MissingRequiredFields('Food suggestion has no "name"', raw=raw)
    return FoodSuggestion(
        name=name,
        cal=_number(data, "cal", "calories", "kcal"),
        carbs=_number(data, "carbs", "carb", "carbohydrate"),
        protein=_number(data, "protein"),
        fat=_number(data, "fat"),
        ingredients=data.get("ingredients"),
        serving=_text(data.get("serving")),
    )
