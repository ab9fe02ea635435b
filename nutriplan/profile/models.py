# -*- coding: utf-8 -*-
"""Profile: Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class BodyFat(str, Enum):
    low = "low"
    normal = "normal"
    high = "high"
    unknown = "unknown"


class TargetGoal(str, Enum):
    decrease = "decrease"
    increase = "increase"
    healthy = "healthy"


class ActivityLevel(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"
    very_high = "very_high"


class UserProfileData(BaseModel):
    age: int = Field(..., ge=0, description="Years, derived from the stored birth year")
    weight: float = Field(..., description="kg")
    height: float = Field(..., description="cm")
    gender: Gender = Gender.other
    body_fat: BodyFat = BodyFat.unknown
    target_goal: TargetGoal = TargetGoal.healthy
    target_weight: float = Field(..., description="kg; equals weight for the healthy goal")
    activity_level: ActivityLevel = ActivityLevel.moderate


class ProfileSnapshot(BaseModel):
    profile: UserProfileData
    dietary_restrictions: List[str] = Field(default_factory=list)
    eating_type: Optional[str] = None


class ProfileUpsertRequest(BaseModel):
    birth_year: Optional[int] = Field(None, ge=1900, le=2100)
    weight: Optional[float] = Field(None, gt=0)
    height: Optional[float] = Field(None, gt=0)
    gender: Optional[str] = None
    body_fat: Optional[str] = None
    target_goal: Optional[str] = None
    target_weight: Optional[float] = Field(None, gt=0)
    activity_level: Optional[str] = None
    dietary_restrictions: Optional[str] = Field(None, description="Comma-separated")
    eating_type: Optional[str] = None
