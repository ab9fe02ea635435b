# -*- coding: utf-8 -*-
"""Profile: API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_current_user_id
from ..errors import ConfigurationError
from .models import ProfileSnapshot, ProfileUpsertRequest
from .snapshot import build_profile_snapshot, resolve_profile_snapshot
from .storage import upsert_profile_row

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("", response_model=ProfileSnapshot)
def get_profile(user_id: str = Depends(get_current_user_id)):
    try:
        return resolve_profile_snapshot(user_id)
    except ConfigurationError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.put("", response_model=ProfileSnapshot)
def put_profile(request: ProfileUpsertRequest, user_id: str = Depends(get_current_user_id)):
    fields = request.model_dump(exclude_unset=True)
    if "birth_year" in fields:
        fields["age"] = fields.pop("birth_year")
    row = upsert_profile_row(user_id, fields)
    try:
        return build_profile_snapshot(row)
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
