# -*- coding: utf-8 -*-
"""Profile — API endpoints (onboarding + edits)."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..app_db import Database, get_db
from ..auth.models import UserPublic, user_public
from ..auth.security import SessionData, require_session
from ..auth.storage import update_user_profile
from ..errors import NotFoundError
from .models import ProfileSetupRequest, ProfileUpdateRequest

router = APIRouter(prefix="/api/profile", tags=["Profile"])


def _save(db: Database, user_id: int, fields: Dict[str, Any]) -> UserPublic:
    # units/notifications are NOT NULL columns; an explicit null means "leave as is".
    for key in ("units", "notifications"):
        if key in fields and fields[key] is None:
            del fields[key]
    if "notifications" in fields:
        fields["notifications"] = int(fields["notifications"])
    user = update_user_profile(db, user_id, fields)
    if not user:
        raise NotFoundError("User not found")
    return user_public(user)


@router.post("/setup", response_model=UserPublic, summary="Complete the onboarding profile")
def setup_profile(
    body: ProfileSetupRequest,
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    return _save(db, session.user_id, body.model_dump(exclude_unset=True))


@router.put("", response_model=UserPublic, summary="Update profile fields")
def update_profile(
    body: ProfileUpdateRequest,
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    return _save(db, session.user_id, body.model_dump(exclude_unset=True))
