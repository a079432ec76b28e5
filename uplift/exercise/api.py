# -*- coding: utf-8 -*-
"""Exercise library — API endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from ..app_db import Database, get_db
from ..auth.security import SessionData, require_session
from ..errors import NotFoundError
from .models import Exercise, ExerciseCreateRequest
from .storage import create_exercise, get_visible_exercise, list_exercises

router = APIRouter(prefix="/api/exercises", tags=["Exercises"])


@router.get("", response_model=List[Exercise], summary="List global and custom exercises")
def list_all(
    muscle_group: str | None = Query(default=None, alias="muscleGroup"),
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    return list_exercises(db, session.user_id, muscle_group=muscle_group)


@router.get("/{exercise_id}", response_model=Exercise, summary="Get one exercise")
def get_one(
    exercise_id: int,
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    exercise = get_visible_exercise(db, session.user_id, exercise_id)
    if not exercise:
        raise NotFoundError("Exercise not found")
    return exercise


@router.post("", response_model=Exercise, status_code=201, summary="Create a custom exercise")
def create(
    body: ExerciseCreateRequest,
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    return create_exercise(db, user_id=session.user_id, data=body.model_dump())
