# -*- coding: utf-8 -*-
"""Nutrition domain — API endpoints (goals, daily comparison, range summary)."""

from __future__ import annotations

import datetime as dt
import logging

from fastapi import APIRouter, Depends, Query

from ..app_db import Database, get_db
from ..auth.security import SessionData, require_session
from ..errors import ValidationError
from ..schema import DATE_DESCRIPTION
from .macros import DEFAULT_GOAL, adherence, goal_targets, remaining
from .models import DailyNutrition, NutritionGoal, NutritionGoalRequest, NutritionSummary
from .storage import create_goal, daily_macros, get_active_goal, range_summary

logger = logging.getLogger(__name__)

goals_router = APIRouter(prefix="/api/nutrition-goals", tags=["Nutrition"])
router = APIRouter(prefix="/api/nutrition", tags=["Nutrition"])


def _goal_or_default(db: Database, user_id: int) -> dict:
    goal = get_active_goal(db, user_id)
    if goal is None:
        return dict(DEFAULT_GOAL, user_id=user_id)
    return goal


@goals_router.get("", response_model=NutritionGoal, summary="Active nutrition goal (or the default)")
def active_goal(session: SessionData = Depends(require_session), db: Database = Depends(get_db)):
    return _goal_or_default(db, session.user_id)


@goals_router.post("", response_model=NutritionGoal, status_code=201, summary="Set a new active nutrition goal")
def set_goal(
    body: NutritionGoalRequest,
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    goal = create_goal(db, user_id=session.user_id, data=body.model_dump())
    logger.info("User %s set nutrition goal %s", session.user_id, goal["id"])
    return goal


@router.get("/daily", response_model=DailyNutrition, summary="Consumed vs. target macros for a day")
def daily(
    date: dt.date = Query(..., description=DATE_DESCRIPTION),
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    day = date.isoformat()
    consumed, meal_count = daily_macros(db, session.user_id, day)
    goal = _goal_or_default(db, session.user_id)
    targets = goal_targets(goal)
    return {
        "date": day,
        "consumed": consumed,
        "goal": goal,
        "targets": targets,
        "remaining": remaining(consumed, targets),
        "adherence": adherence(consumed, targets),
        "meal_count": meal_count,
    }


@router.get("/summary", response_model=NutritionSummary, summary="Per-day consumed macros over a date range")
def summary(
    start: dt.date = Query(..., description=DATE_DESCRIPTION),
    end: dt.date = Query(..., description=DATE_DESCRIPTION),
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    if start > end:
        raise ValidationError(errors={"end": ["end must not be before start"]})
    return range_summary(db, session.user_id, start=start.isoformat(), end=end.isoformat())
