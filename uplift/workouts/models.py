# -*- coding: utf-8 -*-
"""Workouts — Pydantic models."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import Field

from ..schema import DATE_DESCRIPTION, ApiModel


class ProgramCreateRequest(ApiModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=2000)
    frequency: Optional[int] = Field(None, ge=1, le=7, description="days per week")
    level: Optional[str] = Field(None, max_length=50)
    active: bool = False


class WorkoutProgram(ApiModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    frequency: Optional[int] = None
    level: Optional[str] = None
    active: bool = False
    created_at: str


class DayCreateRequest(ApiModel):
    name: str = Field(..., min_length=1, max_length=100)
    day_of_week: Optional[int] = Field(None, ge=0, le=6, description="0 = Sunday")
    target_muscle_groups: Optional[str] = Field(None, max_length=500)
    order: Optional[int] = Field(None, ge=0, description="defaults to the end of the program")


class WorkoutDay(ApiModel):
    id: int
    program_id: int
    name: str
    day_of_week: Optional[int] = None
    target_muscle_groups: Optional[str] = None
    order: int
    created_at: str


class DayExerciseCreateRequest(ApiModel):
    exercise_id: int
    sets: Optional[int] = Field(None, ge=0, le=100)
    reps: Optional[str] = Field(None, max_length=50, description="e.g. '8-12'")
    weight: Optional[str] = Field(None, max_length=50, description="e.g. '60kg' or 'bodyweight'")
    rest_time: Optional[int] = Field(None, ge=0, description="seconds")
    order: Optional[int] = Field(None, ge=0)


class DayExercise(ApiModel):
    id: int
    day_id: int
    exercise_id: int
    sets: Optional[int] = None
    reps: Optional[str] = None
    weight: Optional[str] = None
    rest_time: Optional[int] = None
    order: int
    exercise_name: Optional[str] = None
    muscle_group: Optional[str] = None
    image_url: Optional[str] = None


class SessionCreateRequest(ApiModel):
    program_id: Optional[int] = None
    day_id: Optional[int] = None
    date: dt.date = Field(..., description=DATE_DESCRIPTION)
    duration: Optional[int] = Field(None, ge=0, description="minutes")
    complete: bool = False
    notes: Optional[str] = Field(None, max_length=2000)


class WorkoutSession(ApiModel):
    id: int
    user_id: int
    program_id: Optional[int] = None
    day_id: Optional[int] = None
    date: str
    duration: Optional[int] = None
    complete: bool = False
    notes: Optional[str] = None
    created_at: str


class RecentSession(ApiModel):
    id: int
    date: str
    duration: Optional[int] = None
    complete: bool = False
    program_name: Optional[str] = None
    day_name: Optional[str] = None


class SetLogCreateRequest(ApiModel):
    exercise_id: int
    set_number: int = Field(..., ge=1)
    reps: int = Field(..., ge=0)
    weight: float = Field(..., ge=0)
    complete: bool = False


class SetLog(ApiModel):
    id: int
    session_id: int
    exercise_id: int
    set_number: int
    reps: int
    weight: float
    complete: bool = False
    created_at: str
