# -*- coding: utf-8 -*-
"""Workouts — API endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ..app_db import Database, get_db
from ..auth.security import SessionData, require_session
from ..errors import NotFoundError, ValidationError
from ..exercise.storage import get_visible_exercise
from ..ownership import PROGRAM, WORKOUT_DAY, WORKOUT_SESSION, load_owned, owned
from .models import (
    DayCreateRequest,
    DayExercise,
    DayExerciseCreateRequest,
    ProgramCreateRequest,
    RecentSession,
    SessionCreateRequest,
    SetLog,
    SetLogCreateRequest,
    WorkoutDay,
    WorkoutProgram,
    WorkoutSession,
)
from .storage import (
    activate_program,
    create_day,
    create_day_exercise,
    create_program,
    create_set_log,
    create_workout_session,
    list_day_exercises,
    list_days,
    list_programs,
    recent_workout_sessions,
)

router = APIRouter(prefix="/api", tags=["Workouts"])

owned_program = owned(PROGRAM, "program_id")
owned_day = owned(WORKOUT_DAY, "day_id")
owned_session = owned(WORKOUT_SESSION, "session_id")


def _require_exercise(db: Database, user_id: int, exercise_id: int) -> None:
    if not get_visible_exercise(db, user_id, exercise_id):
        raise NotFoundError("Exercise not found")


# ---- Programs ----


@router.get("/workout-programs", response_model=List[WorkoutProgram], summary="List my workout programs")
def programs(session: SessionData = Depends(require_session), db: Database = Depends(get_db)):
    return list_programs(db, session.user_id)


@router.post("/workout-programs", response_model=WorkoutProgram, status_code=201, summary="Create a workout program")
def new_program(
    body: ProgramCreateRequest,
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    return create_program(db, user_id=session.user_id, data=body.model_dump())


@router.get("/workout-programs/{program_id}", response_model=WorkoutProgram, summary="Get one workout program")
def program_detail(program_id: int, program: dict = Depends(owned_program)):
    return program


@router.post(
    "/workout-programs/{program_id}/activate",
    response_model=WorkoutProgram,
    summary="Make this the active program",
)
def program_activate(
    program_id: int,
    program: dict = Depends(owned_program),
    db: Database = Depends(get_db),
):
    return activate_program(db, user_id=program["user_id"], program_id=program["id"])


# ---- Days ----


@router.get("/workout-programs/{program_id}/days", response_model=List[WorkoutDay], summary="List program days")
def program_days(
    program_id: int,
    program: dict = Depends(owned_program),
    db: Database = Depends(get_db),
):
    return list_days(db, program["id"])


@router.post(
    "/workout-programs/{program_id}/days",
    response_model=WorkoutDay,
    status_code=201,
    summary="Add a day to a program",
)
def new_program_day(
    program_id: int,
    body: DayCreateRequest,
    program: dict = Depends(owned_program),
    db: Database = Depends(get_db),
):
    return create_day(db, program_id=program["id"], data=body.model_dump())


# ---- Day exercises ----


@router.get("/workout-days/{day_id}/exercises", response_model=List[DayExercise], summary="List exercises for a day")
def day_exercises(
    day_id: int,
    day: dict = Depends(owned_day),
    db: Database = Depends(get_db),
):
    return list_day_exercises(db, day["id"])


@router.post(
    "/workout-days/{day_id}/exercises",
    response_model=DayExercise,
    status_code=201,
    summary="Prescribe an exercise on a day",
)
def new_day_exercise(
    day_id: int,
    body: DayExerciseCreateRequest,
    day: dict = Depends(owned_day),
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    _require_exercise(db, session.user_id, body.exercise_id)
    return create_day_exercise(db, day_id=day["id"], data=body.model_dump())


# ---- Sessions ----


@router.post("/workout-sessions", response_model=WorkoutSession, status_code=201, summary="Log a workout session")
def new_session(
    body: SessionCreateRequest,
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    if body.program_id is not None:
        load_owned(db, PROGRAM, body.program_id, session.user_id)
    if body.day_id is not None:
        day = load_owned(db, WORKOUT_DAY, body.day_id, session.user_id)
        if body.program_id is not None and day["program_id"] != body.program_id:
            raise ValidationError(errors={"dayId": ["Day does not belong to the given program"]})

    data = body.model_dump()
    data["date"] = body.date.isoformat()
    return create_workout_session(db, user_id=session.user_id, data=data)


@router.get("/workout-sessions/recent", response_model=List[RecentSession], summary="Ten most recent sessions")
def recent_sessions(session: SessionData = Depends(require_session), db: Database = Depends(get_db)):
    return recent_workout_sessions(db, session.user_id, limit=10)


@router.post(
    "/workout-sessions/{session_id}/sets",
    response_model=SetLog,
    status_code=201,
    summary="Log a set within a session",
)
def new_set(
    session_id: int,
    body: SetLogCreateRequest,
    workout: dict = Depends(owned_session),
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    _require_exercise(db, session.user_id, body.exercise_id)
    return create_set_log(db, session_id=workout["id"], data=body.model_dump())
