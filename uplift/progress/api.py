# -*- coding: utf-8 -*-
"""Progress — API endpoints."""

from __future__ import annotations

import datetime as dt
from typing import List

from fastapi import APIRouter, Depends, Query

from ..app_db import Database, get_db
from ..auth.security import SessionData, require_session
from ..errors import ValidationError
from ..schema import DATE_DESCRIPTION
from .models import BodyMeasurement, MeasurementCreateRequest, PhotoCreateRequest, ProgressPhoto
from .storage import create_measurement, create_photo, list_photos, measurements_in_range, recent_measurements

measurements_router = APIRouter(prefix="/api/body-measurements", tags=["Progress"])
photos_router = APIRouter(prefix="/api/progress-photos", tags=["Progress"])


@measurements_router.get("/recent", response_model=List[BodyMeasurement], summary="Ten most recent measurements")
def recent(session: SessionData = Depends(require_session), db: Database = Depends(get_db)):
    return recent_measurements(db, session.user_id, limit=10)


@measurements_router.get("/range", response_model=List[BodyMeasurement], summary="Measurements in a date range")
def in_range(
    start_date: dt.date = Query(..., alias="startDate", description=DATE_DESCRIPTION),
    end_date: dt.date = Query(..., alias="endDate", description=DATE_DESCRIPTION),
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    if start_date > end_date:
        raise ValidationError(errors={"endDate": ["endDate must not be before startDate"]})
    return measurements_in_range(db, session.user_id, start=start_date.isoformat(), end=end_date.isoformat())


@measurements_router.post("", response_model=BodyMeasurement, status_code=201, summary="Record a measurement")
def new_measurement(
    body: MeasurementCreateRequest,
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    data = body.model_dump()
    data["date"] = body.date.isoformat()
    return create_measurement(db, user_id=session.user_id, data=data)


@photos_router.get("", response_model=List[ProgressPhoto], summary="Progress photos, newest first")
def photos(session: SessionData = Depends(require_session), db: Database = Depends(get_db)):
    return list_photos(db, session.user_id)


@photos_router.post("", response_model=ProgressPhoto, status_code=201, summary="Add a progress photo")
def new_photo(
    body: PhotoCreateRequest,
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    data = body.model_dump()
    data["date"] = body.date.isoformat()
    return create_photo(db, user_id=session.user_id, data=data)
