# -*- coding: utf-8 -*-
"""Progress — Pydantic models."""

from __future__ import annotations

import datetime as dt
from typing import Literal, Optional

from pydantic import Field

from ..schema import DATE_DESCRIPTION, ApiModel


class MeasurementCreateRequest(ApiModel):
    date: dt.date = Field(..., description=DATE_DESCRIPTION)
    weight: Optional[float] = Field(None, ge=30, le=300, description="kg")
    body_fat: Optional[float] = Field(None, ge=0, le=100, description="percent")
    chest: Optional[float] = Field(None, ge=0, le=500, description="cm")
    waist: Optional[float] = Field(None, ge=0, le=500, description="cm")
    hips: Optional[float] = Field(None, ge=0, le=500, description="cm")
    arms: Optional[float] = Field(None, ge=0, le=500, description="cm")
    thighs: Optional[float] = Field(None, ge=0, le=500, description="cm")
    notes: Optional[str] = Field(None, max_length=2000)


class BodyMeasurement(ApiModel):
    id: int
    user_id: int
    date: str
    weight: Optional[float] = None
    body_fat: Optional[float] = None
    chest: Optional[float] = None
    waist: Optional[float] = None
    hips: Optional[float] = None
    arms: Optional[float] = None
    thighs: Optional[float] = None
    notes: Optional[str] = None
    created_at: str


class PhotoCreateRequest(ApiModel):
    date: dt.date = Field(..., description=DATE_DESCRIPTION)
    photo_url: str = Field(..., min_length=1, max_length=2048)
    type: Optional[Literal["front", "side", "back"]] = None


class ProgressPhoto(ApiModel):
    id: int
    user_id: int
    date: str
    photo_url: str
    type: Optional[str] = None
    created_at: str
