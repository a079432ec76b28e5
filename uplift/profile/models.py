# -*- coding: utf-8 -*-
"""Profile — Pydantic models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..schema import ApiModel

Units = Literal["metric", "imperial"]


class ProfileUpdateRequest(ApiModel):
    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    age: Optional[int] = Field(None, ge=13, le=120)
    gender: Optional[str] = Field(None, min_length=1, max_length=50)
    height: Optional[float] = Field(None, ge=50, le=300, description="cm")
    weight: Optional[float] = Field(None, ge=30, le=300, description="kg")
    body_fat: Optional[float] = Field(None, ge=0, le=100, description="%")
    activity_level: Optional[str] = Field(None, min_length=1, max_length=50)
    goal: Optional[str] = Field(None, min_length=1, max_length=50)
    units: Optional[Units] = None
    notifications: Optional[bool] = None


class ProfileSetupRequest(ProfileUpdateRequest):
    """Onboarding form: the fields that make a profile complete are mandatory."""

    full_name: str = Field(..., min_length=1, max_length=255)
    age: int = Field(..., ge=13, le=120)
    weight: float = Field(..., ge=30, le=300, description="kg")
