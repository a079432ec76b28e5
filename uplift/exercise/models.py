# -*- coding: utf-8 -*-
"""Exercise library — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..schema import ApiModel


class ExerciseCreateRequest(ApiModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=2000)
    muscle_group: Optional[str] = Field(None, max_length=50)
    instructions: Optional[str] = Field(None, max_length=4000)
    image_url: Optional[str] = Field(None, max_length=2048)
    video_url: Optional[str] = Field(None, max_length=2048)


class Exercise(ApiModel):
    id: int
    user_id: Optional[int] = None
    is_custom: bool = False
    name: str
    description: Optional[str] = None
    muscle_group: Optional[str] = None
    instructions: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    created_at: str
