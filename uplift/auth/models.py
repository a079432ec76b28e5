# -*- coding: utf-8 -*-
"""Auth — Pydantic models."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import Field

from ..schema import ApiModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


def profile_complete(user: Mapping[str, Any]) -> bool:
    """A profile is complete once full name, age and weight are all set."""
    return bool(user.get("full_name")) and user.get("age") is not None and user.get("weight") is not None


class RegisterRequest(ApiModel):
    username: str = Field(..., min_length=3, max_length=100)
    email: str = Field(..., min_length=3, max_length=254, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6, max_length=128)


class LoginRequest(ApiModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1, max_length=128)


class RegisterResponse(ApiModel):
    id: int
    username: str
    email: str


class LoginResponse(ApiModel):
    id: int
    username: str
    email: str
    profile_complete: bool


class MessageResponse(ApiModel):
    message: str


class UserPublic(ApiModel):
    id: int
    username: str
    email: str
    full_name: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    body_fat: Optional[float] = None
    activity_level: Optional[str] = None
    goal: Optional[str] = None
    units: str = "metric"
    notifications: bool = True
    created_at: str
    profile_complete: bool = False


def user_public(row: Dict[str, Any]) -> UserPublic:
    data = {k: v for k, v in row.items() if k != "password_hash"}
    data["profile_complete"] = profile_complete(row)
    return UserPublic.model_validate(data)
