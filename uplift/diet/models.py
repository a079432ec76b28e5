# -*- coding: utf-8 -*-
"""Diet — Pydantic models (food catalogue + meal logging)."""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from ..schema import DATE_DESCRIPTION, ApiModel


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class FoodItemCreateRequest(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    brand: Optional[str] = Field(None, max_length=255)
    calories: float = Field(..., ge=0, description="kcal per serving")
    protein: float = Field(0.0, ge=0, description="grams per serving")
    carbs: float = Field(0.0, ge=0, description="grams per serving")
    fat: float = Field(0.0, ge=0, description="grams per serving")
    fiber: Optional[float] = Field(None, ge=0)
    sugar: Optional[float] = Field(None, ge=0)
    serving_size: Optional[float] = Field(None, gt=0, description="reference serving, e.g. 100")
    serving_unit: Optional[str] = Field(None, max_length=50, description="e.g. 'g' or 'cup'")
    barcode: Optional[str] = Field(None, max_length=64)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value


class FoodItem(ApiModel):
    id: int
    user_id: Optional[int] = None
    is_custom: bool = False
    name: str
    brand: Optional[str] = None
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None
    fiber: Optional[float] = None
    sugar: Optional[float] = None
    serving_size: Optional[float] = None
    serving_unit: Optional[str] = None
    barcode: Optional[str] = None
    created_at: str


class MealCreateRequest(ApiModel):
    name: str = Field(..., min_length=1, max_length=100)
    type: MealType
    date: dt.date = Field(..., description=DATE_DESCRIPTION)
    time: Optional[str] = Field(None, pattern=r"^\d{2}:\d{2}(:\d{2})?$", description="HH:MM")


class MealLineCreateRequest(ApiModel):
    food_item_id: int
    serving_size: Optional[float] = Field(None, gt=0, description="number of servings; 1 when omitted")
    serving_unit: Optional[str] = Field(None, max_length=50)
    custom_serving_description: Optional[str] = Field(None, max_length=255)


class MealLine(ApiModel):
    id: int
    meal_id: int
    food_item_id: int
    serving_size: Optional[float] = None
    serving_unit: Optional[str] = None
    custom_serving_description: Optional[str] = None
    name: Optional[str] = None
    brand: Optional[str] = None
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None


class Meal(ApiModel):
    id: int
    user_id: int
    name: str
    type: Optional[str] = None
    date: str
    time: Optional[str] = None
    created_at: str
    items: List[MealLine] = Field(default_factory=list)
