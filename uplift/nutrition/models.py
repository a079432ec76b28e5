# -*- coding: utf-8 -*-
"""Nutrition domain — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..schema import DATE_DESCRIPTION, ApiModel


class MacroTotals(ApiModel):
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


class NutritionGoalRequest(ApiModel):
    daily_calories: Optional[int] = Field(None, ge=0, le=20000)
    protein_pct: Optional[float] = Field(None, ge=0, le=100)
    carbs_pct: Optional[float] = Field(None, ge=0, le=100)
    fat_pct: Optional[float] = Field(None, ge=0, le=100)
    protein_g: Optional[float] = Field(None, ge=0)
    carbs_g: Optional[float] = Field(None, ge=0)
    fat_g: Optional[float] = Field(None, ge=0)


class NutritionGoal(ApiModel):
    id: Optional[int] = None
    user_id: Optional[int] = None
    daily_calories: Optional[int] = None
    protein_pct: Optional[float] = None
    carbs_pct: Optional[float] = None
    fat_pct: Optional[float] = None
    protein_g: Optional[float] = None
    carbs_g: Optional[float] = None
    fat_g: Optional[float] = None
    active: bool = True
    created_at: Optional[str] = None
    is_default: bool = False


class DailyNutrition(ApiModel):
    date: str = Field(..., description=DATE_DESCRIPTION)
    consumed: MacroTotals
    goal: NutritionGoal
    targets: MacroTotals
    remaining: MacroTotals
    adherence: MacroTotals = Field(..., description="percent of target reached, capped at 100")
    meal_count: int = Field(0, ge=0)


class NutritionDay(ApiModel):
    date: str = Field(..., description=DATE_DESCRIPTION)
    totals: MacroTotals
    meal_count: int = Field(0, ge=0)


class NutritionSummary(ApiModel):
    start: str
    end: str
    totals: MacroTotals
    days: List[NutritionDay]
