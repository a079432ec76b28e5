# -*- coding: utf-8 -*-
"""Diet — API endpoints (food catalogue + meals)."""

from __future__ import annotations

import datetime as dt
from typing import List

from fastapi import APIRouter, Depends, Query

from ..app_db import Database, get_db
from ..auth.security import SessionData, require_session
from ..errors import NotFoundError
from ..ownership import MEAL, owned
from ..schema import DATE_DESCRIPTION
from .models import FoodItem, FoodItemCreateRequest, Meal, MealCreateRequest, MealLine, MealLineCreateRequest, MealType
from .storage import (
    add_meal_line,
    create_food_item,
    create_meal,
    get_visible_food_item,
    list_global_food_items,
    list_meals,
    search_food_items,
)

food_router = APIRouter(prefix="/api/food-items", tags=["Food"])
meal_router = APIRouter(prefix="/api/meals", tags=["Meals"])


@food_router.get("", response_model=List[FoodItem], summary="Global food catalogue")
def food_catalogue(
    session: SessionData = Depends(require_session),  # noqa: ARG001
    db: Database = Depends(get_db),
):
    return list_global_food_items(db, limit=50)


@food_router.get("/search", response_model=List[FoodItem], summary="Search foods by name")
def food_search(
    query: str = Query(..., min_length=1, max_length=100),
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    return search_food_items(db, session.user_id, query, limit=20)


@food_router.post("", response_model=FoodItem, status_code=201, summary="Create a custom food item")
def food_create(
    body: FoodItemCreateRequest,
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    return create_food_item(db, user_id=session.user_id, data=body.model_dump())


@meal_router.post("", response_model=Meal, status_code=201, summary="Log a meal")
def meal_create(
    body: MealCreateRequest,
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    data = body.model_dump()
    data["type"] = body.type.value
    data["date"] = body.date.isoformat()
    return create_meal(db, user_id=session.user_id, data=data)


@meal_router.get("/by-date", response_model=List[Meal], summary="Meals (with items) on a date")
def meals_by_date(
    date: dt.date = Query(..., description=DATE_DESCRIPTION),
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    day = date.isoformat()
    return list_meals(db, session.user_id, start=day, end=day)


@meal_router.get("/by-date-and-type", response_model=List[Meal], summary="Meals of one type on a date")
def meals_by_date_and_type(
    date: dt.date = Query(..., description=DATE_DESCRIPTION),
    type: MealType = Query(...),
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    day = date.isoformat()
    return list_meals(db, session.user_id, start=day, end=day, meal_type=type.value)


@meal_router.post("/{meal_id}/items", response_model=MealLine, status_code=201, summary="Add a food to a meal")
def meal_add_item(
    meal_id: int,
    body: MealLineCreateRequest,
    meal: dict = Depends(owned(MEAL, "meal_id")),
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
):
    if not get_visible_food_item(db, session.user_id, body.food_item_id):
        raise NotFoundError("Food item not found")
    return add_meal_line(db, meal_id=meal["id"], data=body.model_dump())
