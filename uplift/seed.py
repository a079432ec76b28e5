# -*- coding: utf-8 -*-
"""Global exercise + food catalogue used to seed a fresh database."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from .app_db import Database
from .diet.storage import create_food_item
from .exercise.storage import create_exercise

logger = logging.getLogger(__name__)

EXERCISES: List[Dict[str, Any]] = [
    {"name": "Barbell Bench Press", "muscle_group": "chest", "instructions": "Lower the bar to mid-chest, press to lockout."},
    {"name": "Push-Up", "muscle_group": "chest", "instructions": "Keep a straight line from head to heels."},
    {"name": "Back Squat", "muscle_group": "legs", "instructions": "Break at hips and knees together, hit depth, drive up."},
    {"name": "Romanian Deadlift", "muscle_group": "legs", "instructions": "Hinge at the hips with a neutral spine."},
    {"name": "Walking Lunge", "muscle_group": "legs"},
    {"name": "Deadlift", "muscle_group": "back", "instructions": "Bar over mid-foot, brace, push the floor away."},
    {"name": "Pull-Up", "muscle_group": "back", "instructions": "Full hang to chin over bar."},
    {"name": "Barbell Row", "muscle_group": "back"},
    {"name": "Overhead Press", "muscle_group": "shoulders", "instructions": "Press from the front rack to overhead lockout."},
    {"name": "Lateral Raise", "muscle_group": "shoulders"},
    {"name": "Barbell Curl", "muscle_group": "arms"},
    {"name": "Triceps Dip", "muscle_group": "arms"},
    {"name": "Plank", "muscle_group": "core", "instructions": "Hold a rigid line; do not let the hips sag."},
    {"name": "Hanging Leg Raise", "muscle_group": "core"},
]

# Nutrients are per listed serving.
FOODS: List[Dict[str, Any]] = [
    {"name": "Chicken Breast", "calories": 165, "protein": 31, "carbs": 0, "fat": 3.6, "serving_size": 100, "serving_unit": "g"},
    {"name": "Egg", "calories": 78, "protein": 6.3, "carbs": 0.6, "fat": 5.3, "serving_size": 1, "serving_unit": "large"},
    {"name": "White Rice (cooked)", "calories": 130, "protein": 2.7, "carbs": 28, "fat": 0.3, "serving_size": 100, "serving_unit": "g"},
    {"name": "Rolled Oats", "calories": 150, "protein": 5, "carbs": 27, "fat": 2.5, "fiber": 4, "serving_size": 40, "serving_unit": "g"},
    {"name": "Banana", "calories": 105, "protein": 1.3, "carbs": 27, "fat": 0.4, "fiber": 3.1, "sugar": 14, "serving_size": 1, "serving_unit": "medium"},
    {"name": "Apple", "calories": 95, "protein": 0.5, "carbs": 25, "fat": 0.3, "fiber": 4.4, "sugar": 19, "serving_size": 1, "serving_unit": "medium"},
    {"name": "Greek Yogurt (plain)", "calories": 100, "protein": 17, "carbs": 6, "fat": 0.7, "serving_size": 170, "serving_unit": "g"},
    {"name": "Salmon", "calories": 208, "protein": 20, "carbs": 0, "fat": 13, "serving_size": 100, "serving_unit": "g"},
    {"name": "Broccoli", "calories": 34, "protein": 2.8, "carbs": 7, "fat": 0.4, "fiber": 2.6, "serving_size": 100, "serving_unit": "g"},
    {"name": "Almonds", "calories": 164, "protein": 6, "carbs": 6, "fat": 14, "fiber": 3.5, "serving_size": 28, "serving_unit": "g"},
    {"name": "Whole Milk", "calories": 149, "protein": 8, "carbs": 12, "fat": 8, "serving_size": 1, "serving_unit": "cup"},
    {"name": "Whey Protein", "calories": 120, "protein": 24, "carbs": 3, "fat": 1.5, "serving_size": 1, "serving_unit": "scoop"},
]


def _global_names(db: Database, table: str) -> set:
    with db.connection() as conn:
        rows = conn.execute(f"SELECT name FROM {table} WHERE user_id IS NULL").fetchall()
    return {r["name"] for r in rows}


def seed_catalogue(db: Database) -> Tuple[int, int]:
    """Insert missing global exercises/foods. Returns (exercises_added, foods_added)."""
    existing = _global_names(db, "exercises")
    exercises_added = 0
    for item in EXERCISES:
        if item["name"] not in existing:
            create_exercise(db, user_id=None, data=item)
            exercises_added += 1

    existing = _global_names(db, "food_items")
    foods_added = 0
    for item in FOODS:
        if item["name"] not in existing:
            create_food_item(db, user_id=None, data=item)
            foods_added += 1

    logger.info("Seeded %d exercises and %d foods", exercises_added, foods_added)
    return exercises_added, foods_added
