# -*- coding: utf-8 -*-
"""Nutrition domain aggregation (meal lines -> daily totals) + goal storage."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from ..app_db import Database
from .macros import add_totals, compute_totals

_GOAL_COLUMNS = ("daily_calories", "protein_pct", "carbs_pct", "fat_pct", "protein_g", "carbs_g", "fat_g")

_LINES_IN_RANGE = """
    SELECT
        m.id AS meal_id, m.date, mfi.id AS line_id,
        mfi.serving_size, fi.calories, fi.protein, fi.carbs, fi.fat
    FROM meals m
    LEFT JOIN meal_food_items mfi ON mfi.meal_id = m.id
    LEFT JOIN food_items fi ON fi.id = mfi.food_item_id
    WHERE m.user_id = ? AND m.date >= ? AND m.date <= ?
"""


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _lines_by_day(db: Database, user_id: int, start: str, end: str) -> Dict[str, Tuple[List[Dict[str, Any]], set]]:
    with db.connection() as conn:
        rows = conn.execute(_LINES_IN_RANGE, (user_id, start, end)).fetchall()

    per_day: Dict[str, Tuple[List[Dict[str, Any]], set]] = {}
    for r in rows:
        lines, meal_ids = per_day.setdefault(r["date"], ([], set()))
        meal_ids.add(r["meal_id"])
        # A meal without lines still counts as a meal but adds nothing.
        if r["line_id"] is not None:
            lines.append(dict(r))
    return per_day


def daily_macros(db: Database, user_id: int, date: str) -> Tuple[Dict[str, float], int]:
    """Consumed totals and meal count for one day; no meals means all zeros."""
    lines, meal_ids = _lines_by_day(db, user_id, date, date).get(date, ([], set()))
    return compute_totals(lines), len(meal_ids)


def range_summary(db: Database, user_id: int, *, start: str, end: str) -> Dict[str, Any]:
    per_day = _lines_by_day(db, user_id, start, end)

    totals = compute_totals([])
    days: List[Dict[str, Any]] = []
    for day in sorted(per_day.keys()):
        lines, meal_ids = per_day[day]
        day_totals = compute_totals(lines)
        totals = add_totals(totals, day_totals)
        days.append({"date": day, "totals": day_totals, "meal_count": len(meal_ids)})

    return {"start": start, "end": end, "totals": totals, "days": days}


# ---- Goals ----


def get_active_goal(db: Database, user_id: int) -> Optional[Dict[str, Any]]:
    with db.connection() as conn:
        row = conn.execute(
            """
            SELECT * FROM nutrition_goals
            WHERE user_id = ? AND active = 1
            ORDER BY created_at DESC, id DESC
            LIMIT 1
            """,
            (user_id,),
        ).fetchone()
    return dict(row) if row else None


def create_goal(db: Database, *, user_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    """Deactivate the user's current goal(s) and insert the new active one atomically."""
    cols = ", ".join(("user_id",) + _GOAL_COLUMNS + ("active", "created_at"))
    marks = ", ".join("?" for _ in range(len(_GOAL_COLUMNS) + 3))
    with db.transaction() as conn:
        conn.execute("UPDATE nutrition_goals SET active = 0 WHERE user_id = ? AND active = 1", (user_id,))
        cur = conn.execute(
            f"INSERT INTO nutrition_goals ({cols}) VALUES ({marks})",
            [user_id, *(data.get(c) for c in _GOAL_COLUMNS), 1, _utc_now()],
        )
        row = conn.execute("SELECT * FROM nutrition_goals WHERE id = ?", (cur.lastrowid,)).fetchone()
    return dict(row)

