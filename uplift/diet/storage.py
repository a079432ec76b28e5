# -*- coding: utf-8 -*-
"""Diet — DB storage helpers (food catalogue, meals, meal lines)."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..app_db import Database

_VISIBLE = "(user_id IS NULL OR user_id = ?)"

_FOOD_COLUMNS = (
    "name",
    "brand",
    "calories",
    "protein",
    "carbs",
    "fat",
    "fiber",
    "sugar",
    "serving_size",
    "serving_unit",
    "barcode",
)

_LINE_SELECT = """
    SELECT
        mfi.id, mfi.meal_id, mfi.food_item_id, mfi.serving_size, mfi.serving_unit,
        mfi.custom_serving_description,
        fi.name, fi.brand, fi.calories, fi.protein, fi.carbs, fi.fat
    FROM meal_food_items mfi
    JOIN food_items fi ON fi.id = mfi.food_item_id
"""


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


# ---- Food catalogue ----


def list_global_food_items(db: Database, *, limit: int = 50) -> List[Dict[str, Any]]:
    with db.connection() as conn:
        rows = conn.execute(
            "SELECT * FROM food_items WHERE user_id IS NULL ORDER BY name ASC, id ASC LIMIT ?",
            (limit,),
        ).fetchall()
    return [dict(r) for r in rows]


def search_food_items(db: Database, user_id: int, query: str, *, limit: int = 20) -> List[Dict[str, Any]]:
    pattern = f"%{query.strip()}%"
    with db.connection() as conn:
        rows = conn.execute(
            f"SELECT * FROM food_items WHERE name LIKE ? AND {_VISIBLE} ORDER BY name ASC, id ASC LIMIT ?",
            (pattern, user_id, limit),
        ).fetchall()
    return [dict(r) for r in rows]


def get_visible_food_item(db: Database, user_id: int, food_item_id: int) -> Optional[Dict[str, Any]]:
    with db.connection() as conn:
        row = conn.execute(
            f"SELECT * FROM food_items WHERE id = ? AND {_VISIBLE}",
            (food_item_id, user_id),
        ).fetchone()
    return dict(row) if row else None


def create_food_item(db: Database, *, user_id: Optional[int], data: Dict[str, Any]) -> Dict[str, Any]:
    """Insert a food item; ``user_id=None`` adds it to the global catalogue."""
    values = [data.get(col) for col in _FOOD_COLUMNS]
    cols = ", ".join(("user_id", "is_custom") + _FOOD_COLUMNS + ("created_at",))
    marks = ", ".join("?" for _ in range(len(_FOOD_COLUMNS) + 3))
    with db.connection() as conn:
        cur = conn.execute(
            f"INSERT INTO food_items ({cols}) VALUES ({marks})",
            [user_id, int(user_id is not None), *values, _utc_now()],
        )
        row = conn.execute("SELECT * FROM food_items WHERE id = ?", (cur.lastrowid,)).fetchone()
    return dict(row)


# ---- Meals ----


def create_meal(db: Database, *, user_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    with db.connection() as conn:
        cur = conn.execute(
            "INSERT INTO meals (user_id, name, type, date, time, created_at) VALUES (?, ?, ?, ?, ?, ?)",
            (user_id, data["name"], data.get("type"), data["date"], data.get("time"), _utc_now()),
        )
        row = conn.execute("SELECT * FROM meals WHERE id = ?", (cur.lastrowid,)).fetchone()
    meal = dict(row)
    meal["items"] = []
    return meal


def meal_lines(db: Database, meal_ids: List[int]) -> Dict[int, List[Dict[str, Any]]]:
    """Joined food lines grouped by meal id."""
    out: Dict[int, List[Dict[str, Any]]] = {mid: [] for mid in meal_ids}
    if not meal_ids:
        return out
    marks = ", ".join("?" for _ in meal_ids)
    with db.connection() as conn:
        rows = conn.execute(
            _LINE_SELECT + f" WHERE mfi.meal_id IN ({marks}) ORDER BY mfi.id ASC",
            list(meal_ids),
        ).fetchall()
    for r in rows:
        out[r["meal_id"]].append(dict(r))
    return out


def list_meals(
    db: Database,
    user_id: int,
    *,
    start: str,
    end: str,
    meal_type: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Meals with their lines for an inclusive date range, oldest first."""
    sql = "SELECT * FROM meals WHERE user_id = ? AND date >= ? AND date <= ?"
    params: List[Any] = [user_id, start, end]
    if meal_type:
        sql += " AND type = ?"
        params.append(meal_type)
    sql += " ORDER BY date ASC, time ASC, id ASC"
    with db.connection() as conn:
        rows = conn.execute(sql, params).fetchall()

    meals = [dict(r) for r in rows]
    lines = meal_lines(db, [m["id"] for m in meals])
    for meal in meals:
        meal["items"] = lines.get(meal["id"], [])
    return meals


def add_meal_line(db: Database, *, meal_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    with db.connection() as conn:
        cur = conn.execute(
            """
            INSERT INTO meal_food_items (
                meal_id, food_item_id, serving_size, serving_unit, custom_serving_description, created_at
            ) VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                meal_id,
                data["food_item_id"],
                data.get("serving_size"),
                data.get("serving_unit"),
                data.get("custom_serving_description"),
                _utc_now(),
            ),
        )
        row = conn.execute(_LINE_SELECT + " WHERE mfi.id = ?", (cur.lastrowid,)).fetchone()
    return dict(row)
