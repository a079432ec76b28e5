# -*- coding: utf-8 -*-
"""Exercise library — DB storage helpers.

Exercises are either global (``user_id IS NULL``) or custom to one user; a user sees
the global catalogue plus their own custom entries.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..app_db import Database

_VISIBLE = "(user_id IS NULL OR user_id = ?)"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def list_exercises(db: Database, user_id: int, *, muscle_group: Optional[str] = None) -> List[Dict[str, Any]]:
    sql = f"SELECT * FROM exercises WHERE {_VISIBLE}"
    params: list[Any] = [user_id]
    if muscle_group:
        sql += " AND muscle_group = ?"
        params.append(muscle_group)
    sql += " ORDER BY name ASC, id ASC"
    with db.connection() as conn:
        rows = conn.execute(sql, params).fetchall()
    return [dict(r) for r in rows]


def get_visible_exercise(db: Database, user_id: int, exercise_id: int) -> Optional[Dict[str, Any]]:
    with db.connection() as conn:
        row = conn.execute(
            f"SELECT * FROM exercises WHERE id = ? AND {_VISIBLE}",
            (exercise_id, user_id),
        ).fetchone()
        return dict(row) if row else None


def create_exercise(db: Database, *, user_id: Optional[int], data: Dict[str, Any]) -> Dict[str, Any]:
    """Insert an exercise; ``user_id=None`` adds it to the global catalogue."""
    with db.connection() as conn:
        cur = conn.execute(
            """
            INSERT INTO exercises (
                user_id, is_custom, name, description, muscle_group,
                instructions, image_url, video_url, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                user_id,
                int(user_id is not None),
                data["name"],
                data.get("description"),
                data.get("muscle_group"),
                data.get("instructions"),
                data.get("image_url"),
                data.get("video_url"),
                _utc_now(),
            ),
        )
        row = conn.execute("SELECT * FROM exercises WHERE id = ?", (cur.lastrowid,)).fetchone()
    return dict(row)
