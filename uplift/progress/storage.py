# -*- coding: utf-8 -*-
"""Progress — DB storage helpers (body measurements + progress photos)."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

from ..app_db import Database

_MEASUREMENT_COLUMNS = ("date", "weight", "body_fat", "chest", "waist", "hips", "arms", "thighs", "notes")


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def recent_measurements(db: Database, user_id: int, *, limit: int = 10) -> List[Dict[str, Any]]:
    with db.connection() as conn:
        rows = conn.execute(
            "SELECT * FROM body_measurements WHERE user_id = ? ORDER BY date DESC, id DESC LIMIT ?",
            (user_id, limit),
        ).fetchall()
    return [dict(r) for r in rows]


def measurements_in_range(db: Database, user_id: int, *, start: str, end: str) -> List[Dict[str, Any]]:
    """Inclusive on both ends, oldest first (chart order)."""
    with db.connection() as conn:
        rows = conn.execute(
            """
            SELECT * FROM body_measurements
            WHERE user_id = ? AND date >= ? AND date <= ?
            ORDER BY date ASC, id ASC
            """,
            (user_id, start, end),
        ).fetchall()
    return [dict(r) for r in rows]


def create_measurement(db: Database, *, user_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    cols = ", ".join(("user_id",) + _MEASUREMENT_COLUMNS + ("created_at",))
    marks = ", ".join("?" for _ in range(len(_MEASUREMENT_COLUMNS) + 2))
    with db.connection() as conn:
        cur = conn.execute(
            f"INSERT INTO body_measurements ({cols}) VALUES ({marks})",
            [user_id, *(data.get(c) for c in _MEASUREMENT_COLUMNS), _utc_now()],
        )
        row = conn.execute("SELECT * FROM body_measurements WHERE id = ?", (cur.lastrowid,)).fetchone()
    return dict(row)


def list_photos(db: Database, user_id: int) -> List[Dict[str, Any]]:
    with db.connection() as conn:
        rows = conn.execute(
            "SELECT * FROM progress_photos WHERE user_id = ? ORDER BY date DESC, id DESC",
            (user_id,),
        ).fetchall()
    return [dict(r) for r in rows]


def create_photo(db: Database, *, user_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    with db.connection() as conn:
        cur = conn.execute(
            "INSERT INTO progress_photos (user_id, date, photo_url, type, created_at) VALUES (?, ?, ?, ?, ?)",
            (user_id, data["date"], data["photo_url"], data.get("type"), _utc_now()),
        )
        row = conn.execute("SELECT * FROM progress_photos WHERE id = ?", (cur.lastrowid,)).fetchone()
    return dict(row)
