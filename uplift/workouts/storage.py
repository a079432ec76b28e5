# -*- coding: utf-8 -*-
"""Workouts — DB storage helpers (programs, days, prescriptions, sessions, sets)."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, List

from ..app_db import Database


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _next_order(conn: sqlite3.Connection, table: str, parent_col: str, parent_id: int) -> int:
    row = conn.execute(
        f'SELECT COALESCE(MAX("order") + 1, 0) AS next_order FROM {table} WHERE {parent_col} = ?',
        (parent_id,),
    ).fetchone()
    return int(row["next_order"])


# ---- Programs ----


def list_programs(db: Database, user_id: int) -> List[Dict[str, Any]]:
    with db.connection() as conn:
        rows = conn.execute(
            "SELECT * FROM workout_programs WHERE user_id = ? ORDER BY active DESC, created_at DESC, id DESC",
            (user_id,),
        ).fetchall()
    return [dict(r) for r in rows]


def create_program(db: Database, *, user_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    """Insert a program; an active one retires the user's previously active program."""
    active = bool(data.get("active"))
    with db.transaction() as conn:
        if active:
            conn.execute(
                "UPDATE workout_programs SET active = 0 WHERE user_id = ? AND active = 1",
                (user_id,),
            )
        cur = conn.execute(
            """
            INSERT INTO workout_programs (user_id, name, description, frequency, level, active, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                user_id,
                data["name"],
                data.get("description"),
                data.get("frequency"),
                data.get("level"),
                int(active),
                _utc_now(),
            ),
        )
        row = conn.execute("SELECT * FROM workout_programs WHERE id = ?", (cur.lastrowid,)).fetchone()
    return dict(row)


def activate_program(db: Database, *, user_id: int, program_id: int) -> Dict[str, Any]:
    with db.transaction() as conn:
        conn.execute(
            "UPDATE workout_programs SET active = CASE WHEN id = ? THEN 1 ELSE 0 END WHERE user_id = ?",
            (program_id, user_id),
        )
        row = conn.execute("SELECT * FROM workout_programs WHERE id = ?", (program_id,)).fetchone()
    return dict(row)


# ---- Days ----


def list_days(db: Database, program_id: int) -> List[Dict[str, Any]]:
    with db.connection() as conn:
        rows = conn.execute(
            'SELECT * FROM workout_days WHERE program_id = ? ORDER BY "order" ASC, id ASC',
            (program_id,),
        ).fetchall()
    return [dict(r) for r in rows]


def create_day(db: Database, *, program_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    with db.transaction() as conn:
        order = data.get("order")
        if order is None:
            order = _next_order(conn, "workout_days", "program_id", program_id)
        cur = conn.execute(
            """
            INSERT INTO workout_days (program_id, name, day_of_week, target_muscle_groups, "order", created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                program_id,
                data["name"],
                data.get("day_of_week"),
                data.get("target_muscle_groups"),
                order,
                _utc_now(),
            ),
        )
        row = conn.execute("SELECT * FROM workout_days WHERE id = ?", (cur.lastrowid,)).fetchone()
    return dict(row)


# ---- Day exercises ----

_DAY_EXERCISE_SELECT = """
    SELECT
        wde.id, wde.day_id, wde.exercise_id, wde.sets, wde.reps, wde.weight,
        wde.rest_time, wde."order",
        e.name AS exercise_name, e.muscle_group, e.image_url
    FROM workout_day_exercises wde
    LEFT JOIN exercises e ON e.id = wde.exercise_id
"""


def list_day_exercises(db: Database, day_id: int) -> List[Dict[str, Any]]:
    with db.connection() as conn:
        rows = conn.execute(
            _DAY_EXERCISE_SELECT + ' WHERE wde.day_id = ? ORDER BY wde."order" ASC, wde.id ASC',
            (day_id,),
        ).fetchall()
    return [dict(r) for r in rows]


def create_day_exercise(db: Database, *, day_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    with db.transaction() as conn:
        order = data.get("order")
        if order is None:
            order = _next_order(conn, "workout_day_exercises", "day_id", day_id)
        cur = conn.execute(
            """
            INSERT INTO workout_day_exercises (day_id, exercise_id, sets, reps, weight, rest_time, "order", created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                day_id,
                data["exercise_id"],
                data.get("sets"),
                data.get("reps"),
                data.get("weight"),
                data.get("rest_time"),
                order,
                _utc_now(),
            ),
        )
        row = conn.execute(_DAY_EXERCISE_SELECT + " WHERE wde.id = ?", (cur.lastrowid,)).fetchone()
    return dict(row)


# ---- Sessions + set logs ----


def create_workout_session(db: Database, *, user_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    with db.connection() as conn:
        cur = conn.execute(
            """
            INSERT INTO workout_sessions (user_id, program_id, day_id, date, duration, complete, notes, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                user_id,
                data.get("program_id"),
                data.get("day_id"),
                data["date"],
                data.get("duration"),
                int(bool(data.get("complete"))),
                data.get("notes"),
                _utc_now(),
            ),
        )
        row = conn.execute("SELECT * FROM workout_sessions WHERE id = ?", (cur.lastrowid,)).fetchone()
    return dict(row)


def recent_workout_sessions(db: Database, user_id: int, *, limit: int = 10) -> List[Dict[str, Any]]:
    with db.connection() as conn:
        rows = conn.execute(
            """
            SELECT
                ws.id, ws.date, ws.duration, ws.complete,
                wp.name AS program_name, wd.name AS day_name
            FROM workout_sessions ws
            LEFT JOIN workout_programs wp ON wp.id = ws.program_id
            LEFT JOIN workout_days wd ON wd.id = ws.day_id
            WHERE ws.user_id = ?
            ORDER BY ws.date DESC, ws.id DESC
            LIMIT ?
            """,
            (user_id, limit),
        ).fetchall()
    return [dict(r) for r in rows]


def create_set_log(db: Database, *, session_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    with db.connection() as conn:
        cur = conn.execute(
            """
            INSERT INTO workout_set_logs (session_id, exercise_id, set_number, reps, weight, complete, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                session_id,
                data["exercise_id"],
                data["set_number"],
                data["reps"],
                data["weight"],
                int(bool(data.get("complete"))),
                _utc_now(),
            ),
        )
        row = conn.execute("SELECT * FROM workout_set_logs WHERE id = ?", (cur.lastrowid,)).fetchone()
    return dict(row)
