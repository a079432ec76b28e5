# -*- coding: utf-8 -*-
"""Auth — DB storage helpers (users + server-side sessions)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from ..app_db import Database

# Columns a profile update may touch; everything else on the row is identity/credentials.
PROFILE_COLUMNS = (
    "full_name",
    "age",
    "gender",
    "height",
    "weight",
    "body_fat",
    "activity_level",
    "goal",
    "units",
    "notifications",
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _iso(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


def get_user_by_username(db: Database, username: str) -> Optional[Dict[str, Any]]:
    with db.connection() as conn:
        row = conn.execute("SELECT * FROM users WHERE username = ?", (username.strip(),)).fetchone()
        return dict(row) if row else None


def get_user_by_email(db: Database, email: str) -> Optional[Dict[str, Any]]:
    with db.connection() as conn:
        row = conn.execute("SELECT * FROM users WHERE email = ?", (email.lower().strip(),)).fetchone()
        return dict(row) if row else None


def get_user_by_id(db: Database, user_id: int) -> Optional[Dict[str, Any]]:
    with db.connection() as conn:
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return dict(row) if row else None


def create_user(db: Database, *, username: str, email: str, password_hash: str) -> Dict[str, Any]:
    """Insert a user. Raises ``sqlite3.IntegrityError`` when username/email is taken."""
    now = _iso(_utc_now())
    with db.connection() as conn:
        cur = conn.execute(
            "INSERT INTO users (username, email, password_hash, created_at) VALUES (?, ?, ?, ?)",
            (username.strip(), email.lower().strip(), password_hash, now),
        )
        row = conn.execute("SELECT * FROM users WHERE id = ?", (cur.lastrowid,)).fetchone()
    return dict(row)


def update_user_profile(db: Database, user_id: int, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    updates = {k: v for k, v in fields.items() if k in PROFILE_COLUMNS}
    with db.connection() as conn:
        if updates:
            assignments = ", ".join(f"{col} = ?" for col in updates)
            conn.execute(
                f"UPDATE users SET {assignments} WHERE id = ?",
                (*updates.values(), user_id),
            )
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return dict(row) if row else None


def create_session(db: Database, *, session_id: str, user_id: int, username: str, ttl_days: int) -> Dict[str, Any]:
    now = _utc_now()
    record = {
        "id": session_id,
        "user_id": user_id,
        "username": username,
        "created_at": _iso(now),
        "expires_at": _iso(now + timedelta(days=ttl_days)),
    }
    with db.connection() as conn:
        conn.execute(
            "INSERT INTO sessions (id, user_id, username, created_at, expires_at) VALUES (?, ?, ?, ?, ?)",
            (record["id"], record["user_id"], record["username"], record["created_at"], record["expires_at"]),
        )
    return record


def get_session(db: Database, session_id: str) -> Optional[Dict[str, Any]]:
    """Return a live session; expired rows are removed on sight."""
    with db.connection() as conn:
        row = conn.execute("SELECT * FROM sessions WHERE id = ?", (session_id,)).fetchone()
        if not row:
            return None
        if row["expires_at"] <= _iso(_utc_now()):
            conn.execute("DELETE FROM sessions WHERE id = ?", (session_id,))
            return None
        return dict(row)


def delete_session(db: Database, session_id: str) -> bool:
    with db.connection() as conn:
        cur = conn.execute("DELETE FROM sessions WHERE id = ?", (session_id,))
        return cur.rowcount > 0
