# -*- coding: utf-8 -*-
"""App database — SQLite schema + a small bounded connection pool.

The ``Database`` object is built once at startup, stored on ``app.state.db`` and handed
to storage helpers explicitly; nothing in the package keeps a module-level connection.
"""

from __future__ import annotations

import logging
import queue
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

from fastapi import Request

from .errors import ServerError

logger = logging.getLogger(__name__)

_SCHEMA: List[str] = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        username TEXT NOT NULL UNIQUE,
        email TEXT NOT NULL UNIQUE,
        password_hash TEXT NOT NULL,
        full_name TEXT,
        age INTEGER,
        gender TEXT,
        height REAL,
        weight REAL,
        body_fat REAL,
        activity_level TEXT,
        goal TEXT,
        units TEXT NOT NULL DEFAULT 'metric',
        notifications INTEGER NOT NULL DEFAULT 1,
        created_at TEXT NOT NULL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS sessions (
        id TEXT PRIMARY KEY,
        user_id INTEGER NOT NULL,
        username TEXT NOT NULL,
        created_at TEXT NOT NULL,
        expires_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_sessions_user ON sessions(user_id);",
    """
    CREATE TABLE IF NOT EXISTS workout_programs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        name TEXT NOT NULL,
        description TEXT,
        frequency INTEGER,
        level TEXT,
        active INTEGER NOT NULL DEFAULT 0,
        created_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_workout_programs_user ON workout_programs(user_id, active);",
    """
    CREATE TABLE IF NOT EXISTS workout_days (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        program_id INTEGER NOT NULL,
        name TEXT NOT NULL,
        day_of_week INTEGER,
        target_muscle_groups TEXT,
        "order" INTEGER NOT NULL,
        created_at TEXT NOT NULL,
        FOREIGN KEY(program_id) REFERENCES workout_programs(id) ON DELETE CASCADE
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_workout_days_program ON workout_days(program_id, \"order\");",
    """
    CREATE TABLE IF NOT EXISTS exercises (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER,
        is_custom INTEGER NOT NULL DEFAULT 0,
        name TEXT NOT NULL,
        description TEXT,
        muscle_group TEXT,
        instructions TEXT,
        image_url TEXT,
        video_url TEXT,
        created_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS workout_day_exercises (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        day_id INTEGER NOT NULL,
        exercise_id INTEGER NOT NULL,
        sets INTEGER,
        reps TEXT,
        weight TEXT,
        rest_time INTEGER,
        "order" INTEGER NOT NULL,
        created_at TEXT NOT NULL,
        FOREIGN KEY(day_id) REFERENCES workout_days(id) ON DELETE CASCADE,
        FOREIGN KEY(exercise_id) REFERENCES exercises(id)
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS workout_sessions (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        program_id INTEGER,
        day_id INTEGER,
        date TEXT NOT NULL,
        duration INTEGER,
        complete INTEGER NOT NULL DEFAULT 0,
        notes TEXT,
        created_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE,
        FOREIGN KEY(program_id) REFERENCES workout_programs(id) ON DELETE SET NULL,
        FOREIGN KEY(day_id) REFERENCES workout_days(id) ON DELETE SET NULL
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_workout_sessions_user_date ON workout_sessions(user_id, date DESC);",
    """
    CREATE TABLE IF NOT EXISTS workout_set_logs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        session_id INTEGER NOT NULL,
        exercise_id INTEGER NOT NULL,
        set_number INTEGER NOT NULL,
        reps INTEGER NOT NULL,
        weight REAL NOT NULL,
        complete INTEGER NOT NULL DEFAULT 0,
        created_at TEXT NOT NULL,
        FOREIGN KEY(session_id) REFERENCES workout_sessions(id) ON DELETE CASCADE,
        FOREIGN KEY(exercise_id) REFERENCES exercises(id)
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS food_items (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER,
        is_custom INTEGER NOT NULL DEFAULT 0,
        name TEXT NOT NULL,
        brand TEXT,
        calories REAL,
        protein REAL,
        carbs REAL,
        fat REAL,
        fiber REAL,
        sugar REAL,
        serving_size REAL,
        serving_unit TEXT,
        barcode TEXT,
        created_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_food_items_name ON food_items(name);",
    """
    CREATE TABLE IF NOT EXISTS meals (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        name TEXT NOT NULL,
        type TEXT,
        date TEXT NOT NULL,
        time TEXT,
        created_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_meals_user_date ON meals(user_id, date);",
    """
    CREATE TABLE IF NOT EXISTS meal_food_items (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        meal_id INTEGER NOT NULL,
        food_item_id INTEGER NOT NULL,
        serving_size REAL,
        serving_unit TEXT,
        custom_serving_description TEXT,
        created_at TEXT NOT NULL,
        FOREIGN KEY(meal_id) REFERENCES meals(id) ON DELETE CASCADE,
        FOREIGN KEY(food_item_id) REFERENCES food_items(id)
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_meal_food_items_meal ON meal_food_items(meal_id);",
    """
    CREATE TABLE IF NOT EXISTS body_measurements (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        date TEXT NOT NULL,
        weight REAL,
        body_fat REAL,
        chest REAL,
        waist REAL,
        hips REAL,
        arms REAL,
        thighs REAL,
        notes TEXT,
        created_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_body_measurements_user_date ON body_measurements(user_id, date);",
    """
    CREATE TABLE IF NOT EXISTS progress_photos (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        date TEXT NOT NULL,
        photo_url TEXT NOT NULL,
        type TEXT,
        created_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS nutrition_goals (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        daily_calories INTEGER,
        protein_pct REAL,
        carbs_pct REAL,
        fat_pct REAL,
        protein_g REAL,
        carbs_g REAL,
        fat_g REAL,
        active INTEGER NOT NULL DEFAULT 1,
        created_at TEXT NOT NULL,
        FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_nutrition_goals_user_active ON nutrition_goals(user_id, active, created_at DESC);",
]


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


def init_app_db(db_path: Path) -> None:
    conn = connect(db_path)
    try:
        cur = conn.cursor()
        for statement in _SCHEMA:
            cur.execute(statement)
        conn.commit()
    finally:
        conn.close()


class Database:
    """Bounded pool of SQLite connections with an explicit open/close lifecycle."""

    def __init__(self, db_path: Path, pool_size: int = 10, timeout: float = 30.0) -> None:
        if pool_size < 1:
            raise ValueError("pool_size must be >= 1")
        self.db_path = Path(db_path)
        self.pool_size = pool_size
        self.timeout = timeout
        self._idle: "queue.LifoQueue[sqlite3.Connection]" = queue.LifoQueue(maxsize=pool_size)
        self._created = 0
        self._lock = threading.Lock()
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self) -> None:
        if self._open:
            return
        init_app_db(self.db_path)
        self._open = True
        logger.info("Database ready at %s (pool size %d)", self.db_path, self.pool_size)

    def close(self) -> None:
        with self._lock:
            self._open = False
            while True:
                try:
                    conn = self._idle.get_nowait()
                except queue.Empty:
                    break
                conn.close()
                self._created -= 1
        logger.info("Database connections closed")

    def _acquire(self) -> sqlite3.Connection:
        if not self._open:
            raise ServerError("Database is not open")
        try:
            return self._idle.get_nowait()
        except queue.Empty:
            pass
        with self._lock:
            if self._created < self.pool_size:
                self._created += 1
                try:
                    return connect(self.db_path)
                except sqlite3.Error:
                    self._created -= 1
                    raise
        try:
            return self._idle.get(timeout=self.timeout)
        except queue.Empty as exc:
            logger.error("Connection pool exhausted after %.1fs", self.timeout)
            raise ServerError() from exc

    def _release(self, conn: sqlite3.Connection) -> None:
        if not self._open:
            conn.close()
            with self._lock:
                self._created -= 1
            return
        self._idle.put_nowait(conn)

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        conn = self._acquire()
        try:
            yield conn
            conn.commit()
        except BaseException:
            conn.rollback()
            raise
        finally:
            self._release(conn)

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Like ``connection()`` but takes the write lock up front (``BEGIN IMMEDIATE``)."""
        with self.connection() as conn:
            conn.execute("BEGIN IMMEDIATE")
            yield conn


def get_db(request: Request) -> Database:
    return request.app.state.db
