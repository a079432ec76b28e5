# -*- coding: utf-8 -*-
"""Ownership checks for user-scoped resources.

Each owned entity is described once by the chain of parent tables that leads to a
``user_id`` column. ``load_owned`` walks that chain in a single query, so a row that
does not exist and a row that belongs to someone else are indistinguishable (404).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

from fastapi import Depends, Request

from .app_db import Database, get_db
from .auth.security import SessionData, require_session
from .errors import NotFoundError


@dataclass(frozen=True)
class OwnedEntity:
    table: str
    label: str
    # (foreign key on the previous table, parent table) pairs, child -> root.
    parents: Tuple[Tuple[str, str], ...] = ()

    def query(self) -> str:
        joins = []
        for idx, (fk, parent) in enumerate(self.parents):
            joins.append(f"JOIN {parent} t{idx + 1} ON t{idx + 1}.id = t{idx}.{fk}")
        owner = f"t{len(self.parents)}"
        return (
            f"SELECT t0.* FROM {self.table} t0 {' '.join(joins)} "
            f"WHERE t0.id = ? AND {owner}.user_id = ?"
        )


PROGRAM = OwnedEntity("workout_programs", "Workout program")
WORKOUT_DAY = OwnedEntity("workout_days", "Workout day", (("program_id", "workout_programs"),))
WORKOUT_SESSION = OwnedEntity("workout_sessions", "Workout session")
MEAL = OwnedEntity("meals", "Meal")


def load_owned(db: Database, entity: OwnedEntity, entity_id: Any, user_id: int) -> Dict[str, Any]:
    try:
        key = int(entity_id)
    except (TypeError, ValueError):
        raise NotFoundError(f"{entity.label} not found") from None
    with db.connection() as conn:
        row = conn.execute(entity.query(), (key, user_id)).fetchone()
    if not row:
        raise NotFoundError(f"{entity.label} not found")
    return dict(row)


def owned(entity: OwnedEntity, path_param: str) -> Callable[..., Dict[str, Any]]:
    """Dependency factory: resolve ``path_param`` to a row owned by the session user."""

    def _dependency(
        request: Request,
        session: SessionData = Depends(require_session),
        db: Database = Depends(get_db),
    ) -> Dict[str, Any]:
        return load_owned(db, entity, request.path_params.get(path_param), session.user_id)

    return _dependency
