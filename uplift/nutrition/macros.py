# -*- coding: utf-8 -*-
"""Nutrition domain — macro arithmetic.

Plain functions over dicts so both the HTTP layer and the CLI/tests can use them
without a database.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

MACROS = ("calories", "protein", "carbs", "fat")

# kcal per gram
KCAL_PER_GRAM = {"protein": 4.0, "carbs": 4.0, "fat": 9.0}

DEFAULT_GOAL: Dict[str, Any] = {
    "id": None,
    "user_id": None,
    "daily_calories": 2200,
    "protein_pct": 30.0,
    "carbs_pct": 40.0,
    "fat_pct": 30.0,
    "protein_g": None,
    "carbs_g": None,
    "fat_g": None,
    "active": True,
    "created_at": None,
    "is_default": True,
}


def _zero() -> Dict[str, float]:
    return {k: 0.0 for k in MACROS}


def _rounded(values: Mapping[str, float]) -> Dict[str, float]:
    return {k: round(float(values.get(k) or 0.0), 1) for k in MACROS}


def compute_totals(items: Iterable[Mapping[str, Any]]) -> Dict[str, float]:
    """Sum nutrients over meal lines; each line counts ``serving_size`` servings (1 if unset)."""
    totals = _zero()
    for item in items:
        servings = item.get("serving_size")
        servings = 1.0 if servings is None else float(servings)
        for key in MACROS:
            totals[key] += float(item.get(key) or 0.0) * servings
    return _rounded(totals)


def add_totals(a: Mapping[str, float], b: Mapping[str, float]) -> Dict[str, float]:
    return _rounded({k: float(a.get(k) or 0.0) + float(b.get(k) or 0.0) for k in MACROS})


def goal_targets(goal: Mapping[str, Any]) -> Dict[str, float]:
    """Gram targets from the goal; a missing gram field falls back to its percentage."""
    calories = float(goal.get("daily_calories") or 0.0)
    targets: Dict[str, float] = {"calories": calories}
    for key in ("protein", "carbs", "fat"):
        grams: Optional[float] = goal.get(f"{key}_g")
        if grams is None:
            pct = float(goal.get(f"{key}_pct") or 0.0)
            grams = calories * pct / 100.0 / KCAL_PER_GRAM[key]
        targets[key] = float(grams)
    return _rounded(targets)


def remaining(consumed: Mapping[str, float], targets: Mapping[str, float]) -> Dict[str, float]:
    return _rounded({k: max(0.0, float(targets.get(k) or 0.0) - float(consumed.get(k) or 0.0)) for k in MACROS})


def adherence(consumed: Mapping[str, float], targets: Mapping[str, float]) -> Dict[str, float]:
    out: Dict[str, float] = {}
    for key in MACROS:
        target = float(targets.get(key) or 0.0)
        if target <= 0:
            out[key] = 0.0
            continue
        out[key] = min(100.0, float(consumed.get(key) or 0.0) / target * 100.0)
    return _rounded(out)
