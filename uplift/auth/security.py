# -*- coding: utf-8 -*-
"""Auth — password hashing + server-side sessions + FastAPI helpers."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import os
import secrets
from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import Depends, Request, Response

from ..app_db import Database, get_db
from ..config import Settings
from ..errors import AuthError, NotFoundError
from .storage import create_session, delete_session, get_session, get_user_by_id

SESSION_COOKIE_NAME = "uplift_sid"

# Password hashing (stdlib pbkdf2_hmac).
_PBKDF2_ALG = "sha256"
_PBKDF2_ITERATIONS = 200_000


@dataclass(frozen=True)
class SessionData:
    session_id: str
    user_id: int
    username: str


def _b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _b64url_decode(data: str) -> bytes:
    pad = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode((data + pad).encode("ascii"))


def hash_password(password: str, *, iterations: int = _PBKDF2_ITERATIONS) -> str:
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac(_PBKDF2_ALG, password.encode("utf-8"), salt, iterations)
    return f"pbkdf2_{_PBKDF2_ALG}${iterations}${_b64url_encode(salt)}${_b64url_encode(dk)}"


def verify_password(password: str, password_hash: str) -> bool:
    try:
        scheme, iter_s, salt_b64, dk_b64 = password_hash.split("$", 3)
        if not scheme.startswith("pbkdf2_"):
            return False
        alg = scheme.split("_", 1)[1]
        salt = _b64url_decode(salt_b64)
        expected = _b64url_decode(dk_b64)
        actual = hashlib.pbkdf2_hmac(alg, password.encode("utf-8"), salt, int(iter_s))
    except (ValueError, binascii.Error):
        # Malformed hash or unknown digest name.
        return False
    return hmac.compare_digest(actual, expected)


def _settings(request: Request) -> Settings:
    return request.app.state.settings


def _session_key(token: str, secret: str) -> str:
    # Only the HMAC of the cookie token is stored, so a leaked table cannot be replayed.
    return hmac.new(secret.encode("utf-8"), token.encode("utf-8"), hashlib.sha256).hexdigest()


def get_token_from_request(request: Request) -> Optional[str]:
    cookie = request.cookies.get(SESSION_COOKIE_NAME)
    return cookie or None


def start_session(request: Request, response: Response, db: Database, user: Dict[str, Any]) -> SessionData:
    cfg = _settings(request)
    token = secrets.token_urlsafe(32)
    session_id = _session_key(token, cfg.session_secret)
    create_session(
        db,
        session_id=session_id,
        user_id=int(user["id"]),
        username=str(user["username"]),
        ttl_days=cfg.session_ttl_days,
    )
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        httponly=True,
        secure=bool(cfg.cookie_secure),
        samesite="lax",
        max_age=int(cfg.session_ttl_days) * 24 * 60 * 60,
        path="/",
    )
    return SessionData(session_id=session_id, user_id=int(user["id"]), username=str(user["username"]))


def end_session(request: Request, response: Response, db: Database, *, clear_cookie: bool = True) -> bool:
    """Destroy the session carried by the request, if any. Returns True when a row was removed."""
    token = get_token_from_request(request)
    removed = False
    if token:
        removed = delete_session(db, _session_key(token, _settings(request).session_secret))
    if clear_cookie:
        response.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return removed


def require_session(request: Request, db: Database = Depends(get_db)) -> SessionData:
    cached = getattr(request.state, "session", None)
    if cached:
        return cached

    token = get_token_from_request(request)
    if not token:
        raise AuthError("Authentication required")
    row = get_session(db, _session_key(token, _settings(request).session_secret))
    if not row:
        raise AuthError("Authentication required")

    session = SessionData(session_id=row["id"], user_id=int(row["user_id"]), username=row["username"])
    request.state.session = session
    return session


def get_current_user(
    session: SessionData = Depends(require_session),
    db: Database = Depends(get_db),
) -> Dict[str, Any]:
    user = get_user_by_id(db, session.user_id)
    if not user:
        raise NotFoundError("User not found")
    return user
