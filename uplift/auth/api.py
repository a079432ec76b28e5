# -*- coding: utf-8 -*-
"""Auth — API endpoints."""

from __future__ import annotations

import logging
import sqlite3

from fastapi import APIRouter, Depends, Request, Response

from ..app_db import Database, get_db
from ..errors import AuthError, ConflictError, SessionError
from .models import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    UserPublic,
    profile_complete,
    user_public,
)
from .security import end_session, get_current_user, hash_password, start_session, verify_password
from .storage import create_user, get_user_by_email, get_user_by_username

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", response_model=RegisterResponse, status_code=201, summary="Register a new user")
def register(body: RegisterRequest, request: Request, response: Response, db: Database = Depends(get_db)):
    if get_user_by_username(db, body.username):
        raise ConflictError("Username is already taken")
    if get_user_by_email(db, body.email):
        raise ConflictError("Email is already registered")

    try:
        user = create_user(
            db,
            username=body.username,
            email=body.email,
            password_hash=hash_password(body.password),
        )
    except sqlite3.IntegrityError as exc:
        # Lost a race with a concurrent registration for the same username/email.
        raise ConflictError("Username or email is already registered") from exc

    start_session(request, response, db, user)
    logger.info("Registered user %s (id=%s)", user["username"], user["id"])
    return RegisterResponse(id=user["id"], username=user["username"], email=user["email"])


@router.post("/login", response_model=LoginResponse, summary="Login")
def login(body: LoginRequest, request: Request, response: Response, db: Database = Depends(get_db)):
    user = get_user_by_username(db, body.username)
    if not user or not verify_password(body.password, user["password_hash"]):
        logger.warning("Failed login for username %r", body.username)
        raise AuthError("Invalid username or password")

    # Never reuse a session id across logins.
    end_session(request, response, db, clear_cookie=False)
    start_session(request, response, db, user)
    return LoginResponse(
        id=user["id"],
        username=user["username"],
        email=user["email"],
        profile_complete=profile_complete(user),
    )


@router.post("/logout", response_model=MessageResponse, summary="Logout")
def logout(request: Request, response: Response, db: Database = Depends(get_db)):
    try:
        end_session(request, response, db)
    except sqlite3.Error as exc:
        logger.error("Session destroy failed", exc_info=exc)
        raise SessionError("Failed to logout") from exc
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserPublic, summary="Get current user")
def me(user: dict = Depends(get_current_user)):
    return user_public(user)
