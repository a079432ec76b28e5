# -*- coding: utf-8 -*-
"""Error taxonomy + FastAPI exception handlers.

Every error leaves the API as ``{"message": ...}``; validation failures also carry
an ``errors`` map of field name -> list of messages.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "An error occurred"


class ValidationError(HTTPException):
    def __init__(self, message: str = "Invalid input", errors: Optional[Dict[str, List[str]]] = None) -> None:
        super().__init__(status_code=400, detail=message)
        self.errors = errors or {}


class ConflictError(HTTPException):
    def __init__(self, message: str) -> None:
        super().__init__(status_code=400, detail=message)


class AuthError(HTTPException):
    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(status_code=401, detail=message)


class NotFoundError(HTTPException):
    def __init__(self, message: str = "Not found") -> None:
        super().__init__(status_code=404, detail=message)


class SessionError(HTTPException):
    def __init__(self, message: str = "Failed to logout") -> None:
        super().__init__(status_code=500, detail=message)


class ServerError(HTTPException):
    def __init__(self, message: str = GENERIC_MESSAGE) -> None:
        super().__init__(status_code=500, detail=message)


def _field_name(loc: Any) -> str:
    # ("body", "age") -> "age"; ("query", "date") -> "date"; ("body",) -> "body"
    parts = [str(p) for p in (loc or ())]
    if len(parts) > 1 and parts[0] in {"body", "query", "path", "header", "cookie"}:
        parts = parts[1:]
    return ".".join(parts) or "body"


def field_errors(raw_errors: List[Dict[str, Any]]) -> Dict[str, List[str]]:
    out: Dict[str, List[str]] = {}
    for err in raw_errors:
        out.setdefault(_field_name(err.get("loc")), []).append(str(err.get("msg") or "Invalid value"))
    return out


def _payload(message: str, errors: Optional[Dict[str, List[str]]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"message": message}
    if errors:
        body["errors"] = errors
    return body


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=_payload(str(exc.detail), exc.errors))

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content=_payload("Invalid input", field_errors(list(exc.errors()))))

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=_payload(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(sqlite3.Error)
    async def _database_error(request: Request, exc: sqlite3.Error) -> JSONResponse:
        logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content=_payload(GENERIC_MESSAGE))
