"""
api/routes/v1/auth.py -- Registration, login, and token check endpoints.

Routes:
  POST /register   -- create a user account (public)
  POST /login      -- password login; returns a bearer token (public)
  GET  /protected  -- echo the caller's token identity (requires auth)

Security:
  authenticate_user() provides timing equalization -- use it, never inline
  get_by_username() + verify_password().
  Wrong username and wrong password produce byte-identical 400 responses.
  Cache-Control: no-store on login responses.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from api.models import (
    LoginRequest,
    LoginResponse,
    ProtectedResponse,
    RegisterRequest,
    RegisterResponse,
    SessionUserResponse,
    UserResponse,
)
from auth.dependencies import authenticate
from auth.models import SessionUser
from auth.store import UsernameTakenError, UserStore
from auth.tokens import authenticate_user, create_access_token, register_user
from core.config import get_settings

logger = logging.getLogger("staffdesk.api.auth")

# Auth policy:
# - POST /register:   public -- self-service account creation
# - POST /login:      public -- login endpoint must be unauthenticated
# - GET  /protected:  requires auth (authenticate)
router = APIRouter()

_NO_STORE = {"Cache-Control": "no-store"}


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(request: Request, body: Optional[RegisterRequest] = None) -> RegisterResponse:
    """Create a user account. role defaults to "member"."""
    body = body or RegisterRequest()
    if not body.username or not body.password:
        raise HTTPException(
            status_code=400,
            detail={"code": "missing_fields", "message": "Username and password are required."},
        )

    user_store: UserStore = request.app.state.user_store
    try:
        user = register_user(user_store, body.username, body.password, body.role.value)
    except UsernameTakenError as exc:
        raise HTTPException(
            status_code=409,
            detail={"code": "conflict", "message": "Username already exists."},
        ) from exc

    return RegisterResponse(
        message="User registered successfully!",
        user=UserResponse(id=user.id, username=user.username, role=user.role),
    )


@router.post("/login", response_model=LoginResponse)
async def login(request: Request, body: Optional[LoginRequest] = None) -> JSONResponse:
    """Authenticate with username and password; return a signed bearer token.

    Returns the same generic error for unknown username, wrong password, and
    missing fields ("bad_credentials") to avoid leaking username existence.
    """
    body = body or LoginRequest()
    user_store: UserStore = request.app.state.user_store
    user = None
    if body.username and body.password:
        user = authenticate_user(user_store, body.username, body.password)
    if user is None:
        logger.warning("Failed login for username=%r", body.username)
        raise HTTPException(
            status_code=400,
            detail={"code": "bad_credentials", "message": "Invalid credentials."},
            headers=_NO_STORE,
        )

    expires_in = get_settings().token_expire_seconds
    token = create_access_token(user.id, user.username, user.role, expire_seconds=expires_in)
    return JSONResponse(
        status_code=200,
        content=LoginResponse(
            message="Login successful!",
            token=token,
            token_type="bearer",  # noqa: S106 # nosec B106 -- OAuth token type, not a password
            expires_in=expires_in,
        ).model_dump(),
        headers=_NO_STORE,
    )


@router.get("/protected", response_model=ProtectedResponse)
async def protected(current_user: SessionUser = Depends(authenticate)) -> ProtectedResponse:
    """Return a greeting plus the identity decoded from the caller's token."""
    return ProtectedResponse(
        message=f"Welcome, {current_user.username}! You have access to this protected data.",
        user=SessionUserResponse.from_session(current_user),
    )
