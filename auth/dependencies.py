"""
auth/dependencies.py -- FastAPI Depends() helpers for authentication.

Only one auth method is accepted: an "Authorization: Bearer <token>" header
carrying a JWT issued by POST /login. The second whitespace-separated part of
the header is taken as the token; the scheme word is not checked.

authenticate() distinguishes two failures:
  401 -- the header is absent or has no token part.
  403 -- a token was presented but is malformed, wrongly signed, or expired.

require_role(role) wraps authenticate() and raises HTTP 403 unless the
token's role is exactly the required one. There is no role hierarchy.

Layer rule: no imports from api/ or directory/.
  auth/dependencies.py may import from fastapi (for Depends/HTTPException/Request)
  because this module is part of the FastAPI dependency injection system.
"""

from __future__ import annotations

from collections.abc import Callable

from fastapi import Depends, HTTPException, Request

from auth.models import ADMIN_ROLE, SessionUser
from auth.tokens import decode_access_token


def _bearer_token(request: Request) -> str | None:
    """Return the second part of the Authorization header, or None if there is none."""
    parts = request.headers.get("Authorization", "").split()
    if len(parts) < 2:
        return None
    return parts[1]


def authenticate(request: Request) -> SessionUser:
    """Require a valid bearer token and attach its identity to request.state.user.

    Use as a FastAPI dependency:
        @router.get("/protected")
        async def route(user: SessionUser = Depends(authenticate)): ...
    """
    token = _bearer_token(request)
    if token is None:
        raise HTTPException(
            status_code=401,
            detail={"code": "unauthorized", "message": "Authentication required."},
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(token)
    if payload is None:
        raise HTTPException(
            status_code=403,
            detail={"code": "invalid_token", "message": "Invalid or expired token."},
        )

    user = SessionUser(
        id=payload["id"],
        username=payload["username"],
        role=payload["role"],
        expires_at=payload["exp"],
    )
    request.state.user = user
    return user


def require_role(role: str) -> Callable[..., SessionUser]:
    """Build a dependency that admits only tokens whose role equals `role`.

    Use as a FastAPI dependency:
        @router.post("/admin-only")
        async def route(user: SessionUser = Depends(require_role("admin"))): ...
    """

    def _check_role(user: SessionUser = Depends(authenticate)) -> SessionUser:
        if user.role != role:
            raise HTTPException(
                status_code=403,
                detail={"code": "forbidden", "message": "Access denied: Insufficient privileges."},
            )
        return user

    return _check_role


require_admin = require_role(ADMIN_ROLE)
