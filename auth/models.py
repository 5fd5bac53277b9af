"""
auth/models.py -- Domain dataclasses for authentication entities.

Pattern: Data class (pure data container, zero logic). Stores and routes do
the work; these only own shape.

Layer rule: no imports from api/, directory/, or core/.
"""

from __future__ import annotations

from dataclasses import dataclass

ADMIN_ROLE = "admin"
MEMBER_ROLE = "member"


@dataclass
class User:
    """A registered account.

    Users are created at registration or by the startup seed and are never
    updated or deleted. id is None until UserStore.create_user() assigns one.
    """

    username: str
    hashed_password: str
    role: str = MEMBER_ROLE  # "admin" | "member"
    id: int | None = None
    created_at: str = ""  # ISO 8601, set by store on insert


@dataclass(frozen=True)
class SessionUser:
    """Identity decoded from a verified access token.

    Built purely from token claims -- the user store is not consulted, so a
    token stays valid until it expires.
    """

    id: int
    username: str
    role: str
    expires_at: int  # "exp" claim, seconds since epoch
