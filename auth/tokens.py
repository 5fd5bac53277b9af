"""
auth/tokens.py -- Password hashing, JWT, and credential service helpers.

Security design decisions:
  JWT: python-jose with HS256. Tokens are signed with SECRET_KEY and carry
       id, username, role, issue time and expiry. The username is repeated
       as the standard "sub" claim. Verification returns None on any failure
       -- the dependency layer turns that into a 403. Nothing is stored
       server-side; signature and expiry alone decide validity.

  Passwords: bcrypt directly (no passlib wrapper). The cost factor is read
       from Settings.bcrypt_rounds. The _DUMMY_HASH constant lets
       authenticate_user() run bcrypt even for unknown usernames, so response
       time does not reveal whether a username exists.

  SECRET_KEY: sourced from core.config.get_settings(). The Settings class
       validates the key at startup: dev mode (DEBUG=true) auto-generates a
       random key with a warning; production mode refuses to start without one.

Layer rule: no imports from api/ or directory/. Import from core/ is allowed
-- core/ is the kernel and has no reverse dependencies.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from auth.models import MEMBER_ROLE, User
from auth.store import UsernameTakenError, UserStore
from core.config import get_settings

logger = logging.getLogger("staffdesk.auth")

# ---------------------------------------------------------------------------
# Config -- read once at module load via the lru_cache singleton
# ---------------------------------------------------------------------------

_settings = get_settings()

_ALGORITHM = "HS256"

# bcrypt only looks at the first 72 bytes; bcrypt>=4.1 raises instead of
# truncating, so cut the input here for both hash and verify.
_BCRYPT_MAX_BYTES = 72

# ---------------------------------------------------------------------------
# Password hashing
# ---------------------------------------------------------------------------


def _password_bytes(plain: str) -> bytes:
    return plain.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(plain: str) -> str:
    """Return a salted bcrypt hash of the given plaintext password."""
    salt = bcrypt.gensalt(rounds=_settings.bcrypt_rounds)
    return bcrypt.hashpw(_password_bytes(plain), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Return True if the plaintext password matches the bcrypt hash."""
    try:
        return bcrypt.checkpw(_password_bytes(plain), hashed.encode("utf-8"))
    except ValueError:
        # Malformed hash string
        return False


# Timing equalization dummy hash.
# Computed once at module load so the first login attempt is not measurably
# slower than subsequent ones.
_DUMMY_HASH: str = hash_password("staffdesk_timing_dummy")


# ---------------------------------------------------------------------------
# JWT encode / decode
# ---------------------------------------------------------------------------


def create_access_token(user_id: int, username: str, role: str, expire_seconds: int = 0) -> str:
    """Encode a signed JWT with user identity and expiry.

    Args:
        user_id:        Numeric user ID.
        username:       Username stored as the JWT subject claim.
        role:           User role ("admin" or "member").
        expire_seconds: Token lifetime in seconds. If 0 (default), uses
                        Settings.token_expire_seconds.
    """
    duration = expire_seconds if expire_seconds > 0 else _settings.token_expire_seconds
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "username": username,
        "role": role,
        "sub": username,
        "iat": now,
        "exp": now + timedelta(seconds=duration),
    }
    return jwt.encode(payload, _settings.secret_key, algorithm=_ALGORITHM)


def decode_access_token(token: str) -> dict | None:
    """Decode and verify a JWT. Returns the payload dict or None on any failure.

    Covers bad signature, malformed token, expired token, and tokens missing
    the identity claims this service issues.
    """
    try:
        payload = jwt.decode(token, _settings.secret_key, algorithms=[_ALGORITHM])
    except JWTError:
        return None
    if not isinstance(payload.get("id"), int) or isinstance(payload.get("id"), bool):
        return None
    if not isinstance(payload.get("username"), str) or not isinstance(payload.get("role"), str):
        return None
    if not isinstance(payload.get("exp"), int):
        return None
    return payload


# ---------------------------------------------------------------------------
# Credential service
# ---------------------------------------------------------------------------


def register_user(store: UserStore, username: str, password: str, role: str = MEMBER_ROLE) -> User:
    """Hash the password and store a new User.

    Raises auth.store.UsernameTakenError if the username already exists. The
    duplicate check runs before hashing so a conflict costs no bcrypt work.
    """
    if store.get_by_username(username) is not None:
        raise UsernameTakenError(username)
    user = User(username=username, hashed_password=hash_password(password), role=role)
    store.create_user(user)
    logger.info("User registered: %s (role=%s, id=%d)", user.username, user.role, user.id)
    return user


def authenticate_user(store: UserStore, username: str, password: str) -> User | None:
    """Authenticate a username/password login with timing equalization.

    Always runs bcrypt whether or not the user exists:
    - Unknown username: bcrypt runs against _DUMMY_HASH (same cost as real check)
    - Wrong password: bcrypt runs against the real hash (same cost)

    Returns the User on success, None on any failure. Callers must not tell
    the two failure cases apart in their response.
    """
    user = store.get_by_username(username)
    if user is None:
        # Equalize timing -- do NOT return early before running bcrypt
        verify_password(password, _DUMMY_HASH)
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user
