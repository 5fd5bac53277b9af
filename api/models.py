"""
API request and response models for StaffDesk REST endpoints.

These Pydantic v2 models define the HTTP transport contract for the API layer.
They are intentionally separate from the dataclasses in auth/models.py and
directory/models.py, which own the internal domain representation. Route
handlers map between the two.

Request bodies declare their required fields as Optional: presence is checked
in the route handlers so a missing field yields the endpoint's own 400 message
(and, for PUT /employees/{id}, so an unknown id is reported as 404 first).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from auth.models import SessionUser
from directory.models import Employee

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class RoleEnum(str, Enum):
    admin = "admin"
    member = "member"


# ---------------------------------------------------------------------------
# Auth -- request models
# ---------------------------------------------------------------------------


class RegisterRequest(BaseModel):
    """Request body for POST /register. role defaults to member."""

    username: Optional[str] = None
    password: Optional[str] = None
    role: RoleEnum = RoleEnum.member


class LoginRequest(BaseModel):
    """Request body for POST /login."""

    username: Optional[str] = None
    password: Optional[str] = None


# ---------------------------------------------------------------------------
# Auth -- response models
# ---------------------------------------------------------------------------


class UserResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    role: str


class RegisterResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    token: str
    token_type: str = "bearer"
    expires_in: int


class SessionUserResponse(BaseModel):
    """Decoded token identity echoed back by GET /protected."""

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    role: str
    exp: int

    @classmethod
    def from_session(cls, user: SessionUser) -> "SessionUserResponse":
        return cls(id=user.id, username=user.username, role=user.role, exp=user.expires_at)


class ProtectedResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    user: SessionUserResponse


# ---------------------------------------------------------------------------
# Employees
# ---------------------------------------------------------------------------


class EmployeeIn(BaseModel):
    """Request body for POST /employees and PUT /employees/{id}."""

    name: Optional[str] = None
    position: Optional[str] = None
    email: Optional[str] = None

    def is_complete(self) -> bool:
        """True when every field is present and non-empty."""
        return bool(self.name and self.position and self.email)


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    position: str
    email: str

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeResponse":
        return cls(id=employee.id, name=employee.name, position=employee.position, email=employee.email)


class EmployeeMutationResponse(BaseModel):
    """Response for POST /employees and PUT /employees/{id}."""

    model_config = ConfigDict(frozen=True)

    message: str
    employee: EmployeeResponse


class MessageResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str


# ---------------------------------------------------------------------------
# Errors and health
# ---------------------------------------------------------------------------


class ErrorDetail(BaseModel):
    """Machine-readable error payload."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: Optional[str] = None


class ErrorResponse(BaseModel):
    """Top-level error envelope returned on 4xx/5xx responses."""

    model_config = ConfigDict(frozen=True)

    error: ErrorDetail


class HealthResponse(BaseModel):
    """Response for GET /health."""

    model_config = ConfigDict(frozen=True)

    status: str = "ok"
    version: str
