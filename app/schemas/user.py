"""
Pydantic schemas for User authentication and registration.
"""

from pydantic import EmailStr, Field, field_validator
from typing import List, Optional

from app.schemas.base import CamelModel, RequestModel


class UserRegisterRequest(RequestModel):
    """Request schema for self-registration."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(
        ...,
        min_length=5,
        max_length=72,  # bcrypt limit
        description="Password must be 5-72 characters"
    )
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr


class UserCreateRequest(UserRegisterRequest):
    """Request schema for admins adding a user; the new user may be an admin."""
    is_admin: bool = False


class UserUpdateRequest(RequestModel):
    """Partial update of a user's own profile."""
    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    password: Optional[str] = Field(None, min_length=5, max_length=72)
    email: Optional[EmailStr] = None

    @field_validator("first_name", "last_name", "password", "email")
    @classmethod
    def not_null(cls, v):
        # Every column behind these fields is NOT NULL
        if v is None:
            raise ValueError("may not be null")
        return v


class UserAuthRequest(RequestModel):
    """Request schema for POST /auth/token."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)


class TokenResponse(CamelModel):
    """JWT token response."""
    token: str


class TokenPayload(CamelModel):
    """Identity carried by a verified token."""
    username: str
    is_admin: bool = False


class AppliedJob(CamelModel):
    id: int
    title: str
    company_handle: str


class UserResponse(CamelModel):
    """User profile response (no password)."""
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserDetailResponse(UserResponse):
    jobs: List[AppliedJob] = []


class UserEnvelope(CamelModel):
    user: UserResponse


class UserDetailEnvelope(CamelModel):
    user: UserDetailResponse


class UserTokenResponse(CamelModel):
    user: UserResponse
    token: str


class UserListResponse(CamelModel):
    users: List[UserResponse]


class UserDeletedResponse(CamelModel):
    deleted: str


class ApplicationResponse(CamelModel):
    applied: int
