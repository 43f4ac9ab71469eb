"""Authentication schemas."""

from datetime import datetime
from pydantic import BaseModel, EmailStr, Field


class SignupRequest(BaseModel):
    """User registration request."""

    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72, description="Password must be 6-72 characters")
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)


class LoginRequest(BaseModel):
    """User login request."""

    email: EmailStr
    password: str = Field(..., max_length=72)


class RefreshTokenRequest(BaseModel):
    """Exchange a refresh token for a new token pair."""

    refresh_token: str


class UserResponse(BaseModel):
    """Public user profile."""

    id: str
    email: str
    first_name: str
    last_name: str
    created_at: datetime


class TokenResponse(BaseModel):
    """Authentication token response."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse
