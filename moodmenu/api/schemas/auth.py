"""Pydantic schemas for authentication and user management endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field
from moodmenu.core.auth import Role

# --- Request Schemas ---


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: str = Field(..., min_length=1, max_length=255, description="Login email")
    password: str = Field(..., min_length=1, description="User password")


class CreateUserRequest(BaseModel):
    """Request schema for admin user creation."""

    email: str = Field(..., min_length=1, max_length=255, description="Login email (case-sensitive)")
    password: str = Field(..., min_length=1, max_length=128, description="Initial password")
    role: Role = Field(default=Role.USER, description="User role (defaults to user)")


# --- Response Schemas ---


class LoginResponse(BaseModel):
    """Response schema for user login."""

    message: str = Field(default="Login successful")
    email: str
    role: Role
    is_admin: bool


class LogoutResponse(BaseModel):
    message: str = Field(default="Logged out")


class AuthStatusResponse(BaseModel):
    """Response schema for the session status probe."""

    authenticated: bool
    email: str | None = None
    role: Role | None = None
    is_admin: bool = False


class UserResponse(BaseModel):
    """Response schema for user data; never carries the password hash."""

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User email")
    role: Role = Field(..., description="User role")
    is_admin: bool = Field(..., description="Whether the role is elevated")
    created_at: datetime = Field(..., description="Account creation timestamp")


class UsersResponse(BaseModel):
    users: list[UserResponse]
