"""
Authentication module data models.

Request and response bodies for the /api/auth endpoints.
"""

from typing import Optional
from pydantic import BaseModel, Field

from modules.users.models import User


class RegisterRequest(BaseModel):
    """
    Registration request.

    Fields are optional here so that missing values produce the service's
    400 message rather than a generic validation error.
    """

    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Plaintext password")


class LoginRequest(BaseModel):
    """
    Login request.

    A missing or null field is a failed lookup, not a validation error.
    """

    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Plaintext password")


class AuthResponse(BaseModel):
    """A user together with a freshly activated session token."""

    user: User
    token: str


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
