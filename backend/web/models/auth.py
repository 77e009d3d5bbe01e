"""
Authentication request/response models.

Request fields are optional at the schema level so the routes can answer
missing fields with the `{error}` payload instead of a framework 422.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class SignUpRequest(BaseModel):
    """Signup body as sent by the EcoRoot client (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = None
    password: Optional[str] = Field(None, repr=False)
    user_type: Optional[str] = Field(None, alias="userType")
    # Not part of the client contract; checked only when a caller sends it.
    confirm_password: Optional[str] = Field(None, alias="confirmPassword", repr=False)


class SignInRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = Field(None, repr=False)


class PublicUser(BaseModel):
    """Normalized identity returned by /signup."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    user_type: Optional[str] = Field(None, alias="userType")

    @classmethod
    def from_provider(cls, user: Dict[str, Any]) -> "PublicUser":
        metadata = user.get("user_metadata") or {}
        return cls(
            id=str(user["id"]),
            email=user.get("email"),
            name=metadata.get("name"),
            user_type=metadata.get("userType"),
        )


class SignUpResponse(BaseModel):
    message: str = "Account created successfully"
    user: PublicUser


class SignInResponse(BaseModel):
    """Provider session and user, passed through unmodified."""

    message: str = "Signed in successfully"
    session: Optional[Dict[str, Any]] = None
    user: Optional[Dict[str, Any]] = None


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str
