"""
Shared authentication utilities.

Why:
    Every auth route must be called with a bearer credential identifying the
    calling application (the public anon key). Keeping the check in one
    dependency avoids duplicating it per route.
"""

from __future__ import annotations

import secrets
from typing import Optional

from fastapi import Request

from backend.web.config import settings


class AppCredentialError(Exception):
    """The request did not carry an acceptable application credential."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an `Authorization: Bearer <token>` header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None


def require_app_credential(request: Request) -> str:
    """FastAPI dependency: accept the configured anon (or service role) key.

    Without any configured key (local development) a non-empty bearer is
    enough.
    """
    token = bearer_token(request.headers.get("Authorization"))
    if not token:
        raise AppCredentialError("Missing authorization header")
    accepted = [k for k in (settings.SUPABASE_ANON_KEY, settings.SUPABASE_SERVICE_ROLE_KEY) if k]
    if accepted and not any(secrets.compare_digest(token, key) for key in accepted):
        raise AppCredentialError("Invalid authorization credential")
    return token
