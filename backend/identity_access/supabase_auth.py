"""
Supabase Auth adapter for account creation and password sign-in.

Design:
- Framework-agnostic, called from the web routes.
- A fresh SDK client is created per call so no user session is ever cached
  in-process between requests.
- SDK auth errors are converted into `IdentityProviderError`; any other
  exception propagates and the caller treats it as an internal error.

Security:
- The Service Role key is used only for the admin user-creation call.
- Do not log credentials or tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict

import structlog
from supabase import AuthError, ClientOptions, create_client

logger = structlog.get_logger()


class IdentityProviderError(Exception):
    """The provider rejected the request (bad credentials, duplicate account, weak password)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class ProviderConfig:
    url: str  # e.g. https://<project>.supabase.co
    anon_key: str  # public key, used for password sign-in
    service_role_key: str  # privileged key, used for admin user creation


def to_payload(value: Any) -> Any:
    """Convert an SDK model into plain JSON-compatible data.

    The SDK returns pydantic models; dicts (and None) pass through unchanged.
    """
    if value is None or isinstance(value, (dict, list, str, int, float, bool)):
        return value
    dump = getattr(value, "model_dump", None)
    if callable(dump):
        return dump(mode="json")
    return dict(vars(value))


def _provider_message(exc: AuthError) -> str:
    message = getattr(exc, "message", None) or str(exc)
    return message or "Authentication provider rejected the request"


class SupabaseAuthService:
    """Thin wrapper around the Supabase Auth SDK."""

    def __init__(self, cfg: ProviderConfig, *, client_factory: Callable[..., Any] = create_client) -> None:
        self.cfg = cfg
        self._client_factory = client_factory

    def _client(self, key: str) -> Any:
        if not self.cfg.url or not key:
            raise RuntimeError("supabase_not_configured")
        options = ClientOptions(auto_refresh_token=False, persist_session=False)
        return self._client_factory(self.cfg.url, key, options=options)

    def create_user(self, *, email: str, password: str, metadata: Dict[str, str]) -> Dict[str, Any]:
        """Create a confirmed user through the admin API and return the user payload.

        Email confirmation is pre-set because no mail server is configured.
        """
        client = self._client(self.cfg.service_role_key)
        try:
            response = client.auth.admin.create_user(
                {
                    "email": email,
                    "password": password,
                    "user_metadata": dict(metadata),
                    "email_confirm": True,
                }
            )
        except AuthError as exc:
            raise IdentityProviderError(_provider_message(exc)) from exc
        user = to_payload(getattr(response, "user", None))
        if not isinstance(user, dict):
            raise RuntimeError("user_missing_in_provider_response")
        return user

    def sign_in_with_password(self, *, email: str, password: str) -> Dict[str, Any]:
        """Open a provider session; returns `{"user": ..., "session": ...}` as plain data."""
        client = self._client(self.cfg.anon_key)
        try:
            response = client.auth.sign_in_with_password({"email": email, "password": password})
        except AuthError as exc:
            raise IdentityProviderError(_provider_message(exc)) from exc
        return {
            "user": to_payload(getattr(response, "user", None)),
            "session": to_payload(getattr(response, "session", None)),
        }


__all__ = ["IdentityProviderError", "ProviderConfig", "SupabaseAuthService", "to_payload"]
