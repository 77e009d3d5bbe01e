"""
HTTP client for the EcoRoot auth endpoints.

Design:
- One POST per call, no retries; the caller decides what to show.
- Every request carries the public anon key as bearer credential.
- Transport failures and unreadable bodies raise `NetworkError`; HTTP error
  statuses are returned as `ApiResponse` so the form can surface the server's
  `error` message.

Security: Never log passwords. The anon key is public by design but is still
kept out of log lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import os

import httpx


class NetworkError(Exception):
    """The request did not produce a readable response."""


@dataclass(frozen=True)
class ClientConfig:
    functions_base_url: str  # e.g. https://<project>.supabase.co/functions/v1/server
    public_anon_key: str
    timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "ClientConfig":
        return cls(
            functions_base_url=os.getenv("ECOROOT_FUNCTIONS_URL", "http://localhost:8000"),
            public_anon_key=os.getenv("ECOROOT_PUBLIC_ANON_KEY", ""),
        )

    def endpoint(self, path: str) -> str:
        return f"{self.functions_base_url.rstrip('/')}/{path.lstrip('/')}"


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def error_message(self, fallback: str) -> str:
        message = self.data.get("error")
        return message if isinstance(message, str) and message else fallback


class AuthApiClient:
    def __init__(self, cfg: ClientConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.cfg = cfg
        # Injectable transport keeps tests off the network
        self._transport = transport

    async def sign_up(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        user_type: str,
    ) -> ApiResponse:
        return await self._post(
            "signup",
            {
                "firstName": first_name,
                "lastName": last_name,
                "email": email,
                "password": password,
                "userType": user_type,
            },
        )

    async def sign_in(self, *, email: str, password: str) -> ApiResponse:
        return await self._post("signin", {"email": email, "password": password})

    async def _post(self, path: str, body: Dict[str, str]) -> ApiResponse:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.cfg.public_anon_key}",
        }
        try:
            async with httpx.AsyncClient(timeout=self.cfg.timeout, transport=self._transport) as client:
                response = await client.post(self.cfg.endpoint(path), json=body, headers=headers)
        except httpx.HTTPError as exc:
            raise NetworkError(f"{path}: {exc.__class__.__name__}") from exc
        try:
            data = response.json()
        except ValueError as exc:
            raise NetworkError(f"{path}: unreadable response body") from exc
        return ApiResponse(status_code=response.status_code, data=data if isinstance(data, dict) else {})
