"""
Pytest configuration for EcoRoot tests.

Why: Force AnyIO to use the asyncio backend, provide test settings before the
app modules are imported, and offer in-memory fakes for the identity provider
(server tests) and the auth API (client tests).
"""
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

# Test settings must exist before backend.web.config is imported
os.environ["ENVIRONMENT"] = "test"
os.environ["SUPABASE_URL"] = "https://test.supabase.co"
os.environ["SUPABASE_ANON_KEY"] = "test_anon_key"
os.environ["SUPABASE_SERVICE_ROLE_KEY"] = "test_service_role_key"
os.environ["API_PREFIX"] = ""

REPO_ROOT = Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from app.services.auth_api import ApiResponse  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


# --- Server side ---------------------------------------------------------------


class FakeAuthService:
    """Stand-in for SupabaseAuthService; records calls, never touches the network."""

    def __init__(self) -> None:
        self.created: List[Dict[str, Any]] = []
        self.sign_ins: List[Dict[str, str]] = []
        self.create_error: Optional[Exception] = None
        self.sign_in_error: Optional[Exception] = None
        self.session: Dict[str, Any] = {
            "access_token": "access-abc",
            "refresh_token": "refresh-xyz",
            "token_type": "bearer",
            "expires_in": 3600,
        }

    def create_user(self, *, email: str, password: str, metadata: Dict[str, str]) -> Dict[str, Any]:
        self.created.append({"email": email, "password": password, "metadata": dict(metadata)})
        if self.create_error is not None:
            raise self.create_error
        return {
            "id": "7d0f1b3c-0000-4000-8000-000000000001",
            "email": email,
            "aud": "authenticated",
            "user_metadata": dict(metadata),
        }

    def sign_in_with_password(self, *, email: str, password: str) -> Dict[str, Any]:
        self.sign_ins.append({"email": email, "password": password})
        if self.sign_in_error is not None:
            raise self.sign_in_error
        return {
            "user": {
                "id": "7d0f1b3c-0000-4000-8000-000000000001",
                "email": email,
                "aud": "authenticated",
                "user_metadata": {"name": "John Doe", "firstName": "John", "lastName": "Doe", "userType": "student"},
                "app_metadata": {"provider": "email"},
            },
            "session": dict(self.session),
        }


@pytest.fixture
def fake_auth() -> FakeAuthService:
    return FakeAuthService()


@pytest.fixture
def api_app(fake_auth: FakeAuthService):
    """The FastAPI app with the provider adapter replaced by `fake_auth`."""
    from backend.web import main
    from backend.web.dependencies import get_auth_service

    main.app.dependency_overrides[get_auth_service] = lambda: fake_auth
    try:
        yield main.app
    finally:
        main.app.dependency_overrides.clear()


# --- Client side ---------------------------------------------------------------


class FakeAuthApi:
    """Stand-in for AuthApiClient with scripted responses."""

    def __init__(self) -> None:
        self.sign_up_calls: List[Dict[str, str]] = []
        self.sign_in_calls: List[Dict[str, str]] = []
        self.sign_up_response: Any = ApiResponse(
            200,
            {
                "message": "Account created successfully",
                "user": {"id": "u-1", "email": "john@example.com", "name": "John Doe", "userType": "student"},
            },
        )
        self.sign_in_response: Any = ApiResponse(
            200,
            {
                "message": "Signed in successfully",
                "session": {"access_token": "access-abc"},
                "user": {
                    "id": "u-1",
                    "email": "john@example.com",
                    "user_metadata": {"name": "John Doe", "userType": "student"},
                },
            },
        )

    async def sign_up(self, **kwargs: str) -> ApiResponse:
        self.sign_up_calls.append(kwargs)
        if isinstance(self.sign_up_response, Exception):
            raise self.sign_up_response
        return self.sign_up_response

    async def sign_in(self, **kwargs: str) -> ApiResponse:
        self.sign_in_calls.append(kwargs)
        if isinstance(self.sign_in_response, Exception):
            raise self.sign_in_response
        return self.sign_in_response


@pytest.fixture
def fake_api() -> FakeAuthApi:
    return FakeAuthApi()


@pytest.fixture
def no_sleep():
    """Replacement for asyncio.sleep that records the requested delays."""
    delays: List[float] = []

    async def _sleep(seconds: float) -> None:
        delays.append(seconds)

    _sleep.delays = delays  # type: ignore[attr-defined]
    return _sleep

