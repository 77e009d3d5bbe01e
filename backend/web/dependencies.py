"""
FastAPI dependencies for the auth service.
"""
from __future__ import annotations

from typing import Optional

from backend.identity_access.supabase_auth import ProviderConfig, SupabaseAuthService
from backend.web.config import settings

# Global service instance (holds configuration only, no user state)
_auth_service: Optional[SupabaseAuthService] = None


def get_auth_service() -> SupabaseAuthService:
    """Return the process-wide Supabase auth adapter, created on first use."""
    global _auth_service
    if _auth_service is None:
        _auth_service = SupabaseAuthService(
            ProviderConfig(
                url=settings.SUPABASE_URL,
                anon_key=settings.SUPABASE_ANON_KEY,
                service_role_key=settings.SUPABASE_SERVICE_ROLE_KEY,
            )
        )
    return _auth_service
