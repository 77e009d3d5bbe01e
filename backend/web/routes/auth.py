"""
Authentication routes: account creation and password sign-in.

Why:
    The browser client never talks to the identity provider directly. These
    stateless routes validate the request, call the provider through
    `SupabaseAuthService` and map the outcome to `{error}` payloads with
    matching status codes.

Error mapping:
    - invalid input / provider rejection -> 400 with a readable message
    - anything unexpected -> 500 "Internal server error" (details only in logs)
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import structlog

from backend.identity_access.domain import ACCOUNT_TYPES, display_name
from backend.identity_access.supabase_auth import IdentityProviderError, SupabaseAuthService
from backend.web.auth_utils import require_app_credential
from backend.web.dependencies import get_auth_service
from backend.web.models.auth import (
    ErrorResponse,
    PublicUser,
    SignInRequest,
    SignInResponse,
    SignUpRequest,
    SignUpResponse,
)


auth_router = APIRouter(tags=["Auth"], dependencies=[Depends(require_app_credential)])
logger = structlog.get_logger()

INTERNAL_ERROR = "Internal server error"

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@auth_router.post("/signup", response_model=SignUpResponse, responses=_ERROR_RESPONSES)
def signup(
    request: Request,
    payload: SignUpRequest,
    auth: SupabaseAuthService = Depends(get_auth_service),
):
    """
    Create a confirmed account for a student or college.

    Behavior:
        - Requires firstName, lastName, email, password and userType.
        - userType must be one of ACCOUNT_TYPES.
        - An optional confirmPassword must match password.
        - Email confirmation is pre-set on the provider (no mail server).
    """
    logger.info(
        "signup_attempt",
        email=payload.email,
        user_type=payload.user_type,
        ip=_client_ip(request),
    )
    required = (payload.first_name, payload.last_name, payload.email, payload.password, payload.user_type)
    if not all(required):
        return _error(400, "All fields are required")
    if payload.user_type not in ACCOUNT_TYPES:
        return _error(400, "Invalid user type. Must be student or college.")
    if payload.confirm_password is not None and payload.confirm_password != payload.password:
        return _error(400, "Passwords do not match")

    metadata = {
        "name": display_name(payload.first_name, payload.last_name),
        "firstName": payload.first_name,
        "lastName": payload.last_name,
        "userType": payload.user_type,
    }
    try:
        user = auth.create_user(email=payload.email, password=payload.password, metadata=metadata)
        body = SignUpResponse(user=PublicUser.from_provider(user))
    except IdentityProviderError as exc:
        logger.warning("signup_rejected", email=payload.email, error=exc.message)
        return _error(400, exc.message)
    except Exception:
        logger.exception("signup_error", email=payload.email)
        return _error(500, INTERNAL_ERROR)

    logger.info("signup_succeeded", user_id=body.user.id, user_type=body.user.user_type)
    return body


@auth_router.post("/signin", response_model=SignInResponse, responses=_ERROR_RESPONSES)
def signin(
    request: Request,
    payload: SignInRequest,
    auth: SupabaseAuthService = Depends(get_auth_service),
):
    """
    Open a provider session with email and password.

    The provider's session and user objects are returned unmodified.
    """
    logger.info("signin_attempt", email=payload.email, ip=_client_ip(request))
    if not payload.email or not payload.password:
        return _error(400, "Email and password are required")

    try:
        result = auth.sign_in_with_password(email=payload.email, password=payload.password)
    except IdentityProviderError as exc:
        logger.warning("signin_rejected", email=payload.email, error=exc.message)
        return _error(400, exc.message)
    except Exception:
        logger.exception("signin_error", email=payload.email)
        return _error(500, INTERNAL_ERROR)

    user = result.get("user") or {}
    logger.info("signin_succeeded", user_id=user.get("id"))
    return SignInResponse(session=result.get("session"), user=result.get("user"))
