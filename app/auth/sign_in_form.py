"""
Sign-in form controller.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

import structlog

from app.components.auth_cards import SignInCard
from app.services.auth_api import AuthApiClient, NetworkError
from app.state.forms import SubmitFailed, SubmitStarted, SubmitSucceeded, ValidationFailed
from app.validation import validate_sign_in

from .base_form import NETWORK_ERROR_MESSAGE, AuthForm, SubmitResult

logger = structlog.get_logger()

SIGN_IN_FIELDS = ("email", "password")


class SignInForm(AuthForm):
    fields = SIGN_IN_FIELDS
    password_fields = ("password",)

    def __init__(
        self,
        api: AuthApiClient,
        *,
        on_sign_in_success: Callable[[Mapping[str, Any]], None],
        on_switch_to_sign_up: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(api)
        self.on_sign_in_success = on_sign_in_success
        self.on_switch_to_sign_up = on_switch_to_sign_up

    async def submit(self) -> SubmitResult:
        """Validate, send one sign-in request, and hand the identity to the parent.

        The `user` object from the response is passed on verbatim.
        """
        if self.state.is_loading:
            return SubmitResult(ok=False)

        errors = validate_sign_in(self.state.values)
        if errors:
            self.dispatch(ValidationFailed(errors))
            return self._failed()

        email = self.state.value("email")
        self.dispatch(SubmitStarted())
        try:
            response = await self.api.sign_in(email=email, password=self.state.value("password"))
        except NetworkError as exc:
            logger.error("signin_network_error", error=str(exc))
            self.dispatch(SubmitFailed(NETWORK_ERROR_MESSAGE))
            return self._failed()

        if not response.ok:
            message = response.error_message("Failed to sign in")
            logger.warning("signin_failed", status=response.status_code, error=message)
            self.dispatch(SubmitFailed(message))
            return self._failed()

        user = response.data.get("user")
        if not isinstance(user, Mapping):
            logger.warning("signin_user_missing", status=response.status_code)
            self.dispatch(SubmitFailed("Failed to sign in"))
            return self._failed()

        logger.info("signed_in", email=email)
        self.dispatch(SubmitSucceeded())
        self.on_sign_in_success(user)
        return SubmitResult(ok=True, payload=response.data)

    def switch_to_sign_up(self) -> None:
        if self.on_switch_to_sign_up is not None:
            self.on_switch_to_sign_up()

    def render(self) -> str:
        return SignInCard(self.state).render()
