"""
Sign-up form controller.

After a successful account creation the form clears itself, shows a success
notice, waits `redirect_delay` seconds and then tells the parent to switch to
sign-in.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional

import structlog

from app.components.auth_cards import SignUpCard
from app.services.auth_api import AuthApiClient, NetworkError
from app.state.forms import SubmitFailed, SubmitStarted, SubmitSucceeded, ValidationFailed
from app.validation import validate_sign_up

from .base_form import NETWORK_ERROR_MESSAGE, AuthForm, SubmitResult

logger = structlog.get_logger()

SIGN_UP_FIELDS = ("first_name", "last_name", "email", "password", "confirm_password", "user_type")
SIGN_UP_SUCCESS_MESSAGE = "Account created successfully! You can now sign in."
SUCCESS_REDIRECT_DELAY = 2.0  # seconds


class SignUpForm(AuthForm):
    fields = SIGN_UP_FIELDS
    password_fields = ("password", "confirm_password")

    def __init__(
        self,
        api: AuthApiClient,
        *,
        on_sign_up_success: Callable[[], None],
        on_switch_to_sign_in: Optional[Callable[[], None]] = None,
        redirect_delay: float = SUCCESS_REDIRECT_DELAY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        super().__init__(api)
        self.on_sign_up_success = on_sign_up_success
        self.on_switch_to_sign_in = on_switch_to_sign_in
        self.redirect_delay = redirect_delay
        self._sleep = sleep

    async def submit(self) -> SubmitResult:
        """Validate, send one signup request, then hand over to sign-in.

        Invalid input never reaches the network. A second call while a
        request is in flight is ignored.
        """
        if self.state.is_loading:
            return SubmitResult(ok=False)

        errors = validate_sign_up(self.state.values)
        if errors:
            self.dispatch(ValidationFailed(errors))
            return self._failed()

        values = self.state.values
        self.dispatch(SubmitStarted())
        try:
            response = await self.api.sign_up(
                first_name=values["first_name"],
                last_name=values["last_name"],
                email=values["email"],
                password=values["password"],
                user_type=values["user_type"],
            )
        except NetworkError as exc:
            logger.error("signup_network_error", error=str(exc))
            self.dispatch(SubmitFailed(NETWORK_ERROR_MESSAGE))
            return self._failed()

        if not response.ok:
            message = response.error_message("Failed to create account")
            logger.warning("signup_failed", status=response.status_code, error=message)
            self.dispatch(SubmitFailed(message))
            return self._failed()

        logger.info("account_created", email=values["email"])
        self.dispatch(SubmitSucceeded(message=SIGN_UP_SUCCESS_MESSAGE, clear_values=True))
        await self._sleep(self.redirect_delay)
        self.on_sign_up_success()
        return SubmitResult(ok=True, payload=response.data)

    def switch_to_sign_in(self) -> None:
        if self.on_switch_to_sign_in is not None:
            self.on_switch_to_sign_in()

    def render(self) -> str:
        return SignUpCard(self.state).render()
