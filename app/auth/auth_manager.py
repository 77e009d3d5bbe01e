"""
Top-level view controller for the authentication screens.

Holds `AuthState` (current view and signed-in identity) in memory only. A new
AuthManager always starts on sign-in with no identity; sessions the provider
may still consider valid are not restored.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

import structlog

from app.components.auth_cards import ProfileCard
from app.models.identity import IdentityView
from app.services.auth_api import AuthApiClient
from app.state.auth import (
    SIGN_IN,
    SIGN_UP,
    AuthState,
    SignedOut,
    SignInSucceeded,
    SignUpSucceeded,
    ViewSwitched,
    reduce_auth,
)

from .sign_in_form import SignInForm
from .sign_up_form import SUCCESS_REDIRECT_DELAY, SignUpForm

logger = structlog.get_logger()


class AuthManager:
    def __init__(
        self,
        api: AuthApiClient,
        *,
        redirect_delay: float = SUCCESS_REDIRECT_DELAY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.api = api
        self.redirect_delay = redirect_delay
        self._sleep = sleep
        self.state = AuthState()
        self._form: Optional[Union[SignInForm, SignUpForm]] = None
        self._mount_form()

    # --- State ---------------------------------------------------------------

    @property
    def view(self) -> str:
        return self.state.view

    @property
    def identity(self) -> Optional[Mapping[str, Any]]:
        return self.state.identity

    @property
    def active_form(self) -> Optional[Union[SignInForm, SignUpForm]]:
        """The mounted form, or None while signed in."""
        return self._form

    def dispatch(self, action) -> AuthState:
        previous = self.state
        self.state = reduce_auth(previous, action)
        if self.state.is_signed_in:
            self._form = None
        elif self._form is None or previous.view != self.state.view:
            # Navigating away unmounts the old form and discards its state
            self._mount_form()
        return self.state

    def _mount_form(self) -> None:
        if self.state.view == SIGN_UP:
            self._form = SignUpForm(
                self.api,
                on_sign_up_success=self.handle_sign_up_success,
                on_switch_to_sign_in=lambda: self.switch_view(SIGN_IN),
                redirect_delay=self.redirect_delay,
                sleep=self._sleep,
            )
        else:
            self._form = SignInForm(
                self.api,
                on_sign_in_success=self.handle_sign_in_success,
                on_switch_to_sign_up=lambda: self.switch_view(SIGN_UP),
            )

    # --- Transitions -----------------------------------------------------------

    def handle_sign_up_success(self) -> None:
        self.dispatch(SignUpSucceeded())

    def handle_sign_in_success(self, identity: Mapping[str, Any]) -> None:
        self.dispatch(SignInSucceeded(identity))
        logger.info("identity_set", user_id=IdentityView.from_identity(identity).id)

    def sign_out(self) -> None:
        self.dispatch(SignedOut())
        logger.info("signed_out")

    def switch_view(self, view: str) -> None:
        self.dispatch(ViewSwitched(view))

    # --- Rendering -------------------------------------------------------------

    def render(self) -> str:
        if self.state.identity is not None:
            return ProfileCard(IdentityView.from_identity(self.state.identity)).render()
        return self._form.render()
