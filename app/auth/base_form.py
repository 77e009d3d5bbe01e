"""
Shared behavior of the sign-in and sign-up form controllers.

A controller owns the current `FormState` snapshot of one mounted form and
advances it only through `dispatch`. It is discarded when the form is
unmounted (AuthManager switches view), which discards the state with it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from app.services.auth_api import AuthApiClient
from app.state.forms import FieldChanged, FormState, PasswordVisibilityToggled, reduce_form

NETWORK_ERROR_MESSAGE = "Network error. Please try again."


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of one `submit()` call.

    `ok` with the server payload on success, otherwise the errors that were
    placed on the form (empty when the submit was ignored).
    """

    ok: bool
    payload: Optional[Dict[str, Any]] = None
    errors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


class AuthForm:
    fields: Tuple[str, ...] = ()
    password_fields: Tuple[str, ...] = ()

    def __init__(self, api: AuthApiClient) -> None:
        self.api = api
        self.state = FormState.initial(self.fields)

    def dispatch(self, action) -> FormState:
        self.state = reduce_form(self.state, action)
        return self.state

    def change(self, name: str, value: str) -> FormState:
        """Update one field value, clearing its error and the general error."""
        return self.dispatch(FieldChanged(name, value))

    def toggle_password_visibility(self, name: str) -> FormState:
        if name not in self.password_fields:
            raise KeyError(name)
        return self.dispatch(PasswordVisibilityToggled(name))

    def _failed(self) -> SubmitResult:
        return SubmitResult(ok=False, errors=self.state.errors)
