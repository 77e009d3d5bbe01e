"""
AuthManager view state: which form is shown and who is signed in.

The identity is the provider's user object exactly as the server returned
it; the state only holds a reference and never copies or reshapes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

SIGN_IN = "signin"
SIGN_UP = "signup"
VIEWS = (SIGN_IN, SIGN_UP)


@dataclass(frozen=True)
class AuthState:
    view: str = SIGN_IN
    identity: Optional[Mapping[str, Any]] = None

    @property
    def is_signed_in(self) -> bool:
        return self.identity is not None


@dataclass(frozen=True)
class ViewSwitched:
    view: str


@dataclass(frozen=True)
class SignUpSucceeded:
    pass


@dataclass(frozen=True)
class SignInSucceeded:
    identity: Mapping[str, Any]


@dataclass(frozen=True)
class SignedOut:
    pass


AuthAction = ViewSwitched | SignUpSucceeded | SignInSucceeded | SignedOut


def reduce_auth(state: AuthState, action: AuthAction) -> AuthState:
    if isinstance(action, ViewSwitched):
        if action.view not in VIEWS:
            raise ValueError(f"unknown view: {action.view!r}")
        return AuthState(view=action.view, identity=state.identity)
    if isinstance(action, SignUpSucceeded):
        return AuthState(view=SIGN_IN, identity=state.identity)
    if isinstance(action, SignInSucceeded):
        return AuthState(view=state.view, identity=action.identity)
    if isinstance(action, SignedOut):
        return AuthState(view=SIGN_IN, identity=None)
    raise TypeError(f"unknown auth action: {action!r}")
