"""
Cards for the authentication screens: sign in, sign up, and the signed-in
profile panel.

The cards are pure functions of their state snapshot; all behavior lives in
the form controllers (`app.auth`).
"""

from typing import Optional

from app.models.identity import IdentityView
from app.state.forms import FormState

from .alert import Alert
from .base import Component
from .forms import RadioGroupField, SubmitButton, TextInputField

ACCOUNT_TYPE_OPTIONS = (("student", "Student"), ("college", "College"))


class AuthCard(Component):
    """Shared card frame: brand icon, title, description, body."""

    def __init__(self, *, card_id: str, title: str, description: str) -> None:
        self.card_id = card_id
        self.title = title
        self.description = description

    def frame(self, body_html: str) -> str:
        return (
            f'<section class="card auth-card" id="{self.card_id}" aria-labelledby="{self.card_id}-title">'
            '<header class="card-header">'
            '<div class="brand-icon" aria-hidden="true">&#127807;</div>'
            f'<h2 class="card-title" id="{self.card_id}-title">{self.escape(self.title)}</h2>'
            f'<p class="card-description">{self.escape(self.description)}</p>'
            "</header>"
            f'<div class="card-content">{body_html}</div>'
            "</section>"
        )


def _switch_link(prompt: str, label: str, action: str) -> str:
    return (
        f'<p class="auth-switch">{Component.escape(prompt)} '
        f'<button type="button" class="link-button" data-action="{action}">{Component.escape(label)}</button>'
        "</p>"
    )


class SignInCard(AuthCard):
    def __init__(self, state: FormState) -> None:
        super().__init__(
            card_id="signin",
            title="Welcome back",
            description="Sign in to your EcoRoot account",
        )
        self.state = state

    def render(self) -> str:
        s = self.state
        email = TextInputField("email", "Email", error_text=s.error("email")).render(
            value=s.value("email"),
            input_type="email",
            placeholder="john@example.com",
            autocomplete="email",
        )
        password = TextInputField("password", "Password", error_text=s.error("password")).render(
            value="",
            input_type="password",
            placeholder="Enter your password",
            autocomplete="current-password",
            revealed="password" in s.revealed_passwords,
        )
        submit = SubmitButton.for_form(s, "Sign in", "Signing in...").render()
        body = (
            Alert(s.general_error).render()
            + f'<form method="post" data-form="signin" novalidate>{email}{password}{submit}</form>'
            + _switch_link("Don't have an account?", "Sign up", "switch-to-signup")
        )
        return self.frame(body)


class SignUpCard(AuthCard):
    def __init__(self, state: FormState) -> None:
        super().__init__(
            card_id="signup",
            title="Join EcoRoot",
            description="Create your account to start your environmental journey",
        )
        self.state = state

    def _password(self, field_id: str, label: str, placeholder: str) -> str:
        s = self.state
        # Password values are never echoed back into the markup
        return TextInputField(field_id, label, error_text=s.error(field_id)).render(
            input_type="password",
            placeholder=placeholder,
            autocomplete="new-password",
            revealed=field_id in s.revealed_passwords,
        )

    def render(self) -> str:
        s = self.state
        account_type = RadioGroupField("user_type", "I am a:", error_text=s.error("user_type")).render(
            options=ACCOUNT_TYPE_OPTIONS,
            selected=s.value("user_type"),
        )
        first_name = TextInputField("first_name", "First name", error_text=s.error("first_name")).render(
            value=s.value("first_name"), placeholder="John", autocomplete="given-name"
        )
        last_name = TextInputField("last_name", "Last name", error_text=s.error("last_name")).render(
            value=s.value("last_name"), placeholder="Doe", autocomplete="family-name"
        )
        email = TextInputField("email", "Email", error_text=s.error("email")).render(
            value=s.value("email"),
            input_type="email",
            placeholder="john@example.com",
            autocomplete="email",
        )
        password = self._password("password", "Password", "Enter your password")
        confirm = self._password("confirm_password", "Confirm password", "Confirm your password")
        submit = SubmitButton.for_form(s, "Create account", "Creating account...").render()
        body = (
            Alert(s.success_message, variant="success").render()
            + Alert(s.general_error).render()
            + '<form method="post" data-form="signup" novalidate>'
            + account_type
            + f'<div class="form-row">{first_name}{last_name}</div>'
            + email
            + password
            + confirm
            + submit
            + "</form>"
            + _switch_link("Already have an account?", "Sign in", "switch-to-signin")
        )
        return self.frame(body)


class ProfileCard(AuthCard):
    """Panel shown while signed in."""

    def __init__(self, identity: IdentityView) -> None:
        account = identity.user_type or "user"
        super().__init__(
            card_id="profile",
            title="Welcome to EcoRoot!",
            description=f"You're successfully signed in as a {account}",
        )
        self.identity = identity

    @staticmethod
    def _row(label: str, value: Optional[str]) -> str:
        return (
            f"<p><strong>{Component.escape(label)}:</strong> "
            f"{Component.escape(value if value else 'N/A')}</p>"
        )

    def render(self) -> str:
        i = self.identity
        details = self._row("Name", i.name) + self._row("Email", i.email) + self._row("Account Type", i.user_type)
        body = (
            f'<div class="profile-details">{details}</div>'
            '<div class="profile-banner">Ready to explore environmental education content!</div>'
            '<button type="button" class="btn btn-outline w-full" data-action="sign-out">Sign Out</button>'
        )
        return self.frame(body)
