# EcoRoot Component System
# Pure Python Components for HTML generation

from .base import Component
from .alert import Alert
from .forms import FormField, TextInputField, RadioGroupField, SubmitButton
from .auth_cards import AuthCard, SignInCard, SignUpCard, ProfileCard

__all__ = [
    "Component",
    "Alert",
    "FormField",
    "TextInputField",
    "RadioGroupField",
    "SubmitButton",
    "AuthCard",
    "SignInCard",
    "SignUpCard",
    "ProfileCard",
]
