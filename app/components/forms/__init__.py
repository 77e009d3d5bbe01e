"""
Form components for EcoRoot.

Provides the building blocks (fields and submit button) used by the
sign-in and sign-up cards.
"""

from .fields import FormField, TextInputField, RadioGroupField
from .submit import SubmitButton

__all__ = [
    "FormField",
    "TextInputField",
    "RadioGroupField",
    "SubmitButton",
]
