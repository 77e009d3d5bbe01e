"""
Client-side validation for the sign-in and sign-up forms.

Each validator returns a mapping of field name to message; an empty mapping
means the values may be sent to the server.
"""

from __future__ import annotations

import re
from typing import Dict, Mapping, Optional

from backend.identity_access.domain import ACCOUNT_TYPES

# Simple local@domain.tld check, same rule the browser client always used.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MIN_PASSWORD_LENGTH = 8


def validate_email(value: str) -> Optional[str]:
    if not value.strip():
        return "Email is required"
    if not EMAIL_PATTERN.fullmatch(value):
        return "Please enter a valid email address"
    return None


def validate_sign_in(values: Mapping[str, str]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    email_error = validate_email(values.get("email", ""))
    if email_error:
        errors["email"] = email_error
    if not values.get("password", ""):
        errors["password"] = "Password is required"
    return errors


def validate_sign_up(values: Mapping[str, str]) -> Dict[str, str]:
    errors: Dict[str, str] = {}

    if not values.get("first_name", "").strip():
        errors["first_name"] = "First name is required"
    if not values.get("last_name", "").strip():
        errors["last_name"] = "Last name is required"

    email_error = validate_email(values.get("email", ""))
    if email_error:
        errors["email"] = email_error

    password = values.get("password", "")
    if not password:
        errors["password"] = "Password is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"

    confirm = values.get("confirm_password", "")
    if not confirm:
        errors["confirm_password"] = "Please confirm your password"
    elif confirm != password:
        errors["confirm_password"] = "Passwords do not match"

    if values.get("user_type", "") not in ACCOUNT_TYPES:
        errors["user_type"] = "Please select your account type"

    return errors
