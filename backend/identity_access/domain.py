"""
Identity domain constants.

Why:
- Centralize the allowed account types so the client forms and the signup
  route cannot drift apart.
"""

from __future__ import annotations

# Immutable to prevent accidental mutation.
ACCOUNT_TYPES = frozenset({"student", "college"})


def display_name(first_name: str, last_name: str) -> str:
    """Return the full name stored in the provider's user metadata."""
    return f"{first_name} {last_name}"


__all__ = ["ACCOUNT_TYPES", "display_name"]
