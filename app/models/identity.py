"""
Display model for the signed-in identity.

The identity object belongs to the identity provider and is kept verbatim in
the AuthManager state. This model reads only the fields the profile panel
shows (id, email, user_metadata.name, user_metadata.userType) and checks that
each one is a string; anything else is treated as missing.
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


class IdentityView(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    user_type: Optional[str] = None

    @classmethod
    def from_identity(cls, identity: Any) -> "IdentityView":
        if not isinstance(identity, Mapping):
            return cls()
        metadata = identity.get("user_metadata")
        if not isinstance(metadata, Mapping):
            metadata = {}
        return cls(
            id=_text(identity.get("id")),
            email=_text(identity.get("email")),
            name=_text(metadata.get("name")),
            user_type=_text(metadata.get("userType")),
        )
