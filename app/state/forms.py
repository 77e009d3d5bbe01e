"""
Form state as immutable snapshots.

A form's state is never mutated in place: every user event or request outcome
is an action, and `reduce_form(state, action)` returns the next snapshot.
Field errors live under the field name; the general (non-field) error lives
under `GENERAL_ERROR`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterable, Mapping, FrozenSet

GENERAL_ERROR = "general"


def _frozen(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class FormState:
    values: Mapping[str, str]
    errors: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    is_loading: bool = False
    success_message: str = ""
    revealed_passwords: FrozenSet[str] = frozenset()

    @classmethod
    def initial(cls, fields: Iterable[str]) -> "FormState":
        return cls(values=_frozen({name: "" for name in fields}))

    @property
    def general_error(self) -> str:
        return self.errors.get(GENERAL_ERROR, "")

    def error(self, name: str) -> str:
        return self.errors.get(name, "")

    def value(self, name: str) -> str:
        return self.values.get(name, "")


# --- Actions -------------------------------------------------------------------


@dataclass(frozen=True)
class FieldChanged:
    name: str
    value: str


@dataclass(frozen=True)
class PasswordVisibilityToggled:
    name: str


@dataclass(frozen=True)
class ValidationFailed:
    errors: Mapping[str, str]


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class SubmitFailed:
    message: str


@dataclass(frozen=True)
class SubmitSucceeded:
    message: str = ""
    clear_values: bool = False


FormAction = (
    FieldChanged
    | PasswordVisibilityToggled
    | ValidationFailed
    | SubmitStarted
    | SubmitFailed
    | SubmitSucceeded
)


def reduce_form(state: FormState, action: FormAction) -> FormState:
    """Return the snapshot that follows `state` after `action`."""
    if isinstance(action, FieldChanged):
        if action.name not in state.values:
            raise KeyError(action.name)
        values = dict(state.values)
        values[action.name] = action.value
        # Typing clears this field's error and the general error
        errors = {k: v for k, v in state.errors.items() if k not in (action.name, GENERAL_ERROR)}
        return replace(state, values=_frozen(values), errors=_frozen(errors))

    if isinstance(action, PasswordVisibilityToggled):
        return replace(state, revealed_passwords=state.revealed_passwords ^ {action.name})

    if isinstance(action, ValidationFailed):
        return replace(state, errors=_frozen(action.errors))

    if isinstance(action, SubmitStarted):
        return replace(state, is_loading=True, errors=_frozen({}), success_message="")

    if isinstance(action, SubmitFailed):
        return replace(state, is_loading=False, errors=_frozen({GENERAL_ERROR: action.message}))

    if isinstance(action, SubmitSucceeded):
        values = {name: "" for name in state.values} if action.clear_values else state.values
        return replace(
            state,
            values=_frozen(values),
            is_loading=False,
            success_message=action.message,
            revealed_passwords=frozenset() if action.clear_values else state.revealed_passwords,
        )

    raise TypeError(f"unknown form action: {action!r}")
