"""
Submit button for the auth forms.

While a request is in flight the button shows its loading label and is
disabled, which is what keeps a form from being submitted twice.
"""

from typing import Optional

from app.state.forms import FormState

from ..base import Component


class SubmitButton(Component):
    def __init__(
        self,
        label: str,
        *,
        loading_label: str = "Please wait...",
        is_loading: bool = False,
        data_action: Optional[str] = None,
    ) -> None:
        self.label = label
        self.loading_label = loading_label
        self.is_loading = is_loading
        self.data_action = data_action

    @classmethod
    def for_form(cls, state: FormState, label: str, loading_label: str) -> "SubmitButton":
        return cls(label, loading_label=loading_label, is_loading=state.is_loading)

    def render(self) -> str:
        attrs = self.attributes(
            type="submit",
            class_=self.classes("btn", "btn-primary", "w-full", is_loading=self.is_loading),
            disabled=self.is_loading,
            data_action=self.data_action,
            aria_busy="true" if self.is_loading else None,
        )
        text = self.loading_label if self.is_loading else self.label
        return f"<button {attrs}>{self.escape(text)}</button>"
