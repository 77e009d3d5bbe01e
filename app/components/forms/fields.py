"""
Form field components.

Small wrappers that keep label, input, and error markup consistent across the
sign-in and sign-up cards.
"""

from typing import Optional, Sequence, Tuple

from ..base import Component


class FormField(Component):
    """Wrapper that renders label, input slot, and error text."""

    def __init__(
        self,
        field_id: str,
        label: str,
        *,
        error_text: Optional[str] = None,
    ) -> None:
        self.field_id = field_id
        self.label = label
        self.error_text = error_text

    def _error_html(self) -> str:
        if not self.error_text:
            return ""
        return (
            f'<p class="form-error text-destructive" role="alert" id="{self.field_id}-error">'
            f"{self.escape(self.error_text)}</p>"
        )

    def render(self, input_html: str) -> str:
        label_attrs = self.attributes(for_=self.field_id, class_="form-label")
        return (
            f'<div class="{self.classes("form-field", form_field__invalid=bool(self.error_text))}">'
            f"<label {label_attrs}>{self.escape(self.label)}</label>"
            f"{input_html}"
            f"{self._error_html()}"
            "</div>"
        )


class TextInputField(FormField):
    """Single-line input; password inputs get a show/hide toggle button.

    Parameters:
        value: Current field value.
        input_type: 'text', 'email' or 'password'.
        revealed: For password inputs, render as plain text.
    """

    def render(
        self,
        *,
        value: str = "",
        input_type: str = "text",
        placeholder: Optional[str] = None,
        autocomplete: Optional[str] = None,
        revealed: bool = False,
    ) -> str:
        is_password = input_type == "password"
        effective_type = "text" if (is_password and revealed) else input_type
        input_attrs = self.attributes(
            id=self.field_id,
            name=self.field_id,
            type=effective_type,
            value=value,
            placeholder=placeholder,
            autocomplete=autocomplete,
            aria_describedby=f"{self.field_id}-error" if self.error_text else None,
            aria_invalid="true" if self.error_text else "false",
        )
        input_html = f"<input {input_attrs}>"
        if is_password:
            toggle_attrs = self.attributes(
                type="button",
                class_="password-toggle",
                data_toggle_password=self.field_id,
                aria_pressed="true" if revealed else "false",
            )
            toggle_label = "Hide password" if revealed else "Show password"
            input_html = (
                '<div class="input-with-toggle">'
                f"{input_html}<button {toggle_attrs}>{toggle_label}</button>"
                "</div>"
            )
        return super().render(input_html)


class RadioGroupField(FormField):
    """Radio group for a single choice out of a fixed set of options."""

    def render(self, *, options: Sequence[Tuple[str, str]], selected: str = "") -> str:
        items = []
        for value, label in options:
            option_id = f"{self.field_id}-{value}"
            input_attrs = self.attributes(
                id=option_id,
                type="radio",
                name=self.field_id,
                value=value,
                checked=value == selected,
            )
            items.append(
                f'<div class="radio-item"><input {input_attrs}>'
                f'<label for="{option_id}">{self.escape(label)}</label></div>'
            )
        group_attrs = self.attributes(
            role="radiogroup",
            class_="radio-group",
            aria_invalid="true" if self.error_text else "false",
        )
        return super().render(f"<div {group_attrs}>{''.join(items)}</div>")
