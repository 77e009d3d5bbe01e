"""
Alert banner for general form errors and success notices.
"""

from .base import Component


class Alert(Component):
    def __init__(self, message: str, *, variant: str = "destructive") -> None:
        self.message = message
        self.variant = variant

    def render(self) -> str:
        if not self.message:
            return ""
        role = "alert" if self.variant == "destructive" else "status"
        attrs = self.attributes(class_=f"alert alert--{self.variant}", role=role)
        return f"<div {attrs}><p class=\"alert-description\">{self.escape(self.message)}</p></div>"
