"""Confirmation dialog shown before an attachment action fires."""

from typing import Any

from pydantic import BaseModel


class ActionConfirmation(BaseModel):
    """Optional "are you sure?" dialog attached to an action."""

    title: str | None = None
    text: str | None = None
    ok_text: str | None = None
    dismiss_text: str | None = None

    model_config = {"extra": "ignore", "validate_assignment": True}

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
