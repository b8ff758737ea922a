"""Attachment action model — a single interactive element (e.g. a button)."""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, field_validator

from slackhook.errors import InvalidArgumentError
from slackhook.models.confirmation import ActionConfirmation


class ActionType(StrEnum):
    """Known action types. Advisory only, not enforced on the model."""

    BUTTON = "button"


class ActionStyle(StrEnum):
    """Known button styles. Advisory only, not enforced on the model."""

    DEFAULT = "default"
    PRIMARY = "primary"
    DANGER = "danger"


def coerce_confirmation(value: Any) -> ActionConfirmation | None:
    """Resolve a confirmation given as a model instance or a keyed mapping.

    Raises:
        InvalidArgumentError: If the value is neither.
    """
    if value is None or isinstance(value, ActionConfirmation):
        return value
    if isinstance(value, Mapping):
        return ActionConfirmation.model_validate(dict(value))
    raise InvalidArgumentError(
        "The action confirmation must be an instance of ActionConfirmation "
        f"or a keyed mapping, got {type(value).__name__}"
    )


def _drop_unset(attributes: Mapping[Any, Any]) -> dict[Any, Any]:
    return {k: v for k, v in attributes.items() if v is not None}


class AttachmentAction(BaseModel):
    """An action inside a message attachment.

    `name` and `value` are sent back to the action URL when the user clicks.
    Setters return the action itself so calls can be chained:

        AttachmentAction(name="deploy").button("Deploy").set_style("primary")

    Serialize with `to_dict()`; every key is always present.
    """

    name: str | None = None
    text: str | None = None
    style: str | None = None
    type: str = ActionType.BUTTON
    value: str | None = None
    confirm: ActionConfirmation | None = None

    model_config = {"extra": "ignore", "validate_assignment": True}

    def __init__(self, **data: Any) -> None:
        super().__init__(**_drop_unset(data))

    @field_validator("confirm", mode="before")
    @classmethod
    def _check_confirm(cls, value: Any) -> ActionConfirmation | None:
        return coerce_confirmation(value)

    @classmethod
    def from_mapping(cls, attributes: Mapping[str, Any]) -> "AttachmentAction":
        """Build an action from a keyed mapping, skipping keys set to None."""
        return cls.model_validate(_drop_unset(attributes))

    # --- name ---

    def get_name(self) -> str | None:
        return self.name

    def set_name(self, name: str | None) -> "AttachmentAction":
        self.name = name
        return self

    # --- text ---

    def get_text(self) -> str | None:
        return self.text

    def set_text(self, text: str | None) -> "AttachmentAction":
        self.text = text
        return self

    # --- style ---

    def get_style(self) -> str | None:
        return self.style

    def set_style(self, style: str | None) -> "AttachmentAction":
        self.style = style
        return self

    # --- type ---

    def get_type(self) -> str:
        return self.type

    def set_type(self, type_: str) -> "AttachmentAction":
        self.type = type_
        return self

    def button(self, text: str) -> "AttachmentAction":
        """Make this a button labelled `text`."""
        return self.set_text(text).set_type(ActionType.BUTTON)

    # --- value ---

    def get_value(self) -> str | None:
        return self.value

    def set_value(self, value: str | None) -> "AttachmentAction":
        self.value = value
        return self

    # --- confirm ---

    def get_confirm(self) -> ActionConfirmation | None:
        return self.confirm

    def set_confirm(
        self, confirm: ActionConfirmation | Mapping[str, Any] | None
    ) -> "AttachmentAction":
        """Set the confirmation dialog from a model or a keyed mapping.

        Raises:
            InvalidArgumentError: If `confirm` is neither.
        """
        self.confirm = coerce_confirmation(confirm)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the wire mapping: name, text, style, type, value, confirm."""
        return {
            "name": self.name,
            "text": self.text,
            "style": self.style,
            "type": str(self.type),
            "value": self.value,
            "confirm": self.confirm.to_dict() if self.confirm is not None else None,
        }
