"""slackhook — value objects for chat webhook attachment actions."""

from slackhook.errors import InvalidArgumentError
from slackhook.helpers.factory import create_action, encode_action, parse_action
from slackhook.helpers.validation import validate_action
from slackhook.models.action import (
    ActionStyle,
    ActionType,
    AttachmentAction,
    coerce_confirmation,
)
from slackhook.models.confirmation import ActionConfirmation

__all__ = [
    # Errors
    "InvalidArgumentError",
    # Models
    "ActionConfirmation",
    "ActionStyle",
    "ActionType",
    "AttachmentAction",
    "coerce_confirmation",
    # Helpers
    "create_action",
    "encode_action",
    "parse_action",
    "validate_action",
]
